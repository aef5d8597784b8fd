"""Assemble composed panels, navigation and display settings into pages."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from .buttons import ButtonRegistry
from .models import Page, Panel, SystemInfo

if typ.TYPE_CHECKING:
    from panelkit.config import Config

    from .buttons import ActionButton


def new_page(
    user: typ.Any,
    menu: typ.Any,
    panel: Panel,
    config: Config,
    assets_list: str = "",
    *buttons: ActionButton,
) -> Page:
    """Build the page handed to the template for one request.

    Parameters
    ----------
    user : Any
        Logged-in user model, passed through untouched.
    menu : Any
        Resolved sidebar menu, passed through untouched.
    panel : Panel
        Panel to show; callers compose it beforehand.
    config : Config
        Display configuration snapshot.
    assets_list : str, optional
        Markup pulling in component assets.
    *buttons : ActionButton
        Navbar buttons in display order.

    Returns
    -------
    Page
        Page whose ``custom_foot_html`` is the configured footer, each
        button's footer fragment, then one ``<script>`` holding every
        button's click script.
    """
    registry = ButtonRegistry(tuple(buttons))
    nav_html, nav_js = registry.content()
    footer = config.custom_foot_html + registry.footer_content()
    return Page(
        user=user,
        menu=menu,
        panel=panel,
        system=SystemInfo(),
        url_prefix=config.asset_prefix(),
        title=config.title,
        logo=Markup(config.logo),
        mini_logo=Markup(config.mini_logo),
        color_scheme=config.color_scheme,
        index_url=config.index_url(),
        cdn_url=config.asset_url,
        custom_head_html=Markup(config.custom_head_html),
        custom_foot_html=Markup(f"{footer}<script>{nav_js}</script>"),
        assets_list=Markup(assets_list),
        nav_buttons=list(registry),
        nav_buttons_html=Markup(nav_html),
    )


def new_page_panel(panel: Panel) -> Page:
    """Build a page carrying only ``panel``, used for pjax fragment responses."""
    return Page(panel=panel, system=SystemInfo())


__all__ = ["new_page", "new_page_panel"]
