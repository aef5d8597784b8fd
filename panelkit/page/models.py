"""Shared dataclasses used by the page composition pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from panelkit._constants import VERSION

from .buttons import Action, ActionButton, get_nav_button


@dc.dataclass(frozen=True, slots=True)
class SystemInfo:
    """Basic information about the running admin system."""

    version: str = VERSION


@dc.dataclass(frozen=True, slots=True)
class RenderOptions:
    """Switches applied while composing panel content.

    Attributes
    ----------
    production : bool
        Minify the composed content as the final stage. Defaults to ``False``.
    suppress_animation : bool
        Skip the entrance animation even when one is configured. Defaults to
        ``False``.
    """

    production: bool = False
    suppress_animation: bool = False


@dc.dataclass(frozen=True, slots=True)
class Panel:
    """Main content of an admin screen, swapped in place by pjax navigation.

    Attributes
    ----------
    title : str
        Heading shown above the content.
    description : str
        Secondary heading text.
    content : Markup
        Trusted HTML body of the panel.
    url : str
        URL the panel was requested from.
    mini_sidebar : bool
        Collapse the sidebar when the panel is shown.
    auto_refresh : bool
        Reload the pjax container on a timer.
    refresh_interval : tuple[int, ...]
        Candidate refresh intervals in seconds; the first one wins.
    """

    title: str = ""
    description: str = ""
    content: Markup = dc.field(default_factory=Markup)
    url: str = ""
    mini_sidebar: bool = False
    auto_refresh: bool = False
    refresh_interval: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Normalise raw strings and lists into markup and tuples."""
        if not isinstance(self.content, Markup):
            object.__setattr__(self, "content", Markup(self.content))
        if not isinstance(self.refresh_interval, tuple):
            object.__setattr__(self, "refresh_interval", tuple(self.refresh_interval))


@dc.dataclass(slots=True)
class Page:
    """Top-level value handed to the page template.

    Only :meth:`add_button` mutates a page after construction; it appends and
    never reorders or removes earlier contributions.
    """

    panel: Panel
    user: typ.Any = None
    menu: typ.Any = None
    system: SystemInfo = dc.field(default_factory=SystemInfo)
    url_prefix: str = ""
    title: str = ""
    logo: Markup = dc.field(default_factory=Markup)
    mini_logo: Markup = dc.field(default_factory=Markup)
    color_scheme: str = ""
    index_url: str = ""
    cdn_url: str = ""
    custom_head_html: Markup = dc.field(default_factory=Markup)
    custom_foot_html: Markup = dc.field(default_factory=Markup)
    assets_list: Markup = dc.field(default_factory=Markup)
    nav_buttons: list[ActionButton] = dc.field(default_factory=list)
    nav_buttons_html: Markup = dc.field(default_factory=Markup)

    def add_button(self, title: str, icon: str, action: Action) -> Page:
        """Append a nav button after construction and return ``self``.

        Only the action's footer content is added to ``custom_foot_html``.
        ``nav_buttons_html`` and the button click script are not regenerated,
        so a late button must be rendered by the caller.
        """
        self.nav_buttons.append(get_nav_button(title, icon, action))
        self.custom_foot_html = Markup(
            str(self.custom_foot_html) + str(action.footer_content())
        )
        return self


GetPanelFn = typ.Callable[[typ.Any], Panel]


__all__ = ["GetPanelFn", "Page", "Panel", "RenderOptions", "SystemInfo"]
