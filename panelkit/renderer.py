"""Render assembled pages into HTML with the bundled Jinja templates."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from panelkit._constants import PJAX_CONTAINER_ID

if typ.TYPE_CHECKING:
    from panelkit.page import Page


class PageRenderer:
    """Render a :class:`~panelkit.page.Page` as a full document or a fragment."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``fragment.jinja``;
            defaults to the templates shipped with the package.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, page: Page, *, fragment: bool = False) -> str:
        """Return the HTML for ``page``.

        With ``fragment`` set only the panel section is rendered, which is the
        payload a pjax request swaps into the content container.
        """
        name = "fragment.jinja" if fragment else "page.jinja"
        template = self.env.get_template(name)
        html = template.render(page=page, container_id=PJAX_CONTAINER_ID)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["PageRenderer"]
