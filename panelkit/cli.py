"""Cyclopts CLI entrypoint for rendering admin pages from panel content.

The ``panels`` console script composes a panel from an HTML content file,
assembles it with the display settings in ``admin.yaml`` and writes either a
full page or the pjax fragment. It is mostly useful for previewing how
animation, sidebar and refresh settings shape the emitted markup.

Examples
--------
Render a full page:

>>> from panelkit.cli import app
>>> app(["render", "--content", "users.html"])  # doctest: +SKIP

Render a minified pjax fragment that refreshes every 30 seconds:

>>> app(
...     [
...         "render",
...         "--content",
...         "users.html",
...         "--fragment",
...         "--auto-refresh",
...         "--interval",
...         "30",
...         "--production",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_config
from .page import Panel, RenderOptions, compose, new_page, new_page_panel
from .renderer import PageRenderer

DEFAULT_CONFIG = Path("admin.yaml")

logger = logging.getLogger(__name__)

app = App(name="panels", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Compose panel content into an admin page or pjax fragment.")
def render(
    *,
    content: typ.Annotated[
        Path, Parameter(help="HTML file holding the panel body", env_var="INPUT_CONTENT")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to admin config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML", env_var="INPUT_OUTPUT")
    ] = Path("public/index.html"),
    title: typ.Annotated[str, Parameter(help="Panel title")] = "",
    description: typ.Annotated[str, Parameter(help="Panel description")] = "",
    user: typ.Annotated[str | None, Parameter(help="Display name of the user")] = None,
    mini_sidebar: bool = False,
    auto_refresh: bool = False,
    interval: typ.Annotated[
        list[int] | None, Parameter(help="Refresh interval candidates in seconds")
    ] = None,
    production: bool = False,
    no_animation: bool = False,
    fragment: bool = False,
    verbose: bool = False,
) -> None:
    """Render one panel through the composition pipeline.

    Parameters
    ----------
    content : Path
        File whose text becomes the panel body.
    config : Path, optional
        Admin configuration YAML; defaults to ``admin.yaml``.
    output : Path, optional
        Destination HTML file; parent folders are created.
    title, description : str, optional
        Panel headings.
    user : str or None, optional
        Name shown in the navbar.
    mini_sidebar, auto_refresh : bool, optional
        Panel flags injected as scripts.
    interval : list[int] or None, optional
        Refresh interval candidates; the first one is used.
    production : bool, optional
        Minify the composed content.
    no_animation : bool, optional
        Suppress the configured entrance animation.
    fragment : bool, optional
        Emit only the pjax fragment instead of the full page.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    FileNotFoundError
        If the content or configuration file is missing.
    """
    _configure_logging(verbose=verbose)
    if not content.exists():
        msg = f"Content file '{content}' not found."
        raise FileNotFoundError(msg)
    settings = load_config(config)
    logger.debug("loaded %s (animation=%r)", config, settings.animation.type)

    panel = Panel(
        title=title,
        description=description,
        content=content.read_text(encoding="utf-8"),
        url=settings.index_url(),
        mini_sidebar=mini_sidebar,
        auto_refresh=auto_refresh,
        refresh_interval=tuple(interval or ()),
    )
    options = RenderOptions(production=production, suppress_animation=no_animation)
    composed = compose(panel, settings.animation, options)

    if fragment:
        page = new_page_panel(composed)
    else:
        page = new_page({"name": user} if user else None, [], composed, settings)
    html = PageRenderer().render(page, fragment=fragment)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `panels` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
