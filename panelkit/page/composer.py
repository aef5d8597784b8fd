"""Compose raw panel content into the markup swapped in by pjax.

:func:`compose` wraps the panel body in exactly one content container and then
layers, in a fixed order, the entrance animation cleanup script, the
sidebar-collapse script, the auto-refresh script and, last, minification.

Example
-------
>>> from panelkit.config import AnimationConfig
>>> from panelkit.page import Panel, compose
>>> str(compose(Panel(content="<p>hi</p>"), AnimationConfig()).content)
'<div class="pjax-container-content"><p>hi</p></div>'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from panelkit._constants import (
    CONTENT_CONTAINER_CLASS,
    DEFAULT_REFRESH_SECONDS,
    PJAX_CONTAINER_SELECTOR,
    SIDEBAR_COLLAPSE_CLASS,
)

from .minify import compress
from .models import Panel, RenderOptions

if typ.TYPE_CHECKING:
    from panelkit.config import AnimationConfig

Compressor = typ.Callable[[str], str]

SIDEBAR_COLLAPSE_SCRIPT = f'<script>$("body").addClass("{SIDEBAR_COLLAPSE_CLASS}")</script>'


def _animation_style(animation: AnimationConfig) -> str:
    declarations = ""
    if animation.delay != 0:
        declarations += (
            f"animation-delay: {animation.delay:f}s;"
            f"-webkit-animation-delay: {animation.delay:f}s;"
        )
    if animation.duration != 0:
        declarations += (
            f"animation-duration: {animation.duration:f}s;"
            f"-webkit-animation-duration: {animation.duration:f}s;"
        )
    return f' style="{declarations}"' if declarations else ""


def _cleanup_script(animation_type: str) -> str:
    # Animate.css replays the entrance when a modal inside the panel opens.
    return (
        "<script>\n"
        f"$('.{CONTENT_CONTAINER_CLASS} .modal.fade').on('show.bs.modal', function (event) {{\n"
        f"    $('.{CONTENT_CONTAINER_CLASS}').removeClass('{animation_type}');\n"
        "});\n"
        "</script>"
    )


def refresh_seconds(panel: Panel) -> int:
    """Return the authoritative refresh interval of ``panel`` in seconds."""
    if panel.refresh_interval:
        return panel.refresh_interval[0]
    return DEFAULT_REFRESH_SECONDS


def _refresh_script(seconds: int) -> str:
    return (
        "<script>\n"
        "window.setTimeout(function () {\n"
        f"    $.pjax.reload('{PJAX_CONTAINER_SELECTOR}');\n"
        f"}}, {seconds * 1000});\n"
        "</script>"
    )


def compose(
    panel: Panel,
    animation: AnimationConfig,
    options: RenderOptions | None = None,
    *,
    compressor: Compressor = compress,
) -> Panel:
    """Return a copy of ``panel`` whose content is ready for the pjax container.

    Parameters
    ----------
    panel : Panel
        Source panel; it is never modified.
    animation : AnimationConfig
        Snapshot of the configured entrance animation.
    options : RenderOptions, optional
        Production minification and animation suppression switches; defaults
        to ``RenderOptions()``.
    compressor : Callable[[str], str], optional
        Minifier applied to the fully composed content in production.

    Returns
    -------
    Panel
        Panel equal to ``panel`` except for ``content``.

    Notes
    -----
    Every call wraps whatever content it receives, so composing an already
    composed panel nests a second container.
    """
    options = options or RenderOptions()
    class_names = CONTENT_CONTAINER_CLASS
    style = ""
    cleanup = ""
    if animation.enabled and not options.suppress_animation:
        class_names += f" animated {animation.type}"
        style = _animation_style(animation)
        cleanup = _cleanup_script(animation.type)

    content = f'<div class="{class_names}"{style}>{panel.content}</div>{cleanup}'
    if panel.mini_sidebar:
        content += SIDEBAR_COLLAPSE_SCRIPT
    if panel.auto_refresh:
        content += _refresh_script(refresh_seconds(panel))
    if options.production:
        content = compressor(content)
    return dc.replace(panel, content=Markup(content))


__all__ = ["SIDEBAR_COLLAPSE_SCRIPT", "Compressor", "compose", "refresh_seconds"]
