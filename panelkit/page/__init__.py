"""Compose admin panels and assemble them into pages."""

from .assembler import new_page, new_page_panel
from .buttons import (
    Action,
    ActionButton,
    ButtonRegistry,
    JumpAction,
    PopUpAction,
    get_nav_button,
)
from .composer import compose, refresh_seconds
from .minify import compress
from .models import GetPanelFn, Page, Panel, RenderOptions, SystemInfo
from .rowdata import (
    TemplateResolution,
    TemplateRowContext,
    parse_table_data_template,
    parse_table_data_template_with_id,
    resolve,
    resolve_template,
)

__all__ = [
    "Action",
    "ActionButton",
    "ButtonRegistry",
    "GetPanelFn",
    "JumpAction",
    "Page",
    "Panel",
    "PopUpAction",
    "RenderOptions",
    "SystemInfo",
    "TemplateResolution",
    "TemplateRowContext",
    "compose",
    "compress",
    "get_nav_button",
    "new_page",
    "new_page_panel",
    "parse_table_data_template",
    "parse_table_data_template_with_id",
    "refresh_seconds",
    "resolve",
    "resolve_template",
]
