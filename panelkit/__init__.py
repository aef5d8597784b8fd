"""Compose admin panels into full pages or pjax fragments.

This package wraps panel content in the pjax content container, injects the
animation, sidebar and auto-refresh scripts, assembles pages with navbar
buttons and renders them through Jinja templates.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from panelkit import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
