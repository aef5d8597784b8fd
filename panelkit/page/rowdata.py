"""Resolve row placeholders inside action link templates.

Table actions carry URLs and scripts such as ``/admin/delete?id={{.Ids}}``.
``{{.Id}}`` resolves to the identifier of one row and ``{{.Ids}}`` to a
JavaScript expression the browser evaluates to the currently selected row
identifiers, so one template serves both per-row and bulk actions.

Resolution is fail-soft: malformed templates and unknown placeholders resolve
to an empty string. The underlying error is logged and returned through
:func:`resolve_template` for callers that need the diagnostic.
Only expression tags are template syntax: a literal ``{%`` or ``{#`` in a URL
or script is copied through unchanged.

Examples
--------
>>> parse_table_data_template_with_id("7", "link/{{.Id}}")
'link/7'
>>> parse_table_data_template("/delete?ids=' + {{.Ids}}")
"/delete?ids=' + selectedRows().join()"
>>> resolve("link/{{.Id", TemplateRowContext(id="7"))
''
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re

from jinja2 import Environment, StrictUndefined

from panelkit._constants import SELECTED_ROWS_EXPRESSION

logger = logging.getLogger(__name__)

DOTTED_PLACEHOLDER = re.compile(r"\{\{(-?)\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*(-?)\}\}")
# Only expression tags are template syntax; block and comment openers are text.
LITERAL_DELIMITER = re.compile(r"\{([%#])")

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


@dc.dataclass(frozen=True, slots=True)
class TemplateRowContext:
    """Values exposed to a row template.

    Attributes
    ----------
    id : str
        Identifier of a single row; empty when rendering a bulk action.
    ids : str
        Client-side expression yielding the selected row identifiers.
    """

    id: str = ""
    ids: str = SELECTED_ROWS_EXPRESSION


@dc.dataclass(frozen=True, slots=True)
class TemplateResolution:
    """Outcome of resolving a row template.

    ``text`` is always usable; ``error`` holds the exception that forced the
    empty fallback, if any.
    """

    text: str
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the template resolved without error."""
        return self.error is None


def _normalise(content: str) -> str:
    escaped = LITERAL_DELIMITER.sub(
        lambda match: "{{ '{" + match.group(1) + "' }}", content
    )
    return DOTTED_PLACEHOLDER.sub(r"{{\1 \2 \3}}", escaped)


def resolve_template(content: str, context: TemplateRowContext) -> TemplateResolution:
    """Resolve ``content`` against ``context`` and report any swallowed error.

    Parameters
    ----------
    content : str
        Template source; plain strings and ``markupsafe.Markup`` are treated
        identically.
    context : TemplateRowContext
        Row values made available as ``{{.Id}}`` and ``{{.Ids}}``.

    Returns
    -------
    TemplateResolution
        The resolved text, or ``""`` together with the error when parsing or
        rendering failed.
    """
    source = _normalise(str(content))
    try:
        text = _env.from_string(source).render(Id=context.id, Ids=context.ids)
    except Exception as exc:  # noqa: BLE001 - resolution is fail-soft
        logger.warning("Row template %r could not be resolved: %s", str(content), exc)
        return TemplateResolution(text="", error=exc)
    return TemplateResolution(text=text)


def resolve(content: str, context: TemplateRowContext) -> str:
    """Return ``content`` resolved against ``context``, or ``""`` on error."""
    return resolve_template(content, context).text


def parse_table_data_template(content: str) -> str:
    """Resolve a bulk-action template where no single row id is known."""
    return resolve(content, TemplateRowContext())


def parse_table_data_template_with_id(id: str, content: str) -> str:  # noqa: A002
    """Resolve a per-row template; ``{{.Ids}}`` remains available."""
    return resolve(content, TemplateRowContext(id=str(id)))


__all__ = [
    "DOTTED_PLACEHOLDER",
    "TemplateResolution",
    "TemplateRowContext",
    "parse_table_data_template",
    "parse_table_data_template_with_id",
    "resolve",
    "resolve_template",
]
