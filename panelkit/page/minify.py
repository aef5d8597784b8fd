"""Whitespace minification for composed panel content."""

from __future__ import annotations

import re

PRESERVED_BLOCK = re.compile(
    r"(<(pre|textarea)\b.*?</\2\s*>)|(<script\b[^>]*>)(.*?)(</script\s*>)",
    re.DOTALL | re.IGNORECASE,
)
INTER_TAG_SPACE = re.compile(
    r"(<(/?)([A-Za-z][\w-]*)[^<>]*>)\s+(?=</?([A-Za-z][\w-]*))"
)
WHITESPACE_RUN = re.compile(r"\s+")
LEADING_TAG = re.compile(r"^ </?([A-Za-z][\w-]*)")
TRAILING_TAG = re.compile(r"</?([A-Za-z][\w-]*)[^<>]*> $")

# Whitespace next to these tags never renders.
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "body", "br", "dd",
        "details", "dialog", "div", "dl", "dt", "fieldset", "figcaption",
        "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
        "head", "header", "hr", "html", "li", "link", "main", "meta", "nav",
        "ol", "option", "p", "pre", "script", "section", "style", "summary",
        "table", "tbody", "td", "tfoot", "th", "thead", "title", "tr", "ul",
    }
)


def _inter_tag(match: re.Match[str]) -> str:
    left, right = match.group(3).lower(), match.group(4).lower()
    if left in BLOCK_TAGS or right in BLOCK_TAGS:
        return match.group(1)
    return match.group(1) + " "


def _is_block(name: str | None) -> bool:
    return name is None or name.lower() in BLOCK_TAGS


def _squeeze_markup(text: str, before: str | None, after: str | None) -> str:
    """Squeeze a segment lying between the preserved tags ``before`` and ``after``."""
    squeezed = WHITESPACE_RUN.sub(" ", INTER_TAG_SPACE.sub(_inter_tag, text))
    leading = LEADING_TAG.match(squeezed)
    if squeezed.startswith(" ") and (
        _is_block(before) or (leading is not None and _is_block(leading.group(1)))
    ):
        squeezed = squeezed[1:]
    trailing = TRAILING_TAG.search(squeezed)
    if squeezed.endswith(" ") and (
        _is_block(after) or (trailing is not None and _is_block(trailing.group(1)))
    ):
        squeezed = squeezed[:-1]
    return squeezed


def _squeeze_script(body: str) -> str:
    # Newlines are kept: scripts may rely on automatic semicolon insertion.
    lines = (line.strip() for line in body.splitlines())
    return "\n".join(line for line in lines if line)


def compress(content: str) -> str:
    """Return ``content`` with insignificant whitespace removed.

    Whitespace between two inline elements collapses to one space; next to a
    block-level tag it is dropped. Text inside ``<pre>`` and ``<textarea>`` is
    left untouched, and script bodies only lose indentation and blank lines.

    Examples
    --------
    >>> compress("<div>\\n    <p>hi   there</p>\\n</div>")
    '<div><p>hi there</p></div>'
    >>> compress("<b>Hello</b>\\n  <i>world</i>")
    '<b>Hello</b> <i>world</i>'
    """
    pieces: list[str] = []
    position = 0
    previous: str | None = None
    for match in PRESERVED_BLOCK.finditer(content):
        name = match.group(2) or "script"
        segment = content[position : match.start()]
        pieces.append(_squeeze_markup(segment, previous, name))
        if match.group(1):
            pieces.append(match.group(1))
        else:
            pieces.append(
                match.group(3) + _squeeze_script(match.group(4)) + match.group(5)
            )
        position = match.end()
        previous = name
    pieces.append(_squeeze_markup(content[position:], previous, None))
    return "".join(pieces).strip()


__all__ = ["compress"]
