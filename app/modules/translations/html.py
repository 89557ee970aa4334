"""Attribute stripping for inline tag markup.

Trans-style components only need the tag names (``<b>``, ``<i>``, ``<span>``,
``<br/>``); attributes are dropped. This is a textual best-effort rewrite,
not an HTML parser: anything that does not look like a complete tag is left
as-is.
"""

import re

# <name ...>, </name ...>, <name .../>; attribute text may not contain < or >
TAG_RE = re.compile(
    r"<(?P<closing>/?)"
    r"(?P<name>[A-Za-z][A-Za-z0-9-]*)"
    r"(?P<attrs>\s+[^\s<>/][^<>]*?)?"
    r"(?P<self_closing>\s*/)?\s*>"
)


def _strip(match: "re.Match[str]") -> str:
    self_closing = match.group("self_closing") or ""
    return f"<{match.group('closing')}{match.group('name')}{self_closing}>"


def strip_html_attributes(text: str) -> str:
    """Remove every attribute from the tags embedded in text.

    ``<b class="x">`` becomes ``<b>``, ``<br class="x" />`` becomes
    ``<br />``. Closing tags keep their slash. Unterminated or malformed
    tag-like sequences (``a < b``, ``<b class="x"`` with no ``>``) are left
    untouched.

    Args:
        text: Leaf text.

    Returns:
        Text with attribute-free tags.
    """
    if "<" not in text:
        return text
    return TAG_RE.sub(_strip, text)
