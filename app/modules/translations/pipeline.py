"""Per-leaf transform pipeline: plural -> placeholder -> tag attributes."""

from typing import List, Tuple

from modules.translations.html import strip_html_attributes
from modules.translations.placeholders import rewrite_placeholders
from modules.translations.plurals import rewrite_plural


def transform_text(text: str) -> str:
    """Apply the content transforms (placeholders, then tag attributes)."""
    return strip_html_attributes(rewrite_placeholders(text))


def transform_leaf(key: str, text: str) -> List[Tuple[str, str]]:
    """Transform one leaf into its output key/text pairs.

    Pluralization runs first since it may split the key into suffixed
    siblings; the content transforms then run on every resulting text.

    Args:
        key: Key owning the leaf.
        text: Source text.

    Returns:
        One to three ``(key, text)`` pairs.

    Raises:
        MalformedPluralSyntax: If the text has invalid plural segments.
    """
    return [
        (variant_key, transform_text(variant_text))
        for variant_key, variant_text in rewrite_plural(key, text)
    ]
