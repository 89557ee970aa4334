"""Plural form rewriting.

Two source syntaxes are recognised, never mixed within one string:

    {0} No items|{1} One item|[2,*] :count items   (bracketed counts)
    item|items                                      (pipe only: one, other)

Both become sibling keys suffixed with the selector, e.g. ``items_zero``,
``items_one``, ``items_other``.
"""

import re
from typing import List, Optional, Tuple

from modules.translations.errors import MalformedPluralSyntax
from modules.translations.models import PluralSpec, Selector

PLURAL_DELIMITER = "|"

EXACT_RE = re.compile(r"^\{\s*(?P<count>\d+)\s*\}(?P<text>.*)$", re.DOTALL)
RANGE_RE = re.compile(
    r"^\[\s*(?P<low>\d+)\s*,\s*(?P<high>\d+|\*)\s*\](?P<text>.*)$", re.DOTALL
)


def _exact_selector(count: int) -> Selector:
    if count == 0:
        return Selector.ZERO
    if count == 1:
        return Selector.ONE
    return Selector.OTHER


def _parse_marker(segment: str, source: str) -> Optional[Tuple[Selector, str]]:
    """Return (selector, text) for a marked segment, None when unmarked."""
    match = EXACT_RE.match(segment)
    if match:
        return _exact_selector(int(match.group("count"))), match.group("text").strip()

    match = RANGE_RE.match(segment)
    if not match:
        return None

    low = int(match.group("low"))
    high = match.group("high")
    text = match.group("text").strip()
    if high == "*":
        return Selector.OTHER, text
    if int(high) < low:
        raise MalformedPluralSyntax(source, f"empty range [{low},{high}]")
    if int(high) == low:
        return _exact_selector(low), text
    return Selector.OTHER, text


def parse_plural(text: str) -> Optional[PluralSpec]:
    """Parse the plural variants encoded in text.

    Args:
        text: Leaf text.

    Returns:
        PluralSpec ordered Zero, One, Other, or None when the text has no
        ``|`` delimiter.

    Raises:
        MalformedPluralSyntax: If the segments form neither syntax or a
            selector appears twice.
    """
    if PLURAL_DELIMITER not in text:
        return None

    segments = [segment.strip() for segment in text.split(PLURAL_DELIMITER)]
    parsed = [_parse_marker(segment, text) for segment in segments]
    marked = [pair for pair in parsed if pair is not None]

    if not marked:
        if len(segments) != 2:
            raise MalformedPluralSyntax(
                text, f"expected 2 unmarked segments, found {len(segments)}"
            )
        pairs = [(Selector.ONE, segments[0]), (Selector.OTHER, segments[1])]
    elif len(marked) != len(segments):
        raise MalformedPluralSyntax(text, "mixes counted and unmarked segments")
    else:
        pairs = marked

    seen = set()
    for selector, _ in pairs:
        if selector in seen:
            raise MalformedPluralSyntax(
                text, f"selector '{selector.value}' appears more than once"
            )
        seen.add(selector)

    return PluralSpec.from_pairs(pairs)


def rewrite_plural(key: str, text: str) -> List[Tuple[str, str]]:
    """Expand a leaf into its suffixed plural siblings.

    Args:
        key: Key owning the leaf.
        text: Leaf text.

    Returns:
        ``[(key, text)]`` when the text is not a plural, otherwise one
        ``(key_<selector>, text)`` pair per selector in Zero, One, Other
        order.

    Raises:
        MalformedPluralSyntax: See parse_plural.
    """
    spec = parse_plural(text)
    if spec is None:
        return [(key, text)]
    return [(selector.suffix(key), variant) for selector, variant in spec.variants]
