"""Placeholder rewriting.

Source strings mark interpolation points as ``:name``; the casing of the
marker selects a formatting directive in the emitted ``{{...}}`` form:

    :name  -> {{name}}
    :Name  -> {{name, capitalize}}
    :NAME  -> {{name, uppercase}}
"""

import re

from modules.translations.models import Casing

PLACEHOLDER_RE = re.compile(r":(?P<identifier>[^\W\d]\w*)")

TEMPLATES = {
    Casing.LOWER: "{{{{{identifier}}}}}",
    Casing.CAPITALIZED: "{{{{{lowered}, capitalize}}}}",
    Casing.UPPER: "{{{{{lowered}, uppercase}}}}",
}


def classify(identifier: str) -> Casing:
    """Classify the casing of a placeholder identifier.

    ``UPPER`` when every cased character is uppercase, ``CAPITALIZED`` when
    only the first character is uppercase and the rest is lowercase, and
    ``LOWER`` otherwise (including camelCase and ``ResourceName``-style
    identifiers, which keep their casing).

    Args:
        identifier: Identifier without the leading colon.

    Returns:
        Casing of the identifier.
    """
    if identifier.isupper():
        return Casing.UPPER
    head, rest = identifier[:1], identifier[1:]
    if head.isupper() and rest == rest.lower():
        return Casing.CAPITALIZED
    return Casing.LOWER


def format_placeholder(identifier: str) -> str:
    """Return the interpolation directive for one identifier."""
    template = TEMPLATES[classify(identifier)]
    return template.format(identifier=identifier, lowered=identifier.lower())


def rewrite_placeholders(text: str) -> str:
    """Rewrite every ``:identifier`` marker in text.

    Single pass over the input; emitted directives are never rescanned.

    Args:
        text: Leaf text.

    Returns:
        Text with interpolation directives.
    """
    if ":" not in text:
        return text
    return PLACEHOLDER_RE.sub(
        lambda match: format_placeholder(match.group("identifier")), text
    )
