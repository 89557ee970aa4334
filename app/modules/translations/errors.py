"""Error taxonomy for the translation converter.

Transform errors are collected per leaf and attached to the namespace
result; only the driver decides whether they fail a run.
"""

from pathlib import Path
from typing import Optional


class TranslationError(Exception):
    """Base class for all converter errors."""


class MalformedPluralSyntax(TranslationError):
    """A leaf's pipe-delimited segments do not form a valid plural.

    Attributes:
        text: The offending leaf text.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed plural syntax ({reason}): {text!r}")


class DuplicateKey(TranslationError):
    """An emitted key collides with a sibling already in the output group."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Duplicate key after transform: {key}")


class UnterminatedTag(TranslationError):
    """Unterminated tag-like sequence.

    Never raised: the attribute stripper leaves such text untouched. Kept so
    callers can refer to the full taxonomy.
    """


class EmptyNamespace(TranslationError):
    """A namespace has no leaves. Reported as a warning, output is ``{}``."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"Namespace has no translations: {namespace}")


class SourceLoadError(TranslationError):
    """A namespace source file could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load {self.path}: {reason}")


class FingerprintError(TranslationError):
    """The raw content of a locale is unavailable for hashing."""

    def __init__(self, locale: str, reason: Optional[str] = None):
        self.locale = locale
        self.reason = reason or "source content unavailable"
        super().__init__(f"Cannot fingerprint locale {locale}: {self.reason}")
