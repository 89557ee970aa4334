"""Locale version fingerprints for client cache invalidation.

A locale's hash depends only on the raw content of its namespace files,
concatenated in sorted filename order, so unrelated re-runs and different
filesystems produce the same value.
"""

import hashlib
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

from modules.translations.errors import FingerprintError
from modules.translations.models import VersionEntry, VersionMap

HASH_ALGORITHM = "sha256"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_locale_hash(
    contents: Mapping[str, Optional[bytes]], locale: str = ""
) -> str:
    """Hash the raw source content of one locale.

    Args:
        contents: Mapping of namespace filename -> raw bytes.
        locale: Locale code, used in error messages.

    Returns:
        Hex digest of the contents concatenated in sorted filename order.

    Raises:
        FingerprintError: If any content is missing (None).
    """
    digest = hashlib.new(HASH_ALGORITHM)
    for name in sorted(contents):
        content = contents[name]
        if content is None:
            raise FingerprintError(locale, f"unreadable source {name}")
        digest.update(content)
    return digest.hexdigest()


def build_version_entry(
    contents: Mapping[str, Optional[bytes]],
    locale: str = "",
    now: Optional[Clock] = None,
) -> VersionEntry:
    """Create a VersionEntry stamped with the current UTC time.

    Raises:
        FingerprintError: If any content is missing.
    """
    clock = now or utc_now
    return VersionEntry(
        hash=compute_locale_hash(contents, locale=locale), last_updated=clock()
    )


def update_version_map(
    versions: VersionMap,
    locale: str,
    contents: Mapping[str, Optional[bytes]],
    now: Optional[Clock] = None,
) -> VersionMap:
    """Return versions with the entry for locale recomputed.

    Entries of other locales are carried over unchanged; versions itself is
    not modified.

    Raises:
        FingerprintError: If any content of the locale is missing.
    """
    entry = build_version_entry(contents, locale=locale, now=now)
    return versions.with_entry(locale, entry)
