"""Translation models for the converter.

Defines the translation tree, the transient plural parse result, the
per-namespace result report and the locale version map.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from modules.translations.errors import SourceLoadError, TranslationError


class Selector(str, Enum):
    """Pluralization category, used as the output key suffix."""

    ZERO = "zero"
    ONE = "one"
    OTHER = "other"

    @property
    def precedence(self) -> int:
        return _SELECTOR_ORDER.index(self)

    def suffix(self, key: str) -> str:
        """Return the suffixed key (e.g. ``created_one``)."""
        return f"{key}_{self.value}"


_SELECTOR_ORDER = (Selector.ZERO, Selector.ONE, Selector.OTHER)


class Casing(str, Enum):
    """Casing class of a placeholder identifier."""

    LOWER = "lower"
    CAPITALIZED = "capitalized"
    UPPER = "upper"


@dataclass(frozen=True)
class Leaf:
    """Terminal translation string."""

    text: str


@dataclass(frozen=True)
class Group:
    """Ordered mapping of key -> TranslationNode.

    Frozen and backed by a read-only mapping; transforms always build a new
    Group instead of editing one in place.
    """

    entries: Mapping[str, "TranslationNode"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> "TranslationNode":
        return self.entries[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return list(self.entries.items()) == list(other.entries.items())

    def __hash__(self) -> int:
        return hash(tuple(self.entries.items()))

    def keys(self) -> List[str]:
        return list(self.entries.keys())

    def items(self):
        return self.entries.items()

    def count_leaves(self) -> int:
        """Count leaves in this group and all nested groups."""
        total = 0
        for node in self.entries.values():
            total += node.count_leaves() if isinstance(node, Group) else 1
        return total

    @classmethod
    def from_data(cls, data: Union[Mapping[Any, Any], List[Any]]) -> "Group":
        """Build a Group from a loaded dict or list structure.

        Lists are keyed by their positional index. Scalar values are coerced
        to text: ``None`` becomes ``""``, booleans become ``"true"`` or
        ``"false"`` and other values use ``str()``.

        Args:
            data: Parsed source structure (dict or list).

        Returns:
            Group mirroring the structure, key order preserved.

        Raises:
            TypeError: If data is neither a mapping nor a list.
        """
        if isinstance(data, Mapping):
            pairs = data.items()
        elif isinstance(data, list):
            pairs = enumerate(data)
        else:
            raise TypeError(f"Expected mapping or list, got {type(data).__name__}")

        entries: Dict[str, TranslationNode] = {}
        for key, value in pairs:
            entries[str(key)] = _node_from_value(value)
        return cls(entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain nested dicts ready for JSON serialization."""
        result: Dict[str, Any] = {}
        for key, node in self.entries.items():
            result[key] = node.to_dict() if isinstance(node, Group) else node.text
        return result


TranslationNode = Union[Leaf, Group]


def _node_from_value(value: Any) -> TranslationNode:
    if isinstance(value, (Mapping, list)):
        return Group.from_data(value)
    if value is None:
        return Leaf("")
    if isinstance(value, bool):
        return Leaf("true" if value else "false")
    return Leaf(str(value))


@dataclass(frozen=True)
class PluralSpec:
    """Parsed plural variants of one leaf, in Zero, One, Other order.

    Attributes:
        variants: Tuple of (selector, text) pairs, one per selector present.
    """

    variants: Tuple[Tuple[Selector, str], ...]

    @classmethod
    def from_pairs(cls, pairs: List[Tuple[Selector, str]]) -> "PluralSpec":
        return cls(tuple(sorted(pairs, key=lambda pair: pair[0].precedence)))

    @property
    def selectors(self) -> Tuple[Selector, ...]:
        return tuple(selector for selector, _ in self.variants)


@dataclass(frozen=True)
class LeafError:
    """A transform failure on a single leaf.

    Attributes:
        path: Dotted key path of the leaf within the namespace.
        error: The exception describing the failure.
    """

    path: str
    error: TranslationError

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


@dataclass(frozen=True)
class NamespaceSource:
    """One loaded namespace, as handed from the loader to the converter.

    Attributes:
        locale: Locale code (e.g. "en", "fr-CA").
        namespace: Namespace name (e.g. "auth", "admin/users").
        tree: Parsed translation tree, or None when loading failed.
        raw: Raw file content used for fingerprinting, or None when unreadable.
        error: Load failure, if any.
        filename: Source path relative to the locale directory, used to order
            content for fingerprinting (defaults to the namespace).
    """

    locale: str
    namespace: str
    tree: Optional[Group] = None
    raw: Optional[bytes] = None
    error: Optional[SourceLoadError] = None
    filename: str = ""

    @property
    def fingerprint_name(self) -> str:
        return self.filename or self.namespace


@dataclass
class NamespaceResult:
    """Outcome of converting one namespace.

    Attributes:
        locale: Locale code.
        namespace: Namespace name.
        tree: Transformed tree, or None when the source could not be loaded.
        errors: Per-leaf (or load) errors collected during conversion.
        warnings: Non-fatal conditions such as an empty namespace.
    """

    locale: str
    namespace: str
    tree: Optional[Group] = None
    errors: List[LeafError] = field(default_factory=list)
    warnings: List[TranslationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_writable(self) -> bool:
        """True when there is an output tree to hand to the writer."""
        return self.tree is not None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready output for this namespace (``{}`` when there is no tree)."""
        return self.tree.to_dict() if self.tree is not None else {}


@dataclass(frozen=True)
class VersionEntry:
    """Fingerprint of one locale.

    Attributes:
        hash: Hex digest of the locale's concatenated source content.
        last_updated: Timezone-aware timestamp of the update.
    """

    hash: str
    last_updated: datetime

    def to_dict(self) -> Dict[str, str]:
        return {"hash": self.hash, "last_updated": self.last_updated.isoformat()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VersionEntry":
        """Create a VersionEntry from its serialized form.

        Raises:
            ValueError: If fields are missing or the timestamp is invalid.
        """
        try:
            digest = data["hash"]
            stamp = data["last_updated"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid version entry: {data!r}") from e
        if not isinstance(digest, str) or not isinstance(stamp, str):
            raise ValueError(f"Invalid version entry: {data!r}")
        return cls(hash=digest, last_updated=datetime.fromisoformat(stamp))


@dataclass(frozen=True)
class VersionMap:
    """Mapping of locale code -> VersionEntry.

    Treated as a value: updates return a new map.
    """

    entries: Mapping[str, VersionEntry] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, locale: object) -> bool:
        return locale in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionMap):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.entries.items())))

    def get(self, locale: str) -> Optional[VersionEntry]:
        return self.entries.get(locale)

    def with_entry(self, locale: str, entry: VersionEntry) -> "VersionMap":
        """Return a copy with the entry for locale set (or overwritten)."""
        updated = dict(self.entries)
        updated[locale] = entry
        return VersionMap(updated)

    def merge(self, other: "VersionMap") -> "VersionMap":
        """Return a copy where entries from other override this map's."""
        merged = dict(self.entries)
        merged.update(other.entries)
        return VersionMap(merged)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Serialize with locales in sorted order."""
        return {locale: self.entries[locale].to_dict() for locale in sorted(self.entries)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VersionMap":
        """Create a VersionMap from its serialized form.

        Raises:
            ValueError: If data is not a mapping or an entry is invalid.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Version map must be a JSON object")
        return cls(
            {str(locale): VersionEntry.from_dict(entry) for locale, entry in data.items()}
        )
