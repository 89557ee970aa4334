"""Translation converter - source translation trees to i18next-style JSON.

Main components:
- models: Leaf, Group, PluralSpec, NamespaceSource, NamespaceResult, VersionMap
- html / placeholders / plurals: the per-string transforms
- pipeline: transform_leaf composing the transforms
- walker: walk() applying the pipeline to a whole tree
- versioning: per-locale content fingerprints
- loader / writer: file-based source loading and JSON output
- converter: TranslationConverter driving a run
"""

from modules.translations.converter import (
    ConversionResult,
    RunReport,
    TranslationConverter,
)
from modules.translations.errors import (
    DuplicateKey,
    EmptyNamespace,
    FingerprintError,
    MalformedPluralSyntax,
    SourceLoadError,
    TranslationError,
    UnterminatedTag,
)
from modules.translations.factory import create_converter
from modules.translations.html import strip_html_attributes
from modules.translations.loader import FileSourceLoader, SourceLoader, read_version_map
from modules.translations.models import (
    Casing,
    Group,
    Leaf,
    LeafError,
    NamespaceResult,
    NamespaceSource,
    PluralSpec,
    Selector,
    TranslationNode,
    VersionEntry,
    VersionMap,
)
from modules.translations.pipeline import transform_leaf, transform_text
from modules.translations.placeholders import classify, rewrite_placeholders
from modules.translations.plurals import parse_plural, rewrite_plural
from modules.translations.versioning import (
    build_version_entry,
    compute_locale_hash,
    update_version_map,
)
from modules.translations.walker import WalkResult, walk
from modules.translations.writer import JSONTranslationWriter, write_version_map

__all__ = [
    "Casing",
    "ConversionResult",
    "DuplicateKey",
    "EmptyNamespace",
    "FileSourceLoader",
    "FingerprintError",
    "Group",
    "JSONTranslationWriter",
    "Leaf",
    "LeafError",
    "MalformedPluralSyntax",
    "NamespaceResult",
    "NamespaceSource",
    "PluralSpec",
    "RunReport",
    "Selector",
    "SourceLoadError",
    "SourceLoader",
    "TranslationConverter",
    "TranslationError",
    "TranslationNode",
    "UnterminatedTag",
    "VersionEntry",
    "VersionMap",
    "WalkResult",
    "build_version_entry",
    "classify",
    "compute_locale_hash",
    "create_converter",
    "parse_plural",
    "read_version_map",
    "rewrite_placeholders",
    "rewrite_plural",
    "strip_html_attributes",
    "transform_leaf",
    "transform_text",
    "update_version_map",
    "walk",
    "write_version_map",
]
