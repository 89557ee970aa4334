"""Source loading interface and file-based implementation.

Expects one directory per locale under the source root, each holding one
file per namespace (JSON or YAML). Nested directories produce namespaces
such as ``admin/users``.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from infrastructure.logging import get_module_logger
from modules.translations.errors import SourceLoadError
from modules.translations.models import Group, NamespaceSource, VersionMap

logger = get_module_logger()

DEFAULT_SUFFIXES = (".json", ".yml", ".yaml")


class SourceLoader(ABC):
    """Abstract base for source loaders.

    Implementations define where locales come from and how namespace files
    are parsed into translation trees.
    """

    @abstractmethod
    def discover_locales(self) -> List[str]:
        """List the available locale codes, sorted."""
        pass

    @abstractmethod
    def load_locale(self, locale: str) -> List[NamespaceSource]:
        """Load every namespace of a locale.

        Args:
            locale: Locale code to load.

        Returns:
            One NamespaceSource per namespace, failed loads included.

        Raises:
            FileNotFoundError: If the locale does not exist.
        """
        pass


class FileSourceLoader(SourceLoader):
    """Loader for per-locale directories of JSON/YAML namespace files.

    Attributes:
        source_dir: Root directory holding one sub-directory per locale.
        suffixes: File suffixes treated as namespace sources.
    """

    def __init__(
        self,
        source_dir: Path,
        suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    ):
        """Initialize file source loader.

        Args:
            source_dir: Root directory holding one sub-directory per locale.
            suffixes: File suffixes treated as namespace sources.

        Raises:
            ValueError: If source_dir does not exist.
        """
        self.source_dir = Path(source_dir)
        self.suffixes = tuple(suffix.lower() for suffix in suffixes)

        if not self.source_dir.is_dir():
            raise ValueError(f"Source directory not found: {self.source_dir}")

        logger.info(
            "initialized_source_loader",
            source_dir=str(self.source_dir),
            suffixes=list(self.suffixes),
        )

    def discover_locales(self) -> List[str]:
        return sorted(
            entry.name
            for entry in self.source_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )

    def load_locale(self, locale: str) -> List[NamespaceSource]:
        """Load every namespace file below the locale directory.

        Files are visited in sorted relative-path order. A namespace provided
        by two files (``auth.json`` and ``auth.yml``) keeps the first and
        reports the second as a load error.

        Args:
            locale: Locale code (directory name).

        Returns:
            List of NamespaceSource.

        Raises:
            FileNotFoundError: If the locale directory does not exist.
        """
        locale_dir = self.source_dir / locale
        if not locale_dir.is_dir():
            raise FileNotFoundError(
                f"No translation directory for locale {locale} in {self.source_dir}"
            )

        files = sorted(
            (
                path
                for path in locale_dir.rglob("*")
                if path.is_file()
                and path.suffix.lower() in self.suffixes
                and not any(
                    part.startswith(".") for part in path.relative_to(locale_dir).parts
                )
            ),
            key=lambda path: path.relative_to(locale_dir).as_posix(),
        )

        sources: List[NamespaceSource] = []
        seen: Dict[str, str] = {}
        for path in files:
            source = self.load_namespace(locale, path)
            if source.namespace in seen:
                error = SourceLoadError(
                    path,
                    f"namespace '{source.namespace}' already provided by "
                    f"{seen[source.namespace]}",
                )
                logger.error(
                    "duplicate_namespace", locale=locale, file=str(path), error=str(error)
                )
                source = NamespaceSource(
                    locale=locale,
                    namespace=source.namespace,
                    raw=source.raw,
                    error=error,
                    filename=source.filename,
                )
            else:
                seen[source.namespace] = source.filename
            sources.append(source)

        logger.info("loaded_locale_sources", locale=locale, file_count=len(files))
        return sources

    def load_namespace(self, locale: str, path: Path) -> NamespaceSource:
        """Read and parse one namespace file.

        Read or parse failures are returned as a NamespaceSource carrying a
        SourceLoadError; the raw bytes are kept whenever the read worked.

        Args:
            locale: Locale code the file belongs to.
            path: Path of the namespace file.

        Returns:
            NamespaceSource for the file.
        """
        relative = path.relative_to(self.source_dir / locale)
        filename = relative.as_posix()
        namespace = relative.with_suffix("").as_posix()

        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.error("source_read_error", file=str(path), error=str(e))
            return NamespaceSource(
                locale=locale,
                namespace=namespace,
                error=SourceLoadError(path, str(e)),
                filename=filename,
            )

        try:
            tree = self._parse(path, raw)
        except SourceLoadError as e:
            logger.error("source_parse_error", file=str(path), error=e.reason)
            return NamespaceSource(
                locale=locale,
                namespace=namespace,
                raw=raw,
                error=e,
                filename=filename,
            )

        return NamespaceSource(
            locale=locale,
            namespace=namespace,
            tree=tree,
            raw=raw,
            filename=filename,
        )

    def _parse(self, path: Path, raw: bytes) -> Group:
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SourceLoadError(path, f"not valid UTF-8: {e}") from e

        data: Any
        if path.suffix.lower() == ".json":
            if not text.strip():
                return Group()
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise SourceLoadError(path, f"invalid JSON: {e}") from e
        else:
            try:
                # BaseLoader keeps yes/no/on/off and numbers as strings
                data = yaml.load(text, Loader=yaml.BaseLoader)
            except yaml.YAMLError as e:
                raise SourceLoadError(path, f"invalid YAML: {e}") from e

        if data is None:
            return Group()
        if not isinstance(data, (dict, list)):
            raise SourceLoadError(
                path, f"expected a mapping or list, got {type(data).__name__}"
            )
        return Group.from_data(data)


def read_version_map(path: Path) -> VersionMap:
    """Read an existing version file.

    A missing file yields an empty map. A corrupt file is logged and treated
    as empty so the run can rebuild it.

    Args:
        path: Path of the version file.

    Returns:
        VersionMap from the file, possibly empty.
    """
    path = Path(path)
    if not path.exists():
        return VersionMap()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        versions = VersionMap.from_dict(data)
    except (OSError, ValueError) as e:
        logger.warning("version_file_unreadable", file=str(path), error=str(e))
        return VersionMap()

    logger.info("loaded_version_map", file=str(path), locale_count=len(versions))
    return versions
