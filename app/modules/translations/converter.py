"""Translation converter.

``convert`` is the pure core: loaded namespace sources and the previous
version map in, transformed namespaces and the updated version map out,
with no disk I/O. ``run`` wires it to a loader and a writer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from infrastructure.logging import bind_run_context, get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from modules.translations.errors import EmptyNamespace, FingerprintError
from modules.translations.loader import SourceLoader, read_version_map
from modules.translations.models import (
    LeafError,
    NamespaceResult,
    NamespaceSource,
    VersionMap,
)
from modules.translations.versioning import Clock, update_version_map
from modules.translations.walker import walk
from modules.translations.writer import JSONTranslationWriter, write_version_map

logger = get_module_logger()


@dataclass
class ConversionResult:
    """Output of TranslationConverter.convert.

    Attributes:
        namespaces: One result per source, in input order.
        versions: Updated version map.
        version_results: Outcome of the version update, per locale.
    """

    namespaces: List[NamespaceResult] = field(default_factory=list)
    versions: VersionMap = field(default_factory=VersionMap)
    version_results: Dict[str, OperationResult] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(len(result.errors) for result in self.namespaces) + sum(
            1
            for outcome in self.version_results.values()
            if outcome.status == OperationStatus.PERMANENT_ERROR
        )


@dataclass
class RunReport(ConversionResult):
    """Output of a full run, including the files written.

    Attributes:
        locales: Locales processed in the run.
        written: Paths of the namespace files written.
        version_file: Path of the version file, if it was written.
    """

    locales: List[str] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    version_file: Optional[Path] = None

    @property
    def warning_count(self) -> int:
        return sum(len(result.warnings) for result in self.namespaces)


class TranslationConverter:
    """Converts locale namespace trees and maintains the version map.

    Attributes:
        loader: SourceLoader used by run().
        writer: JSONTranslationWriter used by run().
        version_file: Path of the version file used by run().
        clock: Optional clock for version timestamps.
    """

    def __init__(
        self,
        loader: Optional[SourceLoader] = None,
        writer: Optional[JSONTranslationWriter] = None,
        version_file: Optional[Path] = None,
        clock: Optional[Clock] = None,
    ):
        self.loader = loader
        self.writer = writer
        self.version_file = Path(version_file) if version_file else None
        self.clock = clock

    def convert_namespace(self, source: NamespaceSource) -> NamespaceResult:
        """Transform one namespace source.

        Args:
            source: Loaded namespace.

        Returns:
            NamespaceResult with the transformed tree and its error report.
            A source that failed to load yields no tree and its load error.
        """
        result = NamespaceResult(locale=source.locale, namespace=source.namespace)

        if source.tree is None:
            if source.error is not None:
                result.errors.append(LeafError(path="", error=source.error))
            return result

        walked = walk(source.tree)
        result.tree = walked.tree
        result.errors.extend(walked.errors)

        if source.tree.count_leaves() == 0:
            warning = EmptyNamespace(source.namespace)
            result.warnings.append(warning)
            logger.warning(
                "namespace_empty", locale=source.locale, namespace=source.namespace
            )

        logger.info(
            "namespace_converted",
            locale=source.locale,
            namespace=source.namespace,
            error_count=len(result.errors),
        )
        return result

    def convert(
        self,
        sources: Iterable[NamespaceSource],
        versions: Optional[VersionMap] = None,
        locales: Iterable[str] = (),
    ) -> ConversionResult:
        """Convert namespace sources and update the version map.

        Every namespace is converted independently; a failure on one never
        stops the others. Once all namespaces are converted, each locale's
        version entry is recomputed from the raw content of its sources.
        When that content is incomplete the locale keeps its previous entry
        and the failure is reported in version_results.

        Args:
            sources: Loaded namespaces, any number of locales.
            versions: Version map from the previous run (default: empty).
            locales: Locales to version even if they have no sources. Their
                hash is the digest of empty content.

        Returns:
            ConversionResult. The versions argument is not modified.
        """
        result = ConversionResult(
            versions=versions if versions is not None else VersionMap()
        )

        by_locale: Dict[str, List[NamespaceSource]] = {
            locale: [] for locale in locales
        }
        for source in sources:
            by_locale.setdefault(source.locale, []).append(source)
            with bind_run_context(locale=source.locale, namespace=source.namespace):
                result.namespaces.append(self.convert_namespace(source))

        for locale, locale_sources in by_locale.items():
            with bind_run_context(locale=locale):
                result.versions, result.version_results[locale] = (
                    self._update_version(result.versions, locale, locale_sources)
                )

        return result

    def _update_version(
        self,
        versions: VersionMap,
        locale: str,
        sources: Sequence[NamespaceSource],
    ):
        contents = {source.fingerprint_name: source.raw for source in sources}
        try:
            updated = update_version_map(versions, locale, contents, now=self.clock)
        except FingerprintError as e:
            logger.error("version_update_failed", locale=locale, error=str(e))
            return versions, OperationResult.permanent_error(
                str(e), error_code="FINGERPRINT_FAILED"
            )

        entry = updated.get(locale)
        previous = versions.get(locale)
        logger.info(
            "version_updated",
            locale=locale,
            hash=entry.hash,
            changed=previous is None or previous.hash != entry.hash,
        )
        return updated, OperationResult.success(data=entry, message="version updated")

    def run(self, locales: Optional[Sequence[str]] = None) -> RunReport:
        """Convert locales from the loader and write the results.

        Namespaces that failed to load are not written, so existing output
        for them is left in place. The version file is written once, last.

        Args:
            locales: Locale codes to process (default: every discovered locale).

        Returns:
            RunReport describing the run.

        Raises:
            ValueError: If the converter has no loader or writer.
        """
        if self.loader is None or self.writer is None:
            raise ValueError("run() requires a loader and a writer")

        report = RunReport()
        available = self.loader.discover_locales()
        selected = list(locales) if locales else available

        with bind_run_context():
            logger.info("run_started", locales=selected)

            versions = (
                read_version_map(self.version_file) if self.version_file else VersionMap()
            )

            for locale in selected:
                if locale not in available:
                    logger.warning("locale_not_found", locale=locale)
                    report.version_results[locale] = OperationResult.skipped(
                        f"Locale {locale} not found"
                    )
                    continue

                converted = self.convert(
                    self.loader.load_locale(locale), versions, locales=[locale]
                )
                versions = converted.versions
                report.locales.append(locale)
                report.namespaces.extend(converted.namespaces)
                report.version_results.update(converted.version_results)

                for namespace_result in converted.namespaces:
                    if namespace_result.is_writable:
                        report.written.append(
                            self.writer.write_namespace(namespace_result)
                        )

            report.versions = versions
            if self.version_file and report.locales:
                report.version_file = write_version_map(
                    self.version_file, versions, indent=self.writer.indent
                )

            logger.info(
                "run_finished",
                locale_count=len(report.locales),
                file_count=len(report.written),
                error_count=report.error_count,
                warning_count=report.warning_count,
            )

        return report
