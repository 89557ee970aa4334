"""JSON output for converted namespaces and the locale version file."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from infrastructure.logging import get_module_logger
from modules.translations.models import NamespaceResult, VersionMap

logger = get_module_logger()


def _dump(data: Any, indent: int) -> str:
    return json.dumps(data, indent=indent or None, ensure_ascii=False) + "\n"


def _write_atomic(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        # mkstemp files are 0600; output must be world-readable
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class JSONTranslationWriter:
    """Writes converted namespaces as ``<output_dir>/<locale>/<namespace>.json``.

    Attributes:
        output_dir: Root directory for generated files.
        indent: JSON indentation (0 writes compact JSON).
    """

    def __init__(self, output_dir: Path, indent: int = 2):
        self.output_dir = Path(output_dir)
        self.indent = indent

    def namespace_path(self, locale: str, namespace: str) -> Path:
        return self.output_dir / locale / f"{namespace}.json"

    def write_namespace(self, result: NamespaceResult) -> Path:
        """Write one namespace result.

        Args:
            result: Converted namespace; a result without a tree is written
                as ``{}``.

        Returns:
            Path of the written file.
        """
        path = self.namespace_path(result.locale, result.namespace)
        _write_atomic(path, _dump(result.to_dict(), self.indent))
        logger.debug(
            "namespace_written",
            locale=result.locale,
            namespace=result.namespace,
            file=str(path),
        )
        return path


def write_version_map(path: Path, versions: VersionMap, indent: int = 2) -> Path:
    """Persist the version map atomically (temporary file, then rename).

    Args:
        path: Destination path of the version file.
        versions: Full version map to write.
        indent: JSON indentation.

    Returns:
        Path of the written file.
    """
    path = Path(path)
    _write_atomic(path, _dump(versions.to_dict(), indent))
    logger.info("version_map_written", file=str(path), locale_count=len(versions))
    return path
