"""Translation converter feature settings."""

from pathlib import Path

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class ConverterSettings(FeatureSettings):
    """Translation converter configuration.

    Controls where source translations are read from, where the generated
    JSON namespaces and the version file are written, and how strictly
    per-leaf errors are treated.

    Environment Variables:
        I18N_SOURCE_DIR: Root directory holding one sub-directory per locale
        I18N_OUTPUT_DIR: Root directory for generated JSON namespaces
        I18N_VERSION_FILE: Path of the locale version (cache-busting) file
        I18N_JSON_INDENT: Indentation used when writing JSON (default: 2)
        I18N_STRICT: Fail the run when any error is reported (default: False)
        I18N_SOURCE_SUFFIXES: Comma separated source file suffixes

    Example:
        ```python
        from infrastructure.configuration import settings

        source_dir = settings.converter.source_dir
        if settings.converter.strict:
            ...
        ```
    """

    source_dir: Path = Field(
        default=Path("lang"),
        alias="I18N_SOURCE_DIR",
        description="Root directory holding one sub-directory per locale",
    )
    output_dir: Path = Field(
        default=Path("public/locales"),
        alias="I18N_OUTPUT_DIR",
        description="Root directory for generated JSON namespaces",
    )
    version_file: Path = Field(
        default=Path("public/locales/versions.json"),
        alias="I18N_VERSION_FILE",
        description="Path of the locale version file",
    )
    json_indent: int = Field(
        default=2,
        alias="I18N_JSON_INDENT",
        ge=0,
        description="Indentation used when writing JSON",
    )
    strict: bool = Field(
        default=False,
        alias="I18N_STRICT",
        description="Fail the run when any namespace reports an error",
    )
    source_suffixes: str = Field(
        default=".json,.yml,.yaml",
        alias="I18N_SOURCE_SUFFIXES",
        description="Comma separated list of source file suffixes",
    )

    @field_validator("source_suffixes")
    @classmethod
    def _normalize_suffixes(cls, value: str) -> str:
        suffixes = []
        for part in value.split(","):
            part = part.strip().lower()
            if not part:
                continue
            if not part.startswith("."):
                part = f".{part}"
            suffixes.append(part)
        if not suffixes:
            raise ValueError("At least one source suffix is required")
        return ",".join(suffixes)

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Source file suffixes as a tuple (e.g. ``(".json", ".yml")``)."""
        return tuple(self.source_suffixes.split(","))
