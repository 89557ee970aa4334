"""Factory functions for creating converter components.

Provides a convenience function for building a TranslationConverter from
the application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import ConverterSettings, settings
from infrastructure.logging import get_module_logger
from modules.translations.converter import TranslationConverter
from modules.translations.loader import FileSourceLoader
from modules.translations.versioning import Clock
from modules.translations.writer import JSONTranslationWriter

logger = get_module_logger()


def create_converter(
    converter_settings: Optional[ConverterSettings] = None,
    source_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    version_file: Optional[Path] = None,
    clock: Optional[Clock] = None,
) -> TranslationConverter:
    """Create and configure a TranslationConverter.

    Explicit arguments override the corresponding settings.

    Args:
        converter_settings: Settings to use (default: settings.converter).
        source_dir: Override for the source root.
        output_dir: Override for the output root.
        version_file: Override for the version file path.
        clock: Optional clock for version timestamps.

    Returns:
        TranslationConverter: Configured converter instance

    Raises:
        ValueError: If the source directory does not exist

    Usage:
        converter = create_converter()
        report = converter.run()

        converter = create_converter(source_dir=Path("resources/lang"))
    """
    config = converter_settings or settings.converter

    source_dir = Path(source_dir or config.source_dir)
    output_dir = Path(output_dir or config.output_dir)
    version_file = Path(version_file or config.version_file)

    loader = FileSourceLoader(source_dir, suffixes=config.suffixes)
    writer = JSONTranslationWriter(output_dir, indent=config.json_indent)
    converter = TranslationConverter(
        loader=loader,
        writer=writer,
        version_file=version_file,
        clock=clock,
    )

    logger.info(
        "converter_created",
        source_dir=str(source_dir),
        output_dir=str(output_dir),
        version_file=str(version_file),
    )
    return converter
