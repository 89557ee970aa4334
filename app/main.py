"""Command-line entry point for the translation converter.

Usage:
    i18n-convert --source lang --output public/locales
    i18n-convert --locale en --locale fr --strict
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from infrastructure.configuration import settings
from infrastructure.logging import configure_logging, get_module_logger
from modules.translations import RunReport, create_converter

logger = get_module_logger()

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-convert",
        description="Convert per-locale translation files to i18next JSON.",
    )
    parser.add_argument("--source", type=Path, help="Root directory of locale sources")
    parser.add_argument("--output", type=Path, help="Root directory for JSON output")
    parser.add_argument("--version-file", type=Path, help="Path of the version file")
    parser.add_argument(
        "--locale",
        action="append",
        dest="locales",
        metavar="LOCALE",
        help="Locale to convert (repeatable, default: all)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with an error status when any error is reported",
    )
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    return parser


def list_errors(report: RunReport) -> None:
    for result in report.namespaces:
        for error in result.errors:
            logger.warning(
                "translation_error",
                locale=result.locale,
                namespace=result.namespace,
                path=error.path,
                error=str(error.error),
            )
    for locale, outcome in report.version_results.items():
        if not outcome.is_success:
            logger.warning(
                "version_not_updated",
                locale=locale,
                status=outcome.status.value,
                reason=outcome.message,
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a conversion and return the process exit status."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level)

    strict = settings.converter.strict if args.strict is None else args.strict

    try:
        converter = create_converter(
            source_dir=args.source,
            output_dir=args.output,
            version_file=args.version_file,
        )
    except ValueError as e:
        logger.error("converter_setup_failed", error=str(e))
        return EXIT_USAGE

    report = converter.run(locales=args.locales)
    list_errors(report)

    if strict and report.error_count:
        logger.error("run_failed_strict", error_count=report.error_count)
        return EXIT_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
