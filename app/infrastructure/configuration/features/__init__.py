"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.converter import ConverterSettings

__all__ = [
    "ConverterSettings",
]
