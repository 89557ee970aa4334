"""Tests for modules.translations.factory."""

import pytest

from infrastructure.configuration import ConverterSettings
from modules.translations.converter import TranslationConverter
from modules.translations.factory import create_converter


@pytest.fixture
def converter_settings(monkeypatch, temp_source_dir, tmp_path):
    monkeypatch.setenv("I18N_SOURCE_DIR", str(temp_source_dir))
    monkeypatch.setenv("I18N_OUTPUT_DIR", str(tmp_path / "dist"))
    monkeypatch.setenv("I18N_VERSION_FILE", str(tmp_path / "dist" / "versions.json"))
    monkeypatch.setenv("I18N_JSON_INDENT", "4")
    monkeypatch.setenv("I18N_SOURCE_SUFFIXES", ".json")
    return ConverterSettings()


@pytest.mark.unit
class TestCreateConverter:
    """Tests for create_converter()."""

    def test_uses_settings(self, converter_settings, temp_source_dir, tmp_path):
        """Paths, indent and suffixes come from the settings."""
        converter = create_converter(converter_settings)

        assert isinstance(converter, TranslationConverter)
        assert converter.loader.source_dir == temp_source_dir
        assert converter.loader.suffixes == (".json",)
        assert converter.writer.output_dir == tmp_path / "dist"
        assert converter.writer.indent == 4
        assert converter.version_file == tmp_path / "dist" / "versions.json"

    def test_overrides(self, converter_settings, tmp_path):
        """Explicit arguments win over settings."""
        converter = create_converter(
            converter_settings,
            output_dir=tmp_path / "other",
            version_file=tmp_path / "v.json",
        )

        assert converter.writer.output_dir == tmp_path / "other"
        assert converter.version_file == tmp_path / "v.json"

    def test_missing_source_dir(self, converter_settings, tmp_path):
        """A missing source directory raises ValueError."""
        with pytest.raises(ValueError):
            create_converter(converter_settings, source_dir=tmp_path / "missing")
