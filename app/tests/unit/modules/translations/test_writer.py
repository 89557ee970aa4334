"""Tests for modules.translations.writer."""

import json

import pytest

from modules.translations.models import Group, NamespaceResult, VersionEntry, VersionMap
from modules.translations.writer import JSONTranslationWriter, write_version_map


@pytest.mark.unit
class TestJSONTranslationWriter:
    """Tests for JSONTranslationWriter."""

    def test_write_namespace(self, tmp_path):
        """Namespaces are written under <locale>/<namespace>.json."""
        writer = JSONTranslationWriter(tmp_path)
        result = NamespaceResult(
            locale="fr",
            namespace="admin/users",
            tree=Group.from_data({"title": "Utilisateurs", "b": "é"}),
        )

        path = writer.write_namespace(result)

        assert path == tmp_path / "fr" / "admin" / "users.json"
        content = path.read_text(encoding="utf-8")
        assert content.endswith("\n")
        assert "é" in content
        assert list(json.loads(content)) == ["title", "b"]

    def test_write_empty_namespace(self, tmp_path):
        """A namespace without leaves is written as an empty object."""
        path = JSONTranslationWriter(tmp_path).write_namespace(
            NamespaceResult(locale="en", namespace="empty", tree=Group())
        )

        assert json.loads(path.read_text()) == {}

    def test_compact_output(self, tmp_path):
        """indent=0 writes compact JSON."""
        path = JSONTranslationWriter(tmp_path, indent=0).write_namespace(
            NamespaceResult(locale="en", namespace="a", tree=Group.from_data({"k": "v"}))
        )

        assert path.read_text() == '{"k": "v"}\n'


@pytest.mark.unit
class TestWriteVersionMap:
    """Tests for write_version_map()."""

    def test_writes_full_map(self, tmp_path, fixed_now):
        """The version file holds every locale, sorted."""
        versions = VersionMap(
            {
                "fr": VersionEntry(hash="b", last_updated=fixed_now),
                "en": VersionEntry(hash="a", last_updated=fixed_now),
            }
        )
        path = tmp_path / "out" / "versions.json"

        write_version_map(path, versions)

        data = json.loads(path.read_text())
        assert list(data) == ["en", "fr"]
        assert data["en"] == {"hash": "a", "last_updated": "2026-01-15T12:30:00+00:00"}

    def test_no_temporary_files_left(self, tmp_path):
        """The atomic write leaves only the final file."""
        write_version_map(tmp_path / "versions.json", VersionMap())

        assert [p.name for p in tmp_path.iterdir()] == ["versions.json"]
