"""Tests for modules.translations.placeholders."""

import pytest

from modules.translations.models import Casing
from modules.translations.placeholders import (
    classify,
    format_placeholder,
    rewrite_placeholders,
)


@pytest.mark.unit
class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("name", Casing.LOWER),
            ("user_id", Casing.LOWER),
            ("resourceName", Casing.LOWER),
            ("Name", Casing.CAPITALIZED),
            ("Resource_id", Casing.CAPITALIZED),
            ("NAME", Casing.UPPER),
            ("USER_ID2", Casing.UPPER),
            ("A", Casing.UPPER),
            ("ResourceName", Casing.LOWER),
        ],
    )
    def test_classify(self, identifier, expected):
        """Identifiers are classified by their casing pattern."""
        assert classify(identifier) == expected


@pytest.mark.unit
class TestFormatPlaceholder:
    """Tests for format_placeholder()."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("count", "{{count}}"),
            ("Count", "{{count, capitalize}}"),
            ("COUNT", "{{count, uppercase}}"),
            ("FIRST_NAME", "{{first_name, uppercase}}"),
            ("firstName", "{{firstName}}"),
            ("FirstName", "{{FirstName}}"),
        ],
    )
    def test_directives(self, identifier, expected):
        """Each casing maps to its directive template."""
        assert format_placeholder(identifier) == expected


@pytest.mark.unit
class TestRewritePlaceholders:
    """Tests for rewrite_placeholders()."""

    @pytest.mark.parametrize(
        "text",
        ["", "Nothing to see", "{{already}} done", "Time: 10:30", "a : b"],
    )
    def test_text_without_tokens_unchanged(self, text):
        """Text without :token markers is returned unchanged."""
        assert rewrite_placeholders(text) == text

    def test_rewrites_all_occurrences(self):
        """Every marker in the string is rewritten."""
        text = ":Resource :resource :RESOURCE"

        assert rewrite_placeholders(text) == (
            "{{resource, capitalize}} {{resource}} {{resource, uppercase}}"
        )

    def test_adjacent_punctuation_kept(self):
        """Punctuation directly after a marker is not part of the identifier."""
        assert rewrite_placeholders("Hello :name!") == "Hello {{name}}!"
        assert rewrite_placeholders("(:count)") == "({{count}})"

    @pytest.mark.parametrize(
        "text,expected",
        [
            (":nombre_é", "{{nombre_é}}"),
            (":_id", "{{_id}}"),
            (":Émile", "{{émile, capitalize}}"),
            ("Hola :usuario_2", "Hola {{usuario_2}}"),
            (":2nd", ":2nd"),
        ],
    )
    def test_identifier_characters(self, text, expected):
        """Identifiers take any letters, digits and underscores but no leading digit."""
        assert rewrite_placeholders(text) == expected

    def test_single_pass(self):
        """Output is not rescanned, so consecutive markers do not overlap."""
        assert rewrite_placeholders(":a:b") == "{{a}}{{b}}"

    def test_rewriting_is_stable(self):
        """Rewriting already rewritten text changes nothing."""
        once = rewrite_placeholders("Dear :Name, you have :count messages")

        assert rewrite_placeholders(once) == once
