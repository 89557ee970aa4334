"""Feature-level fixtures for translation converter tests.

Provides sample trees and temporary locale directories with JSON and YAML
namespace files.
"""

import json
from datetime import datetime, timezone

import pytest
import yaml

from modules.translations import (
    FileSourceLoader,
    Group,
    JSONTranslationWriter,
    TranslationConverter,
)

FIXED_NOW = datetime(2026, 1, 15, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    """Constant UTC timestamp used by fixed_clock."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Clock returning a constant UTC timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_translation_data():
    """Nested source data mixing plurals, placeholders and markup."""
    return {
        "title": "Resources",
        "created": (
            "{0} No :resource created.|{1} :Resource created successfully.|"
            "[2,*] Many :resource created successfully."
        ),
        "messages": {
            "welcome": 'Welcome, <b class="highlight">:name</b>!',
            "shout": "HELLO :NAME",
        },
        "user": "user|users",
        "steps": ["First", "Second"],
    }


@pytest.fixture
def sample_tree(sample_translation_data):
    """Group built from sample_translation_data."""
    return Group.from_data(sample_translation_data)


@pytest.fixture
def temp_source_dir(tmp_path):
    """Create temporary source directory with locale sub-directories.

    Returns a directory structure like:
    - lang/en/auth.json
    - lang/en/validation.yml
    - lang/en/admin/users.yaml
    - lang/fr/auth.json
    - lang/fr/validation.yml
    """
    source = tmp_path / "lang"

    en = source / "en"
    (en / "admin").mkdir(parents=True)
    with open(en / "auth.json", "w", encoding="utf-8") as f:
        json.dump(
            {
                "failed": "These credentials do not match our records.",
                "throttle": "Too many attempts. Try again in :seconds seconds.",
            },
            f,
        )
    with open(en / "validation.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "required": "The :attribute field is required.",
                "items": "{0} No items|{1} One item|[2,*] :count items",
            },
            f,
            sort_keys=False,
        )
    with open(en / "admin" / "users.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"title": "<span class='x'>Users</span>"}, f)

    fr = source / "fr"
    fr.mkdir()
    with open(fr / "auth.json", "w", encoding="utf-8") as f:
        json.dump({"failed": "Identifiants incorrects."}, f, ensure_ascii=False)
    with open(fr / "validation.yml", "w", encoding="utf-8") as f:
        yaml.dump({"required": "Le champ :attribute est obligatoire."}, f, allow_unicode=True)

    return source


@pytest.fixture
def source_loader(temp_source_dir):
    """FileSourceLoader over temp_source_dir."""
    return FileSourceLoader(temp_source_dir)


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "public" / "locales"


@pytest.fixture
def converter(source_loader, output_dir, fixed_clock):
    """Converter wired to the temporary source and output directories."""
    return TranslationConverter(
        loader=source_loader,
        writer=JSONTranslationWriter(output_dir),
        version_file=output_dir / "versions.json",
        clock=fixed_clock,
    )
