"""Tests for configuration loading, merging, and validation."""

from pathlib import Path

import pytest
import yaml

from symbol_opener.deep_merge import deep_merge
from symbol_opener.errors import ConfigError
from symbol_opener.load_config import DEFAULT_CONFIG, load_config
from symbol_opener.settings import (
    MultipleSymbolBehavior,
    SymbolNotFoundBehavior,
    WorkspaceNotOpenBehavior,
    settings_from_config,
)


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_arrays_replace() -> None:
    """Ordinary lists such as the sort priority are replaced."""
    merged = deep_merge(
        {"symbol_sort_priority": ["Class", "Function"]},
        {"symbol_sort_priority": ["Function"]},
    )
    assert merged["symbol_sort_priority"] == ["Function"]


def test_deep_merge_detectors_by_language() -> None:
    """Detectors replace same-language defaults and append new languages."""
    base = {
        "lang_detectors": [
            {"lang": "go", "markers": ["go.mod"], "glob": "**/*.go"},
            {"lang": "rust", "markers": ["Cargo.toml"], "glob": "**/*.rs"},
        ]
    }
    update = {
        "lang_detectors": [
            {"lang": "rust", "markers": ["Cargo.toml"], "glob": "crates/**/*.rs"},
            {"lang": "zig", "markers": ["build.zig"], "glob": "**/*.zig"},
        ]
    }
    merged = deep_merge(base, update)
    assert [d["lang"] for d in merged["lang_detectors"]] == ["go", "rust", "zig"]
    assert merged["lang_detectors"][1]["glob"] == "crates/**/*.rs"


def test_load_config_defaults() -> None:
    """Defaults apply when no file is given."""
    config = load_config(None)
    assert config["retry_count"] == 10
    assert config["retry_interval"] == 500
    assert config["symbol_sort_priority"][0] == "Class"


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Merging a user file leaves DEFAULT_CONFIG untouched."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"lang_detectors": [{"lang": "go", "markers": [], "glob": "*.go"}]})
    )
    load_config(str(config_file))
    assert DEFAULT_CONFIG["lang_detectors"][0]["glob"] == "**/*.go"


def test_load_config_with_file(tmp_path: Path) -> None:
    """User values override defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"retry_count": 3, "multiple_symbol_behavior": "quickpick"})
    )
    settings = settings_from_config(load_config(config_file))
    assert settings.retry_count == 3
    assert settings.multiple_symbol_behavior is MultipleSymbolBehavior.QUICKPICK


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    """A path that does not exist is ignored."""
    assert load_config(tmp_path / "absent.yml") == load_config(None)


def test_settings_defaults() -> None:
    """Default settings mirror the documented defaults."""
    settings = settings_from_config(load_config(None))
    assert settings.language is None
    assert settings.multiple_symbol_behavior is MultipleSymbolBehavior.FIRST
    assert settings.workspace_not_open_behavior is WorkspaceNotOpenBehavior.NEW_WINDOW
    assert settings.symbol_not_found_behavior is SymbolNotFoundBehavior.SEARCH
    assert [d.lang for d in settings.lang_detectors] == [
        "go", "rust", "python", "ruby", "java", "cpp", "typescript",
    ]  # fmt: skip


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("multiple_symbol_behavior", "random"),
        ("workspace_not_open_behavior", "popup"),
        ("symbol_not_found_behavior", "ignore"),
        ("retry_count", 0),
        ("retry_interval", -1),
        ("retry_count", "ten"),
        ("log_level", "trace"),
        ("lang_detectors", [{"lang": "go"}]),
        ("symbol_sort_priority", "Class"),
    ],
)
def test_settings_reject_bad_values(key: str, value: object) -> None:
    """Bad values raise ConfigError naming the problem."""
    config = load_config(None)
    config[key] = value
    with pytest.raises(ConfigError):
        settings_from_config(config)


@pytest.mark.parametrize(
    "text",
    ["retry_count: [1, 2\n", "- retry_count: 3\n", "just a string\n"],
)
def test_load_config_rejects_unusable_files(tmp_path: Path, text: str) -> None:
    """Broken YAML and non-mapping documents raise ConfigError."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)
