"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from symbol_opener.deep_merge import deep_merge
from symbol_opener.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "language": None,
    "multiple_symbol_behavior": "first",
    "workspace_not_open_behavior": "new-window",
    "symbol_not_found_behavior": "search",
    # Language servers need time to index after a project opens.
    "retry_count": 10,
    "retry_interval": 500,
    "log_level": "info",
    "editor_command": "code",
    "lang_detectors": [
        {
            "lang": "go",
            "markers": ["go.mod"],
            "glob": "**/*.go",
            "exclude": "**/vendor/**",
        },
        {
            "lang": "rust",
            "markers": ["Cargo.toml"],
            "glob": "**/*.rs",
            "exclude": "**/target/**",
        },
        {
            "lang": "python",
            "markers": ["pyproject.toml", "requirements.txt", "setup.py"],
            "glob": "**/*.py",
            "exclude": "**/.venv/**",
        },
        {
            "lang": "ruby",
            "markers": ["Gemfile"],
            "glob": "**/*.rb",
            "exclude": "**/vendor/**",
        },
        {
            "lang": "java",
            "markers": ["pom.xml", "build.gradle", "build.gradle.kts"],
            "glob": "**/*.java",
            "exclude": "**/target/**",
        },
        {
            "lang": "cpp",
            "markers": ["CMakeLists.txt"],
            "glob": "**/*.{c,cpp,cc,cxx,h,hpp,hxx}",
            "exclude": "**/build/**",
        },
        {
            "lang": "typescript",
            "markers": ["tsconfig.json", "package.json"],
            "glob": "**/*.{ts,js}",
            "exclude": "**/node_modules/**",
        },
    ],
    # Type definitions first, then callables.
    "symbol_sort_priority": [
        "Class",
        "Interface",
        "Struct",
        "Function",
        "Method",
        "Constructor",
        "Constant",
        "Property",
        "Field",
        "Enum",
        "Variable",
    ],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises ``ConfigError`` when the file is not valid YAML or is not a mapping.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"{p}: invalid YAML: {e}") from e
            if not isinstance(user_config, dict):
                raise ConfigError(f"{p}: top level must be a mapping of settings")
            config = deep_merge(config, user_config)
    return config
