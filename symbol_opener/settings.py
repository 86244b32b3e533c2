"""Typed view over the merged configuration mapping."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from symbol_opener.errors import ConfigError
from symbol_opener.models import LangDetector


class MultipleSymbolBehavior(str, Enum):
    """What to do when several exact matches remain."""

    FIRST = "first"  # fast, may open the wrong duplicate
    QUICKPICK = "quickpick"  # interactive, interrupts flow
    WORKSPACE_PRIORITY = "workspace-priority"  # first match under the earliest open root


class WorkspaceNotOpenBehavior(str, Enum):
    """What to do when the requested project is not open here."""

    NEW_WINDOW = "new-window"
    CURRENT_WINDOW = "current-window"
    ERROR = "error"


class SymbolNotFoundBehavior(str, Enum):
    """What to do when resolution ends without a match."""

    ERROR = "error"
    SEARCH = "search"


LOG_LEVELS = ("debug", "info")


@dataclass(frozen=True)
class Settings:
    """Validated configuration consumed by the resolution engine."""

    language: str | None
    multiple_symbol_behavior: MultipleSymbolBehavior
    workspace_not_open_behavior: WorkspaceNotOpenBehavior
    symbol_not_found_behavior: SymbolNotFoundBehavior
    retry_count: int
    retry_interval: int  # milliseconds
    lang_detectors: tuple[LangDetector, ...]
    log_level: str
    symbol_sort_priority: tuple[str, ...]
    editor_command: str = "code"


def _enum_value(enum_cls: type[Enum], key: str, value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(m.value) for m in enum_cls)
        msg = f"Invalid value {value!r} for {key} (expected one of {allowed})"
        raise ConfigError(msg) from None


def _int_at_least(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        msg = f"Invalid value {value!r} for {key} (expected an integer >= {minimum})"
        raise ConfigError(msg)
    return value


def _detectors(value: Any) -> tuple[LangDetector, ...]:
    if not isinstance(value, list):
        msg = "lang_detectors must be a list"
        raise ConfigError(msg)
    detectors = []
    for entry in value:
        if not isinstance(entry, dict) or not entry.get("glob"):
            msg = f"Invalid lang detector: {entry!r}"
            raise ConfigError(msg)
        detectors.append(LangDetector.from_dict(entry))
    return tuple(detectors)


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Validate a merged configuration mapping and build ``Settings``.

    Kind names in ``symbol_sort_priority`` are validated when a request
    builds its priority map, so that a typo is reported to the user who
    triggered the request.
    """
    log_level = config.get("log_level", "info")
    if log_level not in LOG_LEVELS:
        msg = f"Invalid value {log_level!r} for log_level"
        raise ConfigError(msg)

    priority = config.get("symbol_sort_priority", [])
    if not isinstance(priority, list):
        msg = "symbol_sort_priority must be a list"
        raise ConfigError(msg)

    return Settings(
        language=config.get("language") or None,
        multiple_symbol_behavior=_enum_value(
            MultipleSymbolBehavior,
            "multiple_symbol_behavior",
            config.get("multiple_symbol_behavior", "first"),
        ),
        workspace_not_open_behavior=_enum_value(
            WorkspaceNotOpenBehavior,
            "workspace_not_open_behavior",
            config.get("workspace_not_open_behavior", "new-window"),
        ),
        symbol_not_found_behavior=_enum_value(
            SymbolNotFoundBehavior,
            "symbol_not_found_behavior",
            config.get("symbol_not_found_behavior", "search"),
        ),
        retry_count=_int_at_least("retry_count", config.get("retry_count", 10), 1),
        retry_interval=_int_at_least(
            "retry_interval", config.get("retry_interval", 500), 0
        ),
        lang_detectors=_detectors(config.get("lang_detectors", [])),
        log_level=log_level,
        symbol_sort_priority=tuple(str(name) for name in priority),
        editor_command=str(config.get("editor_command", "code")),
    )
