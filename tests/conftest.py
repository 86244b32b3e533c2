"""Shared fixtures: a mocked host, an in-memory store, and settings."""

import dataclasses
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from symbol_opener.load_config import load_config
from symbol_opener.models import Position, SymbolCandidate, SymbolLocation
from symbol_opener.settings import Settings, settings_from_config
from symbol_opener.symbol_kind import SymbolKind


class MemoryStore:
    """Dict-backed durable store."""

    def __init__(self) -> None:
        self.values: dict[str, Any] = {}
        self.puts: list[tuple[str, Any]] = []

    def get(self, key: str) -> Any:
        return self.values.get(key)

    def put(self, key: str, value: Any) -> None:
        self.puts.append((key, value))
        if value is None:
            self.values.pop(key, None)
        else:
            self.values[key] = value


@pytest.fixture
def host() -> MagicMock:
    """A host whose index is empty and whose only open root is /project."""
    h = MagicMock()
    h.query_index_by_name = AsyncMock(return_value=[])
    h.find_files = AsyncMock(return_value=[])
    h.load_document_silently = AsyncMock()
    h.pick_one = AsyncMock(return_value=None)
    h.open_project_root = AsyncMock()
    h.show_error = AsyncMock()
    h.reveal = AsyncMock()
    h.open_search = AsyncMock()
    h.project_roots.return_value = ["/project"]
    h.open_document_paths.return_value = []
    return h


@pytest.fixture
def store() -> MemoryStore:
    """An empty in-memory durable store."""
    return MemoryStore()


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Default settings with one retry, no delay, and no detectors."""

    def factory(**overrides: Any) -> Settings:
        base = settings_from_config(load_config(None))
        values: dict[str, Any] = {
            "retry_count": 1,
            "retry_interval": 0,
            "lang_detectors": (),
        }
        values.update(overrides)
        return dataclasses.replace(base, **values)

    return factory


@pytest.fixture
def make_candidate() -> Callable[..., SymbolCandidate]:
    """Build index candidates with short keyword arguments."""

    def factory(
        name: str,
        kind: SymbolKind = SymbolKind.Function,
        path: str = "/project/foo.ts",
        line: int = 0,
        container: str | None = None,
    ) -> SymbolCandidate:
        return SymbolCandidate(
            raw_name=name,
            kind=kind,
            location=SymbolLocation(path=path, position=Position(line, 0)),
            container_name=container,
        )

    return factory
