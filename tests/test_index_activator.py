"""Tests for index activation heuristics."""

import asyncio
from unittest.mock import MagicMock

from symbol_opener.index_activator import activate_index, detector_extensions
from symbol_opener.models import LangDetector

GO = LangDetector("go", ("go.mod",), "**/*.go", "**/vendor/**")
PYTHON = LangDetector("python", ("pyproject.toml", "setup.py"), "**/*.py", "**/.venv/**")
TS = LangDetector("typescript", ("tsconfig.json",), "**/*.{ts,js}", "**/node_modules/**")


def _files(mapping: dict[str, list[str]]):
    def find(include: str, exclude: str | None = None, max_results: int | None = None):
        return mapping.get(include, [])

    return find


def test_detector_extensions() -> None:
    """Extensions come from the detector's source glob."""
    assert detector_extensions(GO) == {".go"}
    assert detector_extensions(TS) == {".ts", ".js"}
    assert detector_extensions(LangDetector(None, (), "src/**")) == set()


def test_open_source_document_short_circuits(host: MagicMock) -> None:
    """An already open .go file means nothing is searched or loaded."""
    host.open_document_paths.return_value = ["/project/main.go"]

    asyncio.run(activate_index(host, [GO, PYTHON]))

    host.find_files.assert_not_called()
    host.load_document_silently.assert_not_called()


def test_language_override_filters_open_documents(host: MagicMock) -> None:
    """An open .go file does not count when the override is python."""
    host.open_document_paths.return_value = ["/project/main.go"]
    host.find_files.side_effect = _files({"**/*.py": ["/project/app.py"]})

    asyncio.run(activate_index(host, [GO, PYTHON], language="python"))

    host.find_files.assert_awaited_once_with("**/*.py", "**/.venv/**", 1)
    host.load_document_silently.assert_awaited_once_with("/project/app.py")


def test_language_override_without_sources(host: MagicMock) -> None:
    """The override path returns even when no source file exists."""
    asyncio.run(activate_index(host, [GO, PYTHON], language="python"))

    host.find_files.assert_awaited_once()
    host.load_document_silently.assert_not_called()


def test_unknown_override_falls_back_to_markers(host: MagicMock) -> None:
    """An override with no detector uses marker detection."""
    host.find_files.side_effect = _files(
        {"go.mod": ["/project/go.mod"], "**/*.go": ["/project/main.go"]}
    )

    asyncio.run(activate_index(host, [GO], language="rust"))

    host.load_document_silently.assert_awaited_once_with("/project/main.go")


def test_marker_detection_loads_first_source(host: MagicMock) -> None:
    """The first detector with a marker decides; one file is loaded."""
    host.find_files.side_effect = _files(
        {
            "setup.py": ["/project/setup.py"],
            "**/*.py": ["/project/pkg/mod.py", "/project/other.py"],
            "tsconfig.json": ["/project/tsconfig.json"],
        }
    )

    asyncio.run(activate_index(host, [GO, PYTHON, TS]))

    host.load_document_silently.assert_awaited_once_with("/project/pkg/mod.py")
    searched = [c.args[0] for c in host.find_files.await_args_list]
    assert searched == ["go.mod", "pyproject.toml", "setup.py", "**/*.py"]


def test_marker_without_sources_stops_detection(host: MagicMock) -> None:
    """A marker hit ends detection even when its glob finds nothing."""
    host.find_files.side_effect = _files(
        {"go.mod": ["/project/go.mod"], "tsconfig.json": ["/project/tsconfig.json"]}
    )

    asyncio.run(activate_index(host, [GO, TS]))

    host.load_document_silently.assert_not_called()
    searched = [c.args[0] for c in host.find_files.await_args_list]
    assert searched == ["go.mod", "**/*.go"]
