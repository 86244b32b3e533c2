"""Data models for symbol queries, index candidates, and resolution outcomes."""

from dataclasses import dataclass, field
from typing import Any, Union
from urllib.parse import unquote, urlparse

from symbol_opener.symbol_kind import SymbolKind


@dataclass(frozen=True)
class SymbolQuery:
    """One resolution request: a bare symbol name and an optional kind hint."""

    name: str
    kind_hint: str | None = None


@dataclass(frozen=True)
class Position:
    """Zero-based line/column position inside a file."""

    line: int
    column: int = 0


@dataclass(frozen=True)
class SymbolLocation:
    """Where a symbol is defined."""

    path: str
    position: Position = field(default_factory=lambda: Position(0, 0))


@dataclass(frozen=True)
class SymbolCandidate:
    """One match returned by the symbol index."""

    raw_name: str
    kind: SymbolKind
    location: SymbolLocation
    container_name: str | None = None

    @classmethod
    def from_symbol_information(cls, data: dict[str, Any]) -> "SymbolCandidate":
        """Build a candidate from an LSP ``SymbolInformation``-shaped mapping.

        The wire ``kind`` is 1-based (File=1); ``SymbolKind`` starts at zero.
        Raises ``ValueError`` for entries that are not in that shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"symbol entry is not an object: {data!r}")
        location = data.get("location")
        if not isinstance(location, dict):
            raise ValueError(f"symbol location is not an object: {location!r}")
        uri = location.get("uri", "")
        path = unquote(urlparse(uri).path) if uri.startswith("file:") else uri
        start = location.get("range", {}).get("start", {})
        return cls(
            raw_name=data["name"],
            kind=SymbolKind(data["kind"] - 1),
            location=SymbolLocation(
                path=path,
                position=Position(start.get("line", 0), start.get("character", 0)),
            ),
            container_name=data.get("containerName"),
        )


@dataclass(frozen=True)
class PickItem:
    """A candidate as presented by an interactive picker."""

    label: str
    description: str | None
    detail: str
    candidate: SymbolCandidate


@dataclass(frozen=True)
class LangDetector:
    """How to recognize a project language and find one of its source files."""

    lang: str | None
    markers: tuple[str, ...]
    glob: str
    exclude: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LangDetector":
        """Build a detector from its configuration mapping."""
        return cls(
            lang=data.get("lang"),
            markers=tuple(data.get("markers", ())),
            glob=data["glob"],
            exclude=data.get("exclude"),
        )


@dataclass(frozen=True)
class PendingRequest:
    """A request parked in durable storage until its project is open."""

    symbol_name: str
    project_path: str
    kind_hint: str | None = None

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored record shape."""
        return {"symbol": self.symbol_name, "cwd": self.project_path, "kind": self.kind_hint}

    @classmethod
    def from_record(cls, record: object) -> "PendingRequest | None":
        """Parse a stored record; return None when it is malformed."""
        if not isinstance(record, dict):
            return None
        symbol = record.get("symbol")
        cwd = record.get("cwd")
        kind = record.get("kind")
        if not isinstance(symbol, str) or not symbol:
            return None
        if not isinstance(cwd, str) or not cwd:
            return None
        if kind is not None and not isinstance(kind, str):
            return None
        return cls(symbol_name=symbol, project_path=cwd, kind_hint=kind or None)


@dataclass(frozen=True)
class Found:
    """Resolution ended on a single candidate."""

    candidate: SymbolCandidate


@dataclass(frozen=True)
class NotFound:
    """Resolution ended without a usable candidate."""


@dataclass(frozen=True)
class Cancelled:
    """Resolution was abandoned by the user."""


ResolutionOutcome = Union[Found, NotFound, Cancelled]
