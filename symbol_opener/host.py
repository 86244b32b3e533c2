"""Capabilities the resolution engine needs from its host editor.

The engine never talks to an editor directly. Real bindings and test doubles
both implement these protocols.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from symbol_opener.models import PickItem, SymbolCandidate, SymbolLocation


class Host(Protocol):
    """Editor-side operations used while resolving and opening a symbol."""

    async def query_index_by_name(self, query: str) -> list[SymbolCandidate]:
        """Ask the workspace symbol index for matches; may return an empty list."""
        ...

    async def find_files(
        self, include: str, exclude: str | None = None, max_results: int | None = None
    ) -> list[str]:
        """Search the open project for files matching a glob."""
        ...

    async def load_document_silently(self, path: str) -> None:
        """Load a document into the host without showing it."""
        ...

    async def pick_one(self, items: Sequence[PickItem], prompt: str) -> PickItem | None:
        """Let the user choose one item; None when dismissed."""
        ...

    async def open_project_root(self, path: str, new_instance: bool) -> None:
        """Open a project folder, possibly replacing the calling instance."""
        ...

    async def show_error(self, message: str) -> None:
        """Show an error message to the user."""
        ...

    async def reveal(self, location: SymbolLocation) -> None:
        """Open the file and move the cursor to the location."""
        ...

    async def open_search(self, query: str) -> None:
        """Open full-text search prefilled with the query."""
        ...

    def project_roots(self) -> list[str]:
        """Currently open project roots in user-defined order."""
        ...

    def open_document_paths(self) -> list[str]:
        """Paths of documents currently open in the host."""
        ...


class DurableStore(Protocol):
    """Process-wide key/value storage that survives instance restarts."""

    def get(self, key: str) -> Any:
        """Return the stored value or None."""
        ...

    def put(self, key: str, value: Any) -> None:
        """Store a value; None deletes the key."""
        ...


class CancellationToken(Protocol):
    """Cooperative cancellation signal polled between query rounds."""

    def is_cancelled(self) -> bool:
        """Return True once the caller asked to stop."""
        ...


class CancellationSource:
    """Default cancellation token that is cancelled explicitly."""

    def __init__(self) -> None:
        """Create an uncancelled token."""
        self._cancelled = False

    def cancel(self) -> None:
        """Request cancellation."""
        self._cancelled = True

    def is_cancelled(self) -> bool:
        """Return True once ``cancel`` was called."""
        return self._cancelled
