"""Host binding for a terminal session over the local filesystem.

The symbol index is a JSON snapshot of workspace symbols in the LSP
``SymbolInformation`` shape, written by whatever language server exporter the
user runs. It is re-read on every query so a live exporter keeps it fresh.
"""

import asyncio
import json
import logging
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from symbol_opener.find_files import find_files
from symbol_opener.models import PickItem, SymbolCandidate, SymbolLocation

logger = logging.getLogger(__name__)

SEARCH_MAX_RESULTS = 50


def subsequence_match(query: str, name: str) -> bool:
    """LSP-style fuzzy match: query characters appear in order, any case."""
    it = iter(name.lower())
    return all(ch in it for ch in query.lower())


def load_symbol_snapshot(path: Path) -> list[SymbolCandidate]:
    """Read an index snapshot; missing or unreadable files count as empty."""
    if not path.exists():
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.exception("Error loading symbol index %s", path)
        return []
    if not isinstance(data, list):
        logger.warning("Symbol index %s is not a list, ignoring it", path)
        return []

    candidates = []
    for entry in data:
        try:
            candidates.append(SymbolCandidate.from_symbol_information(entry))
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.debug("skipping malformed index entry: %r", entry)
    return candidates


class LocalHost:
    """Implements the host protocol for the command line."""

    def __init__(
        self,
        roots: Sequence[str],
        index_path: str | Path,
        editor_command: str = "code",
        out: TextIO | None = None,
        prompt: Callable[[str], str] = input,
    ) -> None:
        """Bind to project roots, an index snapshot, and an editor command."""
        self.roots = [str(Path(r).resolve()) for r in roots]
        self.index_path = Path(index_path)
        self.editor_command = editor_command
        self.out = out or sys.stdout
        self.prompt = prompt
        self.documents: dict[str, str] = {}

    def project_roots(self) -> list[str]:
        """Roots given on the command line, in order."""
        return list(self.roots)

    def open_document_paths(self) -> list[str]:
        """Documents loaded during this session."""
        return list(self.documents)

    async def query_index_by_name(self, query: str) -> list[SymbolCandidate]:
        """Filter the snapshot by fuzzy name match; '#' means workspace-wide."""
        needle = query[1:] if query.startswith("#") else query
        symbols = load_symbol_snapshot(self.index_path)
        return [s for s in symbols if subsequence_match(needle, s.raw_name)]

    async def find_files(
        self, include: str, exclude: str | None = None, max_results: int | None = None
    ) -> list[str]:
        """Search every root in order, off the event loop."""
        return await asyncio.to_thread(self._find_files, include, exclude, max_results)

    def _find_files(
        self, include: str, exclude: str | None, max_results: int | None
    ) -> list[str]:
        results: list[str] = []
        for root in self.roots:
            remaining = None if max_results is None else max_results - len(results)
            if remaining is not None and remaining <= 0:
                break
            results.extend(find_files(root, include, exclude, remaining))
        return results

    async def load_document_silently(self, path: str) -> None:
        """Read a file into the document cache."""
        self.documents[path] = Path(path).read_text(encoding="utf-8", errors="replace")

    async def pick_one(self, items: Sequence[PickItem], prompt: str) -> PickItem | None:
        """Print a numbered list and read a choice; blank input dismisses."""
        print(prompt, file=self.out)
        for i, item in enumerate(items, start=1):
            description = f" ({item.description})" if item.description else ""
            print(f"  {i}. {item.label}{description}  {item.detail}", file=self.out)
        try:
            answer = self.prompt("> ").strip()
        except EOFError:
            return None
        if not answer.isdigit() or not 1 <= int(answer) <= len(items):
            return None
        return items[int(answer) - 1]

    async def open_project_root(self, path: str, new_instance: bool) -> None:
        """Open the project with the configured editor command."""
        flag = "--new-window" if new_instance else "--reuse-window"
        await self._run([self.editor_command, flag, path])

    async def show_error(self, message: str) -> None:
        """Print an error to stderr."""
        print(f"error: {message}", file=sys.stderr)

    async def reveal(self, location: SymbolLocation) -> None:
        """Print ``path:line:column`` and jump there in the editor, if any."""
        target = f"{location.path}:{location.position.line + 1}:{location.position.column + 1}"
        print(target, file=self.out)
        if self.editor_command:
            await self._run([self.editor_command, "--goto", target])

    async def open_search(self, query: str) -> None:
        """Print text matches for the query across the project roots."""
        print(f'Searching workspace for "{query}"', file=self.out)
        shown = 0
        for path in await self.find_files("**/*"):
            try:
                lines = Path(path).read_text(encoding="utf-8").splitlines()
            except (OSError, UnicodeDecodeError):
                continue
            for lineno, line in enumerate(lines, start=1):
                if query in line:
                    print(f"{path}:{lineno}: {line.strip()}", file=self.out)
                    shown += 1
                    if shown >= SEARCH_MAX_RESULTS:
                        return

    async def _run(self, cmd: list[str]) -> None:
        logger.debug("Running: %s", " ".join(cmd))
        await asyncio.to_thread(subprocess.run, cmd, check=True)
