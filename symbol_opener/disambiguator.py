"""Choose one candidate among same-name matches."""

import logging
import math
import os
from collections.abc import Mapping, Sequence

from symbol_opener.host import Host
from symbol_opener.models import (
    Cancelled,
    Found,
    PickItem,
    SymbolCandidate,
)
from symbol_opener.settings import MultipleSymbolBehavior
from symbol_opener.symbol_kind import SymbolKind

logger = logging.getLogger(__name__)

SELECT_PROMPT = "Select a symbol"
FUZZY_PROMPT = "No exact match found. Select a similar symbol:"


def sort_by_kind_priority(
    candidates: Sequence[SymbolCandidate], priority: Mapping[SymbolKind, int]
) -> list[SymbolCandidate]:
    """Stable sort by kind rank; kinds missing from ``priority`` go last."""
    return sorted(candidates, key=lambda c: priority.get(c.kind, math.inf))


def is_under_root(path: str, root: str) -> bool:
    """Check whether ``path`` lies inside ``root`` on a path-component boundary."""
    root = root.rstrip("/\\")
    if not root:
        # filesystem root
        return path.startswith(("/", "\\"))
    if path == root:
        return True
    return path.startswith((root + "/", root + os.sep))


def pick_items(candidates: Sequence[SymbolCandidate]) -> list[PickItem]:
    """Build picker entries: name, container, and file path."""
    return [
        PickItem(
            label=c.raw_name,
            description=c.container_name,
            detail=c.location.path,
            candidate=c,
        )
        for c in candidates
    ]


async def pick_candidate(
    host: Host, candidates: Sequence[SymbolCandidate], prompt: str
) -> Found | Cancelled:
    """Ask the user to choose; a dismissed picker means Cancelled."""
    selected = await host.pick_one(pick_items(candidates), prompt)
    if selected is None:
        logger.debug("picker dismissed")
        return Cancelled()
    return Found(selected.candidate)


def first_under_roots(
    candidates: Sequence[SymbolCandidate], roots: Sequence[str]
) -> SymbolCandidate | None:
    """Return the first candidate under the earliest root that has any."""
    for root in roots:
        for candidate in candidates:
            if is_under_root(candidate.location.path, root):
                return candidate
    return None


async def select_symbol(
    host: Host,
    candidates: Sequence[SymbolCandidate],
    priority: Mapping[SymbolKind, int],
    behavior: MultipleSymbolBehavior,
) -> Found | Cancelled:
    """Resolve one or more exact matches according to ``behavior``."""
    if not candidates:
        msg = "select_symbol requires at least one candidate"
        raise ValueError(msg)

    ordered = sort_by_kind_priority(candidates, priority)

    if len(ordered) == 1 or behavior is MultipleSymbolBehavior.FIRST:
        return Found(ordered[0])

    if behavior is MultipleSymbolBehavior.QUICKPICK:
        return await pick_candidate(host, ordered, SELECT_PROMPT)

    # Falls back to the top match when the symbol only exists outside every
    # open root (node_modules, vendor, and so on).
    match = first_under_roots(ordered, host.project_roots())
    return Found(match or ordered[0])


async def select_fuzzy_match(
    host: Host, candidates: Sequence[SymbolCandidate]
) -> Found | Cancelled:
    """Offer similar symbols when the index had no exact match."""
    return await pick_candidate(host, candidates, FUZZY_PROMPT)
