"""Query the symbol index with retries until it answers.

A language server may still be indexing right after a project opens: an
empty answer now can become a real answer later, so empty rounds are retried
after a delay. Any non-empty answer means the index is live; if it holds no
exact match, retrying will not produce one, so control passes straight to
disambiguation or the fuzzy picker.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Mapping

from symbol_opener.disambiguator import select_fuzzy_match, select_symbol
from symbol_opener.errors import IndexQueryError, SymbolOpenerError
from symbol_opener.host import CancellationToken, Host
from symbol_opener.models import (
    Cancelled,
    NotFound,
    ResolutionOutcome,
    SymbolCandidate,
    SymbolQuery,
)
from symbol_opener.name_matcher import is_exact_match
from symbol_opener.settings import MultipleSymbolBehavior, Settings
from symbol_opener.symbol_kind import (
    SymbolKind,
    build_priority_map,
    kind_filter_codes,
    matches_kind_hint,
)

logger = logging.getLogger(__name__)

# TypeScript's server needs a '#' prefix to search for some symbol types;
# the others answer the plain name.
QUERY_TRANSFORMS: tuple[Callable[[str], str], ...] = (
    lambda name: f"#{name}",
    lambda name: name,
)

Sleep = Callable[[float], Awaitable[object]]


class SymbolQueryEngine:
    """Runs the query/retry loop for one symbol at a time."""

    def __init__(self, host: Host, sleep: Sleep = asyncio.sleep) -> None:
        """Bind the engine to a host and a sleep function for backoff."""
        self.host = host
        self._sleep = sleep

    async def find_symbols(self, symbol_name: str) -> list[SymbolCandidate]:
        """Run one round: each query transform in order, first non-empty wins."""
        for transform in QUERY_TRANSFORMS:
            query = transform(symbol_name)
            symbols = await self.host.query_index_by_name(query) or []
            logger.debug('query="%s", results=%d', query, len(symbols))
            if symbols:
                return list(symbols)
        return []

    async def try_resolve(
        self,
        query: SymbolQuery,
        priority: Mapping[SymbolKind, int],
        behavior: MultipleSymbolBehavior,
    ) -> ResolutionOutcome | None:
        """Run one round and settle it; None means the round was empty."""
        symbols = await self.find_symbols(query.name)
        if not symbols:
            return None

        if logger.isEnabledFor(logging.DEBUG):
            raw = [{"name": s.raw_name, "kind": int(s.kind)} for s in symbols]
            logger.debug("raw results: %s", json.dumps(raw))

        in_kind = [s for s in symbols if matches_kind_hint(s.kind, query.kind_hint)]
        exact = [s for s in in_kind if is_exact_match(s.raw_name, query.name)]

        if exact:
            return await select_symbol(self.host, exact, priority, behavior)

        if in_kind:
            logger.debug("no exact match, offering %d similar symbols", len(in_kind))
            return await select_fuzzy_match(self.host, in_kind)

        logger.debug("index answered but nothing matched kind %s", query.kind_hint)
        return NotFound()

    async def resolve(
        self,
        query: SymbolQuery,
        settings: Settings,
        token: CancellationToken | None = None,
    ) -> ResolutionOutcome:
        """Resolve a query, retrying empty rounds up to ``settings.retry_count``.

        Raises ``InvalidKindNameError`` before any index call when the
        priority list or the kind hint contains an unknown name, and
        ``IndexQueryError`` when the host fails.
        """
        priority = build_priority_map(settings.symbol_sort_priority)
        if query.kind_hint:
            kind_filter_codes(query.kind_hint)

        total = settings.retry_count
        for attempt in range(1, total + 1):
            if token is not None and token.is_cancelled():
                logger.debug("cancelled before attempt %d/%d", attempt, total)
                return Cancelled()

            logger.debug("attempt %d/%d", attempt, total)
            try:
                outcome = await self.try_resolve(
                    query, priority, settings.multiple_symbol_behavior
                )
            except SymbolOpenerError:
                raise
            except Exception as exc:
                raise IndexQueryError(str(exc) or type(exc).__name__) from exc

            if outcome is not None:
                return outcome

            if attempt < total:
                await self._sleep(settings.retry_interval / 1000)

        return NotFound()

