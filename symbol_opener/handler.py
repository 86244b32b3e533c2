"""Entry points for open-symbol requests, startup, and focus events."""

import logging
from collections.abc import Callable

from symbol_opener.errors import MissingRequiredInputError, SymbolOpenerError
from symbol_opener.handoff import HandoffCoordinator, HandoffState, is_project_open
from symbol_opener.host import CancellationToken, DurableStore, Host
from symbol_opener.index_activator import activate_index
from symbol_opener.models import (
    Cancelled,
    Found,
    PendingRequest,
    ResolutionOutcome,
    SymbolQuery,
)
from symbol_opener.open_request import parse_open_uri
from symbol_opener.pending_request_slot import PendingRequestSlot
from symbol_opener.query_engine import SymbolQueryEngine
from symbol_opener.settings import Settings, SymbolNotFoundBehavior

logger = logging.getLogger(__name__)


def not_found_message(query: SymbolQuery) -> str:
    """User-facing message for a symbol that could not be resolved."""
    kind_info = f" (kind: {query.kind_hint})" if query.kind_hint else ""
    return f'Symbol "{query.name}"{kind_info} not found in workspace'


class SymbolOpener:
    """Wires the handoff coordinator, index activator, and query engine."""

    def __init__(
        self,
        host: Host,
        store: DurableStore,
        get_settings: Callable[[], Settings],
        engine: SymbolQueryEngine | None = None,
    ) -> None:
        """Create an opener for one host instance.

        ``get_settings`` is called per request so configuration edits apply
        without a restart.
        """
        self.host = host
        self.get_settings = get_settings
        self.engine = engine or SymbolQueryEngine(host)
        self.handoff = HandoffCoordinator(host, PendingRequestSlot(store), self._resume)
        self.last_error: SymbolOpenerError | None = None

    async def handle_uri(self, uri: str) -> ResolutionOutcome | None:
        """Handle an open-symbol URI."""
        logger.info("URI received: %s", uri)
        request = parse_open_uri(uri)
        logger.debug("parsed symbol: %s, cwd: %s", request.symbol, request.cwd)
        return await self.handle_request(request.symbol, request.cwd, request.kind)

    async def handle_request(
        self,
        symbol: str | None,
        cwd: str | None,
        kind: str | None = None,
        token: CancellationToken | None = None,
    ) -> ResolutionOutcome | None:
        """Resolve a symbol here, or hand the request to another instance.

        Returns None when the request was handed off or rejected.
        """
        try:
            if not symbol or not cwd:
                raise MissingRequiredInputError

            settings = self.get_settings()
            roots = self.host.project_roots()
            logger.debug("workspace roots: %s, cwd: %s", roots, cwd)
            if not is_project_open(cwd, roots):
                await self.handoff.hand_off(
                    PendingRequest(symbol, cwd, kind), settings.workspace_not_open_behavior
                )
                return None

            return await self.open_symbol(SymbolQuery(symbol, kind), token)
        except SymbolOpenerError as exc:
            await self._report(exc)
            return None

    async def on_startup(self) -> HandoffState:
        """Drain a pending request when the instance starts."""
        return await self._drain_pending()

    async def on_focus(self) -> HandoffState:
        """Drain a pending request when the instance regains focus."""
        return await self._drain_pending()

    async def open_symbol(
        self, query: SymbolQuery, token: CancellationToken | None = None
    ) -> ResolutionOutcome:
        """Prime the index, resolve the query, and present the outcome."""
        settings = self.get_settings()
        await activate_index(self.host, settings.lang_detectors, settings.language)

        kind_info = f", kind: {query.kind_hint}" if query.kind_hint else ""
        logger.info("resolving symbol: %s%s", query.name, kind_info)
        outcome = await self.engine.resolve(query, settings, token)
        await self._present(query, outcome, settings)
        return outcome

    async def _present(
        self, query: SymbolQuery, outcome: ResolutionOutcome, settings: Settings
    ) -> None:
        if isinstance(outcome, Found):
            location = outcome.candidate.location
            logger.info("found: %s:%d", location.path, location.position.line)
            await self.host.reveal(location)
        elif isinstance(outcome, Cancelled):
            logger.info("cancelled")
        elif settings.symbol_not_found_behavior is SymbolNotFoundBehavior.SEARCH:
            logger.info("not found, opening search for %s", query.name)
            await self.host.open_search(query.name)
        else:
            logger.info("not found")
            await self.host.show_error(not_found_message(query))

    async def _resume(self, request: PendingRequest) -> None:
        await self.open_symbol(SymbolQuery(request.symbol_name, request.kind_hint))

    async def _drain_pending(self) -> HandoffState:
        try:
            return await self.handoff.process_pending()
        except SymbolOpenerError as exc:
            await self._report(exc)
            return self.handoff.state

    async def _report(self, exc: SymbolOpenerError) -> None:
        self.last_error = exc
        logger.error("%s", exc)
        await self.host.show_error(str(exc))
