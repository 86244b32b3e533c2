"""Hand a request over to the instance that has its project open.

When the project is not open here, the request is parked in durable storage
and the host is asked to open the project. Every instance drains the slot on
startup and whenever it regains focus: the instance that opens the project is
not always the one that receives the startup event.
"""

import logging
import os
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from typing import Any

from symbol_opener.errors import ProjectNotOpenError
from symbol_opener.host import Host
from symbol_opener.models import PendingRequest
from symbol_opener.pending_request_slot import PendingRequestSlot
from symbol_opener.settings import WorkspaceNotOpenBehavior

logger = logging.getLogger(__name__)


class HandoffState(Enum):
    """Where this instance stands with respect to the pending slot."""

    IDLE = "idle"
    PENDING_SAVED = "pending-saved"
    PENDING_CONSUMED = "pending-consumed"
    PENDING_SKIPPED = "pending-skipped"


def _normalize_root(path: str) -> str:
    return os.path.normpath(path) if path else path


def is_project_open(project_path: str, roots: Sequence[str]) -> bool:
    """Check whether ``project_path`` is one of the open project roots."""
    target = _normalize_root(project_path)
    return any(_normalize_root(root) == target for root in roots)


class HandoffCoordinator:
    """Saves and drains the pending request for one instance."""

    def __init__(
        self,
        host: Host,
        slot: PendingRequestSlot,
        resume: Callable[[PendingRequest], Awaitable[Any]],
    ) -> None:
        """Bind to the host, the durable slot, and the resolution callback."""
        self.host = host
        self.slot = slot
        self.resume = resume
        self.state = HandoffState.IDLE

    async def hand_off(
        self, request: PendingRequest, behavior: WorkspaceNotOpenBehavior
    ) -> HandoffState:
        """Park the request and open its project elsewhere.

        Raises ``ProjectNotOpenError`` when ``behavior`` is ERROR; nothing is
        saved in that case.
        """
        if behavior is WorkspaceNotOpenBehavior.ERROR:
            raise ProjectNotOpenError(request.project_path)

        self.slot.save(request)
        self.state = HandoffState.PENDING_SAVED
        new_instance = behavior is WorkspaceNotOpenBehavior.NEW_WINDOW
        logger.info(
            "workspace %s not open, saved pending request for %s (new window: %s)",
            request.project_path,
            request.symbol_name,
            new_instance,
        )
        await self.host.open_project_root(request.project_path, new_instance=new_instance)
        return self.state

    async def process_pending(self) -> HandoffState:
        """Consume the pending request if it targets a project open here."""
        request = self.slot.peek()
        if request is None:
            return self.state

        roots = self.host.project_roots()
        if not is_project_open(request.project_path, roots):
            logger.debug(
                "pending request for %s does not match open roots %s",
                request.project_path,
                roots,
            )
            self.state = HandoffState.PENDING_SKIPPED
            return self.state

        # Clear first so another instance gaining focus does not replay it.
        self.slot.clear()
        self.state = HandoffState.PENDING_CONSUMED
        logger.info("processing pending request: %s", request.symbol_name)
        await self.resume(request)
        return self.state
