"""The single durable slot holding a request waiting for its project."""

import logging

from symbol_opener.host import DurableStore
from symbol_opener.models import PendingRequest

logger = logging.getLogger(__name__)

PENDING_REQUEST_KEY = "symbolOpener.pendingRequest"


class PendingRequestSlot:
    """At most one pending request system-wide; writes overwrite.

    Reads and clears are separate store calls. Two instances that both have
    the target project open may both consume the same record; no lock is
    taken because the host storage offers none.
    """

    def __init__(self, store: DurableStore, key: str = PENDING_REQUEST_KEY) -> None:
        """Bind the slot to a durable store key."""
        self.store = store
        self.key = key

    def save(self, request: PendingRequest) -> None:
        """Persist a request, replacing any earlier one."""
        self.store.put(self.key, request.to_record())

    def peek(self) -> PendingRequest | None:
        """Read the pending request without clearing it.

        A malformed record is cleared and reported as absent.
        """
        record = self.store.get(self.key)
        if record is None:
            return None
        request = PendingRequest.from_record(record)
        if request is None:
            logger.warning("Discarding malformed pending request: %r", record)
            self.clear()
        return request

    def clear(self) -> None:
        """Delete the pending request."""
        self.store.put(self.key, None)
