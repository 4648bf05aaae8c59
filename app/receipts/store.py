"""
In-memory receipt store, shared by every request-handling thread.
"""
from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Identifier → points mapping guarded by a single lock.

    Entries live for the lifetime of the process; there is no update,
    delete or eviction.
    """

    def __init__(self) -> None:
        self._points: dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Store *points* under *receipt_id*. An existing entry is overwritten."""
        with self._lock:
            replaced = receipt_id in self._points
            self._points[receipt_id] = points
        if replaced:
            logger.warning("Overwrote points for existing receipt %s", receipt_id)

    def get(self, receipt_id: str) -> tuple[int, bool]:
        """Return ``(points, found)``; ``(0, False)`` for unknown identifiers."""
        with self._lock:
            if receipt_id not in self._points:
                return 0, False
            return self._points[receipt_id], True

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)


store = ReceiptStore()


def get_store() -> ReceiptStore:
    """Receipt store dependency."""
    return store
