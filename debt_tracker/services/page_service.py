"""Page-load snapshots for the debt tracker view.

The tracker page is seeded once with the caller's debts. Snapshots are
cached per (path, identity) and dropped when the ledger revalidates the path.
"""

import logging
import threading
from typing import Any, Callable, Optional

from debt_tracker.schemas.debt import dump_debt
from debt_tracker.services.debt_service import DebtService
from debt_tracker.services.notification_service import ChangeNotifier

logger = logging.getLogger(__name__)

Snapshot = list[dict[str, Any]]


class PageCache:
    """Rendered snapshots keyed by view path and caller identity."""

    def __init__(self, notifier: Optional[ChangeNotifier] = None) -> None:
        self._entries: dict[tuple[str, str], Snapshot] = {}
        self._lock = threading.Lock()
        if notifier is not None:
            notifier.subscribe(self.invalidate)

    def get_or_load(self, path: str, identity: str, loader: Callable[[], Snapshot]) -> Snapshot:
        """Return the cached snapshot, calling ``loader`` when missing or stale."""
        key = (path, identity)
        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            return cached

        snapshot = loader()
        # Empty snapshots may come from a failed read, do not pin them
        if snapshot:
            with self._lock:
                self._entries[key] = snapshot
        return snapshot

    def invalidate(self, path: str) -> None:
        """Drop every cached snapshot for ``path``."""
        with self._lock:
            stale = [key for key in self._entries if key[0] == path]
            for key in stale:
                del self._entries[key]
        if stale:
            logger.debug("Invalidated %d cached snapshot(s) for %s", len(stale), path)

    def __contains__(self, key: tuple[str, str]) -> bool:
        with self._lock:
            return key in self._entries


class PageService:
    """Builds the initial debt snapshot for the tracker page."""

    def __init__(self, debt_service: DebtService, cache: Optional[PageCache] = None):
        self.debt_service = debt_service
        self.cache = cache

    def load_debt_tracker(self, identity: Optional[str]) -> Snapshot:
        """Return the caller's debts as JSON-ready dicts, newest first.

        Anonymous callers get an empty list and nothing is cached for them.
        """

        def load() -> Snapshot:
            return [dump_debt(debt) for debt in self.debt_service.get_debts()]

        if self.cache is None or not identity:
            return load()
        return self.cache.get_or_load(self.debt_service.view_path, identity, load)


__all__ = ["PageCache", "PageService"]
