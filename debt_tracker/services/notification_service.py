"""Change notification for cached view paths.

After a successful mutation the ledger calls ``revalidate_path`` with the
view path whose cached rendering is now stale. Subscribers receive only the
path, no payload.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

PathListener = Callable[[str], None]


class ChangeNotifier:
    """Fan out path invalidation signals to subscribers."""

    def __init__(self) -> None:
        self._listeners: list[PathListener] = []

    def subscribe(self, listener: PathListener) -> None:
        """Register a callback invoked with each invalidated path."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: PathListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def revalidate_path(self, path: str) -> None:
        """Mark the cached rendering of ``path`` as stale."""
        logger.debug("Revalidating path %s (%d listeners)", path, len(self._listeners))
        for listener in list(self._listeners):
            listener(path)


__all__ = ["ChangeNotifier", "PathListener"]
