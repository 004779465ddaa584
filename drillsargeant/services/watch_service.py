from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class WatchService:
    """
    Keeps track of the directories the front-end asked to monitor.

    Only the registration is kept; no filesystem observer is started.
    """

    def __init__(self) -> None:
        self._paths: set[str] = set()
        self._lock = threading.Lock()

    def watch(self, path: str) -> str:
        logger.info("Setting up file watcher for: %s", path, extra={"path": path})
        with self._lock:
            if path in self._paths:
                logger.info("Monitoring is already active for: %s", path, extra={"path": path})
            self._paths.add(path)
        return f"Started monitoring: {path}"

    def unwatch(self, path: str) -> str:
        with self._lock:
            if path not in self._paths:
                logger.info("Monitoring is not active for: %s", path, extra={"path": path})
                return f"Not monitoring: {path}"
            self._paths.discard(path)
        logger.info("Stopped file watcher for: %s", path, extra={"path": path})
        return f"Stopped monitoring: {path}"

    def list(self) -> list[str]:
        with self._lock:
            return sorted(self._paths)

    def clear(self) -> None:
        """Forget every path. Resets the shared instance between tests."""
        with self._lock:
            self._paths.clear()
