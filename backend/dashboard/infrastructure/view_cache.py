"""View Cache — process-local store of rendered dashboard views.

Invariants:
    - Entries are keyed by view path ("/dashboard/invoices")
    - revalidate(path) drops the entry and bumps the path's generation; the next
      read recomputes it from the database
    - A view computed under an older generation is never stored: readers capture
      generation(path) before querying and hand it to put(), which refuses the
      snapshot if a revalidate happened in between
    - Revalidating an uncached path is a no-op for the stored views, never an error
    - Stored views are treated as immutable snapshots (callers get the same object back)

Design Decisions:
    - Singleton view_cache exposed through get_view_cache so routes and tests can
      swap it with app.dependency_overrides
    - No TTL: staleness is driven only by writes, which all go through invoice actions
    - Generation check instead of a lock: readers never block writers, a reader that
      lost the race just skips caching and the next read refills the entry
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ViewCache:
    """Read-through cache for rendered views, invalidated by path."""

    def __init__(self):
        self._views: dict[str, Any] = {}
        self._generations: dict[str, int] = {}

    def get(self, path: str) -> Any | None:
        return self._views.get(path)

    def generation(self, path: str) -> int:
        return self._generations.get(path, 0)

    def put(self, path: str, view: Any, generation: int | None = None) -> bool:
        """Store `view` unless `path` was revalidated since `generation` was read."""
        if generation is not None and generation != self.generation(path):
            logger.info(
                f"Discarded stale view {path} (generation {generation})",
                extra={"view_path": path},
            )
            return False
        self._views[path] = view
        return True

    def revalidate(self, path: str) -> None:
        """Mark the view at `path` stale."""
        self._generations[path] = self.generation(path) + 1
        was_cached = self._views.pop(path, None) is not None
        logger.info(
            f"Revalidated view {path} (was cached: {was_cached})",
            extra={"view_path": path},
        )

    def __contains__(self, path: str) -> bool:
        return path in self._views


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """FastAPI dependency for the process-wide view cache."""
    return view_cache
