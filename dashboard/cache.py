"""
Path-keyed cache for rendered dashboard views
"""

import threading
import time
import logging

logger = logging.getLogger(__name__)


class ViewCache:
    """Caches computed views by request path until invalidated or expired."""

    def __init__(self, app=None):
        self._entries = {}
        self._lock = threading.Lock()
        self.ttl = 300
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.ttl = app.config.get('CACHE_TTL', 300)
        app.extensions['view_cache'] = self

    def get(self, path):
        with self._lock:
            entry = self._entries.get(path)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= time.monotonic():
                del self._entries[path]
                return None
            return value

    def set(self, path, value):
        with self._lock:
            self._entries[path] = (time.monotonic() + self.ttl, value)

    def get_or_set(self, path, builder):
        """Return the cached view for ``path``, building and storing it on a miss."""
        value = self.get(path)
        if value is None:
            value = builder()
            self.set(path, value)
        return value

    def invalidate(self, path):
        """Mark the view at ``path`` stale so the next read recomputes it."""
        with self._lock:
            removed = self._entries.pop(path, None) is not None
        logger.debug(f"Invalidated cached view {path} (cached={removed})")

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, path):
        return self.get(path) is not None
