"""Per-browser-session dashboards held in memory."""

import logging
import secrets
from collections import OrderedDict
from threading import Lock
from typing import Optional

from .dashboard import UserDashboard

logger = logging.getLogger(__name__)


def new_session_key() -> str:
    """Generate a random key identifying one browser session."""
    return secrets.token_urlsafe(16)


class DashboardSessions:
    """Registry mapping session keys to their dashboards.

    Holds at most max_sessions dashboards; the least recently used one is
    dropped (with its records) when a new session would exceed the limit.
    """

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._dashboards: OrderedDict[str, UserDashboard] = OrderedDict()
        self._lock = Lock()

    def get_or_create(self, key: str) -> UserDashboard:
        """Get the dashboard for a session, creating an empty one if needed."""
        with self._lock:
            dashboard = self._dashboards.get(key)
            if dashboard is not None:
                self._dashboards.move_to_end(key)
                return dashboard

            dashboard = UserDashboard()
            self._dashboards[key] = dashboard
            while len(self._dashboards) > self.max_sessions:
                evicted_key, _ = self._dashboards.popitem(last=False)
                logger.info("Evicted dashboard for session %s...", evicted_key[:6])
            return dashboard

    def get(self, key: str) -> Optional[UserDashboard]:
        """Get the dashboard for a session, or None if there is none."""
        with self._lock:
            return self._dashboards.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._dashboards)
