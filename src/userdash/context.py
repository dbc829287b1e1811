"""Application context for dependency injection."""

from dataclasses import dataclass, field
from typing import Optional

from .models.app_config import AppConfig
from .services.sessions import DashboardSessions


@dataclass
class AppContext:
    """
    Central context object holding application configuration and state.

    Route modules receive this instead of reaching for module globals, so
    every piece of mutable state has a single explicit owner.

    Usage:
        ctx = AppContext(config=load_config())
        # In routes:
        dashboard = ctx.sessions.get_or_create(session_key)
    """

    config: AppConfig = field(default_factory=AppConfig)
    sessions: Optional[DashboardSessions] = None

    def __post_init__(self):
        if self.sessions is None:
            self.sessions = DashboardSessions(max_sessions=self.config.max_sessions)
