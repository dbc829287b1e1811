"""Application configuration model."""

import logging
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Server and session settings for the dashboard application."""

    host: str = "0.0.0.0"
    port: int = 5001
    log_level: str = "INFO"
    max_sessions: int = 1000  # Dashboards kept in memory before LRU eviction

    def __post_init__(self):
        self.port = int(self.port)
        self.max_sessions = max(1, int(self.max_sessions))
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create from dictionary, falling back to defaults for missing keys."""
        defaults = cls()
        return cls(
            host=data.get("host", defaults.host),
            port=data.get("port", defaults.port),
            log_level=data.get("log_level", defaults.log_level),
            max_sessions=data.get("max_sessions", defaults.max_sessions),
        )
