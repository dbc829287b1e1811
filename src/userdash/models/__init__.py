"""Data models for the user dashboard."""

from .app_config import AppConfig
from .user import UserRecord, UserRole

__all__ = [
    "AppConfig",
    "UserRecord",
    "UserRole",
]
