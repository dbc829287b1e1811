"""Repository layer for record storage."""

from .base import MemoryRepository
from .user_repo import UserRepository

__all__ = [
    "MemoryRepository",
    "UserRepository",
]
