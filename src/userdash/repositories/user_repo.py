"""Repository for a dashboard's user records."""

import itertools
import logging
from typing import Mapping, Optional

from ..models.user import UserRecord
from .base import MemoryRepository

logger = logging.getLogger(__name__)


class UserRepository(MemoryRepository[UserRecord]):
    """In-memory store of user records for one dashboard.

    Records are only mutated through insert(), update() and delete().
    IDs come from a counter, so two inserts can never share an ID.
    """

    def __init__(self, start_id: int = 1):
        super().__init__()
        self._ids = itertools.count(start_id)

    def insert(self, fields: Mapping[str, str]) -> UserRecord:
        """Create a record from validated field values and append it."""
        user = UserRecord(
            id=next(self._ids),
            name=fields["name"],
            email=fields["email"],
            role=fields["role"],
        )
        self.save(user)
        logger.info("Inserted user %d (%s)", user.id, user.email)
        return user

    def update(self, user_id: int, fields: Mapping[str, str]) -> Optional[UserRecord]:
        """Replace name, email and role of an existing record.

        Returns None without touching the store when no record matches.
        """
        user = self.get_by_id(user_id)
        if user is None:
            logger.debug("Update skipped: user %d no longer exists", user_id)
            return None

        updated = UserRecord(
            id=user.id,
            name=fields["name"],
            email=fields["email"],
            role=fields["role"],
        )
        self.save(updated)
        logger.info("Updated user %d", user_id)
        return updated

    def delete(self, user_id: int) -> bool:
        """Remove a record. Deleting an unknown ID is a no-op."""
        deleted = super().delete(user_id)
        if deleted:
            logger.info("Deleted user %d", user_id)
        else:
            logger.debug("Delete skipped: user %d not found", user_id)
        return deleted

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        """Look up a record to seed an edit session."""
        return self.get_by_id(user_id)
