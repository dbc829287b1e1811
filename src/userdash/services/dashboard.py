"""User dashboard controller: form, record store, edit session and paging."""

import logging
from threading import RLock
from typing import Mapping, Optional

from ..repositories.user_repo import UserRepository
from .form_state import FormState
from .projection import PAGE_SIZE, PageView, paginate, total_pages
from .validation import USER_FIELD_RULES

logger = logging.getLogger(__name__)


class UserDashboard:
    """All state behind one user management dashboard.

    Every action runs to completion under the dashboard lock; callers that
    act and then render should hold `lock` across both so the rendered view
    matches the action.
    """

    def __init__(self, repo: Optional[UserRepository] = None, page_size: int = PAGE_SIZE):
        self.repo = repo if repo is not None else UserRepository()
        self.page_size = page_size
        self.form = FormState()
        for field, rule in USER_FIELD_RULES.items():
            self.form.register(field, rule)
        self.edit_user_id: Optional[int] = None
        self.current_page = 1
        self.lock = RLock()

    @property
    def is_editing(self) -> bool:
        return self.edit_user_id is not None

    @property
    def submit_label(self) -> str:
        return "Update User" if self.is_editing else "Add User"

    @property
    def total_pages(self) -> int:
        return total_pages(self.repo.count(), self.page_size)

    def submit(self, data: Mapping[str, Optional[str]]) -> bool:
        """Validate submitted form data and add or update a record.

        Returns False, leaving the store untouched, when validation fails.
        """
        with self.lock:
            if not self.form.handle_submit(data, self._save):
                logger.debug("Submit rejected: %s", ", ".join(sorted(self.form.errors)))
                return False
            self.form.reset()
            self.edit_user_id = None
            return True

    def _save(self, fields: dict[str, str]) -> None:
        if self.edit_user_id is None:
            self.repo.insert(fields)
        else:
            # A record deleted mid-edit makes this a silent no-op
            self.repo.update(self.edit_user_id, fields)

    def start_edit(self, user_id: int) -> bool:
        """Open an edit session and copy the record's values into the form."""
        with self.lock:
            user = self.repo.find_by_id(user_id)
            if user is None:
                logger.debug("Edit skipped: user %d not found", user_id)
                return False
            self.edit_user_id = user_id
            self.form.set_values(user.fields())
            self.form.errors = {}
            return True

    def cancel_edit(self) -> None:
        """End the edit session and clear the form without saving."""
        with self.lock:
            self.form.reset()
            self.edit_user_id = None

    def delete(self, user_id: int) -> bool:
        """Remove a record.

        An edit session on the same record is left open; submitting it later
        updates nothing. The current page is pulled back into range.
        """
        with self.lock:
            deleted = self.repo.delete(user_id)
            if deleted:
                self._clamp_page()
            return deleted

    def next_page(self) -> None:
        with self.lock:
            if self.current_page < self.total_pages:
                self.current_page += 1

    def previous_page(self) -> None:
        with self.lock:
            if self.current_page > 1:
                self.current_page -= 1

    def go_to_page(self, page: int) -> None:
        """Jump to a page, clamped to the available range."""
        with self.lock:
            self.current_page = page
            self._clamp_page()

    def _clamp_page(self) -> None:
        self.current_page = max(1, min(self.current_page, max(self.total_pages, 1)))

    def view(self) -> PageView:
        """The sorted page of records for the current page."""
        with self.lock:
            return paginate(self.repo.list_all(), self.current_page, self.page_size)
