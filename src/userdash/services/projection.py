"""Sorted and paged view of a user store, as shown in the table."""

import math
import unicodedata
from dataclasses import dataclass, field
from typing import Iterable

from ..models.user import UserRecord

PAGE_SIZE = 5


def collation_key(name: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware string comparison.

    Primary: accent- and case-insensitive. Secondary: lowercase before
    uppercase. Identical names produce identical keys.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name.swapcase()


def sort_users(users: Iterable[UserRecord]) -> list[UserRecord]:
    """Sort users by name, keeping insertion order between equal names."""
    return sorted(users, key=lambda user: collation_key(user.name))


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for count items (0 when there are none)."""
    return math.ceil(count / page_size)


@dataclass
class PageView:
    """One page of the sorted user list plus navigation state."""

    rows: list[UserRecord] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_count: int = 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def indicator(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"


def paginate(
    users: Iterable[UserRecord],
    current_page: int,
    page_size: int = PAGE_SIZE,
) -> PageView:
    """Build the page of sorted users for current_page (1-based).

    The page number is taken as given; a page past the end yields no rows.
    """
    ordered = sort_users(users)
    start = (current_page - 1) * page_size
    return PageView(
        rows=ordered[start:start + page_size] if start >= 0 else [],
        current_page=current_page,
        total_pages=total_pages(len(ordered), page_size),
        total_count=len(ordered),
    )
