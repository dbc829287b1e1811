"""User-related data models."""

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    """Roles a user record can hold.

    The value doubles as the label shown in the role select and table.
    """

    ADMIN = "Admin"
    USER = "User"
    VIEWER = "Viewer"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """All role values in display order."""
        return tuple(role.value for role in cls)


@dataclass
class UserRecord:
    """A user entry held in a dashboard's record store."""

    id: int
    name: str
    email: str
    role: UserRole

    def __post_init__(self):
        # Accept the raw select value as well as the enum
        if not isinstance(self.role, UserRole):
            try:
                self.role = UserRole(self.role)
            except ValueError:
                raise ValueError(
                    f"Unknown role '{self.role}'. "
                    f"Expected one of: {', '.join(UserRole.values())}."
                ) from None

    def fields(self) -> dict[str, str]:
        """Editable field values, keyed the way the form names them."""
        return {
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
