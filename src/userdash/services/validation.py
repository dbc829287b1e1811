"""Field validation rules for the user form."""

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from ..models.user import UserRole

REQUIRED_MESSAGE = "This field is required"

# local@domain.tld, no whitespace, exactly one @ separating non-empty parts
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")


class FieldError(ValueError):
    """A validation failure attached to a single form field."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class RequiredFieldError(FieldError):
    """A required field was left empty."""


class InvalidFormatError(FieldError):
    """A field has a value, but not one of the accepted shape."""


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for one form field.

    Presence is checked before format, so a field reports at most one
    error and never both a required and a format error.
    """

    required: Optional[str] = None  # Message when empty; None = optional
    pattern: Optional[re.Pattern] = None
    pattern_message: str = "Invalid value"
    choices: Optional[tuple[str, ...]] = None
    choices_message: str = "Invalid value"

    def check(self, field: str, value: Optional[str]) -> None:
        """Raise the first FieldError the value triggers."""
        if not value:
            if self.required:
                raise RequiredFieldError(field, self.required)
            return

        if self.pattern is not None and not self.pattern.fullmatch(value):
            raise InvalidFormatError(field, self.pattern_message)

        if self.choices is not None and value not in self.choices:
            raise InvalidFormatError(field, self.choices_message)


USER_FIELD_RULES: dict[str, FieldRule] = {
    "name": FieldRule(required=REQUIRED_MESSAGE),
    "email": FieldRule(
        required=REQUIRED_MESSAGE,
        pattern=EMAIL_PATTERN,
        pattern_message="Invalid email address",
    ),
    "role": FieldRule(
        required=REQUIRED_MESSAGE,
        choices=UserRole.values(),
        choices_message="Invalid role",
    ),
}


def validate_fields(
    values: Mapping[str, str],
    rules: Mapping[str, FieldRule],
) -> dict[str, FieldError]:
    """Check every rule and collect failures by field name.

    All fields are evaluated, so several can fail at once.
    """
    errors: dict[str, FieldError] = {}
    for field, rule in rules.items():
        try:
            rule.check(field, values.get(field, ""))
        except FieldError as e:
            errors[field] = e
    return errors
