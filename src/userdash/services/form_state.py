"""Explicit form state: registered fields, current values and errors."""

from typing import Callable, Mapping, Optional

from .validation import FieldError, FieldRule, validate_fields


class FormState:
    """Values and validation state of an HTML form between requests.

    Fields must be registered with their rule before they can be set or
    validated. Every registered field starts out as an empty string.

    Usage:
        form = FormState()
        form.register("name", FieldRule(required="This field is required"))
        form.handle_submit({"name": "Amy"}, on_valid=save)
    """

    def __init__(self):
        self._rules: dict[str, FieldRule] = {}
        self._values: dict[str, str] = {}
        self.errors: dict[str, FieldError] = {}

    def register(self, field: str, rule: Optional[FieldRule] = None) -> None:
        """Declare a field and the rule it is validated against."""
        self._rules[field] = rule or FieldRule()
        self._values.setdefault(field, "")

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names in registration order."""
        return tuple(self._rules)

    @property
    def values(self) -> dict[str, str]:
        """Copy of the current field values."""
        return dict(self._values)

    def get(self, field: str) -> str:
        """Current value of a registered field."""
        if field not in self._rules:
            raise KeyError(f"Field '{field}' is not registered")
        return self._values[field]

    def set_field(self, field: str, value: Optional[str]) -> None:
        """Set a field value programmatically."""
        if field not in self._rules:
            raise KeyError(f"Field '{field}' is not registered")
        self._values[field] = value or ""

    def set_values(self, data: Mapping[str, Optional[str]]) -> None:
        """Set every registered field found in data; other keys are ignored."""
        for field in self._rules:
            if field in data:
                self.set_field(field, data[field])

    def validate(self) -> bool:
        """Run all field rules, replacing the stored errors."""
        self.errors = validate_fields(self._values, self._rules)
        return not self.errors

    def error_for(self, field: str) -> Optional[str]:
        """Message of the error attached to a field, if any."""
        error = self.errors.get(field)
        return error.message if error else None

    def reset(self) -> None:
        """Clear all values and errors."""
        for field in self._rules:
            self._values[field] = ""
        self.errors = {}

    def handle_submit(
        self,
        data: Mapping[str, Optional[str]],
        on_valid: Callable[[dict[str, str]], None],
    ) -> bool:
        """Take submitted values and pass them on only if they validate.

        On failure the submitted values stay in the form so they can be
        shown again next to their error messages.
        """
        # A submission replaces every field; missing ones count as empty
        for field in self._rules:
            self.set_field(field, data.get(field))
        if not self.validate():
            return False
        on_valid(self.values)
        return True
