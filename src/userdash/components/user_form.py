"""User form component: name, email and role with inline errors."""

from typing import Optional

from fasthtml.common import *

from ..models.user import UserRole
from ..services.form_state import FormState

DASHBOARD_TARGET = "#user-dashboard"


def FieldErrorMessage(message: Optional[str], field: str):
    """Inline error shown under a field, or nothing."""
    if not message:
        return None
    return Span(message, cls="error-message", id=f"{field}-error")


def FormGroup(label: str, field: str, control, error: Optional[str]):
    """Label, input control and error message for one field."""
    return Div(
        Label(label, fr=f"user-{field}"),
        control,
        FieldErrorMessage(error, field),
        cls="form-group",
    )


def RoleSelect(selected: str):
    """Role dropdown; the empty option means no role chosen."""
    return Select(
        Option("Select a role", value="", selected=selected == ""),
        *[
            Option(role, value=role, selected=selected == role)
            for role in UserRole.values()
        ],
        name="role",
        id="user-role",
        cls="form-input",
    )


def UserForm(form: FormState, is_editing: bool = False):
    """Form for adding a user, or updating the one being edited.

    Args:
        form: Form state holding the current values and errors.
        is_editing: Whether an edit session is active.
    """
    values = form.values
    return Form(
        FormGroup(
            "Name",
            "name",
            Input(
                type="text",
                name="name",
                id="user-name",
                value=values["name"],
                placeholder="Enter full name",
                cls="form-input",
            ),
            form.error_for("name"),
        ),
        FormGroup(
            "Email",
            "email",
            Input(
                type="text",
                name="email",
                id="user-email",
                value=values["email"],
                placeholder="Enter email address",
                cls="form-input",
            ),
            form.error_for("email"),
        ),
        FormGroup("Role", "role", RoleSelect(values["role"]), form.error_for("role")),
        Button(
            "Update User" if is_editing else "Add User",
            type="submit",
            cls="btn btn-submit",
        ),
        Button(
            "Cancel",
            type="button",
            hx_post="/users/cancel-edit",
            hx_target=DASHBOARD_TARGET,
            hx_swap="outerHTML",
            cls="btn btn-cancel",
        ) if is_editing else None,
        hx_post="/users/submit",
        hx_target=DASHBOARD_TARGET,
        hx_swap="outerHTML",
        cls="form-container",
        id="user-form",
    )
