"""User table and pagination components."""

from fasthtml.common import *

from ..models.user import UserRecord
from ..services.projection import PageView
from .user_form import DASHBOARD_TARGET


def UserRow(user: UserRecord):
    """Table row for one user, with its Edit and Delete actions."""
    return Tr(
        Td(user.name),
        Td(user.email),
        Td(user.role.value),
        Td(
            Div(
                Button(
                    "Edit",
                    hx_post=f"/users/{user.id}/edit",
                    hx_target=DASHBOARD_TARGET,
                    hx_swap="outerHTML",
                    cls="btn btn-edit",
                ),
                Button(
                    "Delete",
                    hx_post=f"/users/{user.id}/delete",
                    hx_target=DASHBOARD_TARGET,
                    hx_swap="outerHTML",
                    cls="btn btn-delete",
                ),
                cls="actions",
            ),
        ),
        id=f"user-row-{user.id}",
    )


def UserTable(users: list[UserRecord]):
    """Table of the users on the current page."""
    return Table(
        Thead(
            Tr(
                Th("Name"),
                Th("Email"),
                Th("Role"),
                Th("Actions"),
            ),
        ),
        Tbody(*[UserRow(user) for user in users]),
        cls="user-table",
    )


def Pagination(view: PageView):
    """Previous/next controls with the page indicator."""
    return Div(
        Button(
            "Previous",
            hx_post="/users/page/previous",
            hx_target=DASHBOARD_TARGET,
            hx_swap="outerHTML",
            disabled=not view.has_previous,
            cls="btn btn-pagination",
            id="page-previous",
        ),
        Span(view.indicator, id="page-indicator"),
        Button(
            "Next",
            hx_post="/users/page/next",
            hx_target=DASHBOARD_TARGET,
            hx_swap="outerHTML",
            disabled=not view.has_next,
            cls="btn btn-pagination",
            id="page-next",
        ),
        cls="pagination",
    )
