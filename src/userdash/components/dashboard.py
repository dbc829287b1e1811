"""User management dashboard fragment."""

from fasthtml.common import *

from ..services.dashboard import UserDashboard
from .user_form import UserForm
from .user_table import Pagination, UserTable


def UserDashboardPanel(dashboard: UserDashboard):
    """Form, table and pagination for one dashboard.

    This is the fragment every dashboard route swaps in.
    """
    view = dashboard.view()
    return Div(
        UserForm(dashboard.form, is_editing=dashboard.is_editing),
        UserTable(view.rows),
        Pagination(view),
        cls="dashboard",
        id="user-dashboard",
    )
