"""Routes for the user management dashboard."""

from fasthtml.common import *
from starlette.responses import JSONResponse

from .utils import form_fields, get_dashboard, require_dashboard
from ..components.dashboard import UserDashboardPanel
from ..components.layout import AppShell
from ..context import AppContext


def register(app, rt, ctx: AppContext):
    """Register dashboard routes."""

    @app.get("/")
    def index(req):
        """Dashboard page."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            return AppShell(content=UserDashboardPanel(dashboard))

    @app.post("/users/submit")
    def submit_user(req, name: str = "", email: str = "", role: str = ""):
        """Add a user, or update the one being edited."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.submit(form_fields(name, email, role))
            return UserDashboardPanel(dashboard)

    @app.post("/users/cancel-edit")
    def cancel_edit(req):
        """Leave edit mode without saving."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.cancel_edit()
            return UserDashboardPanel(dashboard)

    @app.post("/users/page/previous")
    def previous_page(req):
        """Show the previous page of users."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.previous_page()
            return UserDashboardPanel(dashboard)

    @app.post("/users/page/next")
    def next_page(req):
        """Show the next page of users."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.next_page()
            return UserDashboardPanel(dashboard)

    @app.post("/users/page/{page}")
    def go_to_page(req, page: int):
        """Jump to a page; out-of-range numbers are clamped."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.go_to_page(page)
            return UserDashboardPanel(dashboard)

    @app.post("/users/{user_id}/edit")
    def edit_user(req, user_id: int):
        """Load a user into the form for editing."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.start_edit(user_id)
            return UserDashboardPanel(dashboard)

    @app.post("/users/{user_id}/delete")
    def delete_user(req, user_id: int):
        """Delete a user."""
        error = require_dashboard(req)
        if error:
            return error

        dashboard = get_dashboard(req)
        with dashboard.lock:
            dashboard.delete(user_id)
            return UserDashboardPanel(dashboard)

    @app.get("/health")
    def health():
        """Liveness check with the number of active dashboards."""
        return JSONResponse({"status": "ok", "sessions": len(ctx.sessions)})
