"""Shared utilities for route handlers."""

from starlette.responses import Response


def get_dashboard(req):
    """Extract the session's dashboard from the request scope."""
    return req.scope.get("dashboard")


def require_dashboard(req) -> Response | None:
    """Check that the request is bound to a dashboard.

    Returns error Response if it isn't, None if OK.
    """
    if get_dashboard(req) is None:
        return Response("No dashboard session", status_code=400)
    return None


def form_fields(name: str, email: str, role: str) -> dict[str, str]:
    """Collect submitted form values under their field names."""
    return {"name": name, "email": email, "role": role}
