"""Session middleware for the FastHTML application."""

from fasthtml.common import Beforeware

from .services.sessions import new_session_key

SESSION_KEY = "dashboard_id"

# Routes that don't need a dashboard
PUBLIC_ROUTES = {"/health", "/favicon.ico"}


def make_dashboard_beforeware(sessions):
    """Create beforeware that binds each browser session to its dashboard.

    Args:
        sessions: DashboardSessions registry owning the dashboards.

    Returns:
        Beforeware instance for FastHTML app.
    """

    def dashboard_beforeware(req, sess):
        """
        Attach the session's dashboard to the request scope.

        Adds `dashboard` to the request scope. A browser without a key in
        its session cookie gets a new key and an empty dashboard.
        """
        path = req.url.path
        if path in PUBLIC_ROUTES or path.startswith(("/static", "/css", "/js", "/img")):
            req.scope["dashboard"] = None
            return

        key = sess.get(SESSION_KEY)
        if not key:
            key = new_session_key()
            sess[SESSION_KEY] = key
        req.scope["dashboard"] = sessions.get_or_create(key)

    return Beforeware(dashboard_beforeware, skip=[r"/favicon\.ico", r"/static/.*", r"/css/.*", r"/img/.*"])
