"""Main FastHTML application."""

from pathlib import Path
from typing import Optional

from fasthtml.common import *

from .context import AppContext
from .middleware import make_dashboard_beforeware
from .routes import dashboard
from .startup import get_app_context, resolve_session_secret, setup_logging

# Static files directory
static_dir = Path(__file__).parent / "static"


def create_app(ctx: Optional[AppContext] = None, session_secret: Optional[str] = None):
    """Build the FastHTML app and register its routes.

    Args:
        ctx: Application context; loaded from config when omitted.
        session_secret: Cookie signing key; resolved from env/file when omitted.

    Returns:
        Tuple of (app, ctx).
    """
    if ctx is None:
        ctx = get_app_context()
    setup_logging(ctx.config.log_level)

    # Create dashboard middleware (needs the session registry)
    bware = make_dashboard_beforeware(ctx.sessions)

    # Create FastHTML app with session support
    app, rt = fast_app(
        hdrs=[
            Link(rel="icon", type="image/svg+xml", href="/img/favicon.svg"),
            Link(rel="stylesheet", href="/css/app.css"),
        ],
        pico=False,  # Use custom CSS instead of Pico
        secret_key=session_secret or resolve_session_secret(),
        before=bware,
        static_path=str(static_dir),
    )

    dashboard.register(app, rt, ctx)
    return app, ctx


app, _ctx = create_app()


def main_func():
    """Entry point for running the application."""
    import uvicorn
    uvicorn.run(app, host=_ctx.config.host, port=_ctx.config.port)


if __name__ == "__main__":
    main_func()
