"""Layout components for the application shell."""

from fasthtml.common import *


def AppShell(content, title: str = "User Management Dashboard"):
    """
    Main application shell with header.

    Args:
        content: The main content to display
        title: Page title and heading
    """
    return (
        Title(title),
        Main(
            AppHeader(title),
            Div(content, cls="main-content"),
            cls="app-container",
        ),
    )


def AppHeader(title: str):
    """Application header with logo and heading."""
    return Header(
        Div(
            Img(src="/img/favicon.svg", alt="", width="32", height="32", cls="app-logo"),
            H1(title, cls="app-brand-text"),
            cls="app-brand",
        ),
        cls="app-header",
    )
