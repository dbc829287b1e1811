"""Tests for the per-session dashboard registry."""

from userdash.services.dashboard import UserDashboard
from userdash.services.sessions import DashboardSessions, new_session_key


class TestNewSessionKey:
    """Tests for new_session_key()."""

    def test_keys_unique(self):
        keys = {new_session_key() for _ in range(20)}
        assert len(keys) == 20


class TestDashboardSessions:
    """Tests for DashboardSessions."""

    def test_get_or_create_returns_same_dashboard(self):
        sessions = DashboardSessions()
        first = sessions.get_or_create("abc")
        assert isinstance(first, UserDashboard)
        assert sessions.get_or_create("abc") is first
        assert len(sessions) == 1

    def test_sessions_are_isolated(self, valid_fields):
        sessions = DashboardSessions()
        sessions.get_or_create("a").submit(valid_fields)
        assert sessions.get_or_create("b").repo.count() == 0

    def test_get_unknown_returns_none(self):
        assert DashboardSessions().get("missing") is None

    def test_least_recently_used_evicted(self):
        sessions = DashboardSessions(max_sessions=2)
        sessions.get_or_create("a")
        sessions.get_or_create("b")
        sessions.get_or_create("a")  # "b" is now least recently used
        sessions.get_or_create("c")
        assert sessions.get("b") is None
        assert sessions.get("a") is not None
        assert sessions.get("c") is not None
        assert len(sessions) == 2
