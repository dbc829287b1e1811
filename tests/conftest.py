"""Pytest fixtures for userdash tests."""

import os

import pytest

# Keep app imports from writing a .sesskey file
os.environ.setdefault("USERDASH_SESSION_SECRET", "test-session-secret")

from userdash.models.user import UserRecord, UserRole
from userdash.repositories.user_repo import UserRepository
from userdash.services.dashboard import UserDashboard


@pytest.fixture
def valid_fields():
    """Form values that pass every field rule."""
    return {"name": "Amy", "email": "a@a.com", "role": "User"}


@pytest.fixture
def sample_user():
    """Create a sample user record for testing."""
    return UserRecord(id=1, name="Zed", email="z@z.com", role=UserRole.ADMIN)


@pytest.fixture
def user_repo():
    """Create an empty user repository."""
    return UserRepository()


@pytest.fixture
def dashboard():
    """Create an empty dashboard."""
    return UserDashboard()


@pytest.fixture
def make_users():
    """Add n valid users to a dashboard, named User01, User02, ..."""

    def _make(dashboard, n):
        for i in range(1, n + 1):
            assert dashboard.submit(
                {"name": f"User{i:02d}", "email": f"u{i}@example.com", "role": "Viewer"}
            )
        return dashboard

    return _make
