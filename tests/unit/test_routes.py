"""Tests for dashboard routes through the ASGI app."""

import re

import pytest
from starlette.testclient import TestClient

from userdash.app import create_app
from userdash.context import AppContext
from userdash.models.app_config import AppConfig


@pytest.fixture
def ctx():
    return AppContext(config=AppConfig())


@pytest.fixture
def client(ctx):
    app, _ = create_app(ctx, session_secret="test-secret")
    return TestClient(app)


def _button_tag(html, button_id):
    match = re.search(rf'<button[^>]*id="{button_id}"[^>]*>', html)
    assert match, f"button {button_id} not rendered"
    return match.group(0)


def _add(client, name, email, role="User"):
    return client.post("/users/submit", data={"name": name, "email": email, "role": role})


class TestIndex:
    """Tests for GET /."""

    def test_renders_empty_dashboard(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "User Management Dashboard" in resp.text
        assert "Page 1 of 0" in resp.text
        assert "disabled" in _button_tag(resp.text, "page-previous")
        assert "disabled" in _button_tag(resp.text, "page-next")

    def test_one_dashboard_per_browser(self, client, ctx):
        client.get("/")
        client.get("/")
        assert len(ctx.sessions) == 1

    def test_separate_browsers_get_separate_dashboards(self, ctx):
        app, _ = create_app(ctx, session_secret="test-secret")
        first, second = TestClient(app), TestClient(app)
        _add(first, "Amy", "a@a.com")
        assert "Amy" not in second.get("/").text
        assert len(ctx.sessions) == 2


class TestSubmit:
    """Tests for POST /users/submit."""

    def test_empty_submit_shows_required_errors(self, client):
        resp = client.post("/users/submit", data={})
        assert resp.status_code == 200
        assert resp.text.count("This field is required") == 3
        assert "user-row-" not in resp.text

    def test_invalid_email_only_error(self, client):
        resp = _add(client, "Amy", "foo")
        assert "Invalid email address" in resp.text
        assert "This field is required" not in resp.text
        assert 'value="Amy"' in resp.text

    def test_rows_sorted_by_name(self, client):
        _add(client, "Zed", "z@z.com", "Admin")
        resp = _add(client, "Amy", "a@a.com", "User")
        assert resp.text.index("a@a.com") < resp.text.index("z@z.com")


class TestEditAndCancel:
    """Tests for edit, update and cancel routes."""

    def test_edit_populates_form(self, client):
        _add(client, "Zed", "z@z.com", "Admin")
        resp = client.post("/users/1/edit")
        assert 'value="Zed"' in resp.text
        assert 'value="z@z.com"' in resp.text
        assert "Update User" in resp.text
        assert "Cancel" in resp.text

    def test_update_keeps_id(self, client):
        _add(client, "Zed", "z@z.com", "Admin")
        client.post("/users/1/edit")
        resp = _add(client, "Zed", "z@z.com", "Viewer")
        assert re.findall(r'id="user-row-(\d+)"', resp.text) == ["1"]
        assert "Viewer</td>" in resp.text
        assert "Add User" in resp.text

    def test_cancel_reverts_label(self, client):
        _add(client, "Zed", "z@z.com", "Admin")
        client.post("/users/1/edit")
        resp = client.post("/users/cancel-edit")
        assert "Add User" in resp.text
        assert "Update User" not in resp.text
        assert 'value="Zed"' not in resp.text
        assert 'id="user-row-1"' in resp.text


class TestDelete:
    """Tests for POST /users/{user_id}/delete."""

    def test_delete_removes_row(self, client):
        _add(client, "Amy", "a@a.com")
        _add(client, "Zed", "z@z.com")
        resp = client.post("/users/1/delete")
        assert re.findall(r'id="user-row-(\d+)"', resp.text) == ["2"]

    def test_delete_unknown_changes_nothing(self, client):
        _add(client, "Amy", "a@a.com")
        resp = client.post("/users/99/delete")
        assert resp.status_code == 200
        assert re.findall(r'id="user-row-(\d+)"', resp.text) == ["1"]


class TestPagination:
    """Tests for page navigation routes."""

    def test_six_records_two_pages(self, client):
        for i in range(1, 7):
            resp = _add(client, f"User{i:02d}", f"u{i}@example.com")
        assert len(re.findall(r'id="user-row-\d+"', resp.text)) == 5
        assert "Page 1 of 2" in resp.text

        resp = client.post("/users/page/next")
        assert re.findall(r'id="user-row-(\d+)"', resp.text) == ["6"]
        assert "Page 2 of 2" in resp.text
        assert "disabled" in _button_tag(resp.text, "page-next")
        assert "disabled" not in _button_tag(resp.text, "page-previous")

        resp = client.post("/users/page/previous")
        assert "Page 1 of 2" in resp.text

    def test_go_to_page_clamped(self, client):
        for i in range(1, 7):
            _add(client, f"User{i:02d}", f"u{i}@example.com")
        resp = client.post("/users/page/9")
        assert "Page 2 of 2" in resp.text

    def test_go_to_page_rejects_get(self, client):
        for i in range(1, 7):
            _add(client, f"User{i:02d}", f"u{i}@example.com")
        assert client.get("/users/page/2").status_code == 405
        assert "Page 1 of 2" in client.get("/").text


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        client.get("/")
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "sessions": 1}
