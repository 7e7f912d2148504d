# =============================================================================
# tests/test_validators.py - Request Validator Tests
# =============================================================================
# Existence and required-field checks: edge cases, and the order in which
# they run when an endpoint declares both.
# =============================================================================

import pytest

from blog_api.app.api.dependencies import required_text
from blog_api.app.core.errors import RequestRejected
from blog_api.app.services import InMemoryUserStore

from tests.conftest import make_client


NOT_FOUND = {"message": "user not found"}
MISSING_NAME = {"message": "missing required name field"}
MISSING_TEXT = {"message": "missing required text field"}


class TestRequiredText:
    """Unit tests for required_text()."""

    def test_returns_trimmed_value(self):
        assert required_text({"name": "\t Bilbo \n"}, "name") == "Bilbo"

    @pytest.mark.parametrize(
        "payload",
        [None, {}, {"name": ""}, {"name": "   "}, {"name": None}, {"name": 42}, {"name": ["x"]}, ["name"], "name"],
    )
    def test_rejects(self, payload):
        with pytest.raises(RequestRejected) as info:
            required_text(payload, "name")
        assert info.value.status_code == 400
        assert info.value.message == "missing required name field"


class TestUserIdValidation:
    """Every route with an id answers 404 for ids that do not resolve."""

    ROUTES = [
        ("GET", "/api/users/{id}", None),
        ("PUT", "/api/users/{id}", {"name": "Valid"}),
        ("DELETE", "/api/users/{id}", None),
        ("GET", "/api/users/{id}/posts", None),
        ("POST", "/api/users/{id}/posts", {"text": "Valid"}),
    ]

    @pytest.mark.parametrize("method,path,body", ROUTES)
    @pytest.mark.parametrize("user_id", ["3", "0", "-1", "abc", "1.5", "1_0", "١"])
    def test_unresolvable_id(self, client, seeded, method, path, body, user_id):
        resp = client.request(method, path.format(id=user_id), json=body)
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND

    def test_lookup_failure_reads_as_not_found(self, post_store):
        class FailingUserStore(InMemoryUserStore):
            async def get_by_id(self, user_id):
                raise RuntimeError("connection reset")

        client = make_client(FailingUserStore(post_store), post_store)
        resp = client.get("/api/users/1")
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND


class TestBodyValidation:
    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "  "}, {"name": 7}, {"full_name": "x"}])
    def test_create_user(self, client, body):
        resp = client.post("/api/users", json=body)
        assert resp.status_code == 400
        assert resp.json() == MISSING_NAME

    def test_create_user_without_body(self, client):
        resp = client.post("/api/users")
        assert resp.status_code == 400
        assert resp.json() == MISSING_NAME

    def test_create_user_with_array_body(self, client):
        resp = client.post("/api/users", json=["Frodo"])
        assert resp.status_code == 400
        assert resp.json() == MISSING_NAME

    @pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": " \n "}, {"text": False}])
    def test_create_post(self, client, seeded, body):
        resp = client.post("/api/users/1/posts", json=body)
        assert resp.status_code == 400
        assert resp.json() == MISSING_TEXT

    def test_update_user_whitespace_name(self, client, seeded):
        resp = client.put("/api/users/2", json={"name": "   "})
        assert resp.status_code == 400
        assert resp.json() == MISSING_NAME


class TestValidatorOrder:
    """The existence check runs before the body check."""

    def test_put_bad_id_and_bad_body(self, client, seeded):
        resp = client.put("/api/users/99", json={})
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND

    def test_post_bad_id_and_bad_body(self, client, seeded):
        resp = client.post("/api/users/99/posts", json={"text": ""})
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND

    def test_post_for_missing_user_with_valid_body(self, client):
        resp = client.post("/api/users/1/posts", json={"text": "hi"})
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND


class TestNonCanonicalIds:
    """Ids that int() would accept must not alias an existing user."""

    ALIASES = ["1_0", "١٠", "1٠", "+10"]

    @pytest.fixture
    def ten_users(self, client):
        for n in range(1, 11):
            client.post("/api/users", json={"name": f"user {n}"})
        return client

    @pytest.fixture
    def ten_users_sqlite(self, sqlite_client):
        for n in range(1, 11):
            sqlite_client.post("/api/users", json={"name": f"user {n}"})
        return sqlite_client

    @pytest.mark.parametrize("method,path,body", TestUserIdValidation.ROUTES)
    @pytest.mark.parametrize("user_id", ALIASES)
    def test_memory_backend(self, ten_users, method, path, body, user_id):
        resp = ten_users.request(method, path.format(id=user_id), json=body)
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND

    @pytest.mark.parametrize("user_id", ALIASES)
    def test_sqlite_backend(self, ten_users_sqlite, user_id):
        resp = ten_users_sqlite.get(f"/api/users/{user_id}")
        assert resp.status_code == 404
        assert resp.json() == NOT_FOUND

    @pytest.mark.parametrize("user_id", ALIASES)
    def test_delete_leaves_user_in_place(self, ten_users, user_id):
        resp = ten_users.delete(f"/api/users/{user_id}")
        assert resp.status_code == 404
        assert ten_users.get("/api/users/10").json() == {"id": 10, "name": "user 10"}

    def test_canonical_id_still_resolves(self, ten_users):
        assert ten_users.get("/api/users/10").status_code == 200
