"""
Tests for the session gate middleware.
"""
from datetime import timedelta

from admin_portal.auth import get_token_service
from admin_portal.middleware import is_public_path


class TestSessionGate:
    """Requests outside the allow-list need a valid session cookie."""

    def test_redirects_without_cookie(self, client):
        response = client.get("/api/team", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/sign-in"

    def test_redirects_with_invalid_cookie(self, client):
        client.cookies.set("token", "garbage")
        response = client.get("/api/team", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/sign-in"

    def test_redirects_with_expired_cookie(self, client, test_user):
        token = get_token_service().issue_session_token(test_user.id, expires_delta=timedelta(seconds=-5))
        client.cookies.set("token", token)
        response = client.get("/api/team", follow_redirects=False)
        assert response.status_code == 307

    def test_allows_valid_cookie(self, auth_client):
        response = auth_client.get("/api/team", follow_redirects=False)
        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": []}

    def test_one_time_token_cookie_is_rejected(self, client, test_user):
        """An invite token is correctly signed but never works as a session."""
        client.cookies.set("token", get_token_service().issue_one_time_token(test_user.id))
        response = client.get("/api/users", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/sign-in"

    def test_used_invite_link_cannot_open_the_dashboard(self, client, db, mailer, session_token):
        client.cookies.set("token", session_token)
        client.post("/api/send-invite", json={"email": "invitee@example.com"})
        token = mailer.last_token
        client.patch("/api/set-password", json={"token": token, "password": "a-good-password"})

        client.cookies.set("token", token)
        response = client.get("/api/category", follow_redirects=False)
        assert response.status_code == 307

    def test_blog_is_readable_without_session(self, client):
        response = client.get("/api/blog", follow_redirects=False)
        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": []}

    def test_blog_writes_need_session(self, client):
        response = client.post(
            "/api/blog",
            json={"title": "t", "content": "c"},
            follow_redirects=False,
        )
        assert response.status_code == 307

        response = client.delete("/api/blog", params={"id": "x"}, follow_redirects=False)
        assert response.status_code == 307

    def test_public_paths_skip_the_gate(self, client):
        """Sign-in is reachable without a session (and fails on credentials, not the gate)."""
        response = client.post(
            "/api/sign-in",
            json={"email": "nobody@example.com", "password": "whatever"},
            follow_redirects=False,
        )
        assert response.status_code == 401

    def test_health_is_public(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["database"] == "healthy"

    def test_security_headers_present(self, auth_client):
        response = auth_client.get("/api/team")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestPublicPathMatching:
    def test_prefix_matches_sub_paths(self):
        public = ["/auth/reset-password", "/sign-in"]
        assert is_public_path("/auth/reset-password/abc.def", public)
        assert is_public_path("/sign-in", public)

    def test_prefix_does_not_match_lookalikes(self):
        assert not is_public_path("/sign-inside", ["/sign-in"])
        assert not is_public_path("/api/blog", ["/sign-in"])
