"""
Sign-up, sign-in, session cookie and password reset over HTTP.
"""

import re

from fastapi.testclient import TestClient

from src.api import deps

COOKIE = "__chamber_session"


class TestSignUp:
    def test_sets_session_cookie(self, client: TestClient, sign_up) -> None:
        body = sign_up("ann@example.com")

        assert body["user"]["email"] == "ann@example.com"
        assert body["redirect"] == "/me"
        assert COOKIE in client.cookies
        assert client.get("/api/auth/me").json()["email"] == "ann@example.com"

    def test_business_account_gets_welcome_email(self, client: TestClient, sign_up) -> None:
        body = sign_up("bob@example.com", "BUSINESS")

        assert body["redirect"] == "/dashboard"
        sent = deps._dev_email_instance.get_last_email()
        assert sent.recipient == "bob@example.com"
        assert sent.subject == "Welcome! List your business"

    def test_duplicate_email_conflicts(self, client: TestClient, sign_up, password) -> None:
        sign_up("ann@example.com")
        response = client.post(
            "/api/auth/sign-up",
            data={"name": "Ann", "email": "ann@example.com", "password": password},
        )
        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "User already exists"

    def test_field_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/auth/sign-up", data={"name": "A", "email": "nope", "password": "short"}
        )
        assert response.status_code == 400
        errors = response.json()["detail"]["field_errors"]
        assert set(errors) == {"name", "email", "password"}


class TestSignIn:
    def test_wrong_password(self, client: TestClient, sign_up) -> None:
        sign_up("ann@example.com")
        client.cookies.clear()

        response = client.post(
            "/api/auth/sign-in", data={"email": "ann@example.com", "password": "wrong-one"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["field_errors"] == {"password": "Incorrect password"}

    def test_unknown_user(self, client: TestClient, password) -> None:
        response = client.post(
            "/api/auth/sign-in", data={"email": "who@example.com", "password": password}
        )
        assert response.status_code == 404

    def test_sign_in_then_out(self, client: TestClient, sign_up, password) -> None:
        sign_up("ann@example.com")
        client.cookies.clear()

        response = client.post(
            "/api/auth/sign-in", data={"email": "ann@example.com", "password": password}
        )
        assert response.status_code == 200
        assert client.get("/api/auth/me").status_code == 200

        client.post("/api/auth/sign-out")
        assert client.get("/api/auth/me").status_code == 401


def test_me_requires_session(client: TestClient) -> None:
    assert client.get("/api/auth/me").status_code == 401


def test_tampered_cookie_is_anonymous(client: TestClient, sign_up) -> None:
    sign_up("ann@example.com")
    client.cookies.clear()
    client.cookies.set(COOKIE, "not-a-signed-token")
    assert client.get("/api/auth/me").status_code == 401


class TestPasswordReset:
    def test_full_flow(self, client: TestClient, sign_up) -> None:
        sign_up("ann@example.com")
        client.cookies.clear()

        response = client.post("/api/auth/forgot-password", data={"email": "ann@example.com"})
        assert response.status_code == 200

        sent = deps._dev_email_instance.get_last_email()
        token = re.search(r"token=([\w-]+)", sent.body_html).group(1)

        assert client.get("/api/auth/reset-password", params={"token": token}).json() == {
            "email": "ann@example.com"
        }

        response = client.post(
            "/api/auth/reset-password",
            params={"token": token},
            data={"password": "new-password", "confirm_password": "new-password"},
        )
        assert response.status_code == 200
        client.cookies.clear()

        response = client.post(
            "/api/auth/sign-in", data={"email": "ann@example.com", "password": "new-password"}
        )
        assert response.status_code == 200

        # Token is single use
        assert client.get("/api/auth/reset-password", params={"token": token}).status_code == 404

    def test_reset_signs_out_existing_sessions(self, client: TestClient, sign_up) -> None:
        sign_up("ann@example.com")
        old_cookie = client.cookies[COOKIE]
        assert client.get("/api/auth/me").status_code == 200

        client.post("/api/auth/forgot-password", data={"email": "ann@example.com"})
        token = re.search(r"token=([\w-]+)", deps._dev_email_instance.get_last_email().body_html)
        client.post(
            "/api/auth/reset-password",
            params={"token": token.group(1)},
            data={"password": "new-password", "confirm_password": "new-password"},
        )

        client.cookies.clear()
        client.cookies.set(COOKIE, old_cookie)
        assert client.get("/api/auth/me").status_code == 401

    def test_missing_token(self, client: TestClient) -> None:
        response = client.get("/api/auth/reset-password")
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "Invalid reset link, Token is required"

    def test_passwords_must_match(self, client: TestClient) -> None:
        response = client.post(
            "/api/auth/reset-password",
            params={"token": "anything"},
            data={"password": "new-password", "confirm_password": "other-password"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["field_errors"] == {
            "confirm_password": "Passwords do not match"
        }

    def test_unknown_email(self, client: TestClient) -> None:
        response = client.post("/api/auth/forgot-password", data={"email": "who@example.com"})
        assert response.status_code == 404
