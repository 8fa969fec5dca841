"""
Full application wired against a temporary data directory.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.sqlite.repos import SQLiteUserRepo
from src.api import deps
from src.api.main import app

ROOT = Path(__file__).resolve().parents[2]
PASSWORD = "correct-horse"


def reset_singletons() -> None:
    deps.get_settings.cache_clear()
    deps.get_site_config.cache_clear()
    deps._session_store_instance = None
    deps._dev_email_instance = None


@pytest.fixture
def client(tmp_path: Path, monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("CHAMBER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CHAMBER_CONFIG", str(ROOT / "chamber.yaml"))
    monkeypatch.setenv("CHAMBER_SECRET_KEY", "test-secret")
    reset_singletons()

    # Context manager runs the lifespan, which migrates the database
    with TestClient(app) as test_client:
        yield test_client

    reset_singletons()


@pytest.fixture
def user_repo(client: TestClient) -> SQLiteUserRepo:
    return SQLiteUserRepo(deps.get_settings().db_path)


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def sign_up(client: TestClient):
    """Sign up through the API; the client keeps the new session cookie."""

    def _sign_up(email: str, type_: str = "USER", name: str = "Tester") -> dict:
        response = client.post(
            "/api/auth/sign-up",
            data={"name": name, "email": email, "password": PASSWORD, "type": type_},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _sign_up


@pytest.fixture
def admin(sign_up, user_repo: SQLiteUserRepo) -> dict:
    """Signed-in admin (promoted directly in the database)."""
    body = sign_up("admin@example.com")
    user = user_repo.get_by_email("admin@example.com")
    user.is_admin = True
    user_repo.save(user)
    return body


@pytest.fixture
def owner(sign_up) -> dict:
    """Signed-in business account."""
    return sign_up("owner@example.com", "BUSINESS", "Olive")


@pytest.fixture
def sign_in(client: TestClient):
    """Switch the client's session to an existing account."""

    def _sign_in(email: str) -> None:
        client.cookies.clear()
        response = client.post("/api/auth/sign-in", data={"email": email, "password": PASSWORD})
        assert response.status_code == 200, response.text

    return _sign_in
