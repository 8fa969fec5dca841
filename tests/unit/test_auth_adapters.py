from datetime import UTC, datetime, timedelta
from uuid import uuid4

from src.adapters.auth.crypto import CookieSigner, PasslibHasher
from src.adapters.auth.session_store import InMemorySessionStore, hash_token


class TestInMemorySessionStore:
    def test_create_and_get(self) -> None:
        store = InMemorySessionStore(ttl_minutes=10)
        user_id = uuid4()
        token = store.create(user_id)
        assert store.get(token) == user_id

    def test_unknown_token(self) -> None:
        store = InMemorySessionStore()
        assert store.get("not-a-token") is None

    def test_only_digest_is_stored(self) -> None:
        store = InMemorySessionStore()
        token = store.create(uuid4())
        assert token not in store._sessions
        assert hash_token(token) in store._sessions

    def test_expired_session_is_dropped(self) -> None:
        store = InMemorySessionStore(ttl_minutes=10)
        start = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = store.create(uuid4(), now_utc=start)

        assert store.get(token, now_utc=start + timedelta(minutes=9)) is not None
        assert store.get(token, now_utc=start + timedelta(minutes=10)) is None
        assert store._sessions == {}

    def test_delete(self) -> None:
        store = InMemorySessionStore()
        token = store.create(uuid4())
        store.delete(token)
        assert store.get(token) is None

    def test_delete_by_user(self) -> None:
        store = InMemorySessionStore()
        user_id = uuid4()
        store.create(user_id)
        store.create(user_id)
        other = store.create(uuid4())

        assert store.delete_by_user(user_id) == 2
        assert store.get(other) is not None


class TestCookieSigner:
    def test_round_trip(self) -> None:
        signer = CookieSigner("secret")
        assert signer.unsign(signer.sign("tok")) == "tok"

    def test_wrong_secret(self) -> None:
        value = CookieSigner("secret").sign("tok")
        assert CookieSigner("other").unsign(value) is None

    def test_garbage(self) -> None:
        assert CookieSigner("secret").unsign("not-a-jwt") is None


def test_passlib_hasher() -> None:
    hasher = PasslibHasher()
    hashed = hasher.hash_password("correct horse")
    assert hashed.startswith("$argon2")
    assert hasher.verify_password("correct horse", hashed)
    assert not hasher.verify_password("wrong", hashed)
