from typing import Any, cast

from jose import jwt
from passlib.context import CryptContext

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    result: bool = pwd_context.verify(plain_password, hashed_password)
    return result


def get_password_hash(password: str) -> str:
    result: str = pwd_context.hash(password)
    return result


class PasslibHasher:
    """PasswordHasherPort backed by passlib's argon2 scheme."""

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)


class CookieSigner:
    """
    Signs session tokens for the session cookie.

    The cookie carries a JWT whose ``sid`` claim is the opaque session token;
    expiry is enforced by the session store, not by the JWT.
    """

    def __init__(self, secret_key: str):
        self.secret_key = secret_key

    def sign(self, token: str) -> str:
        encoded: str = jwt.encode({"sid": token}, self.secret_key, algorithm=ALGORITHM)
        return encoded

    def unsign(self, value: str) -> str | None:
        try:
            payload = cast(dict[str, Any], jwt.decode(value, self.secret_key, algorithms=[ALGORITHM]))
        except jwt.JWTError:
            return None
        sid = payload.get("sid")
        return sid if isinstance(sid, str) else None
