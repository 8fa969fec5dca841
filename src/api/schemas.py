from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import User, UserType


# --- Users ---
class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    type: UserType
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.model_dump())


class AuthResponse(BaseModel):
    user: UserResponse
    redirect: str


# --- Misc ---
class MessageResponse(BaseModel):
    message: str


class UploadResponse(BaseModel):
    url: str
