"""
Form validation with a typed result.

``validate`` parses submitted form data into a form model and returns either
``Ok(data)`` or ``Invalid(field_errors)``, where ``field_errors`` maps each
failing field to its first message. Routes render or return that mapping
as-is, so messages are written for end users.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, ValidationError

F = TypeVar("F", bound=BaseModel)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


# --- Result ---


@dataclass(frozen=True)
class Ok(Generic[F]):
    data: F

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return False


ValidationResult = Ok[F] | Invalid


def _label(form: type[BaseModel], name: str) -> str:
    info = form.model_fields.get(name)
    if info is not None and info.title:
        return info.title
    return name.replace("_", " ").capitalize()


def validate(data: Mapping[str, Any], form: type[F]) -> Ok[F] | Invalid:
    """Validate raw form data against a form model."""
    try:
        return Ok(form.model_validate(dict(data)))
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            loc = err.get("loc") or ()
            name = str(loc[0]) if loc else "error"
            if name in errors:
                continue
            if err["type"] == "missing":
                errors[name] = f"{_label(form, name)} is required"
            elif err["type"] == "value_error":
                errors[name] = str(err["ctx"]["error"])
            else:
                errors[name] = err["msg"]
        return Invalid(field_errors=errors)


# --- Field Rules ---


def min_length(size: int, message: str) -> AfterValidator:
    def check(value: str | None) -> str | None:
        if value is not None and len(value) < size:
            raise ValueError(message)
        return value

    return AfterValidator(check)


def exact_length(size: int, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) != size:
            raise ValueError(message)
        return value

    return AfterValidator(check)


def email_address(message: str = "Please enter a valid email address") -> AfterValidator:
    def check(value: str) -> str:
        if not EMAIL_RE.match(value):
            raise ValueError(message)
        return value

    return AfterValidator(check)


def url_containing(host: str, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("Please enter a valid URL")
        if host not in value:
            raise ValueError(message)
        return value

    return AfterValidator(check)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional text inputs arrive as "" when left empty.
BlankToNone: BeforeValidator = BeforeValidator(_blank_to_none)


def positive(message: str) -> AfterValidator:
    def check(value: int) -> int:
        if value <= 0:
            raise ValueError(message)
        return value

    return AfterValidator(check)


