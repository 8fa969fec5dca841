"""
Mapping of component errors and form validation onto HTTP responses.

Component services return ``(result, errors)`` where each error carries a
``code``. The code decides the status: ``*_not_found`` is 404, ``*_exists``
is 409, ``forbidden`` is 403 and anything else is a 400.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar

from fastapi import HTTPException, Request
from pydantic import BaseModel

from src.domain.validation import Invalid, validate

F = TypeVar("F", bound=BaseModel)


class ServiceError(Protocol):
    code: str
    message: str
    field: str | None


def status_for(code: str) -> int:
    if code.endswith("_not_found"):
        return 404
    if code.endswith("_exists"):
        return 409
    if code == "forbidden":
        return 403
    if code == "email_failed":
        return 500
    return 400


def raise_for_errors(errors: Sequence[ServiceError]) -> None:
    """Raise HTTPException for the first error, if any."""
    if not errors:
        return
    err = errors[0]
    detail: dict[str, Any] = {"error": err.message}
    if err.field:
        detail["field_errors"] = {err.field: err.message}
    raise HTTPException(status_code=status_for(err.code), detail=detail)


def validate_or_400(data: Mapping[str, Any], form: type[F]) -> F:
    result = validate(data, form)
    if isinstance(result, Invalid):
        raise HTTPException(status_code=400, detail={"field_errors": result.field_errors})
    return result.data


async def form_data(request: Request) -> dict[str, Any]:
    """Submitted form fields (urlencoded or multipart) as a plain dict."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
