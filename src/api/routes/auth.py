from typing import Any

from fastapi import APIRouter, Depends, Response

from src.adapters.auth.crypto import CookieSigner
from src.api.deps import (
    get_auth_service,
    get_cookie_signer,
    get_current_user,
    get_session_token,
    get_site_config,
)
from src.api.errors import form_data, raise_for_errors, validate_or_400
from src.api.schemas import AuthResponse, MessageResponse, UserResponse
from src.components.auth import AuthService, redirect_for
from src.config import SiteConfig
from src.domain.entities import User
from src.domain.forms import ForgotPasswordForm, ResetPasswordForm, SignInForm, SignUpForm

router = APIRouter()


def _start_session(
    response: Response,
    user: User,
    auth: AuthService,
    config: SiteConfig,
    signer: CookieSigner,
) -> AuthResponse:
    token = auth.start_session(user)
    cookie = config.auth.sessions.cookie
    max_age = config.auth.sessions.ttl_minutes * 60

    # Set HttpOnly Cookie
    response.set_cookie(
        key=config.site.session_name,
        value=signer.sign(token),
        httponly=cookie.http_only,
        max_age=max_age,
        expires=max_age,
        samesite=cookie.same_site,  # type: ignore[arg-type]
        secure=cookie.secure,
        path="/",
    )
    return AuthResponse(
        user=UserResponse.from_user(user),
        redirect=redirect_for(user) or "/",
    )


@router.post("/sign-up", response_model=AuthResponse)
def sign_up(
    response: Response,
    data: dict[str, Any] = Depends(form_data),
    auth: AuthService = Depends(get_auth_service),
    config: SiteConfig = Depends(get_site_config),
    signer: CookieSigner = Depends(get_cookie_signer),
) -> AuthResponse:
    form = validate_or_400(data, SignUpForm)
    user, errors = auth.sign_up(form.email, form.name, form.type, form.password)
    raise_for_errors(errors)
    assert user is not None
    return _start_session(response, user, auth, config, signer)


@router.post("/sign-in", response_model=AuthResponse)
def sign_in(
    response: Response,
    data: dict[str, Any] = Depends(form_data),
    auth: AuthService = Depends(get_auth_service),
    config: SiteConfig = Depends(get_site_config),
    signer: CookieSigner = Depends(get_cookie_signer),
) -> AuthResponse:
    form = validate_or_400(data, SignInForm)
    user, errors = auth.sign_in(form.email, form.password)
    raise_for_errors(errors)
    assert user is not None
    return _start_session(response, user, auth, config, signer)


@router.post("/sign-out", response_model=MessageResponse)
def sign_out(
    response: Response,
    token: str | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
    config: SiteConfig = Depends(get_site_config),
) -> MessageResponse:
    """Log out user by ending the session and clearing the cookie."""
    if token:
        auth.sign_out(token)
    response.delete_cookie(key=config.site.session_name, path="/")
    return MessageResponse(message="Signed out")


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    data: dict[str, Any] = Depends(form_data),
    auth: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    form = validate_or_400(data, ForgotPasswordForm)
    _, errors = auth.request_password_reset(form.email)
    raise_for_errors(errors)
    return MessageResponse(message="Reset link sent")


@router.get("/reset-password")
def check_reset_link(
    token: str | None = None,
    auth: AuthService = Depends(get_auth_service),
) -> dict[str, str]:
    request, errors = auth.check_reset_token(token)
    raise_for_errors(errors)
    assert request is not None
    return {"email": request.email}


@router.post("/reset-password", response_model=AuthResponse)
def reset_password(
    response: Response,
    token: str | None = None,
    data: dict[str, Any] = Depends(form_data),
    auth: AuthService = Depends(get_auth_service),
    config: SiteConfig = Depends(get_site_config),
    signer: CookieSigner = Depends(get_cookie_signer),
) -> AuthResponse:
    form = validate_or_400(data, ResetPasswordForm)
    user, errors = auth.reset_password(token, form.password)
    raise_for_errors(errors)
    assert user is not None
    return _start_session(response, user, auth, config, signer)


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.from_user(current_user)
