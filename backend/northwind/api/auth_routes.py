# backend/northwind/api/auth_routes.py

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_db, require_admin
from northwind.api.schemas import AuthRequest, AuthResponse, MessageOut, RefreshTokenRequest
from northwind.core.config import Settings, get_settings
from northwind.core.errors import (
    ExpiredRefreshToken,
    InvalidCredentials,
    InvalidRefreshToken,
    PersistenceFailure,
)
from northwind.core.time_utils import utcnow
from northwind.models import User
from northwind.services.auth_service import AuthService

router = APIRouter()


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, settings)


def _to_response(user: User) -> AuthResponse:
    return AuthResponse(
        access_token=user.access_token,
        refresh_token=user.refresh_token.value,
        refresh_token_expiry_date=user.refresh_token.expiry_date,
    )


def _issue(auth: AuthService, username: str, password: str) -> AuthResponse:
    user = auth.get_by_credentials(username, password)
    if user is None:
        raise InvalidCredentials("Invalid user credentials. User not found")

    authenticated = auth.create_credentials(user)
    if not auth.is_saved_to_db():
        raise PersistenceFailure("Unable to save credentials")
    return _to_response(authenticated)


@router.post("/access", response_model=AuthResponse)
def create_credentials(payload: AuthRequest, auth: AuthService = Depends(get_auth_service)):
    return _issue(auth, payload.username, payload.password)


# OAuth2 form endpoint (Swagger Authorize uses this)
@router.post("/token", response_model=AuthResponse)
def token(form_data: OAuth2PasswordRequestForm = Depends(), auth: AuthService = Depends(get_auth_service)):
    return _issue(auth, form_data.username or "", form_data.password or "")


@router.post("/refresh", response_model=AuthResponse)
def refresh_credentials(payload: RefreshTokenRequest, auth: AuthService = Depends(get_auth_service)):
    user = auth.get_by_refresh_token(payload.refresh_token)
    if user is None:
        raise InvalidRefreshToken("Invalid refresh token")

    expiry = user.refresh_token.expiry_date
    if expiry is None or expiry < utcnow():
        raise ExpiredRefreshToken("Refresh token has expired. Regenerate tokens")

    refreshed = auth.refresh_credentials(user)
    if not auth.is_saved_to_db():
        raise PersistenceFailure("Unable to save credentials")
    return _to_response(refreshed)


@router.post("/revoke", response_model=MessageOut, dependencies=[Depends(require_admin)])
def revoke_credentials(payload: RefreshTokenRequest, auth: AuthService = Depends(get_auth_service)):
    user = auth.get_by_refresh_token(payload.refresh_token)
    if user is None:
        raise InvalidRefreshToken("Invalid refresh token")

    auth.revoke_credentials(user)
    if not auth.is_saved_to_db():
        raise PersistenceFailure("Unable to revoke credentials")
    return MessageOut(message=f"Access for user '{user.username}' has been revoked")
