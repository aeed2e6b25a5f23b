"""JWT login and auth dependencies (get_current_user, require_self)."""

from collections.abc import Generator
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from myflix.core.context import AppContext
from myflix.core.database import StoreSession, open_store_session
from myflix.core.exceptions import AuthenticationError, AuthorizationError
from myflix.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from myflix.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    """Dependency: the AppContext the app factory attached to app.state."""
    return request.app.state.context


def get_store(
    ctx: Annotated[AppContext, Depends(get_context)],
) -> Generator[StoreSession, None, None]:
    """Dependency that yields a DB session with this request's deadline and closes it when done."""
    yield from open_store_session(ctx.session_factory, ctx.settings.REQUEST_TIMEOUT_SEC)


@router.post("", response_model=TokenResponse)
def login(
    body: LoginRequest,
    ctx: Annotated[AppContext, Depends(get_context)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    return auth_service.login(store, ctx.hasher, ctx.tokens, body.username, body.password)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    ctx: Annotated[AppContext, Depends(get_context)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    user = auth_service.resolve_token(store, ctx.tokens, credentials.credentials)
    return CurrentUser(id=user.id, username=user.username, email=user.email)


def require_self(
    username: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: the authenticated user must be the one named in the path."""
    if current_user.username != username:
        raise AuthorizationError()
    return current_user
