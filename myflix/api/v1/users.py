"""User account endpoints: registration, profile, deregistration and favorites."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from myflix.api.v1.auth import get_context, get_store, require_self
from myflix.core.context import AppContext
from myflix.core.database import StoreSession
from myflix.schemas.auth import CurrentUser
from myflix.schemas.users import UserCreate, UserResponse, UserUpdate
from myflix.services import users as user_service

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    ctx: Annotated[AppContext, Depends(get_context)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> UserResponse:
    """Register a new account. The response never includes the password or its hash."""
    user = user_service.register_user(store, ctx.hasher, body)
    return UserResponse.model_validate(user)


@router.get("/{username}", response_model=UserResponse)
def get_profile(
    username: str,
    _user: Annotated[CurrentUser, Depends(require_self)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> UserResponse:
    return UserResponse.model_validate(user_service.get_user(store, username))


@router.put("/{username}", response_model=UserResponse)
def update_profile(
    username: str,
    body: UserUpdate,
    _user: Annotated[CurrentUser, Depends(require_self)],
    ctx: Annotated[AppContext, Depends(get_context)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> UserResponse:
    """
    Update username, password, email or birthday of the caller's own account.
    Renaming invalidates tokens issued for the old username.
    """
    user = user_service.update_user(store, ctx.hasher, username, body)
    return UserResponse.model_validate(user)


@router.delete("/{username}", response_class=PlainTextResponse)
def deregister(
    username: str,
    _user: Annotated[CurrentUser, Depends(require_self)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> str:
    user_service.delete_user(store, username)
    return f"{username} was deleted."


@router.post("/{username}/movies/{movie_id}", response_model=UserResponse)
def add_favorite(
    username: str,
    movie_id: int,
    _user: Annotated[CurrentUser, Depends(require_self)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> UserResponse:
    return UserResponse.model_validate(user_service.add_favorite(store, username, movie_id))


@router.delete("/{username}/movies/{movie_id}", response_model=UserResponse)
def remove_favorite(
    username: str,
    movie_id: int,
    _user: Annotated[CurrentUser, Depends(require_self)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> UserResponse:
    return UserResponse.model_validate(user_service.remove_favorite(store, username, movie_id))
