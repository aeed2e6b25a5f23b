"""Account registration, profile changes, deregistration and favorites."""

import logging

from sqlalchemy.exc import IntegrityError

from myflix.core.database import StoreSession
from myflix.core.exceptions import ConflictError, NotFoundError
from myflix.core.security import PasswordHasher
from myflix.models import Movie, User
from myflix.schemas.users import UserCreate, UserUpdate
from myflix.services.auth import find_user

logger = logging.getLogger(__name__)


def _commit_or_conflict(store: StoreSession, username: str) -> None:
    # The unique index on users.username decides concurrent races: first writer wins.
    try:
        store.db.commit()
    except IntegrityError as e:
        store.db.rollback()
        raise ConflictError(username) from e


def get_user(store: StoreSession, username: str) -> User:
    user = find_user(store, username)
    if user is None:
        raise NotFoundError("User", username)
    return user


def register_user(store: StoreSession, hasher: PasswordHasher, body: UserCreate) -> User:
    """Create an account. Raises ConflictError if the username is taken."""
    if find_user(store, body.username) is not None:
        raise ConflictError(body.username)
    user = User(
        username=body.username,
        password_hash=hasher.hash(body.password),
        email=body.email,
        birthday=body.birthday,
        favorites=[],
    )
    store.deadline.check("user insert")
    store.db.add(user)
    _commit_or_conflict(store, body.username)
    store.db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def update_user(
    store: StoreSession, hasher: PasswordHasher, username: str, body: UserUpdate
) -> User:
    """Apply the fields present in body. A new password is re-hashed."""
    user = get_user(store, username)
    changes = body.model_dump(exclude_unset=True)
    new_username = changes.get("username")
    if new_username is not None and new_username != user.username:
        if find_user(store, new_username) is not None:
            raise ConflictError(new_username)
        user.username = new_username
    if changes.get("password") is not None:
        user.password_hash = hasher.hash(changes["password"])
    if changes.get("email") is not None:
        user.email = changes["email"]
    if "birthday" in changes:
        user.birthday = changes["birthday"]
    store.deadline.check("user update")
    _commit_or_conflict(store, user.username)
    store.db.refresh(user)
    logger.info("User updated", extra={"user_id": user.id, "fields": sorted(k for k in changes if k != "password")})
    return user


def delete_user(store: StoreSession, username: str) -> None:
    user = get_user(store, username)
    store.deadline.check("user delete")
    store.db.delete(user)
    store.db.commit()
    logger.info("User deleted", extra={"user_id": user.id})


def add_favorite(store: StoreSession, username: str, movie_id: int) -> User:
    """Append movie_id to favorites unless it is already there."""
    user = get_user(store, username)
    store.deadline.check("movie lookup")
    if store.db.get(Movie, movie_id) is None:
        raise NotFoundError("Movie", str(movie_id))
    favorites = list(user.favorites or [])
    if movie_id not in favorites:
        user.favorites = favorites + [movie_id]
        store.deadline.check("favorites update")
        store.db.commit()
        store.db.refresh(user)
    return user


def remove_favorite(store: StoreSession, username: str, movie_id: int) -> User:
    """Drop movie_id from favorites; no-op when absent."""
    user = get_user(store, username)
    favorites = list(user.favorites or [])
    if movie_id in favorites:
        user.favorites = [m for m in favorites if m != movie_id]
        store.deadline.check("favorites update")
        store.db.commit()
        store.db.refresh(user)
    return user
