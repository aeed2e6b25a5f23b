"""Login flow and bearer-token identity resolution."""

import logging

from myflix.core.database import StoreSession
from myflix.core.exceptions import AuthenticationError, InvalidCredentialsError
from myflix.core.security import PasswordHasher, TokenService
from myflix.models import User
from myflix.schemas.auth import TokenResponse
from myflix.schemas.users import UserResponse

logger = logging.getLogger(__name__)


def find_user(store: StoreSession, username: str) -> User | None:
    """Look up an account by exact username."""
    store.deadline.check("user lookup")
    return store.db.query(User).filter(User.username == username).first()


def login(
    store: StoreSession,
    hasher: PasswordHasher,
    tokens: TokenService,
    username: str,
    password: str,
) -> TokenResponse:
    """
    Exchange a username/password pair for a bearer token.

    Unknown username and wrong password raise the same InvalidCredentialsError
    so responses do not reveal which accounts exist.
    """
    user = find_user(store, username)
    if user is None:
        hasher.verify_dummy(password)
        logger.info("Login rejected", extra={"reason": "unknown_user"})
        raise InvalidCredentialsError()
    if not hasher.verify(password, user.password_hash):
        logger.info("Login rejected", extra={"reason": "bad_password", "user_id": user.id})
        raise InvalidCredentialsError()
    token = tokens.issue(user.username)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return TokenResponse(
        access_token=token,
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )


def resolve_token(store: StoreSession, tokens: TokenService, token: str) -> User:
    """
    Verify a bearer token and re-resolve its subject against the store.
    A token for an account deleted since issuance is rejected.
    """
    claims = tokens.verify(token)
    user = find_user(store, claims.sub)
    if user is None:
        raise AuthenticationError("User not found")
    return user
