"""Pydantic request/response schemas."""

from myflix.schemas.auth import CurrentUser, LoginRequest, TokenClaims, TokenResponse
from myflix.schemas.health import HealthResponse
from myflix.schemas.movies import Director, Genre, MovieResponse
from myflix.schemas.users import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CurrentUser",
    "Director",
    "Genre",
    "HealthResponse",
    "LoginRequest",
    "MovieResponse",
    "TokenClaims",
    "TokenResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
