"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from myflix.schemas.users import UserResponse


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenClaims(BaseModel):
    """Verified claims of a bearer token."""

    sub: str
    iat: datetime
    exp: datetime


class TokenResponse(BaseModel):
    """JWT access token returned after successful login, plus a summary of the account."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserResponse


class CurrentUser(BaseModel):
    """Authenticated user (id, username, email) resolved by the auth gate."""

    id: int
    username: str
    email: str

    class Config:
        from_attributes = True
