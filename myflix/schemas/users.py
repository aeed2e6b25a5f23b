"""Request/response schemas for user accounts. No schema here carries a password hash."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field

USERNAME_PATTERN = r"^[A-Za-z0-9]+$"


class UserCreate(BaseModel):
    """Registration payload."""

    username: str = Field(
        ...,
        min_length=5,
        max_length=255,
        pattern=USERNAME_PATTERN,
        description="Alphanumeric, at least 5 characters",
    )
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    email: EmailStr = Field(..., description="Email address")
    birthday: date | None = Field(default=None, description="Birthday (YYYY-MM-DD)")


class UserUpdate(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    username: str | None = Field(
        default=None, min_length=5, max_length=255, pattern=USERNAME_PATTERN
    )
    password: str | None = Field(default=None, min_length=1, max_length=128)
    email: EmailStr | None = None
    birthday: date | None = None


class UserResponse(BaseModel):
    """Public view of an account."""

    username: str
    email: str
    birthday: date | None = None
    favorites: list[int] = Field(default_factory=list)

    class Config:
        from_attributes = True
