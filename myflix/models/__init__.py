"""SQLAlchemy ORM models."""

from myflix.models.base import Base
from myflix.models.movie import Movie
from myflix.models.user import User

__all__ = ["Base", "Movie", "User"]
