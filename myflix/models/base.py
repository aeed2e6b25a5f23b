"""Declarative base shared by the movies and users tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base for myFlix ORM models; Alembic autogenerates from its metadata."""
