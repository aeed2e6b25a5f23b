"""ORM model for registered accounts."""

from sqlalchemy import JSON, Column, Date, Integer, String

from myflix.models.base import Base


class User(Base):
    """
    Registered account used for JWT authentication.

    password_hash is always bcrypt output, never the raw password.
    favorites is an ordered list of movie ids without duplicates; it is
    replaced wholesale on change so the ORM notices the update.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    birthday = Column(Date, nullable=True)
    favorites = Column(JSON, nullable=False, default=list)
