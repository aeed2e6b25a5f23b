"""ORM model for catalog movies."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from myflix.models.base import Base


class Movie(Base):
    """
    A catalog entry. Genre and director are embedded documents stored as JSON:

    genre: {"name": ..., "description": ...}
    director: {"name": ..., "bio": ...}
    """

    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    year = Column(Integer, nullable=True)
    genre = Column(JSON, nullable=False, default=dict)
    director = Column(JSON, nullable=False, default=dict)
    image_path = Column(String(2048), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
