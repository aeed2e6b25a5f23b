"""Pydantic schemas for catalog movies."""

from pydantic import BaseModel, Field


class Genre(BaseModel):
    name: str
    description: str = ""


class Director(BaseModel):
    name: str
    bio: str = ""


class MovieResponse(BaseModel):
    """A movie with its embedded genre and director."""

    id: int
    title: str
    description: str
    year: int | None = None
    genre: Genre
    director: Director
    image_path: str | None = Field(default=None, description="Poster image URL")
    featured: bool = False

    class Config:
        from_attributes = True
