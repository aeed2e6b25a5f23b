"""Catalog lookups: movies by title, genres and directors by name."""

from sqlalchemy.orm import Session

from myflix.core.database import StoreSession
from myflix.core.exceptions import NotFoundError
from myflix.models import Movie
from myflix.schemas.movies import Director, Genre


def list_movies(store: StoreSession) -> list[Movie]:
    store.deadline.check("movie list")
    return store.db.query(Movie).order_by(Movie.id).all()


def get_movie_by_title(store: StoreSession, title: str) -> Movie:
    store.deadline.check("movie lookup")
    movie = store.db.query(Movie).filter(Movie.title == title).first()
    if movie is None:
        raise NotFoundError("Movie", title)
    return movie


def _embedded(db: Session, field: str, name: str) -> dict | None:
    # Embedded documents live in JSON columns, so match in Python rather than per-dialect SQL.
    for value in db.query(getattr(Movie, field)).all():
        doc = value[0]
        if isinstance(doc, dict) and doc.get("name") == name:
            return doc
    return None


def get_genre(store: StoreSession, name: str) -> Genre:
    store.deadline.check("genre lookup")
    doc = _embedded(store.db, "genre", name)
    if doc is None:
        raise NotFoundError("Genre", name)
    return Genre.model_validate(doc)


def get_director(store: StoreSession, name: str) -> Director:
    store.deadline.check("director lookup")
    doc = _embedded(store.db, "director", name)
    if doc is None:
        raise NotFoundError("Director", name)
    return Director.model_validate(doc)
