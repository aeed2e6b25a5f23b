"""Catalog endpoints. Every route requires a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends

from myflix.api.v1.auth import get_current_user, get_store
from myflix.core.database import StoreSession
from myflix.schemas.auth import CurrentUser
from myflix.schemas.movies import Director, Genre, MovieResponse
from myflix.services import movies as movie_service

router = APIRouter()


@router.get("/movies", response_model=list[MovieResponse])
def get_movies(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> list[MovieResponse]:
    return [MovieResponse.model_validate(m) for m in movie_service.list_movies(store)]


@router.get("/movies/{title}", response_model=MovieResponse)
def get_movie(
    title: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> MovieResponse:
    """Return one movie by exact title."""
    return MovieResponse.model_validate(movie_service.get_movie_by_title(store, title))


@router.get("/genres/{name}", response_model=Genre)
def get_genre(
    name: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> Genre:
    return movie_service.get_genre(store, name)


@router.get("/directors/{name}", response_model=Director)
def get_director(
    name: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> Director:
    return movie_service.get_director(store, name)
