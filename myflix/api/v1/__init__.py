"""API v1 routes."""

from fastapi import APIRouter

from myflix.api.v1 import auth, health, movies, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/login", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(movies.router, tags=["movies"])
