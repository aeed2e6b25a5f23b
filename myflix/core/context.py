"""Application context: everything a request needs, built once by the app factory."""

from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from myflix.core.config import Settings
from myflix.core.database import build_engine, build_session_factory
from myflix.core.security import PasswordHasher, TokenService


@dataclass(frozen=True)
class AppContext:
    """Read-only after construction; shared by all requests."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    hasher: PasswordHasher
    tokens: TokenService


def build_context(settings: Settings, engine: Engine | None = None) -> AppContext:
    """
    Wire settings into engine, session factory, hasher and token service.
    Raises ConfigurationError when the signing secret is missing.
    """
    tokens = TokenService.from_settings(settings)
    engine = engine or build_engine(settings)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        tokens=tokens,
    )
