"""Core app configuration, database, security and errors."""

from myflix.core.config import Settings, get_settings
from myflix.core.context import AppContext, build_context

__all__ = ["AppContext", "Settings", "build_context", "get_settings"]
