"""Response body for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus a database round-trip result."""

    status: Literal["ok"] = Field(default="ok", description="Always ok when the API answers")
    environment: str = Field(description="APP_ENV the process runs with (dev or prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Outcome of SELECT 1 against DATABASE_URL",
    )
