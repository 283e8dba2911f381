"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus a database round-trip, for Render and uptime checks."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the configured database",
    )
