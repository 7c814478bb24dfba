"""
Game Inventory — Shared Response Schemas
=========================================

What:  Small models that belong to no single entity: the home page counts
       and the health probe payload.
"""

from pydantic import BaseModel, Field


class InventoryCounts(BaseModel):
    """Record counts shown on the home page."""
    game_count: int = Field(ge=0)
    console_count: int = Field(ge=0)


class HealthResponse(BaseModel):
    """
    Health check response for monitoring and load balancer probes.

    A server that cannot reach its database cannot render any page, so the
    database status decides the overall status.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
