"""Models for the system API."""

from typing import Any

from pydantic import Field

from sonarqube_client.models import SonarQubeModel


class NodeHealth(SonarQubeModel):
    name: str | None = None
    type: str | None = None
    host: str | None = None
    health: str | None = None
    status: str | None = None
    causes: list[Any] = Field(default_factory=list)


class HealthResponse(SonarQubeModel):
    """Response from /api/system/health."""

    health: str = Field(description="GREEN, YELLOW or RED")
    causes: list[Any] = Field(default_factory=list)
    nodes: list[NodeHealth] = Field(default_factory=list)


class StatusResponse(SonarQubeModel):
    """Response from /api/system/status."""

    id: str | None = None
    version: str
    status: str = Field(description="UP, DOWN, STARTING, RESTARTING, DB_MIGRATION_NEEDED or DB_MIGRATION_RUNNING")


class SystemHealthV2(SonarQubeModel):
    status: str
    nodes: list[NodeHealth] = Field(default_factory=list)
    checked_at: str | None = Field(default=None, alias="checkedAt")


class LivenessV2(SonarQubeModel):
    status: str = "UP"


class MigrationsStatusV2(SonarQubeModel):
    status: str
    message: str | None = None
    started_at: str | None = Field(default=None, alias="startedAt")
    completed_steps: int | None = Field(default=None, alias="completedSteps")
    total_steps: int | None = Field(default=None, alias="totalSteps")


class DatabaseInfo(SonarQubeModel):
    name: str | None = None
    version: str | None = None


class SystemInfoV2(SonarQubeModel):
    """Response from /api/v2/system/info."""

    version: str
    edition: str | None = Field(default=None, description="community, developer, enterprise or datacenter")
    features: list[str] = Field(default_factory=list)
    server_id: str | None = Field(default=None, alias="serverId")
    installed_at: str | None = Field(default=None, alias="installedAt")
    database: DatabaseInfo | None = None
    production_mode: bool | None = Field(default=None, alias="productionMode")
