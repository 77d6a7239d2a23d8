"""Client for the system API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.deprecation import deprecated
from sonarqube_client.resources.system.models import (
    HealthResponse,
    LivenessV2,
    MigrationsStatusV2,
    StatusResponse,
    SystemHealthV2,
    SystemInfoV2,
)


class SystemClient(BaseClient):
    """Server status and health."""

    async def ping(self) -> str:
        """Check that the server answers.

        Returns:
            "pong"
        """
        text: str = await self._get("/api/system/ping", response_type="text")
        return text.strip()

    async def status(self) -> StatusResponse:
        """Get version and operational state. Works without authentication."""
        data = await self._get("/api/system/status")
        return StatusResponse(**data)

    @deprecated(
        "v1 endpoint deprecated in favor of the v2 API",
        replacement="get_health_v2()",
        deprecated_since="10.6",
        removal_date="TBD",
        migration_guide="get_health_v2() returns the same status plus per-node health for clusters",
        tags=["system", "v2-migration"],
    )
    async def health(self) -> HealthResponse:
        data = await self._get("/api/system/health")
        return HealthResponse(**data)

    @deprecated(
        "v1 endpoint deprecated in favor of the v2 API",
        replacement="get_info_v2()",
        deprecated_since="10.6",
        removal_date="TBD",
        tags=["system", "v2-migration"],
    )
    async def info(self) -> dict[str, Any]:
        """Get detailed system information (requires system administration).

        Returns:
            Raw section mapping, e.g. ``info["System"]["Version"]``
        """
        data: dict[str, Any] = await self._get("/api/system/info")
        return data

    async def get_health_v2(self) -> SystemHealthV2:
        data = await self._get("/api/v2/system/health")
        return SystemHealthV2(**data)

    async def get_liveness_v2(self) -> LivenessV2:
        data = await self._get("/api/v2/system/liveness")
        return LivenessV2(**data)

    async def get_migrations_status_v2(self) -> MigrationsStatusV2:
        data = await self._get("/api/v2/system/migrations-status")
        return MigrationsStatusV2(**data)

    async def get_info_v2(self) -> SystemInfoV2:
        data = await self._get("/api/v2/system/info")
        return SystemInfoV2(**data)

    async def get_openapi_v2(self) -> dict[str, Any]:
        """Get the OpenAPI document describing the v2 API."""
        data: dict[str, Any] = await self._get("/api/v2/openapi.json")
        return data
