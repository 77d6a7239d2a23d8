"""System API."""

from sonarqube_client.resources.system.client import SystemClient
from sonarqube_client.resources.system.models import (
    HealthResponse,
    LivenessV2,
    MigrationsStatusV2,
    StatusResponse,
    SystemHealthV2,
    SystemInfoV2,
)

__all__ = [
    "HealthResponse",
    "LivenessV2",
    "MigrationsStatusV2",
    "StatusResponse",
    "SystemClient",
    "SystemHealthV2",
    "SystemInfoV2",
]
