"""Software composition analysis API."""

from sonarqube_client.resources.sca.client import ScaClient
from sonarqube_client.resources.sca.models import (
    ComponentType,
    SbomComponent,
    SbomDependency,
    SbomFormat,
    SbomLicense,
    SbomMetadata,
    SbomReport,
    SbomVulnerability,
    VulnerabilitySummary,
)

__all__ = [
    "ComponentType",
    "SbomComponent",
    "SbomDependency",
    "SbomFormat",
    "SbomLicense",
    "SbomMetadata",
    "SbomReport",
    "SbomVulnerability",
    "ScaClient",
    "VulnerabilitySummary",
]
