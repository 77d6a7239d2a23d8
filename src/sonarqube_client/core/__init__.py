"""Core building blocks shared by all resource clients."""

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.deprecation import (
    DeprecationContext,
    DeprecationManager,
    DeprecationMetadata,
    DeprecationRegistry,
    SonarQubeDeprecationWarning,
    deprecated,
)

__all__ = [
    "BaseClient",
    "DeprecationContext",
    "DeprecationManager",
    "DeprecationMetadata",
    "DeprecationRegistry",
    "SonarQubeDeprecationWarning",
    "deprecated",
]
