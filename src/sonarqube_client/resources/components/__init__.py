"""Components API."""

from sonarqube_client.resources.components.builders import ComponentTreeBuilder, SearchComponentsBuilder
from sonarqube_client.resources.components.client import ComponentsClient
from sonarqube_client.resources.components.models import (
    Component,
    ComponentShowResponse,
    ComponentTreeResponse,
    SearchComponentsResponse,
)

__all__ = [
    "Component",
    "ComponentShowResponse",
    "ComponentTreeBuilder",
    "ComponentTreeResponse",
    "ComponentsClient",
    "SearchComponentsBuilder",
    "SearchComponentsResponse",
]
