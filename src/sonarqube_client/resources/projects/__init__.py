"""Projects API."""

from sonarqube_client.resources.projects.builders import BulkDeleteProjectsBuilder, SearchProjectsBuilder
from sonarqube_client.resources.projects.client import ProjectsClient
from sonarqube_client.resources.projects.models import (
    CreateProjectResponse,
    Finding,
    Project,
    SearchProjectsResponse,
    Visibility,
)

__all__ = [
    "BulkDeleteProjectsBuilder",
    "CreateProjectResponse",
    "Finding",
    "Project",
    "ProjectsClient",
    "SearchProjectsBuilder",
    "SearchProjectsResponse",
    "Visibility",
]
