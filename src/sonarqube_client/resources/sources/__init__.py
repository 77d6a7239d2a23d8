"""Sources API."""

from sonarqube_client.resources.sources.client import SourcesClient
from sonarqube_client.resources.sources.models import ScmLine, ScmResponse, ShowSourceResponse, SourceLine

__all__ = [
    "ScmLine",
    "ScmResponse",
    "ShowSourceResponse",
    "SourceLine",
    "SourcesClient",
]
