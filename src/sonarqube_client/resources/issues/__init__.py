"""Issues API."""

from sonarqube_client.resources.issues.builders import SearchIssuesBuilder
from sonarqube_client.resources.issues.client import IssuesClient
from sonarqube_client.resources.issues.models import (
    BulkChangeResponse,
    ImpactSeverity,
    Issue,
    IssueChangelog,
    IssueResponse,
    IssueTransition,
    SearchIssuesResponse,
    SoftwareQuality,
)

__all__ = [
    "BulkChangeResponse",
    "ImpactSeverity",
    "Issue",
    "IssueChangelog",
    "IssueResponse",
    "IssueTransition",
    "IssuesClient",
    "SearchIssuesBuilder",
    "SearchIssuesResponse",
    "SoftwareQuality",
]
