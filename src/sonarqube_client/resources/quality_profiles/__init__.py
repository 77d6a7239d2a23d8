"""Quality profiles API."""

from sonarqube_client.resources.quality_profiles.builders import (
    ActivateRulesBuilder,
    DeactivateRulesBuilder,
    ProfileChangelogBuilder,
    ProfileProjectsBuilder,
    SearchProfilesBuilder,
)
from sonarqube_client.resources.quality_profiles.client import QualityProfilesClient
from sonarqube_client.resources.quality_profiles.models import (
    BulkRuleChangeResponse,
    CompareResponse,
    InheritanceResponse,
    QualityProfile,
    SearchProfilesResponse,
)

__all__ = [
    "ActivateRulesBuilder",
    "BulkRuleChangeResponse",
    "CompareResponse",
    "DeactivateRulesBuilder",
    "InheritanceResponse",
    "ProfileChangelogBuilder",
    "ProfileProjectsBuilder",
    "QualityProfile",
    "QualityProfilesClient",
    "SearchProfilesBuilder",
    "SearchProfilesResponse",
]
