"""Resource clients, one per Web API domain."""

from sonarqube_client.resources.ce import CEClient
from sonarqube_client.resources.components import ComponentsClient
from sonarqube_client.resources.fix_suggestions import FixSuggestionsClient
from sonarqube_client.resources.hotspots import HotspotsClient
from sonarqube_client.resources.issues import IssuesClient
from sonarqube_client.resources.measures import MeasuresClient
from sonarqube_client.resources.metrics import MetricsClient
from sonarqube_client.resources.projects import ProjectsClient
from sonarqube_client.resources.quality_gates import QualityGatesClient
from sonarqube_client.resources.quality_profiles import QualityProfilesClient
from sonarqube_client.resources.rules import RulesClient
from sonarqube_client.resources.sca import ScaClient
from sonarqube_client.resources.sources import SourcesClient
from sonarqube_client.resources.system import SystemClient

__all__ = [
    "CEClient",
    "ComponentsClient",
    "FixSuggestionsClient",
    "HotspotsClient",
    "IssuesClient",
    "MeasuresClient",
    "MetricsClient",
    "ProjectsClient",
    "QualityGatesClient",
    "QualityProfilesClient",
    "RulesClient",
    "ScaClient",
    "SourcesClient",
    "SystemClient",
]
