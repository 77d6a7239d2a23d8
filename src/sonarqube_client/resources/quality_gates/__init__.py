"""Quality gates API."""

from sonarqube_client.resources.quality_gates.builders import SearchGateProjectsBuilder
from sonarqube_client.resources.quality_gates.client import QualityGatesClient
from sonarqube_client.resources.quality_gates.models import (
    ConditionOperator,
    ListQualityGatesResponse,
    ProjectStatus,
    QualityGate,
    QualityGateCondition,
)

__all__ = [
    "ConditionOperator",
    "ListQualityGatesResponse",
    "ProjectStatus",
    "QualityGate",
    "QualityGateCondition",
    "QualityGatesClient",
    "SearchGateProjectsBuilder",
]
