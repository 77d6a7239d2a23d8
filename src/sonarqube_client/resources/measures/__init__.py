"""Measures API."""

from sonarqube_client.resources.measures.builders import ComponentTreeBuilder, SearchHistoryBuilder
from sonarqube_client.resources.measures.client import MeasuresClient
from sonarqube_client.resources.measures.models import (
    ComponentMeasuresResponse,
    ComponentTreeResponse,
    Measure,
    MeasuredComponent,
    MeasureHistory,
    SearchHistoryResponse,
)

__all__ = [
    "ComponentMeasuresResponse",
    "ComponentTreeBuilder",
    "ComponentTreeResponse",
    "Measure",
    "MeasureHistory",
    "MeasuredComponent",
    "MeasuresClient",
    "SearchHistoryBuilder",
    "SearchHistoryResponse",
]
