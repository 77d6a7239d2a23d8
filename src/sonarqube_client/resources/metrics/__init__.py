"""Metrics API."""

from sonarqube_client.resources.metrics.builders import SearchMetricsBuilder
from sonarqube_client.resources.metrics.client import MetricsClient
from sonarqube_client.resources.metrics.models import Metric, SearchMetricsResponse

__all__ = [
    "Metric",
    "MetricsClient",
    "SearchMetricsBuilder",
    "SearchMetricsResponse",
]
