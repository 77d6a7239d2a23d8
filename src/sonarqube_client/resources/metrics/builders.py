"""Builders for the metrics API."""

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.resources.metrics.models import Metric, SearchMetricsResponse


class SearchMetricsBuilder(PaginatedBuilder[SearchMetricsResponse, Metric]):
    """Builder for /api/metrics/search."""

    def get_items(self, response: SearchMetricsResponse) -> list[Metric]:
        return response.metrics
