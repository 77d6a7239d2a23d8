"""Client for the metrics API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders import DEFAULT_PAGE_SIZE
from sonarqube_client.core.builders.validation import validate_page_size
from sonarqube_client.core.deprecation import deprecated
from sonarqube_client.resources.metrics.builders import SearchMetricsBuilder
from sonarqube_client.resources.metrics.models import Metric, SearchMetricsResponse


class MetricsClient(BaseClient):
    """Read metric definitions."""

    async def search(self, page: int | None = None, page_size: int | None = None) -> SearchMetricsResponse:
        """Get one page of metrics.

        Args:
            page: 1-based page number
            page_size: Metrics per page (1-500)

        Returns:
            One page of metric definitions

        Raises:
            SonarQubeValidationError: Page size out of range
        """
        params = {"p": page, "ps": page_size}
        validate_page_size(params)
        return await self._search(params)

    async def _search(self, params: dict[str, Any]) -> SearchMetricsResponse:
        data = await self._get("/api/metrics/search", params=params)
        return SearchMetricsResponse(**data)

    async def search_all(self, page_size: int = DEFAULT_PAGE_SIZE) -> list[Metric]:
        """Collect every metric definition.

        Args:
            page_size: Metrics per page

        Returns:
            All metrics
        """
        builder = SearchMetricsBuilder(self._search).page_size(page_size)
        return [metric async for metric in builder.all()]

    async def types(self) -> list[str]:
        data = await self._get("/api/metrics/types")
        return list(data.get("types", []))

    @deprecated(
        "This endpoint has been deprecated and will be removed",
        deprecated_since="7.7",
        removal_date="TBD",
        tags=["metrics"],
    )
    async def domains(self) -> list[str]:
        data = await self._get("/api/metrics/domains")
        return list(data.get("domains", []))
