"""Client for the measures API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_mutually_exclusive, validate_required
from sonarqube_client.resources.measures.builders import ComponentTreeBuilder, SearchHistoryBuilder
from sonarqube_client.resources.measures.models import (
    ComponentMeasuresResponse,
    ComponentTreeResponse,
    SearchHistoryResponse,
)


class MeasuresClient(BaseClient):
    """Read metric values of components."""

    async def component(
        self,
        component: str,
        metric_keys: list[str],
        additional_fields: list[str] | None = None,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> ComponentMeasuresResponse:
        """Get measures of a single component.

        Args:
            component: Component key
            metric_keys: Metrics to fetch, e.g. ``["coverage", "bugs"]``
            additional_fields: Extra response fields (metrics, period)
            branch: Branch name
            pull_request: Pull request id

        Returns:
            Component with its measures

        Raises:
            SonarQubeValidationError: No metric keys, or branch with pull request
        """
        params = {
            "component": component,
            "metricKeys": metric_keys,
            "additionalFields": additional_fields,
            "branch": branch,
            "pullRequest": pull_request,
        }
        validate_required(params, "metricKeys", "Metric keys are required")
        validate_mutually_exclusive(params, "branch", "pullRequest")
        data = await self._get("/api/measures/component", params=params)
        return ComponentMeasuresResponse(**data)

    def component_tree(self) -> ComponentTreeBuilder:
        return ComponentTreeBuilder(self._component_tree)

    async def _component_tree(self, params: dict[str, Any]) -> ComponentTreeResponse:
        data = await self._get("/api/measures/component_tree", params=params)
        return ComponentTreeResponse(**data)

    def search_history(self) -> SearchHistoryBuilder:
        return SearchHistoryBuilder(self._search_history)

    async def _search_history(self, params: dict[str, Any]) -> SearchHistoryResponse:
        data = await self._get("/api/measures/search_history", params=params)
        return SearchHistoryResponse(**data)
