"""Builders for the measures API."""

from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_mutually_exclusive, validate_required
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.measures.models import (
    ComponentTreeResponse,
    MeasuredComponent,
    MeasureHistory,
    SearchHistoryResponse,
)

MAX_METRIC_KEYS = 15


class ComponentTreeBuilder(PaginatedBuilder[ComponentTreeResponse, MeasuredComponent]):
    """Builder for /api/measures/component_tree."""

    def for_component(self, component: str) -> Self:
        return self.set_param("component", component)

    def with_metrics(self, metric_keys: list[str]) -> Self:
        return self.set_param("metricKeys", metric_keys)

    def with_additional_fields(self, fields: list[str]) -> Self:
        return self.set_param("additionalFields", fields)

    def with_strategy(self, strategy: str) -> Self:
        """Tree traversal strategy: all, children or leaves."""
        return self.set_param("strategy", strategy)

    def with_qualifiers(self, qualifiers: list[str]) -> Self:
        return self.set_param("qualifiers", qualifiers)

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def sort_by_metric(self, metric_key: str, with_measures_only: bool = False) -> Self:
        self.set_param("s", "metric")
        self.set_param("metricSort", metric_key)
        return self.set_param("metricSortFilter", "withMeasuresOnly" if with_measures_only else "all")

    def sort_by(self, field: str, ascending: bool = True) -> Self:
        self.set_param("s", field)
        return self.set_param("asc", ascending)

    def validate(self) -> None:
        super().validate()
        validate_required(self._params, "component")
        validate_required(self._params, "metricKeys", "Metric keys are required")
        if len(self._params["metricKeys"]) > MAX_METRIC_KEYS:
            raise SonarQubeValidationError(f"Maximum {MAX_METRIC_KEYS} metric keys allowed", field="metricKeys")
        validate_mutually_exclusive(self._params, "branch", "pullRequest")

    def get_items(self, response: ComponentTreeResponse) -> list[MeasuredComponent]:
        return response.components


class SearchHistoryBuilder(PaginatedBuilder[SearchHistoryResponse, MeasureHistory]):
    """Builder for /api/measures/search_history.

    Paging applies to the history points, so ``all()`` yields one
    ``MeasureHistory`` per metric per page.
    """

    def for_component(self, component: str) -> Self:
        return self.set_param("component", component)

    def with_metrics(self, metrics: list[str]) -> Self:
        return self.set_param("metrics", metrics)

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def date_range(self, from_date: str | None = None, to_date: str | None = None) -> Self:
        self.set_param("from", from_date)
        return self.set_param("to", to_date)

    def validate(self) -> None:
        super().validate()
        validate_required(self._params, "component")
        validate_required(self._params, "metrics", "Metrics are required")
        validate_mutually_exclusive(self._params, "branch", "pullRequest")

    def get_items(self, response: SearchHistoryResponse) -> list[MeasureHistory]:
        return response.measures
