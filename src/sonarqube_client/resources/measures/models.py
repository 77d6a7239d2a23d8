"""Models for the measures API."""

from typing import Any

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class MeasurePeriod(SonarQubeModel):
    index: int | None = None
    value: str | None = None
    best_value: bool | None = Field(default=None, alias="bestValue")


class Measure(SonarQubeModel):
    """Value of one metric on a component."""

    metric: str
    value: str | None = None
    best_value: bool | None = Field(default=None, alias="bestValue")
    period: MeasurePeriod | None = None
    periods: list[MeasurePeriod] = Field(default_factory=list)


class MeasuredComponent(SonarQubeModel):
    key: str
    name: str | None = None
    qualifier: str | None = None
    path: str | None = None
    language: str | None = None
    measures: list[Measure] = Field(default_factory=list)

    def measure(self, metric: str) -> Measure | None:
        """Get the measure of a metric, if present."""
        return next((m for m in self.measures if m.metric == metric), None)


class ComponentMeasuresResponse(SonarQubeModel):
    """Response from /api/measures/component."""

    component: MeasuredComponent
    metrics: list[dict[str, Any]] = Field(default_factory=list)
    period: dict[str, Any] | None = None


class ComponentTreeResponse(PaginatedResponse):
    """Response from /api/measures/component_tree."""

    base_component: MeasuredComponent | None = Field(default=None, alias="baseComponent")
    components: list[MeasuredComponent] = Field(default_factory=list)
    metrics: list[dict[str, Any]] = Field(default_factory=list)


class HistoryPoint(SonarQubeModel):
    date: str
    value: str | None = None


class MeasureHistory(SonarQubeModel):
    metric: str
    history: list[HistoryPoint] = Field(default_factory=list)


class SearchHistoryResponse(PaginatedResponse):
    """Response from /api/measures/search_history."""

    measures: list[MeasureHistory] = Field(default_factory=list)
