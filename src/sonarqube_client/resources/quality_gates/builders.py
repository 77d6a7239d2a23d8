"""Builders for the quality gates API."""

from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_required
from sonarqube_client.resources.quality_gates.models import QualityGateProject, SearchGateProjectsResponse


class SearchGateProjectsBuilder(PaginatedBuilder[SearchGateProjectsResponse, QualityGateProject]):
    """Builder for /api/qualitygates/search: projects associated with a gate."""

    def for_gate(self, gate_name: str) -> Self:
        return self.set_param("gateName", gate_name)

    def query(self, q: str) -> Self:
        return self.set_param("query", q)

    def only_selected(self) -> Self:
        return self.set_param("selected", "selected")

    def only_deselected(self) -> Self:
        return self.set_param("selected", "deselected")

    def show_all(self) -> Self:
        return self.set_param("selected", "all")

    def validate(self) -> None:
        super().validate()
        validate_required(self._params, "gateName")

    def get_items(self, response: SearchGateProjectsResponse) -> list[QualityGateProject]:
        return response.results
