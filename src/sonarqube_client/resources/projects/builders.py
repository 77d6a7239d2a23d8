"""Builders for the projects API."""

from typing import Self

from sonarqube_client.core.builders import BaseBuilder, PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_one_of_required
from sonarqube_client.resources.projects.models import Project, SearchProjectsResponse


class SearchProjectsBuilder(PaginatedBuilder[SearchProjectsResponse, Project]):
    """Builder for /api/projects/search (requires Administer System)."""

    def query(self, q: str) -> Self:
        """Filter on key or name (partial match)."""
        return self.set_param("q", q)

    def with_projects(self, project_keys: list[str]) -> Self:
        return self.set_param("projects", project_keys)

    def with_qualifiers(self, qualifiers: list[str]) -> Self:
        """Filter by qualifier: TRK (project), VW (portfolio), APP (application)."""
        return self.set_param("qualifiers", qualifiers)

    def analyzed_before(self, date: str) -> Self:
        return self.set_param("analyzedBefore", date)

    def only_provisioned(self, enabled: bool = True) -> Self:
        return self.set_param("onProvisionedOnly", enabled)

    def in_organization(self, organization: str) -> Self:
        return self.set_param("organization", organization)

    def get_items(self, response: SearchProjectsResponse) -> list[Project]:
        return response.components


class BulkDeleteProjectsBuilder(BaseBuilder[None]):
    """Builder for /api/projects/bulk_delete.

    At least one of ``analyzed_before``, ``with_projects`` or ``query`` must
    be set so that a bare call cannot delete every project.
    """

    def analyzed_before(self, date: str) -> Self:
        return self.set_param("analyzedBefore", date)

    def with_projects(self, project_keys: list[str]) -> Self:
        return self.set_param("projects", project_keys)

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def with_qualifiers(self, qualifiers: list[str]) -> Self:
        return self.set_param("qualifiers", qualifiers)

    def only_provisioned(self, enabled: bool = True) -> Self:
        return self.set_param("onProvisionedOnly", enabled)

    def validate(self) -> None:
        validate_one_of_required(self._params, "analyzedBefore", "projects", "q")
