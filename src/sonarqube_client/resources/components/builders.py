"""Builders for the components API."""

from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_mutually_exclusive, validate_required
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.components.models import Component, ComponentTreeResponse, SearchComponentsResponse

MIN_TREE_QUERY_LENGTH = 3


class SearchComponentsBuilder(PaginatedBuilder[SearchComponentsResponse, Component]):
    """Builder for /api/components/search."""

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def with_qualifiers(self, qualifiers: list[str]) -> Self:
        return self.set_param("qualifiers", qualifiers)

    def with_languages(self, languages: list[str]) -> Self:
        return self.set_param("languages", languages)

    def in_organization(self, organization: str) -> Self:
        return self.set_param("organization", organization)

    def get_items(self, response: SearchComponentsResponse) -> list[Component]:
        return response.components


class ComponentTreeBuilder(PaginatedBuilder[ComponentTreeResponse, Component]):
    """Builder for /api/components/tree: descendants of a component."""

    def component(self, component_key: str) -> Self:
        return self.set_param("component", component_key)

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def query(self, q: str) -> Self:
        """Limit to names or keys containing ``q`` (at least 3 characters)."""
        return self.set_param("q", q)

    def with_qualifiers(self, qualifiers: list[str]) -> Self:
        return self.set_param("qualifiers", qualifiers)

    def files_only(self) -> Self:
        return self.with_qualifiers(["FIL"])

    def directories_only(self) -> Self:
        return self.with_qualifiers(["DIR"])

    def test_files_only(self) -> Self:
        return self.with_qualifiers(["UTS"])

    def strategy(self, strategy: str) -> Self:
        """Traversal strategy: all, children or leaves."""
        return self.set_param("strategy", strategy)

    def children_only(self) -> Self:
        return self.strategy("children")

    def leaves_only(self) -> Self:
        return self.strategy("leaves")

    def sort_by(self, fields: list[str], ascending: bool = True) -> Self:
        """Sort by name, path or qualifier."""
        self.set_param("s", fields)
        return self.set_param("asc", ascending)

    def validate(self) -> None:
        super().validate()
        validate_required(self._params, "component", "Component parameter is required for tree search")
        query = self._params.get("q")
        if query is not None and len(query) < MIN_TREE_QUERY_LENGTH:
            raise SonarQubeValidationError(
                f"Query parameter must be at least {MIN_TREE_QUERY_LENGTH} characters long",
                field="q",
            )
        validate_mutually_exclusive(self._params, "branch", "pullRequest")

    def get_items(self, response: ComponentTreeResponse) -> list[Component]:
        return response.components
