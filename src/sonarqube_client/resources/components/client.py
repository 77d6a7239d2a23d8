"""Client for the components API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_mutually_exclusive
from sonarqube_client.resources.components.builders import ComponentTreeBuilder, SearchComponentsBuilder
from sonarqube_client.resources.components.models import (
    ComponentShowResponse,
    ComponentTreeResponse,
    SearchComponentsResponse,
)


class ComponentsClient(BaseClient):
    """Navigate projects, directories and files."""

    async def show(
        self,
        component: str,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> ComponentShowResponse:
        """Get a component and its ancestors.

        Raises:
            SonarQubeValidationError: Both branch and pull request given
        """
        params = {"component": component, "branch": branch, "pullRequest": pull_request}
        validate_mutually_exclusive(params, "branch", "pullRequest")
        data = await self._get("/api/components/show", params=params)
        return ComponentShowResponse(**data)

    def search(self) -> SearchComponentsBuilder:
        return SearchComponentsBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchComponentsResponse:
        data = await self._get("/api/components/search", params=self._with_organization(params))
        return SearchComponentsResponse(**data)

    def tree(self, component: str | None = None) -> ComponentTreeBuilder:
        """Start a tree search, optionally rooted at a component."""
        builder = ComponentTreeBuilder(self._tree)
        if component:
            builder.component(component)
        return builder

    async def _tree(self, params: dict[str, Any]) -> ComponentTreeResponse:
        data = await self._get("/api/components/tree", params=params)
        return ComponentTreeResponse(**data)
