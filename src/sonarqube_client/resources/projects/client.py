"""Client for the projects API."""

import logging
from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders import DEFAULT_PAGE_SIZE
from sonarqube_client.core.builders.validation import validate_mutually_exclusive
from sonarqube_client.core.deprecation import deprecated
from sonarqube_client.resources.projects.builders import BulkDeleteProjectsBuilder, SearchProjectsBuilder
from sonarqube_client.resources.projects.models import (
    BulkUpdateKeyResponse,
    CreateProjectResponse,
    Finding,
    Project,
    SearchProjectsResponse,
)

logger = logging.getLogger(__name__)


class ProjectsClient(BaseClient):
    """Manage projects."""

    def search(self) -> SearchProjectsBuilder:
        return SearchProjectsBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchProjectsResponse:
        data = await self._get("/api/projects/search", params=self._with_organization(params))
        return SearchProjectsResponse(**data)

    async def search_all(self, query: str | None = None, page_size: int = DEFAULT_PAGE_SIZE) -> list[Project]:
        """Collect all projects into a list.

        Args:
            query: Optional key/name filter
            page_size: Number of projects per page

        Returns:
            List of projects
        """
        builder = self.search().page_size(page_size)
        if query:
            builder.query(query)
        return [project async for project in builder.all()]

    def bulk_delete(self) -> BulkDeleteProjectsBuilder:
        return BulkDeleteProjectsBuilder(self._bulk_delete)

    async def _bulk_delete(self, params: dict[str, Any]) -> None:
        logger.debug(f"Bulk deleting projects matching {params}")
        await self._post("/api/projects/bulk_delete", data=self._with_organization(params))

    async def create(
        self,
        project: str,
        name: str,
        visibility: str | None = None,
        main_branch: str | None = None,
        new_code_definition_type: str | None = None,
        new_code_definition_value: str | None = None,
    ) -> CreateProjectResponse:
        """Create a project.

        Args:
            project: Project key
            name: Display name
            visibility: public or private
            main_branch: Name of the main branch
            new_code_definition_type: New code definition (e.g. NUMBER_OF_DAYS)
            new_code_definition_value: Value for the new code definition

        Returns:
            Created project
        """
        data = await self._post(
            "/api/projects/create",
            data=self._with_organization(
                {
                    "project": project,
                    "name": name,
                    "visibility": visibility,
                    "mainBranch": main_branch,
                    "newCodeDefinitionType": new_code_definition_type,
                    "newCodeDefinitionValue": new_code_definition_value,
                }
            ),
        )
        return CreateProjectResponse(**data)

    async def delete(self, project: str) -> None:
        await self._post("/api/projects/delete", data={"project": project})

    async def update_key(self, from_key: str, to_key: str) -> None:
        await self._post("/api/projects/update_key", data={"from": from_key, "to": to_key})

    async def update_visibility(self, project: str, visibility: str) -> None:
        await self._post("/api/projects/update_visibility", data={"project": project, "visibility": visibility})

    async def export_findings(
        self,
        project: str,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> list[Finding]:
        """Export all issues and hotspots of a project.

        Raises:
            SonarQubeValidationError: Both branch and pull request given
        """
        params = {"project": project, "branch": branch, "pullRequest": pull_request}
        validate_mutually_exclusive(params, "branch", "pullRequest")
        data = await self._get("/api/projects/export_findings", params=params)
        findings = data if isinstance(data, list) else data.get("export_findings", [])
        return [Finding.model_validate(item) for item in findings]

    @deprecated(
        "Bulk key updates were removed from the server",
        replacement="update_key()",
        deprecated_since="7.6",
        removal_date="2025-12-31",
        tags=["projects"],
    )
    async def bulk_update_key(
        self,
        project: str,
        from_prefix: str,
        to_prefix: str,
        dry_run: bool = False,
    ) -> BulkUpdateKeyResponse:
        """Rename the key of a project and its modules by prefix replacement."""
        data = await self._post(
            "/api/projects/bulk_update_key",
            data={"project": project, "from": from_prefix, "to": to_prefix, "dryRun": dry_run},
        )
        return BulkUpdateKeyResponse(**data)
