"""Client for the quality gates API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_exactly_one, validate_mutually_exclusive
from sonarqube_client.resources.quality_gates.builders import SearchGateProjectsBuilder
from sonarqube_client.resources.quality_gates.models import (
    ListQualityGatesResponse,
    ProjectStatus,
    ProjectStatusResponse,
    QualityGate,
    QualityGateCondition,
    SearchGateProjectsResponse,
)


class QualityGatesClient(BaseClient):
    """Manage quality gates.

    Gates are addressed by name, which all supported server versions accept.
    """

    async def list(self) -> ListQualityGatesResponse:
        data = await self._get("/api/qualitygates/list", params=self._with_organization({}))
        return ListQualityGatesResponse(**data)

    async def show(self, name: str) -> QualityGate:
        data = await self._get("/api/qualitygates/show", params=self._with_organization({"name": name}))
        return QualityGate(**data)

    async def create(self, name: str) -> QualityGate:
        data = await self._post("/api/qualitygates/create", data=self._with_organization({"name": name}))
        return QualityGate(**data)

    async def copy(self, source_name: str, name: str) -> QualityGate:
        data = await self._post(
            "/api/qualitygates/copy",
            data=self._with_organization({"sourceName": source_name, "name": name}),
        )
        return QualityGate(**data)

    async def rename(self, current_name: str, name: str) -> None:
        await self._post(
            "/api/qualitygates/rename",
            data=self._with_organization({"currentName": current_name, "name": name}),
        )

    async def destroy(self, name: str) -> None:
        await self._post("/api/qualitygates/destroy", data=self._with_organization({"name": name}))

    async def set_as_default(self, name: str) -> None:
        await self._post("/api/qualitygates/set_as_default", data=self._with_organization({"name": name}))

    async def create_condition(self, gate_name: str, metric: str, op: str, error: str) -> QualityGateCondition:
        """Add a condition to a gate.

        Args:
            gate_name: Quality gate name
            metric: Metric key, e.g. ``new_coverage``
            op: Operator, LT or GT
            error: Error threshold

        Returns:
            Created condition
        """
        data = await self._post(
            "/api/qualitygates/create_condition",
            data=self._with_organization({"gateName": gate_name, "metric": metric, "op": op, "error": error}),
        )
        return QualityGateCondition(**data)

    async def update_condition(self, condition_id: str, metric: str, op: str, error: str) -> None:
        await self._post(
            "/api/qualitygates/update_condition",
            data=self._with_organization({"id": condition_id, "metric": metric, "op": op, "error": error}),
        )

    async def delete_condition(self, condition_id: str) -> None:
        await self._post("/api/qualitygates/delete_condition", data=self._with_organization({"id": condition_id}))

    async def select(self, gate_name: str, project_key: str) -> None:
        """Associate a project with a gate."""
        await self._post(
            "/api/qualitygates/select",
            data=self._with_organization({"gateName": gate_name, "projectKey": project_key}),
        )

    async def deselect(self, project_key: str) -> None:
        """Move a project back to the default gate."""
        await self._post("/api/qualitygates/deselect", data=self._with_organization({"projectKey": project_key}))

    async def project_status(
        self,
        *,
        analysis_id: str | None = None,
        project_id: str | None = None,
        project_key: str | None = None,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> ProjectStatus:
        """Get the quality gate status of a project or analysis.

        Exactly one of ``analysis_id``, ``project_id`` and ``project_key`` is required.

        Raises:
            SonarQubeValidationError: Identifier missing or ambiguous, or branch with pull request
        """
        params = {
            "analysisId": analysis_id,
            "projectId": project_id,
            "projectKey": project_key,
            "branch": branch,
            "pullRequest": pull_request,
        }
        validate_exactly_one(params, "analysisId", "projectId", "projectKey")
        validate_mutually_exclusive(params, "branch", "pullRequest")

        data = await self._get("/api/qualitygates/project_status", params=params)
        return ProjectStatusResponse(**data).project_status

    def search_projects(self) -> SearchGateProjectsBuilder:
        return SearchGateProjectsBuilder(self._search_projects)

    async def _search_projects(self, params: dict[str, Any]) -> SearchGateProjectsResponse:
        data = await self._get("/api/qualitygates/search", params=self._with_organization(params))
        return SearchGateProjectsResponse(**data)
