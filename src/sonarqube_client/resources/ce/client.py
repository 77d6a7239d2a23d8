"""Client for the compute engine API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.resources.ce.builders import ActivityBuilder
from sonarqube_client.resources.ce.models import ActivityResponse, ActivityStatus, ComponentTasks, Task, TaskResponse


class CEClient(BaseClient):
    """Inspect background analysis tasks."""

    async def activity(self, **filters: Any) -> ActivityResponse:
        """Search tasks with raw wire-name filters.

        Args:
            **filters: Query parameters, e.g. ``component="my-project"``, ``ps=50``

        Returns:
            One page of tasks

        Raises:
            SonarQubeValidationError: Conflicting filters
        """
        return await self.activity_builder().set_params(**filters).execute()

    def activity_builder(self) -> ActivityBuilder:
        return ActivityBuilder(self._activity)

    async def _activity(self, params: dict[str, Any]) -> ActivityResponse:
        data = await self._get("/api/ce/activity", params=params)
        return ActivityResponse(**data)

    async def activity_status(self, component: str | None = None) -> ActivityStatus:
        data = await self._get("/api/ce/activity_status", params={"component": component})
        return ActivityStatus(**data)

    async def component(self, component: str) -> ComponentTasks:
        """Get pending tasks and the current task of a component."""
        data = await self._get("/api/ce/component", params={"component": component})
        return ComponentTasks(**data)

    async def task(self, task_id: str, additional_fields: list[str] | None = None) -> Task:
        data = await self._get("/api/ce/task", params={"id": task_id, "additionalFields": additional_fields})
        return TaskResponse(**data).task
