"""Builders for the compute engine API."""

from typing import Self

from sonarqube_client.core.builders import DEFAULT_PAGE_SIZE, PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_mutually_exclusive
from sonarqube_client.resources.ce.models import ActivityResponse, Task


class ActivityBuilder(PaginatedBuilder[ActivityResponse, Task]):
    """Builder for /api/ce/activity.

    The activity endpoint does not report a total, so another page is
    requested only when the current one came back full.
    """

    def with_component(self, component: str) -> Self:
        return self.set_param("component", component)

    def with_component_id(self, component_id: str) -> Self:
        """Filter by component id. Prefer ``with_component()``."""
        return self.set_param("componentId", component_id)

    def with_query(self, q: str) -> Self:
        """Match component names, exact component keys or exact task ids."""
        return self.set_param("q", q)

    def with_statuses(self, *statuses: str) -> Self:
        return self.set_param("status", list(statuses))

    def with_type(self, task_type: str) -> Self:
        return self.set_param("type", task_type)

    def only_currents(self, enabled: bool = True) -> Self:
        return self.set_param("onlyCurrents", enabled)

    def with_min_submitted_at(self, date: str) -> Self:
        return self.set_param("minSubmittedAt", date)

    def with_max_executed_at(self, date: str) -> Self:
        return self.set_param("maxExecutedAt", date)

    def with_date_range(self, min_submitted_at: str, max_executed_at: str) -> Self:
        return self.with_min_submitted_at(min_submitted_at).with_max_executed_at(max_executed_at)

    def validate(self) -> None:
        super().validate()
        validate_mutually_exclusive(self._params, "component", "componentId")
        validate_mutually_exclusive(self._params, "q", "componentId")

    def has_more_pages(self, response: ActivityResponse, current_page: int) -> bool:
        page_size = self._params.get("ps") or DEFAULT_PAGE_SIZE
        return len(response.tasks) >= page_size

    def get_items(self, response: ActivityResponse) -> list[Task]:
        return response.tasks
