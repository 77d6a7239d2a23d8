"""Builders for the security hotspots API."""

from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_one_of_required, validate_requires
from sonarqube_client.resources.hotspots.models import (
    Hotspot,
    HotspotResolution,
    HotspotStatus,
    SearchHotspotsResponse,
)


class SearchHotspotsBuilder(PaginatedBuilder[SearchHotspotsResponse, Hotspot]):
    """Builder for /api/hotspots/search.

    Either a project or explicit hotspot keys must be given.
    """

    def for_project(self, project_key: str) -> Self:
        return self.set_param("projectKey", project_key)

    def with_hotspots(self, hotspot_keys: list[str]) -> Self:
        return self.set_param("hotspots", hotspot_keys)

    def with_status(self, status: str) -> Self:
        return self.set_param("status", status)

    def with_resolution(self, resolution: str) -> Self:
        """Filter reviewed hotspots by resolution (only with status REVIEWED)."""
        return self.set_param("resolution", resolution)

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def only_mine(self, enabled: bool = True) -> Self:
        return self.set_param("onlyMine", enabled)

    def in_new_code_period(self, enabled: bool = True) -> Self:
        return self.set_param("inNewCodePeriod", enabled)

    def in_files(self, file_paths: list[str]) -> Self:
        return self.set_param("files", file_paths)

    def needing_review(self) -> Self:
        return self.with_status(HotspotStatus.TO_REVIEW)

    def reviewed(self) -> Self:
        return self.with_status(HotspotStatus.REVIEWED)

    def fixed(self) -> Self:
        return self.reviewed().with_resolution(HotspotResolution.FIXED)

    def safe(self) -> Self:
        return self.reviewed().with_resolution(HotspotResolution.SAFE)

    def validate(self) -> None:
        super().validate()
        validate_one_of_required(self._params, "projectKey", "hotspots")
        validate_requires(self._params, "files", "projectKey")

    def get_items(self, response: SearchHotspotsResponse) -> list[Hotspot]:
        return response.hotspots
