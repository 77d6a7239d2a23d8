"""Client for the security hotspots API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.hotspots.builders import SearchHotspotsBuilder
from sonarqube_client.resources.hotspots.models import HotspotDetails, HotspotStatus, SearchHotspotsResponse


class HotspotsClient(BaseClient):
    """Search and review security hotspots."""

    def search(self) -> SearchHotspotsBuilder:
        return SearchHotspotsBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchHotspotsResponse:
        data = await self._get("/api/hotspots/search", params=params)
        return SearchHotspotsResponse(**data)

    async def show(self, hotspot: str) -> HotspotDetails:
        """Get details of a hotspot.

        Args:
            hotspot: Hotspot key

        Returns:
            Hotspot details including rule and changelog
        """
        data = await self._get("/api/hotspots/show", params={"hotspot": hotspot})
        return HotspotDetails(**data)

    async def change_status(
        self,
        hotspot: str,
        status: str,
        resolution: str | None = None,
        comment: str | None = None,
    ) -> None:
        """Change the review status of a hotspot.

        Args:
            hotspot: Hotspot key
            status: TO_REVIEW or REVIEWED
            resolution: FIXED, SAFE or ACKNOWLEDGED, required when REVIEWED
            comment: Optional review comment

        Raises:
            SonarQubeValidationError: Resolution missing for REVIEWED or given for TO_REVIEW
        """
        if status == HotspotStatus.REVIEWED and not resolution:
            raise SonarQubeValidationError("Resolution is required when status is REVIEWED", field="resolution")
        if status == HotspotStatus.TO_REVIEW and resolution:
            raise SonarQubeValidationError("Resolution must not be set when status is TO_REVIEW", field="resolution")

        await self._post(
            "/api/hotspots/change_status",
            data={"hotspot": hotspot, "status": status, "resolution": resolution, "comment": comment},
        )
