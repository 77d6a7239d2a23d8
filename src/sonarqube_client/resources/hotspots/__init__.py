"""Security hotspots API."""

from sonarqube_client.resources.hotspots.builders import SearchHotspotsBuilder
from sonarqube_client.resources.hotspots.client import HotspotsClient
from sonarqube_client.resources.hotspots.models import (
    Hotspot,
    HotspotDetails,
    HotspotResolution,
    HotspotStatus,
    SearchHotspotsResponse,
)

__all__ = [
    "Hotspot",
    "HotspotDetails",
    "HotspotResolution",
    "HotspotStatus",
    "HotspotsClient",
    "SearchHotspotsBuilder",
    "SearchHotspotsResponse",
]
