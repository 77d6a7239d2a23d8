"""Detect which v2 REST endpoints a server exposes."""

import logging

from pydantic import BaseModel, Field

from sonarqube_client.client import SonarQubeClient
from sonarqube_client.exceptions import SonarQubeError

logger = logging.getLogger(__name__)


class V2Endpoint(BaseModel):
    path: str
    methods: list[str]
    since: str


KNOWN_V2_ENDPOINTS = [
    V2Endpoint(path="/api/v2/users/search", methods=["GET"], since="10.4"),
    V2Endpoint(path="/api/v2/projects", methods=["GET", "POST"], since="10.5"),
    V2Endpoint(path="/api/v2/projects/{id}", methods=["GET", "PATCH", "DELETE"], since="10.5"),
    V2Endpoint(path="/api/v2/issues", methods=["GET"], since="10.6"),
    V2Endpoint(path="/api/v2/issues/{id}", methods=["GET", "PATCH"], since="10.6"),
    V2Endpoint(path="/api/v2/rules", methods=["GET"], since="10.6"),
    V2Endpoint(path="/api/v2/quality-gates", methods=["GET", "POST"], since="10.7"),
    V2Endpoint(path="/api/v2/quality-profiles", methods=["GET"], since="10.7"),
    V2Endpoint(path="/api/v2/metrics", methods=["GET"], since="10.8"),
    V2Endpoint(path="/api/v2/settings", methods=["GET", "PATCH"], since="10.8"),
    V2Endpoint(path="/api/v2/system/health", methods=["GET"], since="10.6"),
    V2Endpoint(path="/api/v2/system/liveness", methods=["GET"], since="10.6"),
    V2Endpoint(path="/api/v2/system/migrations-status", methods=["GET"], since="10.6"),
]

# Placeholder substituted for path parameters when probing
PROBE_ID = "test-id"


class EndpointResult(BaseModel):
    endpoint: V2Endpoint
    available: bool
    status_code: int | None = None
    error: str | None = None


class V2ApiReport(BaseModel):
    """Availability of known v2 endpoints plus the server's OpenAPI summary."""

    results: list[EndpointResult] = Field(default_factory=list)
    openapi_version: str | None = None
    openapi_endpoint_count: int | None = None

    @property
    def available(self) -> list[EndpointResult]:
        return [result for result in self.results if result.available]

    @property
    def has_openapi(self) -> bool:
        return self.openapi_endpoint_count is not None


async def probe(client: SonarQubeClient, endpoint: V2Endpoint) -> EndpointResult:
    """Probe one endpoint. Anything but 404 counts as available."""
    path = endpoint.path.replace("{id}", PROBE_ID)
    try:
        status_code = await client.probe_endpoint(path)
    except SonarQubeError as e:
        logger.debug(f"Probe of {path} failed: {e.message}")
        return EndpointResult(endpoint=endpoint, available=False, error=e.message)
    return EndpointResult(endpoint=endpoint, available=status_code != 404, status_code=status_code)


async def check_v2_apis(client: SonarQubeClient, endpoints: list[V2Endpoint] | None = None) -> V2ApiReport:
    """Probe v2 endpoints one at a time and read the OpenAPI document.

    Args:
        client: Open client
        endpoints: Endpoints to probe (default: ``KNOWN_V2_ENDPOINTS``)

    Returns:
        Report of the probes
    """
    report = V2ApiReport()
    for endpoint in endpoints if endpoints is not None else KNOWN_V2_ENDPOINTS:
        report.results.append(await probe(client, endpoint))

    try:
        document = await client.system.get_openapi_v2()
    except SonarQubeError as e:
        logger.debug(f"OpenAPI document unavailable: {e.message}")
        return report

    report.openapi_version = document.get("info", {}).get("version") or "Unknown"
    report.openapi_endpoint_count = len(document.get("paths", {}))
    return report
