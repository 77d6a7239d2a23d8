"""Tests for v2 endpoint detection."""

import httpx
import pytest
import respx

from sonarqube_client import SonarQubeClient
from sonarqube_client.analysis import KNOWN_V2_ENDPOINTS, V2Endpoint, check_v2_apis
from sonarqube_client.config import SonarQubeClientConfig

URL = "https://sonar.test.com"

ENDPOINTS = [
    V2Endpoint(path="/api/v2/system/health", methods=["GET"], since="10.6"),
    V2Endpoint(path="/api/v2/projects/{id}", methods=["GET"], since="10.5"),
    V2Endpoint(path="/api/v2/metrics", methods=["GET"], since="10.8"),
]


class TestCheckV2Apis:
    """Tests for check_v2_apis."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_probe_results(self, config: SonarQubeClientConfig) -> None:
        respx.head(f"{URL}/api/v2/system/health").mock(return_value=httpx.Response(401))
        project = respx.head(f"{URL}/api/v2/projects/test-id").mock(return_value=httpx.Response(404))
        respx.head(f"{URL}/api/v2/metrics").mock(side_effect=httpx.ConnectError("Connection reset"))
        respx.get(f"{URL}/api/v2/openapi.json").mock(
            return_value=httpx.Response(
                200, json={"info": {"version": "10.7"}, "paths": {"/a": {}, "/b": {}, "/c": {}}}
            )
        )

        async with SonarQubeClient(config) as client:
            report = await check_v2_apis(client, ENDPOINTS)

        health, projects, metrics = report.results
        assert health.available and health.status_code == 401
        assert not projects.available and projects.status_code == 404
        assert not metrics.available and metrics.error
        assert project.called
        assert [r.endpoint.path for r in report.available] == ["/api/v2/system/health"]
        assert report.has_openapi
        assert report.openapi_version == "10.7"
        assert report.openapi_endpoint_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_without_openapi(self, config: SonarQubeClientConfig) -> None:
        respx.head(url__startswith=f"{URL}/api/v2/").mock(return_value=httpx.Response(404))
        respx.get(f"{URL}/api/v2/openapi.json").mock(return_value=httpx.Response(404))

        async with SonarQubeClient(config) as client:
            report = await check_v2_apis(client)

        assert len(report.results) == len(KNOWN_V2_ENDPOINTS)
        assert report.available == []
        assert not report.has_openapi
        assert report.openapi_version is None
