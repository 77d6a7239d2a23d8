"""Tests for the system resource."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.deprecation import DeprecationRegistry, SonarQubeDeprecationWarning
from sonarqube_client.exceptions import SonarQubeNotFoundError
from sonarqube_client.resources.system import SystemClient

URL = "https://sonar.test.com"


@pytest.fixture
def api_responses() -> dict:
    """Load API response fixtures."""
    fixtures_path = Path(__file__).parent / "fixtures" / "api_responses.json"
    with fixtures_path.open() as f:
        return json.load(f)


class TestSystemClient:
    """Tests for SystemClient."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_ping(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="pong\n"))

        async with SystemClient(config) as client:
            assert await client.ping() == "pong"

    @pytest.mark.asyncio
    @respx.mock
    async def test_status(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/status").mock(
            return_value=httpx.Response(200, json={"id": "abc", "version": "9.9.4.87374", "status": "UP"})
        )

        async with SystemClient(config) as client:
            status = await client.status()

        assert status.version == "9.9.4.87374"
        assert status.status == "UP"

    @pytest.mark.asyncio
    @respx.mock
    async def test_health_is_deprecated(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/health").mock(
            return_value=httpx.Response(200, json={"health": "GREEN", "causes": []})
        )

        async with SystemClient(config) as client:
            with pytest.warns(SonarQubeDeprecationWarning, match="get_health_v2"):
                health = await client.health()

        assert health.health == "GREEN"
        metadata = DeprecationRegistry.get("SystemClient.health()")
        assert metadata is not None
        assert "v2-migration" in metadata.tags

    @pytest.mark.asyncio
    @respx.mock
    async def test_info_v2(self, config: SonarQubeClientConfig, api_responses: dict) -> None:
        respx.get(f"{URL}/api/v2/system/info").mock(
            return_value=httpx.Response(200, json=api_responses["system_info_v2"])
        )

        async with SystemClient(config) as client:
            info = await client.get_info_v2()

        assert info.edition == "developer"
        assert info.database.name == "PostgreSQL"
        assert info.production_mode is True

    @pytest.mark.asyncio
    @respx.mock
    async def test_info_v2_missing_on_old_servers(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/system/info").mock(return_value=httpx.Response(404, text="Not Found"))

        async with SystemClient(config) as client:
            with pytest.raises(SonarQubeNotFoundError):
                await client.get_info_v2()

    @pytest.mark.asyncio
    @respx.mock
    async def test_liveness_with_empty_body(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/system/liveness").mock(return_value=httpx.Response(204))

        async with SystemClient(config) as client:
            liveness = await client.get_liveness_v2()

        assert liveness.status == "UP"

    @pytest.mark.asyncio
    @respx.mock
    async def test_migrations_status(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/system/migrations-status").mock(
            return_value=httpx.Response(
                200, json={"status": "MIGRATION_RUNNING", "completedSteps": 3, "totalSteps": 10}
            )
        )

        async with SystemClient(config) as client:
            status = await client.get_migrations_status_v2()

        assert (status.completed_steps, status.total_steps) == (3, 10)

    @pytest.mark.asyncio
    @respx.mock
    async def test_openapi(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/openapi.json").mock(
            return_value=httpx.Response(200, json={"info": {"version": "10.7"}, "paths": {"/a": {}, "/b": {}}})
        )

        async with SystemClient(config) as client:
            document = await client.get_openapi_v2()

        assert len(document["paths"]) == 2
