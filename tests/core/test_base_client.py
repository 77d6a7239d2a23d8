"""Tests for BaseClient request handling."""

import httpx
import pytest
import respx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.exceptions import (
    SonarQubeAuthError,
    SonarQubeNetworkError,
    SonarQubeNotFoundError,
    SonarQubeServerError,
    SonarQubeTimeoutError,
)

URL = "https://sonar.test.com"


class TestBaseClient:
    """Tests for BaseClient."""

    def test_init(self, config: SonarQubeClientConfig) -> None:
        """Test client initialization."""
        client = BaseClient(config)

        assert client.config == config
        assert client.base_url == URL
        assert client._client is None

    @pytest.mark.asyncio
    async def test_context_manager_owns_client(self, config: SonarQubeClientConfig) -> None:
        client = BaseClient(config)

        async with client:
            assert isinstance(client._client, httpx.AsyncClient)
            http_client = client._client

        assert http_client.is_closed
        assert client._client is None

    @pytest.mark.asyncio
    async def test_shared_client_is_left_open(self, config: SonarQubeClientConfig) -> None:
        async with httpx.AsyncClient(base_url=URL) as http_client:
            async with BaseClient(config, http_client) as client:
                assert client._client is http_client
            assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_request_outside_context_manager(self, config: SonarQubeClientConfig) -> None:
        with pytest.raises(RuntimeError, match="Client not initialized"):
            await BaseClient(config)._get("/api/system/ping")

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_encodes_params_and_sends_token(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/issues/search").mock(return_value=httpx.Response(200, json={"issues": []}))

        async with BaseClient(config) as client:
            params = {"projects": ["a", "b"], "resolved": False, "q": None}
            data = await client._get("/api/issues/search", params=params)

        assert data == {"issues": []}
        request = route.calls.last.request
        assert request.url.params["projects"] == "a,b"
        assert request.url.params["resolved"] == "false"
        assert "q" not in request.url.params
        assert request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_sends_form_data(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(f"{URL}/api/issues/set_tags").mock(return_value=httpx.Response(204))

        async with BaseClient(config) as client:
            data = await client._post("/api/issues/set_tags", data={"issue": "X", "tags": ["a", "b"], "skip": None})

        assert data == {}
        assert route.calls.last.request.content == b"issue=X&tags=a%2Cb"

    @pytest.mark.asyncio
    @respx.mock
    async def test_text_response(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="pong"))

        async with BaseClient(config) as client:
            assert await client._get("/api/system/ping", response_type="text") == "pong"

    @pytest.mark.asyncio
    @respx.mock
    async def test_authentication_failure(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/projects/search").mock(return_value=httpx.Response(401))

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeAuthError):
                await client._get("/api/projects/search")

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/components/show").mock(
            return_value=httpx.Response(404, json={"errors": [{"msg": "Component 'x' not found"}]})
        )

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeNotFoundError, match="Component 'x' not found"):
                await client._get("/api/components/show", params={"component": "x"})

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/status").mock(return_value=httpx.Response(500, text="Internal Server Error"))

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeServerError) as exc_info:
                await client._get("/api/system/status")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/status").mock(side_effect=httpx.ConnectError("refused"))

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeNetworkError, match="refused"):
                await client._get("/api/system/status")

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/status").mock(side_effect=httpx.ReadTimeout("slow"))

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeTimeoutError):
                await client._get("/api/system/status")

    @pytest.mark.asyncio
    @respx.mock
    async def test_stream(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/sca/sbom-reports").mock(return_value=httpx.Response(200, content=b"<bom/>"))

        async with BaseClient(config) as client:
            chunks = [chunk async for chunk in client._stream("GET", "/api/v2/sca/sbom-reports")]

        assert b"".join(chunks) == b"<bom/>"

    @pytest.mark.asyncio
    @respx.mock
    async def test_stream_error(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/sca/sbom-reports").mock(return_value=httpx.Response(404))

        async with BaseClient(config) as client:
            with pytest.raises(SonarQubeNotFoundError):
                _ = [chunk async for chunk in client._stream("GET", "/api/v2/sca/sbom-reports")]

    def test_with_organization(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        cloud = SonarQubeClientConfig(sonarqube_url="https://sonarcloud.io", sonarqube_organization="acme")
        client = BaseClient(cloud)

        assert client._with_organization({"q": "x"}) == {"q": "x", "organization": "acme"}
        assert client._with_organization({"organization": "other"}) == {"organization": "other"}
