"""Tests for the SonarQubeClient facade."""

import httpx
import pytest
import respx

from sonarqube_client import SonarQubeClient
from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.deprecation import DeprecationManager, SonarQubeDeprecationWarning
from sonarqube_client.exceptions import DeprecatedApiError, SonarQubeNetworkError

URL = "https://sonar.test.com"
EMPTY_ISSUES = {"paging": {"pageIndex": 1, "pageSize": 100, "total": 0}, "issues": []}


class TestConnectionSharing:
    """Tests for the shared HTTP connection."""

    @pytest.mark.asyncio
    async def test_resources_share_one_client(self, config: SonarQubeClientConfig) -> None:
        client = SonarQubeClient(config)

        async with client:
            shared = client._client
            assert shared is not None
            assert all(resource._client is shared for resource in client.resources)

        assert shared.is_closed
        assert all(resource._client is None for resource in client.resources)

    def test_exposes_every_resource(self, config: SonarQubeClientConfig) -> None:
        client = SonarQubeClient(config)

        assert len(client.resources) == 14
        assert client.fix_suggestions in client.resources
        assert client.sca in client.resources

    @pytest.mark.asyncio
    async def test_external_client_left_open(self, config: SonarQubeClientConfig) -> None:
        http_client = httpx.AsyncClient(base_url=URL)

        async with SonarQubeClient(config, http_client=http_client) as client:
            assert client.issues._client is http_client

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_request_outside_context(self, config: SonarQubeClientConfig) -> None:
        client = SonarQubeClient(config)

        with pytest.raises(RuntimeError, match="Client not initialized"):
            await client.system.ping()

    @pytest.mark.asyncio
    @respx.mock
    async def test_requests_go_through_shared_client(self, config: SonarQubeClientConfig) -> None:
        ping = respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="pong"))
        issues = respx.get(f"{URL}/api/issues/search").mock(return_value=httpx.Response(200, json=EMPTY_ISSUES))

        async with SonarQubeClient(config) as client:
            assert await client.system.ping() == "pong"
            await client.issues.search().execute()

        assert ping.calls.last.request.headers["Authorization"] == "Bearer test-token"
        assert issues.called


class TestProbeEndpoint:
    """Tests for endpoint probing."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_head(self, config: SonarQubeClientConfig) -> None:
        head = respx.head(f"{URL}/api/v2/system/health").mock(return_value=httpx.Response(401))

        async with SonarQubeClient(config) as client:
            assert await client.probe_endpoint("/api/v2/system/health") == 401

        assert head.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_falls_back_to_get(self, config: SonarQubeClientConfig) -> None:
        respx.head(f"{URL}/api/v2/rules").mock(return_value=httpx.Response(405))
        get = respx.get(f"{URL}/api/v2/rules").mock(return_value=httpx.Response(200, json={}))

        async with SonarQubeClient(config) as client:
            assert await client.probe_endpoint("/api/v2/rules") == 200

        assert get.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure(self, config: SonarQubeClientConfig) -> None:
        respx.head(f"{URL}/api/v2/rules").mock(side_effect=httpx.ConnectError("Connection refused"))

        async with SonarQubeClient(config) as client:
            with pytest.raises(SonarQubeNetworkError):
                await client.probe_endpoint("/api/v2/rules")

    @pytest.mark.asyncio
    async def test_outside_context(self, config: SonarQubeClientConfig) -> None:
        with pytest.raises(RuntimeError):
            await SonarQubeClient(config).probe_endpoint("/api/v2/rules")


class TestLegacyMethods:
    """Tests for the deprecated convenience methods."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_issues_warns(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/issues/search").mock(return_value=httpx.Response(200, json=EMPTY_ISSUES))

        async with SonarQubeClient(config) as client:
            with pytest.warns(SonarQubeDeprecationWarning, match="SonarQubeClient.get_issues"):
                response = await client.get_issues("svc")

        assert response.total == 0
        assert route.calls.last.request.url.params["projects"] == "svc"
        assert DeprecationManager.has_warned("SonarQubeClient.get_issues()")

    @pytest.mark.asyncio
    async def test_strict_mode_from_config(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        strict = SonarQubeClientConfig(sonarqube_url=URL, strict_deprecations=True)

        async with SonarQubeClient(strict) as client:
            with pytest.raises(DeprecatedApiError) as exc_info:
                await client.get_projects()

        assert exc_info.value.api == "SonarQubeClient.get_projects()"

    @pytest.mark.asyncio
    async def test_default_config_keeps_global_strict_mode(self, config: SonarQubeClientConfig) -> None:
        DeprecationManager.configure(strict_mode=True, suppress_deprecation_warnings=True)

        async with SonarQubeClient(config) as client:
            with pytest.raises(DeprecatedApiError) as exc_info:
                client.issues.search().with_severities(["MAJOR"])

        assert exc_info.value.api == "SearchIssuesBuilder.with_severities()"
        assert DeprecationManager.options().suppress_deprecation_warnings

    def test_explicit_config_overrides_global_setting(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        DeprecationManager.configure(strict_mode=True)

        SonarQubeClient(SonarQubeClientConfig(sonarqube_url=URL, strict_deprecations=False))

        assert DeprecationManager.options().strict_mode is False

    def test_strict_mode_from_environment(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("STRICT_DEPRECATIONS", "true")

        SonarQubeClient(SonarQubeClientConfig(sonarqube_url=URL))

        assert DeprecationManager.options().strict_mode is True

    def test_suppression_from_config(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        SonarQubeClient(SonarQubeClientConfig(sonarqube_url=URL, suppress_deprecation_warnings=True))

        assert DeprecationManager.options().suppress_deprecation_warnings
