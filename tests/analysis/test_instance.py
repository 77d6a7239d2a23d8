"""Tests for instance analysis."""

import httpx
import pytest
import respx

from sonarqube_client import SonarQubeClient
from sonarqube_client.analysis import (
    InstanceAnalysis,
    analyze_expected_failures,
    analyze_instance,
    format_summary,
    is_version_at_least,
)
from sonarqube_client.analysis.instance import V2_SYSTEM_APIS, ExpectedFailure, parse_version
from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.exceptions import SonarQubeError
from sonarqube_client.resources.system.models import SystemInfoV2

URL = "https://sonar.test.com"


class TestVersions:
    """Tests for version comparison."""

    def test_parse_version(self) -> None:
        assert parse_version("10.6.0.92116") == (10, 6, 0, 92116)
        assert parse_version("10.7-SNAPSHOT") == (10, 7)
        assert parse_version("x.1") == (0, 1)

    @pytest.mark.parametrize(
        ("version", "minimum", "expected"),
        [
            ("10.6", "10.6", True),
            ("10.6.0.92116", "10.6", True),
            ("10.5.1", "10.6", False),
            ("9.9", "10.6", False),
            ("2025.1", "10.6", True),
        ],
    )
    def test_is_version_at_least(self, version: str, minimum: str, expected: bool) -> None:
        assert is_version_at_least(version, minimum) is expected


class TestExpectedFailures:
    """Tests for expected failure analysis."""

    def test_enterprise_recent_version(self) -> None:
        failures = analyze_expected_failures(SystemInfoV2(version="10.7", edition="enterprise"))

        assert [f.category for f in failures] == ["Invalid Parameters"]

    def test_old_community_server(self) -> None:
        failures = analyze_expected_failures(SystemInfoV2(version="9.9.4", edition="community"))

        categories = {f.category: f for f in failures}
        assert categories["V2 APIs Not Available"].count == len(V2_SYSTEM_APIS)
        assert categories["Enterprise Features"].apis == [
            "/api/projects/license_usage",
            "/api/projects/get_contains_ai_code",
        ]
        assert sum(f.count for f in failures) == len(V2_SYSTEM_APIS) + 3

    def test_security_feature_enables_ai_code_detection(self) -> None:
        failures = analyze_expected_failures(SystemInfoV2(version="10.7", edition="developer", features=["security"]))

        enterprise = next(f for f in failures if f.category == "Enterprise Features")
        assert enterprise.apis == ["/api/projects/license_usage"]

    def test_missing_edition_counts_as_community(self) -> None:
        failures = analyze_expected_failures(SystemInfoV2(version="10.7"))

        assert "Enterprise Features" in [f.category for f in failures]


class TestInstanceAnalysis:
    """Tests for InstanceAnalysis and format_summary."""

    def test_success_rate(self) -> None:
        analysis = InstanceAnalysis(
            version="10.7",
            edition="community",
            expected_failures=[ExpectedFailure(category="A", reason="r", count=3)],
        )

        assert analysis.expected_failure_count == 3
        assert analysis.expected_passes(144) == 141
        assert analysis.success_rate(144) == 98
        assert analysis.success_rate(0) == 0

    def test_format_summary_truncates_long_api_lists(self) -> None:
        analysis = InstanceAnalysis(
            version="9.9",
            edition="community",
            expected_failures=[
                ExpectedFailure(category="Old", reason="too old", count=5, apis=[f"/api/v2/x{i}" for i in range(5)])
            ],
        )

        lines = format_summary(analysis, total_tests=10)

        assert "  Expected passing tests: 5/10 (50%)" in lines
        assert "    - /api/v2/x1" in lines
        assert "    - /api/v2/x2" not in lines
        assert "    - ... and 3 more" in lines
        assert any("Community Edition" in line for line in lines)


class TestAnalyzeInstance:
    """Tests for analyze_instance against a mocked server."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_v2_server(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="pong"))
        respx.get(f"{URL}/api/v2/system/info").mock(
            return_value=httpx.Response(200, json={"version": "10.7.0.96327", "edition": "enterprise"})
        )

        async with SonarQubeClient(config) as client:
            analysis = await analyze_instance(client)

        assert analysis.v2_available
        assert analysis.edition == "enterprise"
        assert analysis.expected_failure_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_falls_back_to_v1_status(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="pong"))
        respx.get(f"{URL}/api/v2/system/info").mock(return_value=httpx.Response(404))
        respx.get(f"{URL}/api/system/status").mock(
            return_value=httpx.Response(200, json={"version": "9.9.4.87374", "status": "UP"})
        )

        async with SonarQubeClient(config) as client:
            analysis = await analyze_instance(client)

        assert not analysis.v2_available
        assert analysis.version == "9.9.4.87374"
        assert analysis.edition == "community"
        assert "V2 APIs Not Available" in [f.category for f in analysis.expected_failures]

    @pytest.mark.asyncio
    @respx.mock
    async def test_unexpected_ping(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/system/ping").mock(return_value=httpx.Response(200, text="<html>proxy</html>"))

        async with SonarQubeClient(config) as client:
            with pytest.raises(SonarQubeError, match="Unexpected ping response"):
                await analyze_instance(client)
