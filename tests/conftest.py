"""Shared test fixtures."""

from collections.abc import Iterator

import pytest

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.deprecation import DeprecationManager, DeprecationRegistry

BASE_URL = "https://sonar.test.com"


@pytest.fixture(autouse=True)
def reset_deprecations() -> Iterator[None]:
    """Deprecation state is process-wide; isolate it per test."""
    DeprecationManager.reset()
    DeprecationRegistry.clear()
    yield
    DeprecationManager.reset()
    DeprecationRegistry.clear()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer settings out of the tests."""
    for name in (
        "SONARQUBE_URL",
        "SONARQUBE_TOKEN",
        "TOKEN_SCHEME",
        "SONARQUBE_USERNAME",
        "SONARQUBE_PASSWORD",
        "SONARQUBE_PASSCODE",
        "SONARQUBE_ORGANIZATION",
        "REQUEST_TIMEOUT",
        "SUPPRESS_DEPRECATION_WARNINGS",
        "STRICT_DEPRECATIONS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> SonarQubeClientConfig:
    """Create test configuration."""
    monkeypatch.chdir(tmp_path)
    return SonarQubeClientConfig(sonarqube_url=BASE_URL, sonarqube_token="test-token")
