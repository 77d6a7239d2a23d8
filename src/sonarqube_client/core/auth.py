"""Authentication schemes supported by SonarQube."""

from collections.abc import Generator

import httpx

from sonarqube_client.config import SonarQubeClientConfig, TokenScheme

PASSCODE_HEADER = "X-Sonar-Passcode"


class BearerTokenAuth(httpx.Auth):
    """Send a user token as ``Authorization: Bearer <token>``."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("Token is required for bearer authentication")
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class PasscodeAuth(httpx.Auth):
    """Send the system passcode used by monitoring endpoints."""

    def __init__(self, passcode: str) -> None:
        if not passcode:
            raise ValueError("Passcode is required for passcode authentication")
        self.passcode = passcode

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[PASSCODE_HEADER] = self.passcode
        yield request


def build_auth(config: SonarQubeClientConfig) -> httpx.Auth | None:
    """Get authentication for requests.

    A token takes precedence over username/password, which takes precedence
    over a passcode.

    Args:
        config: Client configuration

    Returns:
        HTTP authentication object, or None for anonymous access
    """
    if config.sonarqube_token:
        if config.token_scheme is TokenScheme.BASIC:
            # Token as username with empty password
            return httpx.BasicAuth(config.sonarqube_token, "")
        return BearerTokenAuth(config.sonarqube_token)

    if config.sonarqube_username is not None:
        return httpx.BasicAuth(config.sonarqube_username, config.sonarqube_password or "")

    if config.sonarqube_passcode:
        return PasscodeAuth(config.sonarqube_passcode)

    return None
