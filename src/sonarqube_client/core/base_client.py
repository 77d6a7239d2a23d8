"""Base class for SonarQube resource clients."""

import logging
from collections.abc import AsyncIterator
from typing import Any, Literal, Self

import httpx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.auth import build_auth
from sonarqube_client.core.errors import create_error_from_response, create_network_error
from sonarqube_client.core.query import to_query_params

logger = logging.getLogger(__name__)

ResponseType = Literal["json", "text", "bytes"]


def create_http_client(config: SonarQubeClientConfig) -> httpx.AsyncClient:
    """Create the HTTP client shared by resource clients.

    Args:
        config: Client configuration

    Returns:
        Configured async HTTP client
    """
    return httpx.AsyncClient(
        base_url=config.base_url,
        auth=build_auth(config),
        timeout=config.request_timeout,
        headers={"Accept": "application/json"},
    )


class BaseClient:
    """Common request handling for all resource clients.

    A resource client either shares an ``httpx.AsyncClient`` owned by
    :class:`~sonarqube_client.SonarQubeClient`, or is used on its own as an
    async context manager that opens and closes its own HTTP client.
    """

    def __init__(self, config: SonarQubeClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the client.

        Args:
            config: Client configuration
            http_client: Shared HTTP client, if already open
        """
        self.config = config
        self.base_url = config.base_url
        self._client = http_client
        self._owns_client = False

    def bind(self, http_client: httpx.AsyncClient | None) -> None:
        """Attach (or detach) a shared HTTP client."""
        self._client = http_client
        self._owns_client = False

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            Self
        """
        if self._client is None:
            self._client = create_http_client(self.config)
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type
            exc_val: Exception value
            exc_tb: Exception traceback
        """
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    def _with_organization(self, params: dict[str, Any]) -> dict[str, Any]:
        """Add the configured SonarCloud organization unless already set."""
        if self.config.sonarqube_organization and "organization" not in params:
            return {**params, "organization": self.config.sonarqube_organization}
        return params

    async def _send(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and map failures to client exceptions.

        Raises:
            SonarQubeError: Non-success status (see ``core.errors``)
            SonarQubeNetworkError: Transport failure
            SonarQubeTimeoutError: Transport timeout
        """
        client = self._require_client()
        query = to_query_params(params) if params else None
        form = to_query_params(data) if data else None

        logger.debug(f"{method} {endpoint} params={query}")
        try:
            response = await client.request(method, endpoint, params=query, data=form, json=json, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise create_network_error(e) from e

        if not response.is_success:
            raise create_error_from_response(response)
        return response

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = "json",
    ) -> Any:
        """Make an HTTP request to the SonarQube API.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            params: Query parameters, encoded with ``to_query_params``
            data: Form fields for v1 POST endpoints
            json: JSON body for v2 endpoints
            headers: Extra request headers
            response_type: How to read the body

        Returns:
            Parsed JSON (``{}`` for empty bodies), text or bytes

        Raises:
            RuntimeError: Client used outside its context manager
            SonarQubeError: Request failed
        """
        response = await self._send(method, endpoint, params=params, data=data, json=json, headers=headers)

        if response_type == "text":
            return response.text
        if response_type == "bytes":
            return response.content

        # Handle 204 No Content responses (e.g., delete operations)
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return await self._request("GET", endpoint, params=params, **kwargs)

    async def _post(self, endpoint: str, data: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        """POST form fields to a v1 endpoint."""
        return await self._request("POST", endpoint, data=data, **kwargs)

    async def _stream(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> AsyncIterator[bytes]:
        """Stream a response body in chunks.

        Raises:
            SonarQubeError: Non-success status
            SonarQubeNetworkError: Transport failure
        """
        client = self._require_client()
        query = to_query_params(params) if params else None
        request = client.build_request(method, endpoint, params=query, headers=headers)

        try:
            response = await client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise create_network_error(e) from e

        try:
            if not response.is_success:
                await response.aread()
                raise create_error_from_response(response)
            try:
                async for chunk in response.aiter_bytes():
                    yield chunk
            except httpx.HTTPError as e:
                raise create_network_error(e) from e
        finally:
            await response.aclose()
