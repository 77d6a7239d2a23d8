"""Entry point bundling every resource client behind one connection."""

import logging
from typing import Any, Self

import httpx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.base_client import BaseClient, create_http_client
from sonarqube_client.core.deprecation import DeprecationManager, deprecated
from sonarqube_client.core.errors import create_network_error
from sonarqube_client.resources import (
    CEClient,
    ComponentsClient,
    FixSuggestionsClient,
    HotspotsClient,
    IssuesClient,
    MeasuresClient,
    MetricsClient,
    ProjectsClient,
    QualityGatesClient,
    QualityProfilesClient,
    RulesClient,
    ScaClient,
    SourcesClient,
    SystemClient,
)
from sonarqube_client.resources.issues.models import SearchIssuesResponse
from sonarqube_client.resources.projects.models import SearchProjectsResponse

logger = logging.getLogger(__name__)

# Statuses meaning the method, not the endpoint, is unsupported
METHOD_NOT_SUPPORTED = (405, 501)

# Config field -> DeprecationManager option
DEPRECATION_SETTINGS = {
    "suppress_deprecation_warnings": "suppress_deprecation_warnings",
    "strict_deprecations": "strict_mode",
}


class SonarQubeClient:
    """Client for the SonarQube and SonarCloud Web API.

    Resource clients are exposed as attributes and share one HTTP
    connection pool, opened and closed by the async context manager.

    Example:
        >>> config = SonarQubeClientConfig(sonarqube_url="https://sonar.example.com", sonarqube_token="squ_...")
        >>> async with SonarQubeClient(config) as client:
        ...     async for issue in client.issues.search().with_projects(["my-project"]).all():
        ...         print(issue.key, issue.message)
    """

    def __init__(self, config: SonarQubeClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the client.

        Deprecation settings given explicitly in ``config`` (keyword,
        environment or env file) are applied process-wide. Settings left at
        their defaults keep whatever ``DeprecationManager.configure()`` set.

        Args:
            config: Connection settings
            http_client: Externally managed HTTP client, left open on exit
        """
        self.config = config
        self._client = http_client
        self._owns_client = False

        deprecation_options = {
            option: getattr(config, field)
            for field, option in DEPRECATION_SETTINGS.items()
            if field in config.model_fields_set
        }
        if deprecation_options:
            DeprecationManager.configure(**deprecation_options)

        self.issues = IssuesClient(config, http_client)
        self.hotspots = HotspotsClient(config, http_client)
        self.projects = ProjectsClient(config, http_client)
        self.quality_gates = QualityGatesClient(config, http_client)
        self.quality_profiles = QualityProfilesClient(config, http_client)
        self.rules = RulesClient(config, http_client)
        self.sources = SourcesClient(config, http_client)
        self.measures = MeasuresClient(config, http_client)
        self.metrics = MetricsClient(config, http_client)
        self.components = ComponentsClient(config, http_client)
        self.ce = CEClient(config, http_client)
        self.system = SystemClient(config, http_client)
        self.sca = ScaClient(config, http_client)
        self.fix_suggestions = FixSuggestionsClient(config, http_client)

    @property
    def resources(self) -> list[BaseClient]:
        """All resource clients."""
        return [
            self.issues,
            self.hotspots,
            self.projects,
            self.quality_gates,
            self.quality_profiles,
            self.rules,
            self.sources,
            self.measures,
            self.metrics,
            self.components,
            self.ce,
            self.system,
            self.sca,
            self.fix_suggestions,
        ]

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            Self
        """
        if self._client is None:
            self._client = create_http_client(self.config)
            self._owns_client = True
            logger.debug(f"Opened connection to {self.config.base_url}")
        for resource in self.resources:
            resource.bind(self._client)
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
            for resource in self.resources:
                resource.bind(None)
            self._client = None
            self._owns_client = False

    async def probe_endpoint(self, path: str) -> int:
        """Find out whether an endpoint exists without caring about its payload.

        Sends a HEAD request and falls back to GET when the server does not
        support HEAD on the endpoint. Error statuses are returned, not raised.

        Args:
            path: Endpoint path, e.g. ``/api/v2/system/health``

        Returns:
            HTTP status code

        Raises:
            RuntimeError: Client used outside its context manager
            SonarQubeNetworkError: Transport failure
        """
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            response = await self._client.head(path)
            if response.status_code in METHOD_NOT_SUPPORTED:
                response = await self._client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise create_network_error(e) from e

        logger.debug(f"Probe {path}: {response.status_code}")
        return response.status_code

    @deprecated(
        "Use the projects resource client",
        replacement="projects.search().execute()",
        deprecated_since="0.1.0",
        removal_date="2026-12-31",
        tags=["legacy"],
    )
    async def get_projects(self) -> SearchProjectsResponse:
        """Get the first page of projects."""
        return await self.projects.search().execute()

    @deprecated(
        "Use the issues resource client",
        replacement="issues.search().execute()",
        deprecated_since="0.1.0",
        removal_date="2026-12-31",
        tags=["legacy"],
    )
    async def get_issues(self, project_key: str | None = None) -> SearchIssuesResponse:
        """Get the first page of issues, optionally for one project."""
        builder = self.issues.search()
        if project_key:
            builder.with_projects([project_key])
        return await builder.execute()
