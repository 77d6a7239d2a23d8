"""Typed async client for the SonarQube and SonarCloud Web API."""

from sonarqube_client.client import SonarQubeClient
from sonarqube_client.config import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
    SonarQubeClientConfig,
    TokenScheme,
)
from sonarqube_client.core.deprecation import (
    DeprecationManager,
    DeprecationRegistry,
    SonarQubeDeprecationWarning,
)
from sonarqube_client.exceptions import (
    DeprecatedApiError,
    IndexingInProgressError,
    SonarQubeAPIError,
    SonarQubeAuthError,
    SonarQubeAuthorizationError,
    SonarQubeError,
    SonarQubeNetworkError,
    SonarQubeNotFoundError,
    SonarQubeRateLimitError,
    SonarQubeServerError,
    SonarQubeTimeoutError,
    SonarQubeValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DeprecatedApiError",
    "DeprecationManager",
    "DeprecationRegistry",
    "IndexingInProgressError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "SonarQubeAPIError",
    "SonarQubeAuthError",
    "SonarQubeAuthorizationError",
    "SonarQubeClient",
    "SonarQubeClientConfig",
    "SonarQubeDeprecationWarning",
    "SonarQubeError",
    "SonarQubeNetworkError",
    "SonarQubeNotFoundError",
    "SonarQubeRateLimitError",
    "SonarQubeServerError",
    "SonarQubeTimeoutError",
    "SonarQubeValidationError",
    "TokenScheme",
    "__version__",
]
