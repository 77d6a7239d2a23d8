"""Configuration management for sonarqube-client."""

from sonarqube_client.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from sonarqube_client.config.models import SonarQubeClientConfig, TokenScheme

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "SonarQubeClientConfig",
    "TokenScheme",
]
