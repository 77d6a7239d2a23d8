"""Configuration-related exceptions."""


class ConfigurationError(Exception):
    """Base exception for client configuration errors."""


class MissingConfigurationError(ConfigurationError):
    """A required setting was not provided by any configuration source."""

    def __init__(self, setting: str) -> None:
        """Initialize the error.

        Args:
            setting: Environment variable name of the missing setting
        """
        super().__init__(f"{setting} is required")
        self.setting = setting


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid or settings conflict."""
