"""Configuration models."""

from enum import Enum
from pathlib import Path
from typing import Any, Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from sonarqube_client.config.exceptions import InvalidConfigurationError, MissingConfigurationError

ENV_FILES = [".env.sonarqube", ".env"]

# Tokens shorter than this are never partially shown
MIN_MASKED_PREFIX_LENGTH = 16
MASKED_PREFIX_LENGTH = 8


class TokenScheme(str, Enum):
    """How a user token is sent to the server."""

    BEARER = "bearer"
    BASIC = "basic"


class SonarQubeClientConfig(BaseSettings):
    """Connection settings for a SonarQube or SonarCloud instance."""

    sonarqube_url: str | None = Field(default=None, description="SonarQube server URL")
    sonarqube_token: str | None = Field(
        default=None,
        description="User token (preferred authentication method)",
    )
    token_scheme: TokenScheme = Field(
        default=TokenScheme.BEARER,
        description="Send the token as a bearer token or as a basic-auth username",
    )
    sonarqube_username: str | None = Field(
        default=None,
        description="Username for basic authentication (alternative to token)",
    )
    sonarqube_password: str | None = Field(
        default=None,
        description="Password for basic authentication (alternative to token)",
    )
    sonarqube_passcode: str | None = Field(
        default=None,
        description="System passcode sent as X-Sonar-Passcode (monitoring endpoints)",
    )
    sonarqube_organization: str | None = Field(
        default=None,
        description="Organization key (SonarCloud only)",
    )

    request_timeout: float | None = Field(
        default=30.0,
        description="Transport timeout in seconds, None disables it",
    )

    # Deprecation behaviour, applied process-wide when a client is created
    suppress_deprecation_warnings: bool = Field(
        default=False,
        description="Silence deprecation warnings",
    )
    strict_deprecations: bool = Field(
        default=False,
        description="Raise instead of warning when a deprecated API is used",
    )

    model_config = SettingsConfigDict(
        # Later files take precedence
        env_file=ENV_FILES[::-1],
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(
        self,
        _env_file: str | Path | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            **kwargs: Additional configuration values

        Raises:
            InvalidConfigurationError: If a custom env file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Replace the default dotenv source when a custom env file was given.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        # init_kwargs exists at runtime but is not part of the type stubs
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("sonarqube_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Ensure URL doesn't have trailing slash.

        Args:
            v: URL value

        Returns:
            Normalized URL without trailing slash

        Raises:
            InvalidConfigurationError: If the URL has no http(s) scheme
        """
        if v is None:
            return None
        if not v.startswith(("http://", "https://")):
            raise InvalidConfigurationError(f"Invalid SonarQube URL: {v}. Expected http:// or https://")
        return v.rstrip("/")

    @field_validator("token_scheme", mode="before")
    @classmethod
    def parse_token_scheme(cls, v: str | TokenScheme) -> TokenScheme:
        """Parse token scheme from string or enum.

        Raises:
            InvalidConfigurationError: If the scheme is unknown
        """
        if isinstance(v, TokenScheme):
            return v
        try:
            return TokenScheme(str(v).lower())
        except ValueError as e:
            valid = [s.value for s in TokenScheme]
            raise InvalidConfigurationError(f"Invalid token scheme: {v}. Valid options: {valid}") from e

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise InvalidConfigurationError("REQUEST_TIMEOUT must be positive")
        return v

    @model_validator(mode="after")
    def validate_auth(self) -> Self:
        """Check that the URL is present and that auth settings don't conflict.

        Returns:
            Self

        Raises:
            MissingConfigurationError: If no URL is configured
            InvalidConfigurationError: If auth settings are incomplete or ambiguous
        """
        if not self.sonarqube_url:
            raise MissingConfigurationError("SONARQUBE_URL")

        has_username = self.sonarqube_username is not None
        has_password = self.sonarqube_password is not None
        if has_username != has_password:
            raise InvalidConfigurationError("SONARQUBE_USERNAME and SONARQUBE_PASSWORD must be provided together")

        if self.sonarqube_token is not None and has_username:
            raise InvalidConfigurationError(
                "Provide either SONARQUBE_TOKEN or SONARQUBE_USERNAME/SONARQUBE_PASSWORD, not both"
            )

        return self

    @property
    def base_url(self) -> str:
        """Server URL without trailing slash."""
        # validate_auth guarantees the URL is set
        return self.sonarqube_url or ""

    @property
    def auth_type(self) -> str:
        """Describe which authentication method will be used.

        Returns:
            One of "bearer", "basic", "passcode" or "none"
        """
        if self.sonarqube_token is not None:
            return "bearer" if self.token_scheme is TokenScheme.BEARER else "basic"
        if self.sonarqube_username is not None:
            return "basic"
        if self.sonarqube_passcode is not None:
            return "passcode"
        return "none"

    @property
    def masked_token(self) -> str:
        """Token safe for display.

        Long tokens show their first characters followed by an ellipsis;
        short ones are hidden entirely.
        """
        if not self.sonarqube_token:
            return "<none>"
        if len(self.sonarqube_token) < MIN_MASKED_PREFIX_LENGTH:
            return "********"
        return f"{self.sonarqube_token[:MASKED_PREFIX_LENGTH]}..."

    @staticmethod
    def find_env_file() -> Path | None:
        """Find the environment file being used.

        Checks for .env.sonarqube and .env in current directory in that order.

        Returns:
            Path to the env file if found, None otherwise
        """
        for env_file in ENV_FILES:
            path = Path(env_file)
            if path.exists():
                return path.absolute()
        return None
