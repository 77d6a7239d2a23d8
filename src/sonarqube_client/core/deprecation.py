"""Deprecation tracking for client APIs.

Deprecated client methods report their use to :class:`DeprecationManager`,
which emits a :class:`SonarQubeDeprecationWarning` the first time each API
is used in the process. Richer metadata (removal dates, tags, migration
guides) is collected in :class:`DeprecationRegistry` for reporting.
"""

import functools
import inspect
import json
import logging
import warnings
from collections.abc import Callable
from datetime import date
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, Field

from sonarqube_client.exceptions import DeprecatedApiError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class SonarQubeDeprecationWarning(FutureWarning):
    """Warning emitted when a deprecated client API is used.

    Subclasses FutureWarning so that it is shown by default.
    """


class DeprecationContext(BaseModel):
    """Describes a single deprecated API."""

    api: str = Field(description="Identifier of the deprecated API, e.g. 'ProjectsClient.bulk_update_key()'")
    replacement: str | None = Field(default=None, description="Recommended replacement")
    remove_version: str | None = Field(default=None, description="Version or date of removal")
    migration_guide: str | None = Field(default=None, description="Link to migration guide")
    reason: str | None = Field(default=None, description="Why the API is deprecated")


class DeprecationOptions(BaseModel):
    """Process-wide deprecation behaviour."""

    suppress_deprecation_warnings: bool = False
    strict_mode: bool = False
    migration_mode: bool = False
    on_deprecation_warning: Callable[[DeprecationContext], None] | None = None


class MigrationExample(BaseModel):
    """Before/after snippet showing how to migrate."""

    before: str
    after: str
    description: str | None = None


class DeprecationMetadata(BaseModel):
    """Detailed deprecation record kept for tooling and reports."""

    api: str
    deprecated_since: str
    removal_date: str
    reason: str
    replacement: str | None = None
    examples: list[MigrationExample] = Field(default_factory=list)
    breaking_changes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    migration_guide: str | None = None
    automatic_migration: bool = False

    @property
    def removal(self) -> date | None:
        """Removal date parsed as ISO date, or None if it isn't one."""
        try:
            return date.fromisoformat(self.removal_date)
        except ValueError:
            return None


class DeprecationManager:
    """Records deprecated API usage and emits one warning per API."""

    _warned: ClassVar[set[str]] = set()
    _options: ClassVar[DeprecationOptions] = DeprecationOptions()

    @classmethod
    def configure(cls, **options: Any) -> None:
        """Update deprecation behaviour.

        Options not passed keep their current value.

        Args:
            **options: Any field of :class:`DeprecationOptions`
        """
        cls._options = cls._options.model_copy(update=DeprecationOptions(**options).model_dump(include=set(options)))

    @classmethod
    def options(cls) -> DeprecationOptions:
        return cls._options

    @classmethod
    def warn(cls, context: DeprecationContext) -> None:
        """Report use of a deprecated API.

        The API is always recorded. Strict mode raises on every call, ahead
        of suppression and any custom handler. Otherwise output happens only
        on first use unless warnings are suppressed.

        Args:
            context: The deprecated API being used

        Raises:
            DeprecatedApiError: In strict mode
        """
        key = context.api
        already_warned = key in cls._warned
        cls._warned.add(key)

        if cls._options.strict_mode:
            raise DeprecatedApiError(cls.format_message(context), api=key)

        if cls._options.suppress_deprecation_warnings or already_warned:
            return

        if cls._options.on_deprecation_warning is not None:
            cls._options.on_deprecation_warning(context)
            return

        logger.debug(f"Deprecated API used: {key}")
        warnings.warn(cls.format_message(context), SonarQubeDeprecationWarning, stacklevel=4)

    @classmethod
    def has_warned(cls, api: str) -> bool:
        return api in cls._warned

    @classmethod
    def get_warned_apis(cls) -> list[str]:
        return sorted(cls._warned)

    @classmethod
    def clear_warnings(cls) -> None:
        """Forget which APIs have been warned about."""
        cls._warned.clear()

    @classmethod
    def reset(cls) -> None:
        """Clear recorded warnings and restore default options."""
        cls._warned.clear()
        cls._options = DeprecationOptions()

    @classmethod
    def format_message(cls, context: DeprecationContext) -> str:
        """Format a deprecation message for display.

        Args:
            context: The deprecated API

        Returns:
            Multi-line message
        """
        lines = [f"Deprecated API usage: {context.api}"]
        if context.reason:
            lines.append(f"Reason: {context.reason}")
        if context.replacement:
            lines.append(f"Replacement: {context.replacement}")
        if context.remove_version:
            lines.append(f"Will be removed in: {context.remove_version}")
        if context.migration_guide:
            lines.append(f"Migration guide: {context.migration_guide}")
        if cls._options.migration_mode and context.replacement:
            lines.append(f"Migrate by replacing {context.api} with {context.replacement}")
        return "\n".join(lines)


class DeprecationRegistry:
    """Registry of deprecation metadata for external tooling."""

    _metadata: ClassVar[dict[str, DeprecationMetadata]] = {}

    @classmethod
    def register(cls, metadata: DeprecationMetadata) -> None:
        cls._metadata[metadata.api] = metadata

    @classmethod
    def get(cls, api: str) -> DeprecationMetadata | None:
        return cls._metadata.get(api)

    @classmethod
    def get_all(cls) -> list[DeprecationMetadata]:
        return list(cls._metadata.values())

    @classmethod
    def get_by_tag(cls, tag: str) -> list[DeprecationMetadata]:
        return [m for m in cls._metadata.values() if tag in m.tags]

    @classmethod
    def get_by_removal_date(cls, before: date) -> list[DeprecationMetadata]:
        """Get APIs scheduled for removal on or before a date.

        Args:
            before: Cut-off date (inclusive)

        Returns:
            Matching metadata; entries without a parseable date are skipped
        """
        return [m for m in cls._metadata.values() if m.removal is not None and m.removal <= before]

    @classmethod
    def get_timeline(cls) -> list[DeprecationMetadata]:
        """Get metadata with a valid removal date, soonest first."""
        dated = [m for m in cls._metadata.values() if m.removal is not None]
        return sorted(dated, key=lambda m: m.removal or date.max)

    @classmethod
    def export(cls) -> str:
        """Export all metadata as a JSON array."""
        return json.dumps([m.model_dump(mode="json") for m in cls._metadata.values()])

    @classmethod
    def clear(cls) -> None:
        cls._metadata.clear()

    @classmethod
    def generate_report(cls) -> str:
        """Generate a markdown migration report grouped by removal date.

        Returns:
            Markdown document
        """
        grouped: dict[str, list[DeprecationMetadata]] = {}
        for metadata in cls._metadata.values():
            grouped.setdefault(metadata.removal_date, []).append(metadata)

        def sort_key(removal_date: str) -> tuple[date, str]:
            try:
                return (date.fromisoformat(removal_date), removal_date)
            except ValueError:
                return (date.max, removal_date)

        parts = ["# Deprecation Timeline\n"]
        for removal_date in sorted(grouped, key=sort_key):
            parts.append(f"## Removals scheduled for {removal_date}\n")
            for item in grouped[removal_date]:
                parts.append(f"### {item.api}")
                parts.append(f"- **Deprecated since:** {item.deprecated_since}")
                parts.append(f"- **Reason:** {item.reason}")
                if item.replacement:
                    parts.append(f"- **Replacement:** {item.replacement}")
                if item.migration_guide:
                    parts.append(f"- **Migration guide:** {item.migration_guide}")
                parts.append("")

        return "\n".join(parts)


def deprecated(
    reason: str,
    *,
    replacement: str | None = None,
    deprecated_since: str | None = None,
    removal_date: str | None = None,
    migration_guide: str | None = None,
    tags: list[str] | None = None,
) -> Callable[[F], F]:
    """Mark a method as deprecated.

    Each call reports ``ClassName.method()`` to :class:`DeprecationManager`.
    When ``deprecated_since`` and ``removal_date`` are given the API is also
    registered in :class:`DeprecationRegistry` on first use. Works for both
    regular and ``async`` methods.

    Args:
        reason: Why the method is deprecated
        replacement: What to use instead
        deprecated_since: Version that deprecated the API
        removal_date: Version or ISO date of removal
        migration_guide: Link to migration guide
        tags: Categories for the registry

    Returns:
        Decorator
    """

    def decorator(func: F) -> F:
        api = f"{func.__qualname__}()"
        context = DeprecationContext(
            api=api,
            replacement=replacement,
            remove_version=removal_date,
            migration_guide=migration_guide,
            reason=reason,
        )

        def report() -> None:
            if deprecated_since and removal_date and DeprecationRegistry.get(api) is None:
                DeprecationRegistry.register(
                    DeprecationMetadata(
                        api=api,
                        deprecated_since=deprecated_since,
                        removal_date=removal_date,
                        reason=reason,
                        replacement=replacement,
                        migration_guide=migration_guide,
                        tags=tags or [],
                    )
                )
            DeprecationManager.warn(context)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                report()
                return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            report()
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
