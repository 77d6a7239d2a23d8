"""Builders for the AI fix suggestions API."""

from typing import Any, Self

from sonarqube_client.core.builders import BaseBuilder
from sonarqube_client.core.builders.validation import validate_mutually_exclusive
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.fix_suggestions.models import (
    AiSuggestionsResponse,
    FixStyle,
    FixSuggestionAvailability,
    SuggestionPriority,
)

MIN_ALTERNATIVES = 1
MAX_ALTERNATIVES = 10
MAX_CUSTOM_CONTEXT_LENGTH = 1000


def validate_issue_key(params: dict[str, Any]) -> None:
    """Require a non-blank ``issueKey``."""
    issue_key = params.get("issueKey")
    if issue_key is None:
        raise SonarQubeValidationError("Issue key is required", field="issueKey")
    if not str(issue_key).strip():
        raise SonarQubeValidationError("Issue key cannot be empty", field="issueKey")


class IssueAvailabilityBuilder(BaseBuilder[FixSuggestionAvailability]):
    """Builder for GET /api/v2/fix-suggestions/issues."""

    def with_issue(self, issue_key: str) -> Self:
        return self.set_param("issueKey", issue_key)

    def in_project(self, project_key: str) -> Self:
        return self.set_param("projectKey", project_key)

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def validate(self) -> None:
        validate_issue_key(self._params)
        validate_mutually_exclusive(self._params, "branch", "pullRequest")


class AiSuggestionsBuilder(BaseBuilder[AiSuggestionsResponse]):
    """Builder for POST /api/v2/fix-suggestions/ai-suggestions.

    Example:
        >>> response = await (
        ...     client.fix_suggestions.request_suggestions()
        ...     .with_issue("AY1234")
        ...     .with_max_alternatives(3)
        ...     .with_fix_style(FixStyle.MINIMAL)
        ...     .execute()
        ... )
    """

    def with_issue(self, issue_key: str) -> Self:
        return self.set_param("issueKey", issue_key)

    def with_context(self, include: bool = True) -> Self:
        """Let the model read the code surrounding the issue."""
        return self.set_param("includeContext", include)

    def with_max_alternatives(self, count: int) -> Self:
        """Set how many alternative fixes to generate (1-10).

        Raises:
            SonarQubeValidationError: Count out of range
        """
        if not MIN_ALTERNATIVES <= count <= MAX_ALTERNATIVES:
            raise SonarQubeValidationError(
                f"Max alternatives must be between {MIN_ALTERNATIVES} and {MAX_ALTERNATIVES}",
                field="maxAlternatives",
            )
        return self.set_param("maxAlternatives", count)

    def with_fix_style(self, style: FixStyle | str) -> Self:
        return self.set_param("fixStyle", FixStyle(style))

    def with_language_preferences(self, preferences: dict[str, Any]) -> Self:
        return self.set_param("languagePreferences", preferences)

    def with_custom_context(self, context: str) -> Self:
        """Add free-text guidance for the model.

        Raises:
            SonarQubeValidationError: Context is blank
        """
        if not context.strip():
            raise SonarQubeValidationError("Custom context cannot be empty", field="customContext")
        return self.set_param("customContext", context)

    def with_priority(self, priority: SuggestionPriority | str) -> Self:
        return self.set_param("priority", SuggestionPriority(priority))

    def validate(self) -> None:
        validate_issue_key(self._params)

        alternatives = self._params.get("maxAlternatives")
        if alternatives is not None:
            if alternatives > MAX_ALTERNATIVES:
                raise SonarQubeValidationError(
                    f"Maximum {MAX_ALTERNATIVES} alternatives allowed", field="maxAlternatives"
                )
            if alternatives < MIN_ALTERNATIVES:
                raise SonarQubeValidationError(
                    f"At least {MIN_ALTERNATIVES} alternative required", field="maxAlternatives"
                )

        custom_context = self._params.get("customContext")
        if custom_context is not None and len(custom_context) > MAX_CUSTOM_CONTEXT_LENGTH:
            raise SonarQubeValidationError(
                f"Custom context cannot exceed {MAX_CUSTOM_CONTEXT_LENGTH} characters",
                field="customContext",
            )
