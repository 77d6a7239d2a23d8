"""Client for the AI fix suggestions API."""

import logging
from enum import Enum
from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.resources.fix_suggestions.builders import AiSuggestionsBuilder, IssueAvailabilityBuilder
from sonarqube_client.resources.fix_suggestions.models import (
    AiSuggestionsResponse,
    FixStyle,
    FixSuggestionAvailability,
    SuggestionPriority,
)

logger = logging.getLogger(__name__)


class FixSuggestionsClient(BaseClient):
    """AI CodeFix suggestions for issues (v2 API, SonarQube 10.7+)."""

    def check_availability(self) -> IssueAvailabilityBuilder:
        return IssueAvailabilityBuilder(self._get_availability)

    def request_suggestions(self) -> AiSuggestionsBuilder:
        return AiSuggestionsBuilder(self._request_suggestions)

    async def _get_availability(self, params: dict[str, Any]) -> FixSuggestionAvailability:
        data = await self._get("/api/v2/fix-suggestions/issues", params=params)
        return FixSuggestionAvailability(**data)

    async def _request_suggestions(self, params: dict[str, Any]) -> AiSuggestionsResponse:
        body = {key: value.value if isinstance(value, Enum) else value for key, value in params.items()}
        data = await self._request(
            "POST",
            "/api/v2/fix-suggestions/ai-suggestions",
            json={key: value for key, value in body.items() if value is not None},
        )
        response = AiSuggestionsResponse(**data)
        logger.debug(f"Received {len(response.suggestions)} suggestions for {params.get('issueKey')}")
        return response

    async def get_issue_availability_v2(
        self,
        issue_key: str,
        project_key: str | None = None,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> FixSuggestionAvailability:
        """Check whether AI suggestions can be generated for an issue.

        Args:
            issue_key: Issue key
            project_key: Project key
            branch: Branch name
            pull_request: Pull request id

        Returns:
            Availability, with the reason when unavailable

        Raises:
            SonarQubeValidationError: Blank issue key, or both branch and pull request given
        """
        builder = self.check_availability().with_issue(issue_key)
        builder.set_params(projectKey=project_key, branch=branch, pullRequest=pull_request)
        return await builder.execute()

    async def request_ai_suggestions_v2(
        self,
        issue_key: str,
        include_context: bool | None = None,
        max_alternatives: int | None = None,
        fix_style: FixStyle | str | None = None,
        custom_context: str | None = None,
        priority: SuggestionPriority | str | None = None,
        language_preferences: dict[str, Any] | None = None,
    ) -> AiSuggestionsResponse:
        """Generate fix suggestions for an issue.

        Returns:
            Suggestions and processing metadata

        Raises:
            SonarQubeValidationError: Invalid issue key, alternative count or context
        """
        builder = self.request_suggestions().with_issue(issue_key)
        if include_context is not None:
            builder.with_context(include_context)
        if max_alternatives is not None:
            builder.with_max_alternatives(max_alternatives)
        if fix_style is not None:
            builder.with_fix_style(fix_style)
        if custom_context is not None:
            builder.with_custom_context(custom_context)
        if priority is not None:
            builder.with_priority(priority)
        if language_preferences is not None:
            builder.with_language_preferences(language_preferences)
        return await builder.execute()
