"""Tests for the AI fix suggestions resource."""

import json

import httpx
import pytest
import respx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.exceptions import SonarQubeRateLimitError, SonarQubeValidationError
from sonarqube_client.resources.fix_suggestions import FixStyle, FixSuggestionsClient

URL = "https://sonar.test.com"
SUGGESTIONS_URL = f"{URL}/api/v2/fix-suggestions/ai-suggestions"

SUGGESTIONS_RESPONSE = {
    "sessionId": "sess-1",
    "issue": {"key": "AYx1", "rule": "python:S1481", "line": 12},
    "suggestions": [
        {
            "id": "s1",
            "explanation": "Remove the variable",
            "confidence": 72.5,
            "changes": [
                {
                    "filePath": "src/main.py",
                    "lineChanges": [
                        {"startLine": 12, "endLine": 12, "originalContent": "result = f()", "newContent": "f()"}
                    ],
                }
            ],
        },
        {"id": "s2", "explanation": "Use the variable", "confidence": 91.0, "changes": []},
    ],
    "metadata": {"processingTime": 2.4, "modelUsed": "codefix-1"},
}


class TestAvailability:
    """Tests for availability checks."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_available(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/v2/fix-suggestions/issues").mock(
            return_value=httpx.Response(
                200,
                json={
                    "available": True,
                    "estimatedProcessingTime": 3.5,
                    "aiModel": {"name": "codefix", "supportedLanguages": ["py", "java"]},
                    "rateLimiting": {"requestsRemaining": 19, "dailyQuota": 20},
                },
            )
        )

        async with FixSuggestionsClient(config) as client:
            availability = await client.get_issue_availability_v2("AYx1", project_key="svc")

        assert availability.available
        assert availability.ai_model.supported_languages == ["py", "java"]
        assert availability.rate_limiting.requests_remaining == 19
        assert dict(route.calls.last.request.url.params) == {"issueKey": "AYx1", "projectKey": "svc"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_unavailable_with_reason(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/v2/fix-suggestions/issues").mock(
            return_value=httpx.Response(200, json={"available": False, "reason": "unsupported_rule"})
        )

        async with FixSuggestionsClient(config) as client:
            availability = await client.check_availability().with_issue("AYx1").execute()

        assert not availability.available
        assert availability.reason == "unsupported_rule"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("issue_key", "message"),
        [(None, "Issue key is required"), ("   ", "Issue key cannot be empty")],
    )
    async def test_issue_key_is_checked(self, config: SonarQubeClientConfig, issue_key, message: str) -> None:
        async with FixSuggestionsClient(config) as client:
            builder = client.check_availability()
            if issue_key is not None:
                builder.with_issue(issue_key)
            with pytest.raises(SonarQubeValidationError, match=message):
                await builder.execute()

    @pytest.mark.asyncio
    async def test_branch_and_pull_request(self, config: SonarQubeClientConfig) -> None:
        async with FixSuggestionsClient(config) as client:
            with pytest.raises(SonarQubeValidationError, match="Cannot use both branch and pullRequest"):
                await client.get_issue_availability_v2("AYx1", branch="main", pull_request="2")


class TestAiSuggestions:
    """Tests for suggestion requests."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_sends_json_body(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(SUGGESTIONS_URL).mock(return_value=httpx.Response(200, json=SUGGESTIONS_RESPONSE))

        async with FixSuggestionsClient(config) as client:
            response = await (
                client.request_suggestions()
                .with_issue("AYx1")
                .with_context()
                .with_max_alternatives(2)
                .with_fix_style("minimal")
                .with_priority("high")
                .execute()
            )

        assert json.loads(route.calls.last.request.content) == {
            "issueKey": "AYx1",
            "includeContext": True,
            "maxAlternatives": 2,
            "fixStyle": "minimal",
            "priority": "high",
        }
        assert response.session_id == "sess-1"
        assert response.metadata.model_used == "codefix-1"
        assert response.suggestions[0].files == ["src/main.py"]
        assert response.suggestions[0].changes[0].line_changes[0].new_content == "f()"
        assert response.best_suggestion().id == "s2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_ai_suggestions(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(SUGGESTIONS_URL).mock(return_value=httpx.Response(200, json=SUGGESTIONS_RESPONSE))

        async with FixSuggestionsClient(config) as client:
            await client.request_ai_suggestions_v2(
                "AYx1",
                fix_style=FixStyle.DEFENSIVE,
                custom_context="Keep the public API unchanged",
                language_preferences={"python": {"typeHints": True}},
            )

        assert json.loads(route.calls.last.request.content) == {
            "issueKey": "AYx1",
            "fixStyle": "defensive",
            "customContext": "Keep the public API unchanged",
            "languagePreferences": {"python": {"typeHints": True}},
        }

    def test_max_alternatives_checked_when_set(self, config: SonarQubeClientConfig) -> None:
        builder = FixSuggestionsClient(config).request_suggestions()

        with pytest.raises(SonarQubeValidationError, match="Max alternatives must be between 1 and 10"):
            builder.with_max_alternatives(11)
        with pytest.raises(SonarQubeValidationError, match="Custom context cannot be empty"):
            builder.with_custom_context("  ")
        with pytest.raises(ValueError):
            builder.with_fix_style("aggressive")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("params", "message"),
        [
            ({"maxAlternatives": 11}, "Maximum 10 alternatives allowed"),
            ({"maxAlternatives": 0}, "At least 1 alternative required"),
            ({"customContext": "x" * 1001}, "Custom context cannot exceed 1000 characters"),
        ],
    )
    async def test_execute_validation(self, config: SonarQubeClientConfig, params: dict, message: str) -> None:
        async with FixSuggestionsClient(config) as client:
            builder = client.request_suggestions().with_issue("AYx1").set_params(**params)
            with pytest.raises(SonarQubeValidationError, match=message):
                await builder.execute()

    @pytest.mark.asyncio
    @respx.mock
    async def test_quota_exceeded(self, config: SonarQubeClientConfig) -> None:
        respx.post(SUGGESTIONS_URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "60"}, json={"message": "Daily quota exceeded"})
        )

        async with FixSuggestionsClient(config) as client:
            with pytest.raises(SonarQubeRateLimitError) as exc_info:
                await client.request_ai_suggestions_v2("AYx1")

        assert exc_info.value.retry_after == 60
