"""Models for the AI fix suggestions API."""

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field

from sonarqube_client.models import SonarQubeModel, TextRange


class FixStyle(str, Enum):
    MINIMAL = "minimal"
    COMPREHENSIVE = "comprehensive"
    DEFENSIVE = "defensive"


class SuggestionPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class AiModel(SonarQubeModel):
    name: str
    version: str | None = None
    capabilities: list[str] = Field(default_factory=list)
    supported_languages: list[str] = Field(default_factory=list, alias="supportedLanguages")


class RateLimiting(SonarQubeModel):
    requests_remaining: int | None = Field(default=None, alias="requestsRemaining")
    reset_time: str | None = Field(default=None, alias="resetTime")
    daily_quota: int | None = Field(default=None, alias="dailyQuota")


class FixSuggestionAvailability(SonarQubeModel):
    """Whether AI fix suggestions can be generated for an issue."""

    available: bool
    reason: str | None = Field(
        default=None,
        description="unsupported_rule, language_not_supported, ai_service_unavailable, "
        "quota_exceeded or issue_already_resolved",
    )
    estimated_processing_time: float | None = Field(default=None, alias="estimatedProcessingTime")
    ai_model: AiModel | None = Field(default=None, alias="aiModel")
    rate_limiting: RateLimiting | None = Field(default=None, alias="rateLimiting")


class LineChange(SonarQubeModel):
    """A change to a contiguous range of lines."""

    start_line: int = Field(alias="startLine")
    end_line: int = Field(alias="endLine")
    original_content: str = Field(default="", alias="originalContent")
    new_content: str = Field(default="", alias="newContent")
    change_type: str = Field(default="replace", alias="changeType", description="replace, insert, delete or move")
    change_reason: str | None = Field(default=None, alias="changeReason")
    change_confidence: float | None = Field(default=None, alias="changeConfidence")


class CodeChange(SonarQubeModel):
    """Changes to a single file."""

    file_path: str = Field(alias="filePath")
    original_hash: str | None = Field(default=None, alias="originalHash")
    line_changes: list[LineChange] = Field(default_factory=list, alias="lineChanges")
    file_metadata: dict[str, Any] | None = Field(default=None, alias="fileMetadata")
    dependencies: list[dict[str, Any]] = Field(default_factory=list)


class FixSuggestion(SonarQubeModel):
    """One proposed fix for an issue."""

    id: str
    explanation: str = ""
    confidence: float = Field(default=0, description="Confidence score (0-100)")
    complexity: str | None = None
    success_rate: float | None = Field(default=None, alias="successRate")
    effort_estimate: str | None = Field(default=None, alias="effortEstimate")
    changes: list[CodeChange] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    references: list[dict[str, Any]] = Field(default_factory=list)
    alternatives: list[dict[str, Any]] = Field(default_factory=list)
    testing_guidance: dict[str, Any] | None = Field(default=None, alias="testingGuidance")

    @property
    def files(self) -> list[str]:
        """Paths of the files this fix touches."""
        return [change.file_path for change in self.changes]


class SuggestedIssue(SonarQubeModel):
    key: str
    rule: str | None = None
    severity: str | None = None
    type: str | None = None
    message: str | None = None
    component: str | None = None
    line: int | None = None
    text_range: TextRange | None = Field(default=None, alias="textRange")


class SuggestionMetadata(SonarQubeModel):
    model_config = ConfigDict(protected_namespaces=())

    processing_time: float | None = Field(default=None, alias="processingTime")
    model_used: str | None = Field(default=None, alias="modelUsed")
    confidence_threshold: float | None = Field(default=None, alias="confidenceThreshold")
    context_analyzed: bool | None = Field(default=None, alias="contextAnalyzed")
    request_timestamp: str | None = Field(default=None, alias="requestTimestamp")
    response_timestamp: str | None = Field(default=None, alias="responseTimestamp")


class AiSuggestionsResponse(SonarQubeModel):
    """Response from POST /api/v2/fix-suggestions/ai-suggestions."""

    session_id: str = Field(alias="sessionId")
    issue: SuggestedIssue | None = None
    suggestions: list[FixSuggestion] = Field(default_factory=list)
    metadata: SuggestionMetadata | None = None
    rate_limiting: RateLimiting | None = Field(default=None, alias="rateLimiting")

    def best_suggestion(self) -> FixSuggestion | None:
        """Suggestion with the highest confidence, if any."""
        return max(self.suggestions, key=lambda s: s.confidence, default=None)
