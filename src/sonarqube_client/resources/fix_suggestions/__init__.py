"""AI fix suggestions API."""

from sonarqube_client.resources.fix_suggestions.builders import AiSuggestionsBuilder, IssueAvailabilityBuilder
from sonarqube_client.resources.fix_suggestions.client import FixSuggestionsClient
from sonarqube_client.resources.fix_suggestions.models import (
    AiSuggestionsResponse,
    CodeChange,
    FixStyle,
    FixSuggestion,
    FixSuggestionAvailability,
    LineChange,
    SuggestionPriority,
)

__all__ = [
    "AiSuggestionsBuilder",
    "AiSuggestionsResponse",
    "CodeChange",
    "FixStyle",
    "FixSuggestion",
    "FixSuggestionAvailability",
    "FixSuggestionsClient",
    "IssueAvailabilityBuilder",
    "LineChange",
    "SuggestionPriority",
]
