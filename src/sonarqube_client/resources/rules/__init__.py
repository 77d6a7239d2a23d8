"""Rules API."""

from sonarqube_client.resources.rules.builders import SearchRulesBuilder
from sonarqube_client.resources.rules.client import RulesClient
from sonarqube_client.resources.rules.models import Rule, RuleRepository, SearchRulesResponse, ShowRuleResponse

__all__ = [
    "Rule",
    "RuleRepository",
    "RulesClient",
    "SearchRulesBuilder",
    "SearchRulesResponse",
    "ShowRuleResponse",
]
