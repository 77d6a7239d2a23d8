"""Client for the rules API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.resources.rules.builders import SearchRulesBuilder
from sonarqube_client.resources.rules.models import Rule, RuleRepository, SearchRulesResponse, ShowRuleResponse


class RulesClient(BaseClient):
    """Search and inspect coding rules."""

    def search(self) -> SearchRulesBuilder:
        return SearchRulesBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchRulesResponse:
        data = await self._get("/api/rules/search", params=self._with_organization(params))
        return SearchRulesResponse(**data)

    async def show(self, key: str, actives: bool = False) -> ShowRuleResponse:
        """Get detailed information about a rule.

        Args:
            key: Rule key (e.g., 'python:S1481')
            actives: Include activations in quality profiles

        Returns:
            Rule details
        """
        data = await self._get(
            "/api/rules/show",
            params=self._with_organization({"key": key, "actives": actives or None}),
        )
        return ShowRuleResponse(**data)

    async def repositories(self, language: str | None = None, query: str | None = None) -> list[RuleRepository]:
        data = await self._get("/api/rules/repositories", params={"language": language, "q": query})
        return [RuleRepository.model_validate(item) for item in data.get("repositories", [])]

    async def tags(self, query: str | None = None, page_size: int | None = None) -> list[str]:
        data = await self._get("/api/rules/tags", params=self._with_organization({"q": query, "ps": page_size}))
        return list(data.get("tags", []))

    async def update(
        self,
        key: str,
        *,
        name: str | None = None,
        markdown_description: str | None = None,
        severity: str | None = None,
        status: str | None = None,
        tags: list[str] | None = None,
        markdown_note: str | None = None,
        params: dict[str, str] | None = None,
    ) -> Rule:
        """Update a rule (custom rule fields, tags or note).

        Returns:
            Updated rule
        """
        encoded_params = ";".join(f"{k}={v}" for k, v in params.items()) if params else None
        data = await self._post(
            "/api/rules/update",
            data=self._with_organization(
                {
                    "key": key,
                    "name": name,
                    "markdownDescription": markdown_description,
                    "severity": severity,
                    "status": status,
                    "tags": tags,
                    "markdown_note": markdown_note,
                    "params": encoded_params,
                }
            ),
        )
        return Rule(**data["rule"])
