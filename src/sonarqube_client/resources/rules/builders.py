"""Builders for the rules API."""

from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_requires
from sonarqube_client.resources.rules.models import Rule, SearchRulesResponse


class SearchRulesBuilder(PaginatedBuilder[SearchRulesResponse, Rule]):
    """Builder for /api/rules/search."""

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def with_languages(self, languages: list[str]) -> Self:
        return self.set_param("languages", languages)

    def with_repositories(self, repositories: list[str]) -> Self:
        return self.set_param("repositories", repositories)

    def with_rule_key(self, key: str) -> Self:
        return self.set_param("rule_key", key)

    def with_tags(self, tags: list[str]) -> Self:
        return self.set_param("tags", tags)

    def with_types(self, types: list[str]) -> Self:
        return self.set_param("types", types)

    def with_severities(self, severities: list[str]) -> Self:
        return self.set_param("severities", severities)

    def with_statuses(self, statuses: list[str]) -> Self:
        return self.set_param("statuses", statuses)

    def with_impact_severities(self, severities: list[str]) -> Self:
        return self.set_param("impactSeverities", severities)

    def with_impact_software_qualities(self, qualities: list[str]) -> Self:
        return self.set_param("impactSoftwareQualities", qualities)

    def with_clean_code_attribute_categories(self, categories: list[str]) -> Self:
        return self.set_param("cleanCodeAttributeCategories", categories)

    def with_cwe(self, cwe_ids: list[str]) -> Self:
        return self.set_param("cwe", cwe_ids)

    def with_owasp_top10_2021(self, categories: list[str]) -> Self:
        return self.set_param("owaspTop10-2021", categories)

    def with_sonarsource_security(self, categories: list[str]) -> Self:
        return self.set_param("sonarsourceSecurity", categories)

    def in_quality_profile(self, profile_key: str, activated: bool = True) -> Self:
        """Only rules activated (or not) in a quality profile."""
        self.set_param("qprofile", profile_key)
        return self.set_param("activation", activated)

    def with_active_severities(self, severities: list[str]) -> Self:
        return self.set_param("active_severities", severities)

    def templates_only(self, enabled: bool = True) -> Self:
        return self.set_param("is_template", enabled)

    def with_template_key(self, key: str) -> Self:
        return self.set_param("template_key", key)

    def include_external(self, enabled: bool = True) -> Self:
        return self.set_param("include_external", enabled)

    def available_since(self, date: str) -> Self:
        return self.set_param("available_since", date)

    def in_organization(self, organization: str) -> Self:
        return self.set_param("organization", organization)

    def with_fields(self, fields: list[str]) -> Self:
        return self.set_param("f", fields)

    def with_facets(self, facets: list[str]) -> Self:
        return self.set_param("facets", facets)

    def sort_by(self, field: str, ascending: bool = True) -> Self:
        self.set_param("s", field)
        return self.set_param("asc", ascending)

    def validate(self) -> None:
        super().validate()
        validate_requires(self._params, "active_severities", "qprofile")

    def get_items(self, response: SearchRulesResponse) -> list[Rule]:
        return response.rules
