"""Builders for the quality profiles API."""

from collections.abc import Mapping
from typing import Any, Self

from sonarqube_client.core.builders import BaseBuilder, PaginatedBuilder
from sonarqube_client.core.builders.validation import validate_required
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.quality_profiles.models import (
    BulkRuleChangeResponse,
    ChangelogEvent,
    ProfileChangelogResponse,
    ProfileProject,
    ProfileProjectsResponse,
    SearchProfilesResponse,
)


class SearchProfilesBuilder(BaseBuilder[SearchProfilesResponse]):
    """Builder for /api/qualityprofiles/search (not paginated)."""

    def with_language(self, language: str) -> Self:
        return self.set_param("language", language)

    def for_project(self, project_key: str) -> Self:
        return self.set_param("project", project_key)

    def with_name(self, name: str) -> Self:
        return self.set_param("qualityProfile", name)

    def defaults_only(self, enabled: bool = True) -> Self:
        return self.set_param("defaults", enabled)

    def in_organization(self, organization: str) -> Self:
        return self.set_param("organization", organization)


class ActivateRulesBuilder(BaseBuilder[BulkRuleChangeResponse]):
    """Builder for bulk rule activation on a target profile.

    The rule filters mirror /api/rules/search.
    """

    def target_profile(self, key: str) -> Self:
        return self.set_param("targetKey", key)

    def target_severity(self, severity: str) -> Self:
        return self.set_param("targetSeverity", severity)

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def with_languages(self, languages: list[str]) -> Self:
        return self.set_param("languages", languages)

    def with_repositories(self, repositories: list[str]) -> Self:
        return self.set_param("repositories", repositories)

    def with_tags(self, tags: list[str]) -> Self:
        return self.set_param("tags", tags)

    def with_types(self, types: list[str]) -> Self:
        return self.set_param("types", types)

    def with_severities(self, severities: list[str]) -> Self:
        return self.set_param("severities", severities)

    def with_impact_severities(self, severities: list[str]) -> Self:
        return self.set_param("impactSeverities", severities)

    def with_rules(self, rule_keys: list[str]) -> Self:
        return self.set_param("rule_key", rule_keys)

    def with_activation(self, activated: bool, profile_key: str) -> Self:
        """Only rules activated (or not) in another profile."""
        self.set_param("qprofile", profile_key)
        return self.set_param("activation", activated)

    def validate(self) -> None:
        validate_required(self._params, "targetKey", "Target profile key is required")


class DeactivateRulesBuilder(ActivateRulesBuilder):
    """Builder for bulk rule deactivation on a target profile."""


class ProfileChangelogBuilder(PaginatedBuilder[ProfileChangelogResponse, ChangelogEvent]):
    """Builder for /api/qualityprofiles/changelog."""

    def profile(self, key: str) -> Self:
        return self.set_param("key", key)

    def profile_by_name(self, name: str, language: str) -> Self:
        self.set_param("qualityProfile", name)
        return self.set_param("language", language)

    def since(self, date: str) -> Self:
        return self.set_param("since", date)

    def to(self, date: str) -> Self:
        return self.set_param("to", date)

    def validate(self) -> None:
        super().validate()
        validate_profile_identification(self._params)

    def get_items(self, response: ProfileChangelogResponse) -> list[ChangelogEvent]:
        return response.events


class ProfileProjectsBuilder(PaginatedBuilder[ProfileProjectsResponse, ProfileProject]):
    """Builder for /api/qualityprofiles/projects."""

    def profile(self, key: str) -> Self:
        return self.set_param("key", key)

    def query(self, q: str) -> Self:
        return self.set_param("q", q)

    def selected(self, value: str) -> Self:
        """Which projects to list: all, selected or deselected."""
        return self.set_param("selected", value)

    def validate(self) -> None:
        super().validate()
        validate_required(self._params, "key", "Profile key is required")

    def has_more_pages(self, response: ProfileProjectsResponse, current_page: int) -> bool:
        if response.more is not None and response.page_info is None:
            return response.more
        return super().has_more_pages(response, current_page)

    def get_items(self, response: ProfileProjectsResponse) -> list[ProfileProject]:
        return response.results


def validate_profile_identification(params: Mapping[str, Any]) -> None:
    """Require ``key`` or both ``qualityProfile`` and ``language``.

    Raises:
        SonarQubeValidationError: Profile cannot be identified
    """
    if params.get("key"):
        return
    if params.get("qualityProfile") and params.get("language"):
        return
    raise SonarQubeValidationError(
        "Either key or both qualityProfile and language must be provided",
        field="key",
    )
