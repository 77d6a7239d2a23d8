"""Models for the quality profiles API."""

from typing import Any

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class QualityProfile(SonarQubeModel):
    """Quality profile summary."""

    key: str
    name: str
    language: str
    language_name: str | None = Field(default=None, alias="languageName")
    is_inherited: bool = Field(default=False, alias="isInherited")
    is_built_in: bool = Field(default=False, alias="isBuiltIn")
    is_default: bool = Field(default=False, alias="isDefault")
    parent_key: str | None = Field(default=None, alias="parentKey")
    parent_name: str | None = Field(default=None, alias="parentName")
    active_rule_count: int = Field(default=0, alias="activeRuleCount")
    active_deprecated_rule_count: int = Field(default=0, alias="activeDeprecatedRuleCount")
    project_count: int | None = Field(default=None, alias="projectCount")
    rules_updated_at: str | None = Field(default=None, alias="rulesUpdatedAt")
    last_used: str | None = Field(default=None, alias="lastUsed")
    organization: str | None = None


class SearchProfilesResponse(SonarQubeModel):
    profiles: list[QualityProfile] = Field(default_factory=list)
    actions: dict[str, Any] = Field(default_factory=dict)


class CreateProfileResponse(SonarQubeModel):
    profile: QualityProfile
    warnings: list[str] = Field(default_factory=list)


class BulkRuleChangeResponse(SonarQubeModel):
    """Result of activate_rules / deactivate_rules."""

    succeeded: int = 0
    failed: int = 0
    errors: list[dict[str, Any]] = Field(default_factory=list)


class ChangelogEvent(SonarQubeModel):
    date: str
    action: str
    rule_key: str | None = Field(default=None, alias="ruleKey")
    rule_name: str | None = Field(default=None, alias="ruleName")
    author_login: str | None = Field(default=None, alias="authorLogin")
    author_name: str | None = Field(default=None, alias="authorName")
    params: dict[str, Any] = Field(default_factory=dict)


class ProfileChangelogResponse(PaginatedResponse):
    events: list[ChangelogEvent] = Field(default_factory=list)


class ProfileProject(SonarQubeModel):
    key: str
    name: str
    id: str | int | None = None
    selected: bool = False


class ProfileProjectsResponse(PaginatedResponse):
    """Response from /api/qualityprofiles/projects.

    Older servers report ``more`` instead of a total.
    """

    results: list[ProfileProject] = Field(default_factory=list)
    more: bool | None = None


class InheritanceProfile(SonarQubeModel):
    key: str
    name: str
    parent: str | None = None
    active_rule_count: int = Field(default=0, alias="activeRuleCount")
    overriding_rule_count: int = Field(default=0, alias="overridingRuleCount")
    is_built_in: bool = Field(default=False, alias="isBuiltIn")


class InheritanceResponse(SonarQubeModel):
    profile: InheritanceProfile
    ancestors: list[InheritanceProfile] = Field(default_factory=list)
    children: list[InheritanceProfile] = Field(default_factory=list)


class ComparedRule(SonarQubeModel):
    key: str
    name: str | None = None
    severity: str | None = None


class CompareResponse(SonarQubeModel):
    """Differences between two profiles."""

    left: dict[str, Any] = Field(default_factory=dict)
    right: dict[str, Any] = Field(default_factory=dict)
    in_left: list[ComparedRule] = Field(default_factory=list, alias="inLeft")
    in_right: list[ComparedRule] = Field(default_factory=list, alias="inRight")
    modified: list[dict[str, Any]] = Field(default_factory=list)
    same: list[ComparedRule] = Field(default_factory=list)


class ProfileFormat(SonarQubeModel):
    """Exporter or importer description."""

    key: str
    name: str
    languages: list[str] = Field(default_factory=list)
