"""Models for the issues API."""

from enum import Enum
from typing import Any

from pydantic import Field

from sonarqube_client.models import Facet, PaginatedResponse, SonarQubeModel, TextRange


class ImpactSeverity(str, Enum):
    """Impact severity in the Clean Code taxonomy."""

    INFO = "INFO"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    BLOCKER = "BLOCKER"


class SoftwareQuality(str, Enum):
    """Software quality affected by an issue."""

    MAINTAINABILITY = "MAINTAINABILITY"
    RELIABILITY = "RELIABILITY"
    SECURITY = "SECURITY"


class IssueTransition(str, Enum):
    """Workflow transitions accepted by ``do_transition``."""

    CONFIRM = "confirm"
    UNCONFIRM = "unconfirm"
    REOPEN = "reopen"
    RESOLVE = "resolve"
    FALSE_POSITIVE = "falsepositive"
    WONT_FIX = "wontfix"
    ACCEPT = "accept"
    CLOSE = "close"


class Impact(SonarQubeModel):
    """Impact of an issue on a software quality."""

    software_quality: str = Field(alias="softwareQuality")
    severity: str


class IssueComment(SonarQubeModel):
    """Comment on an issue."""

    key: str
    login: str | None = None
    html_text: str | None = Field(default=None, alias="htmlText")
    markdown: str | None = None
    updatable: bool = False
    created_at: str | None = Field(default=None, alias="createdAt")


class Issue(SonarQubeModel):
    """Represents a SonarQube issue.

    Supports both the Clean Code (``issueStatus``, ``impacts``) and the
    legacy (``status``, ``severity``, ``type``) formats.
    """

    key: str = Field(description="Unique issue identifier")
    rule: str = Field(description="Rule identifier (e.g., 'python:S1481')")
    message: str = Field(default="", description="Issue description")
    component: str = Field(description="Component key")
    project: str | None = Field(default=None, description="Project key")
    line: int | None = Field(default=None, description="Line number where issue occurs")
    hash: str | None = None
    text_range: TextRange | None = Field(default=None, alias="textRange")
    flows: list[dict[str, Any]] = Field(default_factory=list)

    issue_status: str | None = Field(default=None, alias="issueStatus", description="Issue status (new API)")
    impacts: list[Impact] = Field(default_factory=list, description="Impacts on software qualities (new API)")
    clean_code_attribute: str | None = Field(default=None, alias="cleanCodeAttribute")
    clean_code_attribute_category: str | None = Field(default=None, alias="cleanCodeAttributeCategory")

    # Old API format fields
    severity: str | None = Field(default=None, description="Issue severity (old API)")
    status: str | None = Field(default=None, description="Issue status (old API)")
    type: str | None = Field(default=None, description="Issue type (old API)")
    resolution: str | None = None

    effort: str | None = None
    debt: str | None = None
    assignee: str | None = None
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    transitions: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    comments: list[IssueComment] = Field(default_factory=list)
    creation_date: str | None = Field(default=None, alias="creationDate")
    update_date: str | None = Field(default=None, alias="updateDate")
    close_date: str | None = Field(default=None, alias="closeDate")

    @property
    def effective_status(self) -> str | None:
        """Status in whichever format the server returned."""
        return self.issue_status or self.status

    @property
    def highest_impact_severity(self) -> str | None:
        """Most severe impact, or the legacy severity if there are no impacts."""
        if not self.impacts:
            return self.severity
        order = [s.value for s in ImpactSeverity]
        ranked = [impact.severity for impact in self.impacts if impact.severity in order]
        if not ranked:
            return self.impacts[0].severity
        return max(ranked, key=order.index)


class IssueComponent(SonarQubeModel):
    """Component referenced by issues in a search response."""

    key: str
    name: str | None = None
    qualifier: str | None = None
    path: str | None = None
    enabled: bool = True


class SearchIssuesResponse(PaginatedResponse):
    """Response from /api/issues/search.

    Older servers put ``total``, ``p`` and ``ps`` at the top level; these are
    normalised into ``paging``.
    """

    issues: list[Issue] = Field(default_factory=list)
    components: list[IssueComponent] = Field(default_factory=list)
    facets: list[Facet] = Field(default_factory=list)
    effort_total: int | None = Field(default=None, alias="effortTotal")

    @property
    def total(self) -> int:
        """Total number of matching issues."""
        return self.paging.total if self.paging else len(self.issues)


class IssueResponse(SonarQubeModel):
    """Response of single-issue write operations."""

    issue: Issue
    components: list[IssueComponent] = Field(default_factory=list)


class BulkChangeResponse(SonarQubeModel):
    """Summary of a bulk change."""

    total: int = 0
    success: int = 0
    ignored: int = 0
    failures: int = 0


class ChangelogDiff(SonarQubeModel):
    key: str
    old_value: str | None = Field(default=None, alias="oldValue")
    new_value: str | None = Field(default=None, alias="newValue")


class ChangelogEntry(SonarQubeModel):
    """One changelog entry."""

    user: str | None = None
    user_name: str | None = Field(default=None, alias="userName")
    creation_date: str | None = Field(default=None, alias="creationDate")
    diffs: list[ChangelogDiff] = Field(default_factory=list)


class IssueChangelog(SonarQubeModel):
    """Response from /api/issues/changelog."""

    changelog: list[ChangelogEntry] = Field(default_factory=list)
