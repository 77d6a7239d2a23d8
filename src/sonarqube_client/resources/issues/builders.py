"""Builders for the issues API."""

from collections.abc import Sequence
from typing import Self

from sonarqube_client.core.builders import PaginatedBuilder
from sonarqube_client.core.builders.validation import (
    validate_mutually_exclusive,
    validate_requires,
)
from sonarqube_client.core.deprecation import deprecated
from sonarqube_client.resources.issues.models import Issue, SearchIssuesResponse

CLEAN_CODE_REPLACEMENT = "with_issue_statuses(), with_impact_severities() or with_impact_software_qualities()"


class SearchIssuesBuilder(PaginatedBuilder[SearchIssuesResponse, Issue]):
    """Builder for /api/issues/search.

    Example:
        >>> async for issue in client.issues.search().with_projects(["my-project"]).only_unresolved().all():
        ...     print(issue.key)
    """

    def with_components(self, component_keys: list[str]) -> Self:
        """Filter by component keys (files, directories or projects)."""
        return self.set_param("components", component_keys)

    @deprecated(
        "The componentKeys parameter was renamed to components",
        replacement="with_components()",
        deprecated_since="10.2",
        removal_date="2025-08-13",
        tags=["issues"],
    )
    def with_component_keys(self, component_keys: list[str]) -> Self:
        return self.set_param("componentKeys", component_keys)

    def with_projects(self, project_keys: list[str]) -> Self:
        return self.set_param("projects", project_keys)

    def with_issues(self, issue_keys: list[str]) -> Self:
        return self.set_param("issues", issue_keys)

    def with_rules(self, rules: list[str]) -> Self:
        return self.set_param("rules", rules)

    def with_tags(self, tags: list[str]) -> Self:
        return self.set_param("tags", tags)

    def with_languages(self, languages: list[str]) -> Self:
        return self.set_param("languages", languages)

    def with_scopes(self, scopes: list[str]) -> Self:
        """Filter by scope, ``MAIN`` or ``TEST``."""
        return self.set_param("scopes", scopes)

    # Clean Code taxonomy

    def with_issue_statuses(self, statuses: Sequence[str]) -> Self:
        """Filter by issue status (OPEN, CONFIRMED, FALSE_POSITIVE, ACCEPTED, FIXED)."""
        return self.set_param("issueStatuses", list(statuses))

    def with_impact_severities(self, severities: Sequence[str]) -> Self:
        return self.set_param("impactSeverities", list(severities))

    def with_impact_software_qualities(self, qualities: Sequence[str]) -> Self:
        return self.set_param("impactSoftwareQualities", list(qualities))

    def with_clean_code_attribute_categories(self, categories: Sequence[str]) -> Self:
        return self.set_param("cleanCodeAttributeCategories", list(categories))

    # Legacy taxonomy

    @deprecated(
        "Issue statuses were replaced by the Clean Code issue statuses",
        replacement="with_issue_statuses()",
        deprecated_since="10.4",
        removal_date="2025-12-31",
        tags=["issues", "clean-code"],
    )
    def with_statuses(self, statuses: Sequence[str]) -> Self:
        return self.set_param("statuses", list(statuses))

    @deprecated(
        "Issue types were replaced by software qualities",
        replacement=CLEAN_CODE_REPLACEMENT,
        deprecated_since="10.2",
        removal_date="2025-12-31",
        tags=["issues", "clean-code"],
    )
    def with_types(self, types: Sequence[str]) -> Self:
        return self.set_param("types", list(types))

    @deprecated(
        "Severities were replaced by impact severities",
        replacement="with_impact_severities()",
        deprecated_since="10.2",
        removal_date="2025-12-31",
        tags=["issues", "clean-code"],
    )
    def with_severities(self, severities: Sequence[str]) -> Self:
        return self.set_param("severities", list(severities))

    @deprecated(
        "Resolutions were folded into the Clean Code issue statuses",
        replacement="with_issue_statuses()",
        deprecated_since="10.4",
        removal_date="2025-12-31",
        tags=["issues", "clean-code"],
    )
    def with_resolutions(self, resolutions: Sequence[str]) -> Self:
        return self.set_param("resolutions", list(resolutions))

    @deprecated(
        "facetMode 'debt' is no longer supported",
        replacement="with_facets()",
        deprecated_since="7.0",
        removal_date="2025-12-31",
        tags=["issues"],
    )
    def with_facet_mode(self, mode: str) -> Self:
        return self.set_param("facetMode", mode)

    # People

    def assigned_to(self, assignee: str) -> Self:
        return self.set_param("assignees", [assignee])

    def assigned_to_any(self, assignees: list[str]) -> Self:
        return self.set_param("assignees", assignees)

    def by_author(self, author: str) -> Self:
        return self.set_param("author", author)

    def by_authors(self, authors: list[str]) -> Self:
        return self.set_param("authors", authors)

    def only_assigned(self) -> Self:
        return self.set_param("assigned", True)

    def only_unassigned(self) -> Self:
        return self.set_param("assigned", False)

    def only_resolved(self) -> Self:
        return self.set_param("resolved", True)

    def only_unresolved(self) -> Self:
        return self.set_param("resolved", False)

    # Dates

    def created_after(self, date: str) -> Self:
        return self.set_param("createdAfter", date)

    def created_before(self, date: str) -> Self:
        return self.set_param("createdBefore", date)

    def created_at(self, date: str) -> Self:
        """Filter on the exact creation date of an analysis."""
        return self.set_param("createdAt", date)

    def created_in_last(self, period: str) -> Self:
        """Filter on a period before now, e.g. ``1m2w`` for one month and two weeks."""
        return self.set_param("createdInLast", period)

    def in_new_code_period(self, enabled: bool = True) -> Self:
        return self.set_param("inNewCodePeriod", enabled)

    # Branches and pull requests

    def on_branch(self, branch: str) -> Self:
        return self.set_param("branch", branch)

    def on_pull_request(self, pull_request: str) -> Self:
        return self.set_param("pullRequest", pull_request)

    def fixed_in_pull_request(self, pull_request: str) -> Self:
        """Return issues that will be fixed by merging a pull request.

        Requires ``with_components()`` to name the target branch's component.
        """
        return self.set_param("fixedInPullRequest", pull_request)

    # Security standards

    def with_cwe(self, cwe_ids: list[str]) -> Self:
        return self.set_param("cwe", cwe_ids)

    def with_owasp_top10(self, categories: list[str]) -> Self:
        return self.set_param("owaspTop10", categories)

    def with_owasp_top10_2021(self, categories: list[str]) -> Self:
        return self.set_param("owaspTop10-2021", categories)

    def with_owasp_asvs(self, requirements: list[str]) -> Self:
        return self.set_param("owaspAsvs-4.0", requirements)

    def with_owasp_asvs_level(self, level: int) -> Self:
        """Restrict OWASP ASVS 4.0 requirements to a level (1-3)."""
        return self.set_param("owaspAsvsLevel", level)

    def with_sans_top25(self, categories: list[str]) -> Self:
        return self.set_param("sansTop25", categories)

    def with_sonarsource_security(self, categories: list[str]) -> Self:
        return self.set_param("sonarsourceSecurity", categories)

    # Output

    def in_organization(self, organization: str) -> Self:
        return self.set_param("organization", organization)

    def on_component_only(self, enabled: bool = True) -> Self:
        return self.set_param("onComponentOnly", enabled)

    def sort_by(self, field: str, ascending: bool = True) -> Self:
        self.set_param("s", field)
        return self.set_param("asc", ascending)

    def with_additional_fields(self, fields: list[str]) -> Self:
        return self.set_param("additionalFields", fields)

    def with_facets(self, facets: list[str]) -> Self:
        return self.set_param("facets", facets)

    def validate(self) -> None:
        """Check search constraints.

        Raises:
            SonarQubeValidationError: Page size out of range or conflicting filters
        """
        super().validate()
        validate_requires(self._params, "fixedInPullRequest", "components")
        validate_mutually_exclusive(self._params, "createdAt", "createdAfter", "createdBefore", "createdInLast")
        validate_mutually_exclusive(self._params, "createdInLast", "createdAfter", "createdBefore")
        validate_mutually_exclusive(self._params, "branch", "pullRequest")
        validate_requires(self._params, "owaspAsvsLevel", "owaspAsvs-4.0")

    def get_items(self, response: SearchIssuesResponse) -> list[Issue]:
        return response.issues
