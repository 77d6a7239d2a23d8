"""Client for the issues API."""

import logging
from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders import DEFAULT_PAGE_SIZE
from sonarqube_client.core.builders.validation import MAX_PAGE_SIZE
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.issues.builders import SearchIssuesBuilder
from sonarqube_client.resources.issues.models import (
    BulkChangeResponse,
    Issue,
    IssueChangelog,
    IssueResponse,
    SearchIssuesResponse,
)

logger = logging.getLogger(__name__)


class IssuesClient(BaseClient):
    """Search and manage issues."""

    def search(self) -> SearchIssuesBuilder:
        """Start an issue search.

        Returns:
            Builder for /api/issues/search
        """
        return SearchIssuesBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchIssuesResponse:
        data = await self._get("/api/issues/search", params=self._with_organization(params))
        response = SearchIssuesResponse(**data)
        logger.debug(f"Received {len(response.issues)} issues (total={response.total})")
        return response

    async def search_all(
        self,
        projects: list[str] | None = None,
        resolved: bool | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Issue]:
        """Collect all matching issues into a list.

        Args:
            projects: Optional project keys to filter on
            resolved: Only resolved (True) or unresolved (False) issues
            page_size: Number of issues per page (default: 100)

        Returns:
            List of issues
        """
        builder = self.search().page_size(page_size)
        if projects:
            builder.with_projects(projects)
        if resolved is not None:
            builder.set_param("resolved", resolved)

        issues = [issue async for issue in builder.all()]
        logger.debug(f"Total issues fetched: {len(issues)}")
        return issues

    async def add_comment(self, issue: str, text: str) -> IssueResponse:
        """Add a comment to an issue.

        Args:
            issue: Issue key
            text: Comment text (markdown)

        Returns:
            Updated issue
        """
        data = await self._post("/api/issues/add_comment", data={"issue": issue, "text": text})
        return IssueResponse(**data)

    async def edit_comment(self, comment: str, text: str) -> IssueResponse:
        data = await self._post("/api/issues/edit_comment", data={"comment": comment, "text": text})
        return IssueResponse(**data)

    async def delete_comment(self, comment: str) -> IssueResponse:
        data = await self._post("/api/issues/delete_comment", data={"comment": comment})
        return IssueResponse(**data)

    async def assign(self, issue: str, assignee: str | None = None) -> IssueResponse:
        """Assign an issue, or unassign it when no assignee is given."""
        data = await self._post("/api/issues/assign", data={"issue": issue, "assignee": assignee})
        return IssueResponse(**data)

    async def do_transition(self, issue: str, transition: str) -> IssueResponse:
        """Apply a workflow transition (see ``IssueTransition``)."""
        data = await self._post("/api/issues/do_transition", data={"issue": issue, "transition": transition})
        return IssueResponse(**data)

    async def set_tags(self, issue: str, tags: list[str]) -> IssueResponse:
        """Replace the tags of an issue; an empty list removes all tags."""
        data = await self._post("/api/issues/set_tags", data={"issue": issue, "tags": ",".join(tags)})
        return IssueResponse(**data)

    async def set_severity(
        self,
        issue: str,
        severity: str | None = None,
        impact: str | None = None,
    ) -> IssueResponse:
        """Change the severity of an issue.

        Args:
            issue: Issue key
            severity: Legacy severity (BLOCKER, CRITICAL, ...)
            impact: Impact override, e.g. ``MAINTAINABILITY=HIGH``

        Raises:
            SonarQubeValidationError: Neither severity nor impact given
        """
        if severity is None and impact is None:
            raise SonarQubeValidationError("Either severity or impact is required", field="severity")
        data = await self._post(
            "/api/issues/set_severity",
            data={"issue": issue, "severity": severity, "impact": impact},
        )
        return IssueResponse(**data)

    async def bulk_change(
        self,
        issues: list[str],
        *,
        add_tags: list[str] | None = None,
        remove_tags: list[str] | None = None,
        assign: str | None = None,
        set_severity: str | None = None,
        set_type: str | None = None,
        do_transition: str | None = None,
        comment: str | None = None,
        send_notifications: bool | None = None,
    ) -> BulkChangeResponse:
        """Apply the same change to up to 500 issues.

        Args:
            issues: Issue keys
            add_tags: Tags to add
            remove_tags: Tags to remove
            assign: Login to assign the issues to
            set_severity: New severity
            set_type: New type
            do_transition: Transition to apply
            comment: Comment to add
            send_notifications: Notify users

        Returns:
            Summary of the operation

        Raises:
            SonarQubeValidationError: No keys, too many keys, or no action
        """
        if not issues:
            raise SonarQubeValidationError("At least one issue key is required", field="issues")
        if len(issues) > MAX_PAGE_SIZE:
            raise SonarQubeValidationError(
                f"Cannot change more than {MAX_PAGE_SIZE} issues at once",
                field="issues",
            )

        actions = {
            "add_tags": add_tags,
            "remove_tags": remove_tags,
            "assign": assign,
            "set_severity": set_severity,
            "set_type": set_type,
            "do_transition": do_transition,
            "comment": comment,
        }
        if not any(actions.values()):
            raise SonarQubeValidationError("At least one bulk change action is required")

        data = await self._post(
            "/api/issues/bulk_change",
            data={"issues": issues, **actions, "sendNotifications": send_notifications},
        )
        return BulkChangeResponse(**data)

    async def changelog(self, issue: str) -> IssueChangelog:
        data = await self._get("/api/issues/changelog", params={"issue": issue})
        return IssueChangelog(**data)

    async def search_authors(
        self,
        query: str | None = None,
        project: str | None = None,
        page_size: int | None = None,
    ) -> list[str]:
        """Search SCM authors of issues.

        Returns:
            Author names
        """
        data = await self._get(
            "/api/issues/authors",
            params=self._with_organization({"q": query, "project": project, "ps": page_size}),
        )
        return list(data.get("authors", []))

    async def search_tags(
        self,
        query: str | None = None,
        project: str | None = None,
        branch: str | None = None,
        page_size: int | None = None,
    ) -> list[str]:
        """List tags matching a query.

        Returns:
            Tag names
        """
        data = await self._get(
            "/api/issues/tags",
            params=self._with_organization({"q": query, "project": project, "branch": branch, "ps": page_size}),
        )
        return list(data.get("tags", []))

    async def reindex(self, project: str) -> None:
        """Rebuild the issues index of a project (requires admin)."""
        await self._post("/api/issues/reindex", data={"project": project})
