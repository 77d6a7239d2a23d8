"""Client for the sources API."""

import logging

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_mutually_exclusive
from sonarqube_client.resources.sources.models import ScmResponse, ShowSourceResponse, SourceLine, SourceLinesResponse

logger = logging.getLogger(__name__)


class SourcesClient(BaseClient):
    """Read source code and SCM data of analyzed files."""

    async def raw(self, key: str, branch: str | None = None, pull_request: str | None = None) -> str:
        """Get the raw source of a file.

        Args:
            key: File key (e.g., "projectKey:src/main.py")
            branch: Branch name
            pull_request: Pull request id

        Returns:
            File content
        """
        params = {"key": key, "branch": branch, "pullRequest": pull_request}
        validate_mutually_exclusive(params, "branch", "pullRequest")
        text: str = await self._get("/api/sources/raw", params=params, response_type="text")
        return text

    async def show(self, key: str, from_line: int | None = None, to_line: int | None = None) -> ShowSourceResponse:
        data = await self._get("/api/sources/show", params={"key": key, "from": from_line, "to": to_line})
        return ShowSourceResponse(**data)

    async def scm(
        self,
        key: str,
        from_line: int | None = None,
        to_line: int | None = None,
        commits_by_line: bool | None = None,
    ) -> ScmResponse:
        data = await self._get(
            "/api/sources/scm",
            params={"key": key, "from": from_line, "to": to_line, "commits_by_line": commits_by_line},
        )
        return ScmResponse(**data)

    async def lines(
        self,
        key: str,
        from_line: int | None = None,
        to_line: int | None = None,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> list[SourceLine]:
        """Get source lines with SCM and coverage data.

        Args:
            key: File key (e.g., "projectKey:src/main.py")
            from_line: First line (1-based, inclusive)
            to_line: Last line (inclusive)
            branch: Branch name
            pull_request: Pull request id

        Returns:
            Source lines
        """
        params = {"key": key, "from": from_line, "to": to_line, "branch": branch, "pullRequest": pull_request}
        validate_mutually_exclusive(params, "branch", "pullRequest")
        logger.debug(f"Fetching source lines for {key} from={from_line} to={to_line}")
        data = await self._get("/api/sources/lines", params=params)
        return SourceLinesResponse(**data).sources
