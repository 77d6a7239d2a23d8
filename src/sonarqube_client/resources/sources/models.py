"""Models for the sources API."""

import html
import re

from pydantic import Field

from sonarqube_client.models import SonarQubeModel


class SourceLine(SonarQubeModel):
    """Single line of source code.

    Retrieved from /api/sources/lines.
    """

    line: int = Field(description="Line number")
    code: str = Field(default="", description="Source code (may contain HTML tags)")
    scm_revision: str | None = Field(default=None, alias="scmRevision", description="SCM revision hash")
    scm_author: str | None = Field(default=None, alias="scmAuthor", description="Author email")
    scm_date: str | None = Field(default=None, alias="scmDate", description="Date of last modification")
    duplicated: bool = Field(default=False, description="Whether line is duplicated")
    is_new: bool = Field(default=False, alias="isNew", description="Whether line is new code")
    line_hits: int | None = Field(default=None, alias="lineHits")
    conditions: int | None = None
    covered_conditions: int | None = Field(default=None, alias="coveredConditions")

    @property
    def plain_code(self) -> str:
        """Get source code with HTML tags removed.

        Returns:
            Plain text source code
        """
        text = re.sub(r"<[^>]+>", "", self.code)
        return html.unescape(text)


class SourceLinesResponse(SonarQubeModel):
    """Response from /api/sources/lines."""

    sources: list[SourceLine] = Field(default_factory=list, description="Source code lines")


class ShowSourceResponse(SonarQubeModel):
    """Response from /api/sources/show: ``[line, html]`` pairs."""

    sources: list[tuple[int, str]] = Field(default_factory=list)


class ScmLine(SonarQubeModel):
    line: int
    author: str | None = None
    date: str | None = None
    revision: str | None = None


class ScmResponse(SonarQubeModel):
    """Response from /api/sources/scm.

    The server returns ``[line, author, date, revision]`` arrays.
    """

    scm: list[list[str | int]] = Field(default_factory=list)

    @property
    def lines(self) -> list[ScmLine]:
        result = []
        for entry in self.scm:
            padded = [*entry, None, None, None][:4]
            result.append(ScmLine(line=int(padded[0] or 0), author=padded[1], date=padded[2], revision=padded[3]))
        return result
