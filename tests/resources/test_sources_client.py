"""Tests for the sources resource."""

import httpx
import pytest
import respx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.exceptions import SonarQubeValidationError
from sonarqube_client.resources.sources import SourcesClient
from sonarqube_client.resources.sources.models import SourceLine

URL = "https://sonar.test.com"
FILE_KEY = "my-project:src/main.py"


class TestSourceLine:
    """Tests for SourceLine."""

    def test_plain_code_strips_highlighting(self) -> None:
        line = SourceLine(line=1, code='<span class="k">def</span> f(a &lt; b):')

        assert line.plain_code == "def f(a < b):"


class TestSourcesClient:
    """Tests for SourcesClient."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_raw(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/sources/raw").mock(return_value=httpx.Response(200, text="print('hi')\n"))

        async with SourcesClient(config) as client:
            content = await client.raw(FILE_KEY, branch="main")

        assert content == "print('hi')\n"
        assert dict(route.calls.last.request.url.params) == {"key": FILE_KEY, "branch": "main"}

    @pytest.mark.asyncio
    async def test_raw_branch_and_pull_request(self, config: SonarQubeClientConfig) -> None:
        async with SourcesClient(config) as client:
            with pytest.raises(SonarQubeValidationError, match="Cannot use both branch and pullRequest"):
                await client.raw(FILE_KEY, branch="main", pull_request="9")

    @pytest.mark.asyncio
    @respx.mock
    async def test_lines(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/sources/lines").mock(
            return_value=httpx.Response(
                200,
                json={
                    "sources": [
                        {"line": 10, "code": "x = 1", "scmAuthor": "dev@example.com", "isNew": True, "lineHits": 3},
                        {"line": 11, "code": "y = 2", "duplicated": True},
                    ]
                },
            )
        )

        async with SourcesClient(config) as client:
            lines = await client.lines(FILE_KEY, from_line=10, to_line=11)

        assert [line.line for line in lines] == [10, 11]
        assert lines[0].scm_author == "dev@example.com"
        assert lines[0].is_new and lines[0].line_hits == 3
        assert lines[1].duplicated
        assert dict(route.calls.last.request.url.params) == {"key": FILE_KEY, "from": "10", "to": "11"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_show(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/sources/show").mock(
            return_value=httpx.Response(200, json={"sources": [[1, "import os"], [2, ""]]})
        )

        async with SourcesClient(config) as client:
            response = await client.show(FILE_KEY)

        assert response.sources == [(1, "import os"), (2, "")]

    @pytest.mark.asyncio
    @respx.mock
    async def test_scm(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/sources/scm").mock(
            return_value=httpx.Response(
                200,
                json={"scm": [[1, "dev@example.com", "2024-03-01T10:00:00+0000", "a1b2"], [2, "ops@example.com"]]},
            )
        )

        async with SourcesClient(config) as client:
            response = await client.scm(FILE_KEY, commits_by_line=True)

        lines = response.lines
        assert lines[0].revision == "a1b2"
        assert lines[1].author == "ops@example.com"
        assert lines[1].revision is None
