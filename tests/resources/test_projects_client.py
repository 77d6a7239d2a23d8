"""Tests for the projects resource."""

from urllib.parse import parse_qs

import httpx
import pytest
import respx

from sonarqube_client.config import SonarQubeClientConfig
from sonarqube_client.core.deprecation import SonarQubeDeprecationWarning
from sonarqube_client.exceptions import SonarQubeAuthorizationError, SonarQubeValidationError
from sonarqube_client.resources.projects import ProjectsClient

URL = "https://sonar.test.com"


def form(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode())


class TestSearchProjects:
    """Tests for project search."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_legacy_paging_is_followed(self, config: SonarQubeClientConfig) -> None:
        route = respx.get(f"{URL}/api/projects/search").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "total": 3,
                        "p": 1,
                        "ps": 2,
                        "components": [{"key": "a", "name": "A"}, {"key": "b", "name": "B"}],
                    },
                ),
                httpx.Response(200, json={"total": 3, "p": 2, "ps": 2, "components": [{"key": "c", "name": "C"}]}),
            ]
        )

        async with ProjectsClient(config) as client:
            projects = [p.key async for p in client.search().query("svc").page_size(2).all()]

        assert projects == ["a", "b", "c"]
        assert route.call_count == 2
        assert route.calls[0].request.url.params["q"] == "svc"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_all(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/projects/search").mock(
            return_value=httpx.Response(
                200,
                json={
                    "paging": {"pageIndex": 1, "pageSize": 100, "total": 1},
                    "components": [
                        {
                            "key": "a",
                            "name": "A",
                            "visibility": "private",
                            "lastAnalysisDate": "2024-03-01T10:00:00+0000",
                        }
                    ],
                },
            )
        )

        async with ProjectsClient(config) as client:
            projects = await client.search_all()

        assert projects[0].visibility == "private"
        assert projects[0].last_analysis_date == "2024-03-01T10:00:00+0000"

    @pytest.mark.asyncio
    @respx.mock
    async def test_forbidden(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/projects/search").mock(
            return_value=httpx.Response(403, json={"errors": [{"msg": "Insufficient privileges"}]})
        )

        async with ProjectsClient(config) as client:
            with pytest.raises(SonarQubeAuthorizationError):
                await client.search().execute()


class TestProjectAdministration:
    """Tests for project write operations."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_create(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(f"{URL}/api/projects/create").mock(
            return_value=httpx.Response(
                200, json={"project": {"key": "svc", "name": "Service", "visibility": "private"}}
            )
        )

        async with ProjectsClient(config) as client:
            response = await client.create("svc", "Service", visibility="private", main_branch="main")

        assert response.project.key == "svc"
        assert form(route.calls.last.request) == {
            "project": ["svc"],
            "name": ["Service"],
            "visibility": ["private"],
            "mainBranch": ["main"],
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_key(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(f"{URL}/api/projects/update_key").mock(return_value=httpx.Response(204))

        async with ProjectsClient(config) as client:
            await client.update_key("old", "new")

        assert form(route.calls.last.request) == {"from": ["old"], "to": ["new"]}

    @pytest.mark.asyncio
    @respx.mock
    async def test_bulk_delete(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(f"{URL}/api/projects/bulk_delete").mock(return_value=httpx.Response(204))

        async with ProjectsClient(config) as client:
            await client.bulk_delete().with_projects(["a", "b"]).execute()

        assert form(route.calls.last.request) == {"projects": ["a,b"]}

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_bulk_delete_needs_a_filter(self, config: SonarQubeClientConfig) -> None:
        route = respx.post(f"{URL}/api/projects/bulk_delete")

        async with ProjectsClient(config) as client:
            with pytest.raises(SonarQubeValidationError, match="At least one of analyzedBefore, projects, q"):
                await client.bulk_delete().only_provisioned().execute()

        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_export_findings(self, config: SonarQubeClientConfig) -> None:
        respx.get(f"{URL}/api/projects/export_findings").mock(
            return_value=httpx.Response(
                200,
                json={"export_findings": [{"key": "f1", "type": "BUG", "ruleKey": "py:S1", "lineNumber": 3}]},
            )
        )

        async with ProjectsClient(config) as client:
            findings = await client.export_findings("svc", branch="main")

        assert findings[0].rule_key == "py:S1"
        assert findings[0].line_number == 3

    @pytest.mark.asyncio
    async def test_export_findings_branch_and_pull_request(self, config: SonarQubeClientConfig) -> None:
        async with ProjectsClient(config) as client:
            with pytest.raises(SonarQubeValidationError, match="Cannot use both branch and pullRequest"):
                await client.export_findings("svc", branch="main", pull_request="4")

    @pytest.mark.asyncio
    @respx.mock
    async def test_bulk_update_key_is_deprecated(self, config: SonarQubeClientConfig) -> None:
        respx.post(f"{URL}/api/projects/bulk_update_key").mock(
            return_value=httpx.Response(200, json={"keys": [{"key": "a", "newKey": "b", "duplicate": False}]})
        )

        async with ProjectsClient(config) as client:
            with pytest.warns(SonarQubeDeprecationWarning, match="ProjectsClient.bulk_update_key"):
                response = await client.bulk_update_key("a", "a", "b", dry_run=True)

        assert response.keys[0].new_key == "b"
