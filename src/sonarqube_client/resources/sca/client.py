"""Client for the software composition analysis (SCA) API.

SBOM reports are only available on SonarQube Server editions with Advanced
Security and on SonarCloud.
"""

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_mutually_exclusive, validate_required
from sonarqube_client.resources.sca.models import (
    ComponentType,
    SbomFormat,
    SbomMetadata,
    SbomReport,
    VulnerabilitySummary,
)

logger = logging.getLogger(__name__)

SBOM_REPORTS = "/api/v2/sca/sbom-reports"


def _report_params(
    project_key: str,
    branch: str | None,
    pull_request: str | None,
    **extra: Any,
) -> dict[str, Any]:
    params = {"projectKey": project_key, "branch": branch, "pullRequest": pull_request, **extra}
    validate_required(params, "projectKey", "Project key is required")
    validate_mutually_exclusive(params, "branch", "pullRequest")
    return params


class ScaClient(BaseClient):
    """SBOM reports and dependency vulnerabilities (v2 API)."""

    async def get_sbom_report_v2(
        self,
        project_key: str,
        branch: str | None = None,
        pull_request: str | None = None,
        include_vulnerabilities: bool | None = None,
        include_licenses: bool | None = None,
        component_types: Sequence[ComponentType | str] | None = None,
    ) -> SbomReport:
        """Get the SBOM of a project in the native JSON format.

        Args:
            project_key: Project key
            branch: Branch name
            pull_request: Pull request id
            include_vulnerabilities: Include known vulnerabilities
            include_licenses: Include license details
            component_types: Only include these component types

        Returns:
            Parsed SBOM report

        Raises:
            SonarQubeValidationError: Missing project key, or both branch and pull request given
        """
        params = _report_params(
            project_key,
            branch,
            pull_request,
            format=SbomFormat.JSON,
            includeVulnerabilities=include_vulnerabilities,
            includeLicenses=include_licenses,
            componentTypes=list(component_types) if component_types else None,
        )
        data = await self._get(SBOM_REPORTS, params=params, headers={"Accept": "application/json"})
        report = SbomReport(**data)
        logger.debug(f"SBOM for {project_key}: {len(report.components)} components")
        return report

    async def download_sbom_report_v2(
        self,
        project_key: str,
        format: SbomFormat | str = SbomFormat.JSON,
        branch: str | None = None,
        pull_request: str | None = None,
        include_vulnerabilities: bool | None = None,
        include_licenses: bool | None = None,
    ) -> str | bytes:
        """Download the SBOM of a project in a given format.

        JSON based formats are returned as text, XML and RDF formats as bytes.

        Returns:
            Report content
        """
        sbom_format = SbomFormat(format)
        params = _report_params(
            project_key,
            branch,
            pull_request,
            format=sbom_format,
            includeVulnerabilities=include_vulnerabilities,
            includeLicenses=include_licenses,
        )
        if sbom_format.is_text:
            return await self._get(
                SBOM_REPORTS, params=params, headers={"Accept": "application/json"}, response_type="text"
            )
        return await self._get(
            SBOM_REPORTS, params=params, headers={"Accept": "application/octet-stream"}, response_type="bytes"
        )

    async def stream_sbom_report_v2(
        self,
        project_key: str,
        format: SbomFormat | str = SbomFormat.JSON,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> AsyncIterator[bytes]:
        """Stream a large SBOM report in chunks.

        Example:
            >>> async for chunk in client.sca.stream_sbom_report_v2("my-project", "cyclonedx-xml"):
            ...     out.write(chunk)
        """
        params = _report_params(project_key, branch, pull_request, format=SbomFormat(format))
        async for chunk in self._stream(
            "GET", SBOM_REPORTS, params=params, headers={"Accept": "application/octet-stream"}
        ):
            yield chunk

    async def get_sbom_metadata_v2(
        self,
        project_key: str,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> SbomMetadata:
        params = _report_params(project_key, branch, pull_request)
        data = await self._get(f"{SBOM_REPORTS}/metadata", params=params)
        return SbomMetadata(**data)

    async def get_vulnerability_summary_v2(
        self,
        project_key: str,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> VulnerabilitySummary:
        """Get vulnerability counts by severity for a project."""
        params = _report_params(project_key, branch, pull_request)
        data = await self._get("/api/v2/sca/vulnerabilities/summary", params=params)
        return VulnerabilitySummary(**data)
