"""Models for the software composition analysis (SCA) API."""

from enum import Enum
from typing import Any

from pydantic import Field

from sonarqube_client.models import SonarQubeModel


class SbomFormat(str, Enum):
    """Output formats supported by the SBOM report endpoint."""

    JSON = "json"
    SPDX_JSON = "spdx-json"
    SPDX_RDF = "spdx-rdf"
    CYCLONEDX_JSON = "cyclonedx-json"
    CYCLONEDX_XML = "cyclonedx-xml"

    @property
    def is_text(self) -> bool:
        """Whether the report is returned as text rather than binary."""
        return self in (SbomFormat.JSON, SbomFormat.SPDX_JSON, SbomFormat.CYCLONEDX_JSON)


class ComponentType(str, Enum):
    LIBRARY = "library"
    APPLICATION = "application"
    FRAMEWORK = "framework"
    OPERATING_SYSTEM = "operating-system"
    DEVICE = "device"
    FILE = "file"


class SbomComponent(SonarQubeModel):
    """A third-party or first-party component found by the analysis."""

    id: str
    name: str
    type: str | None = None
    ecosystem: str | None = None
    version: str | None = None
    purl: str | None = Field(default=None, description="Package URL")
    scope: str | None = None
    licenses: list[str] = Field(default_factory=list)
    description: str | None = None
    coordinates: dict[str, Any] = Field(default_factory=dict)


class SbomDependency(SonarQubeModel):
    component_id: str = Field(alias="componentId")
    depends_on: list[str] = Field(default_factory=list, alias="dependsOn")
    scope: str | None = None
    relationship: str | None = Field(default=None, description="direct or transitive")
    optional: bool = False


class SbomVulnerability(SonarQubeModel):
    """A known vulnerability affecting one or more components."""

    id: str
    source: str | None = Field(default=None, description="NVD, OSV, GHSA or SONAR")
    summary: str = ""
    description: str | None = None
    cvss: dict[str, Any] | None = None
    dates: dict[str, Any] = Field(default_factory=dict)
    affects: list[dict[str, Any]] = Field(default_factory=list)
    fixes: list[dict[str, Any]] = Field(default_factory=list)
    references: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def severity(self) -> str | None:
        """CVSS severity, if a score is attached."""
        return self.cvss.get("severity") if self.cvss else None


class SbomLicense(SonarQubeModel):
    spdx_id: str | None = Field(default=None, alias="spdxId")
    name: str
    url: str | None = None
    osi_approved: bool | None = Field(default=None, alias="osiApproved")
    category: str | None = Field(default=None, description="permissive, copyleft, proprietary, public-domain, unknown")
    risk_level: str | None = Field(default=None, alias="riskLevel")
    components: list[str] = Field(default_factory=list)


class SbomDocument(SonarQubeModel):
    id: str
    spec_version: str | None = Field(default=None, alias="specVersion")
    created_at: str | None = Field(default=None, alias="createdAt")
    creator: dict[str, Any] = Field(default_factory=dict)
    primary_component: SbomComponent | None = Field(default=None, alias="primaryComponent")


class SbomProjectInfo(SonarQubeModel):
    key: str
    name: str | None = None
    branch: str | None = None
    pull_request: str | None = Field(default=None, alias="pullRequest")


class SbomAnalysisInfo(SonarQubeModel):
    analysis_id: str | None = Field(default=None, alias="analysisId")
    completed_at: str | None = Field(default=None, alias="completedAt")
    total_components: int = Field(default=0, alias="totalComponents")
    total_vulnerabilities: int | None = Field(default=None, alias="totalVulnerabilities")
    total_licenses: int | None = Field(default=None, alias="totalLicenses")


class SbomMetadata(SonarQubeModel):
    """Metadata describing an SBOM report without its content."""

    project: SbomProjectInfo
    analysis: SbomAnalysisInfo | None = None
    generation: dict[str, Any] = Field(default_factory=dict)


class SbomReport(SonarQubeModel):
    """SBOM report in the native JSON format."""

    document: SbomDocument
    components: list[SbomComponent] = Field(default_factory=list)
    dependencies: list[SbomDependency] = Field(default_factory=list)
    vulnerabilities: list[SbomVulnerability] = Field(default_factory=list)
    licenses: list[SbomLicense] = Field(default_factory=list)
    metadata: SbomMetadata | None = None

    def direct_dependencies(self) -> list[SbomDependency]:
        return [d for d in self.dependencies if d.relationship == "direct"]


class ComponentVulnerabilities(SonarQubeModel):
    component_id: str = Field(alias="componentId")
    component_name: str | None = Field(default=None, alias="componentName")
    vulnerability_count: int = Field(default=0, alias="vulnerabilityCount")
    highest_severity: str | None = Field(default=None, alias="highestSeverity")


class VulnerabilitySummary(SonarQubeModel):
    """Vulnerability counts by severity."""

    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    by_component: list[ComponentVulnerabilities] = Field(default_factory=list, alias="byComponent")
