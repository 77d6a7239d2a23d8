"""Models for the quality gates API."""

from enum import Enum

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class ConditionOperator(str, Enum):
    LESS_THAN = "LT"
    GREATER_THAN = "GT"


class QualityGateCondition(SonarQubeModel):
    id: str | int
    metric: str
    op: str
    error: str


class QualityGate(SonarQubeModel):
    """Quality gate as returned by list, show and create."""

    name: str
    id: str | int | None = None
    is_default: bool = Field(default=False, alias="isDefault")
    is_built_in: bool = Field(default=False, alias="isBuiltIn")
    cayc_status: str | None = Field(default=None, alias="caycStatus")
    conditions: list[QualityGateCondition] = Field(default_factory=list)
    actions: dict[str, bool] = Field(default_factory=dict)


class ListQualityGatesResponse(SonarQubeModel):
    qualitygates: list[QualityGate] = Field(default_factory=list)
    default: str | int | None = None
    actions: dict[str, bool] = Field(default_factory=dict)


class QualityGateProject(SonarQubeModel):
    key: str
    name: str
    selected: bool = False


class SearchGateProjectsResponse(PaginatedResponse):
    """Response from /api/qualitygates/search."""

    results: list[QualityGateProject] = Field(default_factory=list)


class ConditionStatus(SonarQubeModel):
    status: str
    metric_key: str = Field(alias="metricKey")
    comparator: str | None = None
    error_threshold: str | None = Field(default=None, alias="errorThreshold")
    actual_value: str | None = Field(default=None, alias="actualValue")


class ProjectStatus(SonarQubeModel):
    """Quality gate status of a project analysis."""

    status: str
    ignored_conditions: bool = Field(default=False, alias="ignoredConditions")
    conditions: list[ConditionStatus] = Field(default_factory=list)
    period: dict[str, str] | None = None
    cayc_status: str | None = Field(default=None, alias="caycStatus")

    @property
    def passed(self) -> bool:
        return self.status == "OK"


class ProjectStatusResponse(SonarQubeModel):
    project_status: ProjectStatus = Field(alias="projectStatus")
