"""Models for the projects API."""

from enum import Enum

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class Project(SonarQubeModel):
    """Project (or other component) returned by /api/projects/search."""

    key: str
    name: str
    qualifier: str = "TRK"
    visibility: str | None = None
    last_analysis_date: str | None = Field(default=None, alias="lastAnalysisDate")
    revision: str | None = None
    managed: bool | None = None
    organization: str | None = None


class SearchProjectsResponse(PaginatedResponse):
    """Response from /api/projects/search."""

    components: list[Project] = Field(default_factory=list)


class CreatedProject(SonarQubeModel):
    key: str
    name: str
    qualifier: str = "TRK"
    visibility: str | None = None


class CreateProjectResponse(SonarQubeModel):
    project: CreatedProject


class Finding(SonarQubeModel):
    """Issue or hotspot exported by /api/projects/export_findings."""

    key: str
    type: str | None = None
    rule_key: str | None = Field(default=None, alias="ruleKey")
    severity: str | None = None
    status: str | None = None
    resolution: str | None = None
    message: str | None = None
    path: str | None = None
    line_number: int | None = Field(default=None, alias="lineNumber")
    project_key: str | None = Field(default=None, alias="projectKey")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class KeyChange(SonarQubeModel):
    key: str
    new_key: str = Field(alias="newKey")
    duplicate: bool = False


class BulkUpdateKeyResponse(SonarQubeModel):
    keys: list[KeyChange] = Field(default_factory=list)
