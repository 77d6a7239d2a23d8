"""Models for the components API."""

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class Component(SonarQubeModel):
    """Project, directory, file or other component."""

    key: str
    name: str | None = None
    qualifier: str | None = Field(default=None, description="TRK, DIR, FIL, UTS, APP, VW, ...")
    path: str | None = None
    language: str | None = None
    project: str | None = None
    description: str | None = None
    visibility: str | None = None
    analysis_date: str | None = Field(default=None, alias="analysisDate")
    leak_period_date: str | None = Field(default=None, alias="leakPeriodDate")
    version: str | None = None
    tags: list[str] = Field(default_factory=list)


class ComponentShowResponse(SonarQubeModel):
    """Response from /api/components/show."""

    component: Component
    ancestors: list[Component] = Field(default_factory=list)


class SearchComponentsResponse(PaginatedResponse):
    """Response from /api/components/search."""

    components: list[Component] = Field(default_factory=list)


class ComponentTreeResponse(PaginatedResponse):
    """Response from /api/components/tree."""

    base_component: Component | None = Field(default=None, alias="baseComponent")
    components: list[Component] = Field(default_factory=list)
