"""Models for the security hotspots API."""

from enum import Enum
from typing import Any

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel, TextRange


class HotspotStatus(str, Enum):
    TO_REVIEW = "TO_REVIEW"
    REVIEWED = "REVIEWED"


class HotspotResolution(str, Enum):
    FIXED = "FIXED"
    SAFE = "SAFE"
    ACKNOWLEDGED = "ACKNOWLEDGED"


class Hotspot(SonarQubeModel):
    """Security hotspot as returned by /api/hotspots/search."""

    key: str
    component: str
    project: str | None = None
    security_category: str | None = Field(default=None, alias="securityCategory")
    vulnerability_probability: str | None = Field(default=None, alias="vulnerabilityProbability")
    status: str
    resolution: str | None = None
    line: int | None = None
    message: str = ""
    assignee: str | None = None
    author: str | None = None
    creation_date: str | None = Field(default=None, alias="creationDate")
    update_date: str | None = Field(default=None, alias="updateDate")
    text_range: TextRange | None = Field(default=None, alias="textRange")
    rule_key: str | None = Field(default=None, alias="ruleKey")
    flows: list[dict[str, Any]] = Field(default_factory=list)


class HotspotComponent(SonarQubeModel):
    key: str
    qualifier: str | None = None
    name: str | None = None
    long_name: str | None = Field(default=None, alias="longName")
    path: str | None = None


class SearchHotspotsResponse(PaginatedResponse):
    """Response from /api/hotspots/search."""

    hotspots: list[Hotspot] = Field(default_factory=list)
    components: list[HotspotComponent] = Field(default_factory=list)


class HotspotRule(SonarQubeModel):
    key: str
    name: str | None = None
    security_category: str | None = Field(default=None, alias="securityCategory")
    vulnerability_probability: str | None = Field(default=None, alias="vulnerabilityProbability")


class HotspotDetails(SonarQubeModel):
    """Full hotspot details from /api/hotspots/show."""

    key: str
    component: HotspotComponent
    project: HotspotComponent
    rule: HotspotRule
    status: str
    resolution: str | None = None
    line: int | None = None
    hash: str | None = None
    message: str = ""
    assignee: str | None = None
    author: str | None = None
    creation_date: str | None = Field(default=None, alias="creationDate")
    update_date: str | None = Field(default=None, alias="updateDate")
    text_range: TextRange | None = Field(default=None, alias="textRange")
    changelog: list[dict[str, Any]] = Field(default_factory=list)
    comment: list[dict[str, Any]] = Field(default_factory=list)
    can_change_status: bool = Field(default=False, alias="canChangeStatus")
