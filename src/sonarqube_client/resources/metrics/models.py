"""Models for the metrics API."""

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class Metric(SonarQubeModel):
    """Metric definition."""

    key: str
    name: str
    id: str | int | None = None
    type: str | None = Field(default=None, description="INT, FLOAT, PERCENT, RATING, ...")
    domain: str | None = None
    description: str | None = None
    direction: int | None = None
    qualitative: bool = False
    hidden: bool = False
    custom: bool = False


class SearchMetricsResponse(PaginatedResponse):
    """Response from /api/metrics/search.

    The server reports ``total``, ``p`` and ``ps`` at the top level.
    """

    metrics: list[Metric] = Field(default_factory=list)
