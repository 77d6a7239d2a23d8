"""Shared response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SonarQubeModel(BaseModel):
    """Base class for all wire-format models.

    Unknown fields are ignored so that newer server versions don't break
    parsing. Fields use camelCase aliases but can be populated by name.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Paging(SonarQubeModel):
    """Paging block returned by v1 search endpoints."""

    page_index: int = Field(default=1, alias="pageIndex", description="1-based page number")
    page_size: int = Field(default=100, alias="pageSize", description="Page size")
    total: int = Field(default=0, description="Total number of matching items")


class V2PageInfo(SonarQubeModel):
    """Page block returned by v2 endpoints."""

    page_index: int = Field(default=1, alias="pageIndex")
    page_size: int = Field(default=50, alias="pageSize")
    total: int = Field(default=0)


class PaginatedResponse(SonarQubeModel):
    """Base for responses carrying paging information.

    Older servers return ``total``, ``p`` and ``ps`` at the top level instead
    of a ``paging`` object; they are folded into ``paging``.
    """

    paging: Paging | None = Field(default=None, description="v1 paging information")
    page: V2PageInfo | None = Field(default=None, description="v2 paging information")
    is_last_page: bool | None = Field(default=None, alias="isLastPage")

    @model_validator(mode="before")
    @classmethod
    def normalize_legacy_paging(cls, data: Any) -> Any:
        """Fold legacy top-level paging fields into ``paging``."""
        if not isinstance(data, dict) or data.get("paging") is not None:
            return data
        if "total" not in data or not isinstance(data["total"], int):
            return data

        data = dict(data)
        data["paging"] = {
            "pageIndex": data.get("p", 1),
            "pageSize": data.get("ps", 100),
            "total": data["total"],
        }
        return data

    @property
    def page_info(self) -> Paging | V2PageInfo | None:
        """Paging block in whichever format the server used."""
        return self.paging or self.page


class FacetValue(SonarQubeModel):
    """A single facet bucket."""

    val: str
    count: int = 0


class Facet(SonarQubeModel):
    """Facet counts returned alongside search results."""

    name: str = Field(alias="property", description="Faceted field, e.g. 'severities'")
    values: list[FacetValue] = Field(default_factory=list)


class TextRange(SonarQubeModel):
    """Location of a finding inside a file."""

    start_line: int = Field(alias="startLine")
    end_line: int = Field(alias="endLine")
    start_offset: int | None = Field(default=None, alias="startOffset")
    end_offset: int | None = Field(default=None, alias="endOffset")
