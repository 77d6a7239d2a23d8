"""Request builders."""

from sonarqube_client.core.builders.base import BaseBuilder
from sonarqube_client.core.builders.paginated import DEFAULT_PAGE_SIZE, PaginatedBuilder

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "BaseBuilder",
    "PaginatedBuilder",
]
