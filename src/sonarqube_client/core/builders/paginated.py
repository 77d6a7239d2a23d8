"""Builder with page-by-page async iteration."""

import logging
from abc import abstractmethod
from collections.abc import AsyncIterator, Sequence
from typing import Generic, Self, TypeVar

from sonarqube_client.core.builders.base import BaseBuilder
from sonarqube_client.core.builders.validation import MAX_PAGE_SIZE, validate_page_size
from sonarqube_client.models import PaginatedResponse

logger = logging.getLogger(__name__)

PageT = TypeVar("PageT", bound=PaginatedResponse)
ItemT = TypeVar("ItemT")

DEFAULT_PAGE_SIZE = 100


class PaginatedBuilder(BaseBuilder[PageT], Generic[PageT, ItemT]):
    """Builder for search endpoints returning paged results.

    ``execute()`` returns a single page; ``all()`` walks every page lazily,
    issuing one request per page and none ahead of the consumer.
    """

    max_page_size: int = MAX_PAGE_SIZE

    def page(self, page_number: int) -> Self:
        """Set the 1-based page number."""
        return self.set_param("p", page_number)

    def page_size(self, size: int) -> Self:
        """Set the number of items per page."""
        return self.set_param("ps", size)

    def validate(self) -> None:
        validate_page_size(self._params, maximum=self.max_page_size)

    @abstractmethod
    def get_items(self, response: PageT) -> Sequence[ItemT]:
        """Get the items from a page.

        Args:
            response: One page of results

        Returns:
            Items on the page
        """

    def has_more_pages(self, response: PageT, current_page: int) -> bool:
        """Check whether another page should be fetched.

        Args:
            response: The page just fetched
            current_page: Its 1-based page number

        Returns:
            True if there are more pages
        """
        info = response.page_info
        if info is not None:
            page_size = info.page_size or self._params.get("ps") or 0
            if page_size <= 0:
                return False
            return current_page * page_size < info.total

        if response.is_last_page is not None:
            return not response.is_last_page

        return False

    async def all(self) -> AsyncIterator[ItemT]:
        """Iterate over the items of every page.

        The page cursor is kept local, so the builder's own parameters are
        the same after iteration as before it.

        Yields:
            Items in server order

        Raises:
            SonarQubeValidationError: Invalid parameters
            SonarQubeError: A page request failed
        """
        self.validate()
        current_page = 1
        has_more = True

        while has_more:
            response = await self._executor({**self._params, "p": current_page})
            items = self.get_items(response)
            logger.debug(f"{type(self).__name__}: received {len(items)} items from page {current_page}")

            for item in items:
                yield item

            has_more = bool(items) and self.has_more_pages(response, current_page)
            current_page += 1
