"""
Read-only access to news items for the public site.
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from newsdesk.core.exceptions import NotFoundError
from newsdesk.models.news import NewsItem
from newsdesk.utils.pagination import MAX_OFFSET, page_offset, parse_page

from ..dtos import NewsPage
from ..repositories import NewsItemStore, NewsOrder


class NewsQueryService:
    """Paginated listing and single-item lookup."""

    def __init__(self, store: NewsItemStore, *, page_size: int) -> None:
        self._store = store
        self.page_size = page_size

    async def list_news(self, page: Optional[Any] = None) -> NewsPage:
        """
        Return one page of news items, newest first.

        ``page`` may be the raw query value; anything that is not a positive
        integer means the first page. Pages past the end are empty.
        """
        number = parse_page(page)
        offset = page_offset(number, self.page_size)
        if offset > MAX_OFFSET:
            items = []
        else:
            items = await self._store.fetch_page(
                offset=offset,
                limit=self.page_size,
                order_by=NewsOrder.NEWEST_FIRST,
            )
        total = await self._store.count()
        logger.debug(f"Listed news page {number}: {len(items)} of {total} items")
        return NewsPage(items=items, page=number, per_page=self.page_size, total=total)

    async def get_news_item(self, news_id: int) -> NewsItem:
        item = await self._store.fetch_by_id(news_id)
        if item is None:
            raise NotFoundError(
                message=f"NewsItem with id {news_id} not found",
                resource_type="news_item",
                resource_id=str(news_id),
            )
        return item
