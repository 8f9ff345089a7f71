"""
Storage contract consumed by the news services.
"""

from __future__ import annotations

import enum
from typing import List, Optional, Protocol

from newsdesk.models.news import NewsItem


class NewsOrder(str, enum.Enum):
    """Orderings a store must support"""
    NEWEST_FIRST = "newest_first"
    INSERTION = "insertion"


class NewsItemStore(Protocol):
    """Interface for news item persistence used by the news domain."""

    async def fetch_by_id(self, news_id: int) -> Optional[NewsItem]:
        ...

    async def fetch_page(
        self,
        *,
        offset: int,
        limit: int,
        order_by: NewsOrder = NewsOrder.NEWEST_FIRST,
    ) -> List[NewsItem]:
        ...

    async def fetch_all(self) -> List[NewsItem]:
        ...

    async def count(self) -> int:
        ...

    async def insert(self, item: NewsItem) -> NewsItem:
        ...

    async def update(self, item: NewsItem) -> NewsItem:
        ...

    async def save(self, item: NewsItem) -> NewsItem:
        ...
