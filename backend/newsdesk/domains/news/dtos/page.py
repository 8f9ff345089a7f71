from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from newsdesk.models.news import NewsItem
from newsdesk.utils.pagination import total_pages


@dataclass
class NewsPage:
    items: List[NewsItem]
    page: int
    per_page: int
    total: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.per_page)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> Optional[int]:
        return self.page - 1 if self.has_previous else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next else None
