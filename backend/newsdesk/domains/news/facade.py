"""
News domain facade.

The facade provides a stable entry point for the API layer to interact with
news functionality without knowing about the underlying services or
repositories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.config import settings
from newsdesk.models.news import NewsItem, NewsItemInput

from .dtos import NewsPage, SubmissionResult
from .repositories import NewsRepository
from .services import NewsAdminService, NewsQueryService


@dataclass
class NewsFacade:
    """Facade coordinating news services and repositories."""

    session: AsyncSession
    page_size: int = field(default_factory=lambda: settings.NEWS_PAGE_SIZE)

    @property
    def repository(self) -> NewsRepository:
        return NewsRepository(self.session)

    @property
    def query_service(self) -> NewsQueryService:
        return NewsQueryService(self.repository, page_size=self.page_size)

    @property
    def admin_service(self) -> NewsAdminService:
        return NewsAdminService(self.repository)

    async def list_news(self, page: Optional[Any] = None) -> NewsPage:
        return await self.query_service.list_news(page)

    async def get_news_item(self, news_id: int) -> NewsItem:
        return await self.query_service.get_news_item(news_id)

    async def list_all_news(self) -> List[NewsItem]:
        return await self.admin_service.list_all()

    def new_news_item(self) -> NewsItem:
        return self.admin_service.new_item()

    async def create_news(self, data: NewsItemInput) -> SubmissionResult:
        return await self.admin_service.create(data)

    async def update_news(self, news_id: int, data: NewsItemInput) -> SubmissionResult:
        return await self.admin_service.update(news_id, data)
