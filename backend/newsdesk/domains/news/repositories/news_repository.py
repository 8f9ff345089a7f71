"""
SQLAlchemy repository for news item persistence operations.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger
from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.exceptions import PersistenceError, ValidationError
from newsdesk.models.news import NewsItem
from newsdesk.utils.datetime_utils import utc_now_naive

from .interfaces import NewsOrder


# Range of the Integer primary key column (signed 32-bit on PostgreSQL)
MAX_ID = 2**31 - 1

ORDERINGS = {
    NewsOrder.NEWEST_FIRST: (desc(NewsItem.created_at), desc(NewsItem.id)),
    NewsOrder.INSERTION: (asc(NewsItem.id),),
}


class NewsRepository:
    """Encapsulates read and write operations on ``news_items``."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def fetch_by_id(self, news_id: int) -> Optional[NewsItem]:
        if not 1 <= news_id <= MAX_ID:
            return None
        try:
            return await self._session.get(NewsItem, news_id)
        except SQLAlchemyError as exc:
            raise await self._failure(f"fetch news item {news_id}", exc) from exc

    async def fetch_page(
        self,
        *,
        offset: int,
        limit: int,
        order_by: NewsOrder = NewsOrder.NEWEST_FIRST,
    ) -> List[NewsItem]:
        stmt = (
            select(NewsItem)
            .order_by(*ORDERINGS[order_by])
            .offset(offset)
            .limit(limit)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._failure("list news items", exc) from exc
        return list(result.scalars().all())

    async def fetch_all(self) -> List[NewsItem]:
        stmt = select(NewsItem).order_by(*ORDERINGS[NewsOrder.INSERTION])
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._failure("list news items", exc) from exc
        return list(result.scalars().all())

    async def count(self) -> int:
        try:
            result = await self._session.execute(select(func.count(NewsItem.id)))
        except SQLAlchemyError as exc:
            raise await self._failure("count news items", exc) from exc
        return result.scalar() or 0

    async def insert(self, item: NewsItem) -> NewsItem:
        self._ensure_valid(item)
        self._session.add(item)
        await self._commit(item, "insert news item")
        logger.info(f"Created news item {item.id}")
        return item

    async def update(self, item: NewsItem) -> NewsItem:
        self._ensure_valid(item)
        item.updated_at = utc_now_naive()
        await self._commit(item, f"update news item {item.id}")
        logger.info(f"Updated news item {item.id}")
        return item

    async def save(self, item: NewsItem) -> NewsItem:
        if item.is_new_record:
            return await self.insert(item)
        return await self.update(item)

    @staticmethod
    def _ensure_valid(item: NewsItem) -> None:
        if not item.validate():
            raise ValidationError("Refusing to write an invalid news item", errors=item.errors)

    async def _commit(self, item: NewsItem, action: str) -> None:
        try:
            await self._session.commit()
            await self._session.refresh(item)
        except SQLAlchemyError as exc:
            raise await self._failure(action, exc) from exc

    async def _failure(self, action: str, exc: SQLAlchemyError) -> PersistenceError:
        logger.error(f"Failed to {action}: {exc}")
        await self._session.rollback()
        return PersistenceError(f"Failed to {action}")
