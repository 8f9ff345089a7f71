"""
Administrative management of news items.

Create and update follow the same path: build or load the item, validate, and
either persist and report success or hand the unsaved item back so the form can
be shown again with its errors. Nothing is written when validation fails.
"""

from __future__ import annotations

from typing import List

from loguru import logger

from newsdesk.core.exceptions import NotFoundError
from newsdesk.models.news import NewsItem, NewsItemInput

from ..dtos import SubmissionOutcome, SubmissionResult
from ..repositories import NewsItemStore


CREATED_NOTICE = "Created successfully."
SAVED_NOTICE = "Saved successfully."


class NewsAdminService:
    """CRUD operations (without delete) backing the admin screens."""

    def __init__(self, store: NewsItemStore) -> None:
        self._store = store

    async def list_all(self) -> List[NewsItem]:
        return await self._store.fetch_all()

    def new_item(self) -> NewsItem:
        return NewsItem(name="", body="")

    async def get_item(self, news_id: int) -> NewsItem:
        item = await self._store.fetch_by_id(news_id)
        if item is None:
            raise NotFoundError(
                message=f"NewsItem with id {news_id} not found",
                resource_type="news_item",
                resource_id=str(news_id),
            )
        return item

    async def create(self, data: NewsItemInput) -> SubmissionResult:
        item = NewsItem.from_input(data)
        if await item.save(self._store):
            return SubmissionResult(
                outcome=SubmissionOutcome.REDIRECT_SUCCESS,
                item=item,
                form="new",
                notice=CREATED_NOTICE,
            )

        logger.warning(f"News item rejected on create: {dict(item.errors)}")
        return SubmissionResult(outcome=SubmissionOutcome.REDISPLAY_FORM, item=item, form="new")

    async def update(self, news_id: int, data: NewsItemInput) -> SubmissionResult:
        item = await self.get_item(news_id)

        # The submitted values are checked on a detached copy so a rejected
        # submission never touches the loaded row.
        draft = NewsItem(
            id=item.id,
            name=data.name,
            body=data.body,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
        if not draft.validate():
            logger.warning(f"News item {news_id} rejected on update: {dict(draft.errors)}")
            return SubmissionResult(outcome=SubmissionOutcome.REDISPLAY_FORM, item=draft, form="edit")

        item.assign(data)
        await item.save(self._store)
        return SubmissionResult(
            outcome=SubmissionOutcome.REDIRECT_SUCCESS,
            item=item,
            form="edit",
            notice=SAVED_NOTICE,
        )
