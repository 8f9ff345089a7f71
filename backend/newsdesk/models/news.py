"""
News item model, validation and schemas
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from pydantic import ConfigDict, Field, field_validator
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, reconstructor

from .base import BLANK_MESSAGE, BaseModel, BaseResponseSchema, BaseSchema, FieldErrors, is_blank

if TYPE_CHECKING:
    from newsdesk.domains.news.repositories.interfaces import NewsItemStore


class NewsItem(BaseModel):
    """Editorial news item shown on the public site"""
    __tablename__ = "news_items"

    REQUIRED_FIELDS = ("name", "body")

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        comment="Headline"
    )
    body: Mapped[Optional[str]] = mapped_column(
        Text,
        comment="Article text"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.errors = FieldErrors()

    @reconstructor
    def _init_on_load(self) -> None:
        self.errors = FieldErrors()

    @classmethod
    def from_input(cls, data: "NewsItemInput") -> "NewsItem":
        """Build an unsaved item from submitted fields without validating."""
        return cls(name=data.name, body=data.body)

    @property
    def is_new_record(self) -> bool:
        return self.id is None

    def assign(self, data: "NewsItemInput") -> None:
        """Apply the editable fields; nothing else can be assigned."""
        self.name = data.name
        self.body = data.body

    def validate(self) -> bool:
        """
        Check required fields, replacing ``errors``.

        Every check runs so the caller sees all problems at once.
        """
        self.errors = FieldErrors()
        for field in self.REQUIRED_FIELDS:
            if is_blank(getattr(self, field)):
                self.errors.add(field, BLANK_MESSAGE)
        return not self.errors

    async def save(self, store: "NewsItemStore") -> bool:
        """
        Validate and persist through ``store``.

        Returns False without writing when validation fails; ``errors`` stays
        populated for the caller to redisplay.
        """
        if not self.validate():
            return False
        await store.save(self)
        return True

    def __repr__(self) -> str:
        return f"<NewsItem(id={self.id}, name={self.name!r})>"


# Pydantic Schemas
class NewsItemInput(BaseSchema):
    """Fields an administrator may submit; anything else is dropped"""
    model_config = ConfigDict(extra="ignore")

    name: str = Field("", description="Headline")
    body: str = Field("", description="Article text")

    @field_validator('name', 'body', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        """Missing form values arrive as None"""
        return "" if v is None else v


class NewsItemResponseSchema(BaseResponseSchema):
    """Public representation of a news item"""

    name: str
    body: str
