"""
Declarative base, shared columns and schema base classes
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from newsdesk.utils.datetime_utils import utc_now_naive


BLANK_MESSAGE = "can't be blank"


class Base(DeclarativeBase):
    """Declarative base shared by every table"""


class BaseModel(Base):
    """Abstract model with integer identity and managed timestamps"""
    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Generated identifier",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now_naive,
        nullable=False,
        index=True,
        comment="Insertion time (naive UTC)",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now_naive,
        onupdate=utc_now_naive,
        nullable=False,
        comment="Last successful mutation (naive UTC)",
    )


class FieldErrors(dict):
    """Validation messages keyed by field name."""

    def add(self, field: str, message: str) -> None:
        self.setdefault(field, []).append(message)

    def full_messages(self) -> List[str]:
        return [
            f"{field.replace('_', ' ').capitalize()} {message}"
            for field, messages in self.items()
            for message in messages
        ]


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


class BaseSchema(PydanticBaseModel):
    """Base schema for request payloads"""
    model_config = ConfigDict(from_attributes=True)


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted resources"""

    id: int
    created_at: datetime
    updated_at: datetime
