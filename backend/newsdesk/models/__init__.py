"""
Models package
"""

from .base import Base, BaseModel, FieldErrors
from .news import NewsItem, NewsItemInput, NewsItemResponseSchema

__all__ = [
    "Base",
    "BaseModel",
    "FieldErrors",
    "NewsItem",
    "NewsItemInput",
    "NewsItemResponseSchema",
]
