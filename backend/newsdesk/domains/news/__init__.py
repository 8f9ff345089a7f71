"""
News domain package.

Provides access to domain-specific services, repositories and facade helpers for
working with news items.  Concrete implementations live in subpackages.
"""

from .facade import NewsFacade  # noqa: F401
from .services import NewsAdminService, NewsQueryService  # noqa: F401
from .repositories import NewsItemStore, NewsOrder, NewsRepository  # noqa: F401
