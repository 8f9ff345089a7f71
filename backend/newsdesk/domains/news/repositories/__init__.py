"""
Repository layer for the news domain.

Repositories encapsulate database access and SQLAlchemy queries. Higher layers
should depend on the ``NewsItemStore`` interface rather than raw sessions.
"""

from .interfaces import NewsItemStore, NewsOrder  # noqa: F401
from .news_repository import NewsRepository  # noqa: F401
