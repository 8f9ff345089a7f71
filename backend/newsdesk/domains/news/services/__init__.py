"""
Service layer for the news domain.
"""

from .admin_service import NewsAdminService  # noqa: F401
from .query_service import NewsQueryService  # noqa: F401
