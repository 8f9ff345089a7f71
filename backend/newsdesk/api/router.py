"""
Site router configuration.
"""

from fastapi import APIRouter

from newsdesk.api.endpoints import news
from newsdesk.api.endpoints.admin import news_items

site_router = APIRouter()

site_router.include_router(news.router)
site_router.include_router(news_items.router)
