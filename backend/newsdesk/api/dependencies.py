"""
API dependencies
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.config import settings
from newsdesk.core.database import get_db
from newsdesk.domains.news import NewsFacade


def get_news_facade(
    db: AsyncSession = Depends(get_db),
) -> NewsFacade:
    """
    Provide NewsFacade instance for request-scoped operations.
    """
    return NewsFacade(db)


def is_mobile_host(host: str) -> bool:
    """
    Check whether ``host`` is on the mobile subdomain.

    Only labels left of the registered domain count as subdomains, so
    ``mobile.example.com`` matches while ``mobile.com`` does not.
    """
    hostname = host.split(":", 1)[0].strip().lower()
    labels = [label for label in hostname.split(".") if label]
    subdomains = labels[: max(len(labels) - (settings.TLD_LENGTH + 1), 0)]
    return bool(subdomains) and subdomains[0] == settings.MOBILE_SUBDOMAIN


def get_is_mobile(request: Request) -> bool:
    """
    Classify the request as mobile based on its Host header.
    """
    return is_mobile_host(request.headers.get("host", ""))
