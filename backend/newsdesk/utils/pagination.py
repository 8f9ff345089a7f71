"""
Page-number pagination helpers.

Listing endpoints accept a 1-based ``page`` query parameter. Anything that is
not a positive integer falls back to the first page instead of failing the
request.
"""

from __future__ import annotations

from typing import Any, Optional


# Largest OFFSET a database driver will bind (signed 64-bit)
MAX_OFFSET = 2**63 - 1


def parse_page(value: Optional[Any]) -> int:
    """Coerce a raw ``page`` parameter to a page number >= 1."""
    if value is None:
        return 1
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def page_offset(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def total_pages(total: int, per_page: int) -> int:
    if total <= 0:
        return 1
    return (total + per_page - 1) // per_page
