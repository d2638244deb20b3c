"""Page/limit pagination for service-layer list operations."""

import math
from typing import Optional

from django.conf import settings
from django.db.models import QuerySet


def paginate(queryset: QuerySet, *, page: int = 1, limit: Optional[int] = None) -> tuple[list, dict]:
    """
    Slice a queryset into one page and build pagination metadata.

    Pages past the end yield an empty list rather than an error, so clients
    can stop when ``has_more`` turns false.

    Args:
        queryset: Ordered queryset to paginate
        page: 1-based page number
        limit: Page size, capped at ``settings.MAX_PAGE_SIZE``

    Returns:
        Tuple of (items, pagination) where pagination holds
        page, limit, total, total_pages and has_more.
    """
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    page = max(int(page), 1)
    limit = min(max(int(limit), 1), settings.MAX_PAGE_SIZE)

    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit])
    total_pages = math.ceil(total / limit)

    return items, {
        'page': page,
        'limit': limit,
        'total': total,
        'total_pages': total_pages,
        'has_more': page < total_pages,
    }
