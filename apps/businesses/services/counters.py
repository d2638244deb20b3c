"""Denormalized business counters."""

import logging
from uuid import UUID

from django.db.models import F

from ..models import Business
from .exceptions import UnknownCounterError

logger = logging.getLogger(__name__)

COUNTER_FIELDS = ('follower_count', 'total_redemptions')


def update_business_counter(business_id: UUID, field: str, delta: int) -> int:
    """
    Atomically add ``delta`` to one of the business counters.

    The update is a single ``UPDATE ... SET field = field + delta`` statement.
    Decrements only apply while the counter stays non-negative.

    Returns:
        Number of rows updated (0 or 1)

    Raises:
        UnknownCounterError: If field is not a counter column
    """
    if field not in COUNTER_FIELDS:
        raise UnknownCounterError(f"Unknown business counter: {field}")

    queryset = Business.objects.filter(id=business_id)
    if delta < 0:
        queryset = queryset.filter(**{f'{field}__gte': -delta})

    updated = queryset.update(**{field: F(field) + delta})
    if not updated:
        logger.warning("Counter %s on business %s not updated (delta=%s)", field, business_id, delta)
    return updated
