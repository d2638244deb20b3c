"""Rating aggregation service with concurrency protection."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID

from django.db import transaction
from django.db.models import Avg

from apps.businesses.models import Business
from ..models import ReviewStatus
from .exceptions import BusinessNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def update_business_rating(*, business_id: UUID) -> Business:
    """
    Recalculate and update a business's average rating.

    Only active reviews count. Uses select_for_update() so concurrent
    review writes recompute one after another.

    Args:
        business_id: Business UUID

    Returns:
        Updated Business instance

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    try:
        # Lock the business to prevent concurrent updates
        business = (
            Business.objects
            .select_for_update()
            .get(id=business_id)
        )
    except Business.DoesNotExist:
        raise BusinessNotFoundError("Business not found")

    avg = (
        business.reviews
        .filter(status=ReviewStatus.ACTIVE)
        .aggregate(avg=Avg('rating'))['avg']
    )

    if avg is None:
        business.average_rating = Decimal('0.00')
    else:
        business.average_rating = Decimal(str(avg)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    business.save(update_fields=['average_rating', 'updated_at'])

    logger.debug("Business %s average rating is now %s", business.id, business.average_rating)
    return business
