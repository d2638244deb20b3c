"""
Redemption validation service.

Business owners confirm redemptions presented by customers and review
the redemptions made at their business.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count
from django.utils import timezone

from apps.businesses.models import Business
from apps.common.pagination import paginate

from ..models import Redemption, RedemptionStatus
from .exceptions import (
    RedemptionNotFoundError,
    BusinessNotFoundError,
    NotBusinessOwnerError,
    RedemptionAlreadyValidatedError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def validate_redemption(
    *,
    redemption_id: UUID,
    validator_id: UUID,
    status: Optional[str] = None
) -> Redemption:
    """
    Mark a redemption as validated by the owner of its business.

    Validation is one-way: once validated, a redemption cannot be
    validated again or moved back to another status.

    Args:
        redemption_id: Redemption code scanned from the customer
        validator_id: UUID of the user performing the validation
        status: Target status, defaults to validated

    Returns:
        Updated Redemption instance

    Raises:
        RedemptionNotFoundError: If the code doesn't match a redemption
        BusinessNotFoundError: If the redemption's business is missing
        NotBusinessOwnerError: If validator doesn't own the business
        RedemptionAlreadyValidatedError: If already validated
    """
    try:
        redemption = (
            Redemption.objects
            .select_for_update()
            .get(id=redemption_id)
        )
    except Redemption.DoesNotExist:
        raise RedemptionNotFoundError("Invalid redemption code")

    business = Business.objects.filter(id=redemption.business_id).first()
    if business is None:
        raise BusinessNotFoundError("Business not found")

    if not business.is_owned_by(validator_id):
        logger.warning(
            "User %s tried to validate redemption %s of business %s",
            validator_id, redemption.id, business.id
        )
        raise NotBusinessOwnerError("You can only validate redemptions for your own business")

    if redemption.status == RedemptionStatus.VALIDATED:
        raise RedemptionAlreadyValidatedError("Redemption has already been validated")

    redemption.status = status or RedemptionStatus.VALIDATED
    redemption.validated_at = timezone.now()
    redemption.validated_by_id = validator_id
    redemption.save(update_fields=['status', 'validated_at', 'validated_by'])

    logger.info("Redemption %s set to %s by %s", redemption.id, redemption.status, validator_id)
    return redemption


def get_business_redemptions(
    *,
    business_id: UUID,
    user_id: UUID,
    status: Optional[str] = None,
    page: int = 1,
    limit: Optional[int] = None
) -> dict:
    """
    Get a page of a business's redemptions plus a status summary.

    The summary always covers every redemption of the business,
    regardless of the status filter and page.

    Args:
        business_id: Business UUID
        user_id: UUID of the requesting user, must be the owner
        status: Optional status filter for the page
        page: 1-based page number
        limit: Page size

    Returns:
        Dict with 'redemptions', 'pagination' and 'summary'

    Raises:
        BusinessNotFoundError: If business doesn't exist
        NotBusinessOwnerError: If user doesn't own the business
    """
    try:
        business = Business.objects.get(id=business_id)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("Business not found")

    if not business.is_owned_by(user_id):
        raise NotBusinessOwnerError("You can only view redemptions for your own business")

    queryset = (
        Redemption.objects
        .filter(business=business)
        .select_related('deal', 'user', 'validated_by')
        .order_by('-redeemed_at')
    )
    if status:
        queryset = queryset.filter(status=status)

    redemptions, pagination = paginate(queryset, page=page, limit=limit)

    return {
        'redemptions': redemptions,
        'pagination': pagination,
        'summary': _get_status_summary(business),
    }


def _get_status_summary(business: Business) -> dict:
    counts = dict(
        Redemption.objects
        .filter(business=business)
        .values('status')
        .annotate(count=Count('id'))
        .order_by()
        .values_list('status', 'count')
    )

    return {
        'total_redemptions': sum(counts.values()),
        'pending_count': counts.get(RedemptionStatus.PENDING.value, 0),
        'validated_count': counts.get(RedemptionStatus.VALIDATED.value, 0),
        'expired_count': counts.get(RedemptionStatus.EXPIRED.value, 0),
        'cancelled_count': counts.get(RedemptionStatus.CANCELLED.value, 0),
    }
