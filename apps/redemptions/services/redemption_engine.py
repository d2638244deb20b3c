"""
Redemption engine.

Turns a user's claim on a deal into a pending redemption while keeping the
deal's inventory counter and the business's redemption counter in step.
"""

import logging
from typing import NamedTuple, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.businesses.services import update_business_counter
from apps.common.pagination import paginate
from apps.deals.models import Deal, DealStatus

from ..models import Redemption
from .exceptions import (
    DealNotFoundError,
    DealNotActiveError,
    DealNotStartedError,
    DealExpiredError,
    DealSoldOutError,
    UserNotFoundError,
    RedemptionLimitReachedError,
    RedemptionNotFoundError,
)

logger = logging.getLogger(__name__)


class RedemptionResult(NamedTuple):
    redemption: Redemption
    redemption_code: str


@transaction.atomic
def redeem_deal(*, user_id: UUID, deal_id: UUID) -> RedemptionResult:
    """
    Redeem a deal for a user.

    The deal row is locked for the whole check-and-write sequence and the
    inventory bump is a conditional UPDATE, so two concurrent redemptions
    can never push quantity_redeemed past quantity_available.

    Args:
        user_id: UUID of the redeeming user
        deal_id: UUID of the deal

    Returns:
        RedemptionResult with the pending redemption and its code

    Raises:
        DealNotFoundError: If deal doesn't exist
        DealNotActiveError: If deal status is not active
        DealNotStartedError: If deal window hasn't opened yet
        DealExpiredError: If deal window has closed
        DealSoldOutError: If limited quantity is exhausted
        UserNotFoundError: If user doesn't exist
        RedemptionLimitReachedError: If user hit max_per_user for this deal
    """
    try:
        deal = (
            Deal.objects
            .select_for_update()
            .get(id=deal_id)
        )
    except Deal.DoesNotExist:
        raise DealNotFoundError("Deal not found")

    if deal.status != DealStatus.ACTIVE:
        raise DealNotActiveError("Deal is not active")

    now = timezone.now()
    if now < deal.starts_at:
        raise DealNotStartedError("Deal has not started yet")
    if now > deal.expires_at:
        raise DealExpiredError("Deal has expired")

    if deal.is_sold_out():
        raise DealSoldOutError("Deal sold out")

    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    previous = Redemption.objects.filter(user=user, deal=deal).count()
    if previous >= deal.max_per_user:
        logger.info("User %s hit redemption limit for deal %s", user.id, deal.id)
        raise RedemptionLimitReachedError(
            f"You can only redeem this deal {deal.max_per_user} time(s)"
        )

    # Inventory bump goes first: its WHERE clause is the sold-out guard
    # against concurrent redeemers, and the insert only runs once it held
    counter = Deal.objects.filter(id=deal.id)
    if deal.quantity_available is not None:
        counter = counter.filter(quantity_redeemed__lt=F('quantity_available'))
    if not counter.update(quantity_redeemed=F('quantity_redeemed') + 1):
        raise DealSoldOutError("Deal sold out")

    redemption = Redemption.objects.create(
        user=user,
        deal=deal,
        business_id=deal.business_id,
        original_price=deal.original_price,
        paid_price=deal.discounted_price,
        savings_amount=deal.savings_amount,
        deal_category=deal.category,
    )

    update_business_counter(deal.business_id, 'total_redemptions', 1)

    logger.info("User %s redeemed deal %s (redemption %s)", user.id, deal.id, redemption.id)
    return RedemptionResult(redemption=redemption, redemption_code=redemption.redemption_code)


def get_user_redemptions(*, user: User, page: int = 1, limit: Optional[int] = None) -> dict:
    """
    Get a page of the user's redemptions, newest first.

    Returns:
        Dict with 'redemptions' and 'pagination'
    """
    queryset = (
        Redemption.objects
        .filter(user=user)
        .select_related('deal', 'business')
        .order_by('-redeemed_at')
    )
    redemptions, pagination = paginate(queryset, page=page, limit=limit)

    return {
        'redemptions': redemptions,
        'pagination': pagination,
    }


def get_redemption_details(*, user: User, redemption_id: UUID) -> Redemption:
    """
    Get one of the user's own redemptions.

    Raises:
        RedemptionNotFoundError: If it doesn't exist or belongs to someone else
    """
    try:
        return (
            Redemption.objects
            .select_related('deal', 'business', 'validated_by')
            .get(id=redemption_id, user=user)
        )
    except Redemption.DoesNotExist:
        raise RedemptionNotFoundError("Redemption not found")
