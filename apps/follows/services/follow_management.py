"""
Follow management service.

Handles follow/unfollow/mute transitions and notification preferences.
Each transition and its follower_count change commit together.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.utils import timezone

from apps.businesses.models import Business
from apps.businesses.services import update_business_counter

from ..models import Follow, FollowStatus
from .exceptions import (
    BusinessNotFoundError,
    SelfFollowError,
    AlreadyFollowingError,
    NotFollowingError,
    NotMutedError,
)

logger = logging.getLogger(__name__)


def _get_business(business_id: UUID, *, lock: bool = False) -> Business:
    queryset = Business.objects.select_for_update() if lock else Business.objects
    try:
        return queryset.get(id=business_id)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("Business not found")


def _get_follow(user_id: UUID, business_id: UUID) -> Optional[Follow]:
    return (
        Follow.objects
        .select_for_update()
        .filter(user_id=user_id, business_id=business_id)
        .first()
    )


@transaction.atomic
def follow_business(*, user_id: UUID, business_id: UUID) -> Follow:
    """
    Follow a business, or re-activate a muted or unfollowed one.

    Locks the business row so concurrent follows serialize on the
    follower counter.

    Args:
        user_id: UUID of the follower
        business_id: UUID of the business

    Returns:
        Active Follow instance

    Raises:
        BusinessNotFoundError: If business doesn't exist
        SelfFollowError: If user owns the business
        AlreadyFollowingError: If follow is already active
    """
    business = _get_business(business_id, lock=True)

    if business.is_owned_by(user_id):
        raise SelfFollowError("You cannot follow your own business")

    follow = _get_follow(user_id, business.id)

    if follow is None:
        try:
            with transaction.atomic():
                follow = Follow.objects.create(
                    user_id=user_id,
                    business=business,
                    status=FollowStatus.ACTIVE,
                    notify_new_deals=True,
                    notify_flash_deals=False,
                )
        except IntegrityError:
            # Database constraint caught a concurrent follow
            raise AlreadyFollowingError("Already following this business")
    elif follow.status == FollowStatus.ACTIVE:
        raise AlreadyFollowingError("Already following this business")
    elif follow.status == FollowStatus.MUTED:
        # Muted follows are already counted
        follow.status = FollowStatus.ACTIVE
        follow.save(update_fields=['status', 'updated_at'])
        logger.info("User %s re-activated muted follow of business %s", user_id, business.id)
        return follow
    else:
        follow.status = FollowStatus.ACTIVE
        follow.followed_at = timezone.now()
        follow.save(update_fields=['status', 'followed_at', 'updated_at'])

    update_business_counter(business.id, 'follower_count', 1)

    logger.info("User %s followed business %s", user_id, business.id)
    return follow


@transaction.atomic
def unfollow_business(*, user_id: UUID, business_id: UUID) -> None:
    """
    Unfollow a business. Works from both active and muted.

    Raises:
        NotFollowingError: If no follow exists or it is already unfollowed
    """
    follow = _get_follow(user_id, business_id)

    if follow is None or follow.status == FollowStatus.UNFOLLOWED:
        raise NotFollowingError("Not following this business")

    follow.status = FollowStatus.UNFOLLOWED
    follow.save(update_fields=['status', 'updated_at'])

    update_business_counter(business_id, 'follower_count', -1)

    logger.info("User %s unfollowed business %s", user_id, business_id)


@transaction.atomic
def mute_business(*, user_id: UUID, business_id: UUID) -> Follow:
    """
    Mute an active follow. The follower count is unchanged.

    Raises:
        NotFollowingError: If follow is missing or not active
    """
    follow = _get_follow(user_id, business_id)

    if follow is None or follow.status != FollowStatus.ACTIVE:
        raise NotFollowingError("Not following this business")

    follow.status = FollowStatus.MUTED
    follow.save(update_fields=['status', 'updated_at'])
    return follow


@transaction.atomic
def unmute_business(*, user_id: UUID, business_id: UUID) -> Follow:
    """
    Unmute a muted follow. The follower count is unchanged.

    Raises:
        NotMutedError: If follow is missing or not muted
    """
    follow = _get_follow(user_id, business_id)

    if follow is None or follow.status != FollowStatus.MUTED:
        raise NotMutedError("Business is not muted")

    follow.status = FollowStatus.ACTIVE
    follow.save(update_fields=['status', 'updated_at'])
    return follow


@transaction.atomic
def update_notification_preferences(
    *,
    user_id: UUID,
    business_id: UUID,
    notify_new_deals: Optional[bool] = None,
    notify_flash_deals: Optional[bool] = None
) -> Follow:
    """
    Update the notification flags of a follow.

    Only flags that are passed (not None) are changed.

    Raises:
        NotFollowingError: If follow is missing or unfollowed
    """
    follow = _get_follow(user_id, business_id)

    if follow is None or follow.status == FollowStatus.UNFOLLOWED:
        raise NotFollowingError("Not following this business")

    update_fields = ['updated_at']
    if notify_new_deals is not None:
        follow.notify_new_deals = notify_new_deals
        update_fields.append('notify_new_deals')
    if notify_flash_deals is not None:
        follow.notify_flash_deals = notify_flash_deals
        update_fields.append('notify_flash_deals')

    follow.save(update_fields=update_fields)
    return follow


def get_followed_businesses(*, user_id: UUID) -> QuerySet:
    """Get the user's active and muted follows, newest first."""
    return (
        Follow.objects
        .filter(user_id=user_id, status__in=[FollowStatus.ACTIVE, FollowStatus.MUTED])
        .select_related('business')
        .order_by('-followed_at')
    )


def get_business_followers(*, business_id: UUID) -> QuerySet:
    """
    Get active followers of a business.

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    business = _get_business(business_id)

    return (
        Follow.objects
        .filter(business=business, status=FollowStatus.ACTIVE)
        .select_related('user')
        .order_by('-followed_at')
    )


def get_follow_status(*, user_id: UUID, business_id: UUID) -> dict:
    """
    Get whether the user follows a business, with preferences if so.

    Returns:
        Dict with 'is_following' and, when following, 'status',
        'notify_new_deals', 'notify_flash_deals' and 'followed_at'
    """
    follow = Follow.objects.filter(user_id=user_id, business_id=business_id).first()

    if follow is None or not follow.is_following:
        return {'is_following': False}

    return {
        'is_following': True,
        'status': follow.status,
        'notify_new_deals': follow.notify_new_deals,
        'notify_flash_deals': follow.notify_flash_deals,
        'followed_at': follow.followed_at,
    }
