"""Review management service - CRUD operations for business reviews."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.redemptions.models import Redemption
from apps.reviews.models import Review, ReviewStatus
from .exceptions import (
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    BusinessNotFoundError,
    UnauthorizedReviewActionError,
)
from .rating_aggregation import update_business_rating

logger = logging.getLogger(__name__)


def _validate_rating(rating: int) -> None:
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")


def _get_review_for_update(review_id: UUID) -> Review:
    try:
        return (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def create_review(
    *,
    user: User,
    business_id: UUID,
    rating: int,
    review_text: str = ''
) -> Review:
    """
    Create a new review for a business.

    This operation:
    1. Validates rating range
    2. Checks the business exists
    3. Checks for duplicate review (business, user)
    4. Flags the author as verified buyer if they redeemed a deal there
    5. Recomputes the business average rating

    Args:
        user: User writing the review
        business_id: UUID of the reviewed business
        rating: Overall rating (1-5)
        review_text: Written review, up to 1000 characters

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        BusinessNotFoundError: If business doesn't exist
        DuplicateReviewError: If user already reviewed this business
    """
    _validate_rating(rating)

    try:
        business = Business.objects.get(id=business_id)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("Business not found")

    # One review per user per business
    if Review.objects.filter(business=business, user=user).exists():
        raise DuplicateReviewError("You have already reviewed this business")

    is_verified_buyer = Redemption.objects.filter(user=user, business=business).exists()

    try:
        with transaction.atomic():
            review = Review.objects.create(
                business=business,
                user=user,
                rating=rating,
                review_text=review_text,
                is_verified_buyer=is_verified_buyer,
                status=ReviewStatus.ACTIVE,
            )
    except IntegrityError:
        # Database unique constraint caught duplicate
        raise DuplicateReviewError("You have already reviewed this business")

    update_business_rating(business_id=business.id)

    logger.info("User %s reviewed business %s (%s stars)", user.id, business.id, rating)
    return review


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    review_text: Optional[str] = None
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. The business
    average is recomputed only when the rating changes.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        rating: New rating (1-5)
        review_text: New review text

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
    """
    review = _get_review_for_update(review_id)

    if review.user_id != user.id:
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    if rating is not None:
        _validate_rating(rating)
        review.rating = rating
    if review_text is not None:
        review.review_text = review_text

    review.save()

    if rating is not None:
        update_business_rating(business_id=review.business_id)

    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review and recompute the business average.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    review = _get_review_for_update(review_id)

    if review.user_id != user.id:
        raise UnauthorizedReviewActionError("You can only delete your own reviews")

    business_id = review.business_id
    review.delete()

    update_business_rating(business_id=business_id)

    logger.info("User %s deleted review %s", user.id, review_id)


def get_user_review(*, user: User, business_id: UUID) -> Optional[Review]:
    """Return the user's review of a business, or None."""
    return (
        Review.objects
        .select_related('user')
        .filter(user=user, business_id=business_id)
        .first()
    )
