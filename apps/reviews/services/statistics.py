"""Statistics service - public review listing with aggregates."""

from typing import Optional
from uuid import UUID

from django.db.models import Avg, Count

from apps.businesses.models import Business
from apps.common.pagination import paginate
from apps.reviews.models import Review, ReviewStatus
from .exceptions import BusinessNotFoundError


def get_business_reviews(
    *,
    business_id: UUID,
    page: int = 1,
    limit: Optional[int] = None
) -> dict:
    """
    Get a page of a business's active reviews with rating statistics.

    Average and distribution cover all active reviews, not just the page.

    Args:
        business_id: Business UUID
        page: 1-based page number
        limit: Page size

    Returns:
        Dictionary with:
        - reviews: list - Page of Review instances, newest first
        - average_rating: float - Mean rating rounded to 1 decimal
        - total_reviews: int - Number of active reviews
        - rating_distribution: dict - Count for each rating (1-5)
        - pagination: dict - Page metadata

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    if not Business.objects.filter(id=business_id).exists():
        raise BusinessNotFoundError("Business not found")

    queryset = (
        Review.objects
        .filter(business_id=business_id, status=ReviewStatus.ACTIVE)
        .select_related('user')
        .order_by('-created_at')
    )

    reviews, pagination = paginate(queryset, page=page, limit=limit)

    avg = queryset.aggregate(avg=Avg('rating'))['avg']

    return {
        'reviews': reviews,
        'average_rating': round(float(avg), 1) if avg is not None else 0.0,
        'total_reviews': pagination['total'],
        'rating_distribution': get_rating_distribution(business_id=business_id),
        'pagination': pagination,
    }


def get_rating_distribution(*, business_id: UUID) -> dict:
    """Count active reviews of a business per star rating (1-5)."""
    distribution = {i: 0 for i in range(1, 6)}
    rows = (
        Review.objects
        .filter(business_id=business_id, status=ReviewStatus.ACTIVE)
        .values('rating')
        .annotate(count=Count('id'))
        .order_by()
    )
    for row in rows:
        distribution[row['rating']] = row['count']

    return distribution
