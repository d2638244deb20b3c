"""
Reviews app services layer.

Services contain business logic and orchestrate operations across models.
Every review write recomputes the business average in the same transaction.
"""

from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    BusinessNotFoundError,
    UnauthorizedReviewActionError,
)

from .review_management import (
    create_review,
    update_review,
    delete_review,
    get_user_review,
)

from .rating_aggregation import (
    update_business_rating,
)

from .statistics import (
    get_business_reviews,
    get_rating_distribution,
)

__all__ = [
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    'BusinessNotFoundError',
    'UnauthorizedReviewActionError',
    # Review management
    'create_review',
    'update_review',
    'delete_review',
    'get_user_review',
    # Rating aggregation
    'update_business_rating',
    # Statistics
    'get_business_reviews',
    'get_rating_distribution',
]
