"""
Domain-specific exceptions for reviews app.

These exceptions represent business rule violations and are
caught in views and converted to HTTP responses via their kind.
"""

from apps.common.exceptions import (
    DomainError,
    NotFoundError,
    InvalidStateError,
    ConflictError,
    ForbiddenError,
)


class ReviewsServiceError(DomainError):
    """Base exception for all review service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError, NotFoundError):
    """Raised when a review does not exist."""
    pass


class DuplicateReviewError(ReviewsServiceError, ConflictError):
    """Raised when a user tries to review the same business twice."""
    pass


class InvalidRatingError(ReviewsServiceError, InvalidStateError):
    """Raised when a rating is outside the 1-5 range."""
    pass


class BusinessNotFoundError(ReviewsServiceError, NotFoundError):
    """Raised when the reviewed business does not exist."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError, ForbiddenError):
    """Raised when a user tries to modify someone else's review."""
    pass
