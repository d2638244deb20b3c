"""
Domain-specific exceptions for follows app.

These exceptions represent business rule violations and are
caught in views and converted to HTTP responses via their kind.
"""

from apps.common.exceptions import (
    DomainError,
    NotFoundError,
    InvalidStateError,
    ConflictError,
)


class FollowsServiceError(DomainError):
    """Base exception for all follow service errors."""
    pass


class BusinessNotFoundError(FollowsServiceError, NotFoundError):
    pass


class SelfFollowError(FollowsServiceError, InvalidStateError):
    """Raised when a business owner tries to follow their own business."""
    pass


class AlreadyFollowingError(FollowsServiceError, ConflictError):
    """Raised when the follow is already active or muted."""
    pass


class NotFollowingError(FollowsServiceError, NotFoundError):
    """Raised when no follow exists or it is in the wrong state."""
    pass


class NotMutedError(FollowsServiceError, NotFoundError):
    pass
