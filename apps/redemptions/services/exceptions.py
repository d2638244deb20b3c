"""
Domain-specific exceptions for redemptions app.

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


class RedemptionsServiceError(DomainError):
    """Base exception for all redemption service errors."""
    pass


class DealNotFoundError(RedemptionsServiceError, NotFoundError):
    pass


class DealNotActiveError(RedemptionsServiceError, InvalidStateError):
    """Raised when the deal is paused, expired or sold out by status."""
    pass


class DealNotStartedError(RedemptionsServiceError, InvalidStateError):
    pass


class DealExpiredError(RedemptionsServiceError, InvalidStateError):
    pass


class DealSoldOutError(RedemptionsServiceError, InvalidStateError):
    """Raised when every unit of a limited deal has been redeemed."""
    pass


class UserNotFoundError(RedemptionsServiceError, NotFoundError):
    pass


class RedemptionLimitReachedError(RedemptionsServiceError, ConflictError):
    """Raised when a user already used all of their redemptions of a deal."""
    pass


class RedemptionNotFoundError(RedemptionsServiceError, NotFoundError):
    pass


class BusinessNotFoundError(RedemptionsServiceError, NotFoundError):
    pass


class NotBusinessOwnerError(RedemptionsServiceError, ForbiddenError):
    """Raised when someone other than the owner acts on a business's redemptions."""
    pass


class RedemptionAlreadyValidatedError(RedemptionsServiceError, InvalidStateError):
    pass
