"""Business service exceptions."""

from apps.common.exceptions import DomainError


class BusinessServiceError(DomainError):
    """Base exception for business services."""
    pass


class UnknownCounterError(BusinessServiceError):
    pass
