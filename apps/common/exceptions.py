"""
Shared error taxonomy for service-layer exceptions.

Each app keeps its own exception hierarchy in ``services/exceptions.py``.
Concrete exceptions additionally inherit one of the kinds below, which
carries the HTTP status the API layer answers with:

    DomainError (base)
    ├── NotFoundError       404  missing deal/user/business/redemption/review
    ├── InvalidStateError   400  business-rule violation on current state
    ├── ConflictError       409  duplicate follow/review, redemption limit
    └── ForbiddenError      403  caller does not own the resource

Usage:
    try:
        result = redeem_deal(user_id=request.user.id, deal_id=deal_id)
    except RedemptionsServiceError as e:
        return error_response(e)
"""

from rest_framework import status
from rest_framework.response import Response


class DomainError(Exception):
    """Base class for every business-rule violation raised by services."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidStateError(DomainError):
    """Entity exists but its current state forbids the operation."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(DomainError):
    """Operation collides with an existing record or a usage limit."""

    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(DomainError):
    """Caller is authenticated but does not own the target resource."""

    status_code = status.HTTP_403_FORBIDDEN


def error_response(exc: DomainError) -> Response:
    """Convert a domain exception into the API's ``{"error": ...}`` body."""
    return Response({'error': str(exc)}, status=exc.status_code)
