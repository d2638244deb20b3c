"""
Redemptions app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and row-level locks.
"""

from .exceptions import (
    RedemptionsServiceError,
    DealNotFoundError,
    DealNotActiveError,
    DealNotStartedError,
    DealExpiredError,
    DealSoldOutError,
    UserNotFoundError,
    RedemptionLimitReachedError,
    RedemptionNotFoundError,
    BusinessNotFoundError,
    NotBusinessOwnerError,
    RedemptionAlreadyValidatedError,
)

from .redemption_engine import (
    RedemptionResult,
    redeem_deal,
    get_user_redemptions,
    get_redemption_details,
)

from .redemption_validation import (
    validate_redemption,
    get_business_redemptions,
)

from .qr_codes import (
    generate_redemption_qr,
)

__all__ = [
    # Exceptions
    'RedemptionsServiceError',
    'DealNotFoundError',
    'DealNotActiveError',
    'DealNotStartedError',
    'DealExpiredError',
    'DealSoldOutError',
    'UserNotFoundError',
    'RedemptionLimitReachedError',
    'RedemptionNotFoundError',
    'BusinessNotFoundError',
    'NotBusinessOwnerError',
    'RedemptionAlreadyValidatedError',
    # Redemption engine
    'RedemptionResult',
    'redeem_deal',
    'get_user_redemptions',
    'get_redemption_details',
    # Validation
    'validate_redemption',
    'get_business_redemptions',
    # QR codes
    'generate_redemption_qr',
]
