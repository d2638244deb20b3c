"""
Follows app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and row-level locks.
"""

from .exceptions import (
    FollowsServiceError,
    BusinessNotFoundError,
    SelfFollowError,
    AlreadyFollowingError,
    NotFollowingError,
    NotMutedError,
)

from .follow_management import (
    follow_business,
    unfollow_business,
    mute_business,
    unmute_business,
    update_notification_preferences,
    get_followed_businesses,
    get_business_followers,
    get_follow_status,
)

__all__ = [
    # Exceptions
    'FollowsServiceError',
    'BusinessNotFoundError',
    'SelfFollowError',
    'AlreadyFollowingError',
    'NotFollowingError',
    'NotMutedError',
    # Follow management
    'follow_business',
    'unfollow_business',
    'mute_business',
    'unmute_business',
    'update_notification_preferences',
    'get_followed_businesses',
    'get_business_followers',
    'get_follow_status',
]
