from .exceptions import (
    BusinessServiceError,
    UnknownCounterError,
)

from .counters import (
    update_business_counter,
)

__all__ = [
    # Exceptions
    'BusinessServiceError',
    'UnknownCounterError',
    # Counters
    'update_business_counter',
]
