"""API layer - Game API communication."""

from .client import GameApiClient, ProductionGameApiClient, MockGameApiClient
from .errors import ApiError, NotFoundError, ForbiddenError, is_transient_error
from .retry import NO_RETRY, RetryStrategy

__all__ = [
    'GameApiClient',
    'ProductionGameApiClient',
    'MockGameApiClient',
    'ApiError',
    'NotFoundError',
    'ForbiddenError',
    'is_transient_error',
    'RetryStrategy',
    'NO_RETRY',
]
