"""Retry Strategy - Backoff for transient game API failures."""

import logging
import time
from typing import Callable, TypeVar, Optional

from .errors import is_transient_error

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RetryStrategy:
    """Retries a call on transient failures with exponential backoff."""

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 0.5,
        exponential_backoff: bool = True,
        should_retry: Optional[Callable[[Exception], bool]] = None,
    ):
        """
        Initialize retry strategy.

        Args:
            max_retries: Maximum number of attempts (1 disables retrying)
            base_delay: Base delay between attempts in seconds
            exponential_backoff: Whether to double the delay after each attempt
            should_retry: Predicate deciding whether an exception is retryable
                (defaults to is_transient_error)
        """
        self.max_retries = max(1, max_retries)
        self.base_delay = base_delay
        self.exponential_backoff = exponential_backoff
        self.should_retry = should_retry or is_transient_error

    def execute(self, func: Callable[[], T], on_retry: Optional[Callable[[int, Exception], None]] = None) -> T:
        """
        Execute function with retries.

        Args:
            func: Function to execute
            on_retry: Optional callback called before each retry with (attempt, exception)

        Returns:
            Result of the function

        Raises:
            The first non-retryable exception, or the last one once attempts run out
        """
        last_exception = None

        for attempt in range(self.max_retries):
            try:
                return func()
            except Exception as e:
                if not self.should_retry(e):
                    raise
                last_exception = e

                if attempt < self.max_retries - 1:
                    delay = self._calculate_delay(attempt)
                    logger.warning(
                        "Attempt %d/%d failed (%s), retrying in %.1fs",
                        attempt + 1,
                        self.max_retries,
                        e,
                        delay,
                    )
                    if on_retry:
                        on_retry(attempt + 1, e)
                    time.sleep(delay)

        raise last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay for a given attempt number."""
        if self.exponential_backoff:
            return self.base_delay * (2 ** attempt)
        return self.base_delay


NO_RETRY = RetryStrategy(max_retries=1)
