"""
Monitoring Decorators

Provides decorators for automatic error capture and slow call warnings.
"""

import functools
import logging
import time
from typing import Any, Callable, Dict, Optional, TypeVar, cast

from .sentry.setup import add_breadcrumb, capture_exception

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def capture_errors(
    action: Optional[str] = None,
    reraise: bool = True,
    tags: Optional[Dict[str, str]] = None,
) -> Callable[[F], F]:
    """
    Decorator to capture exceptions and send to Sentry.

    Args:
        action: Name for the wrapped action (defaults to the function name)
        reraise: Whether to reraise the exception after capture
        tags: Additional tags to include

    Usage:
        @capture_errors(action="box_score")
        def show_box_score(game_id):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            name = action or func.__name__
            add_breadcrumb(message=f"Starting {name}", category="action")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                error_tags = {"action": name}
                if tags:
                    error_tags.update(tags)

                capture_exception(
                    exception=e,
                    tags=error_tags,
                    extra={"function": func.__name__},
                )
                if reraise:
                    raise
                logger.error("%s failed: %s", name, e)
                return None

            add_breadcrumb(message=f"Completed {name}", category="action")
            return result

        return cast(F, wrapper)

    return decorator


def track_performance(
    operation_name: Optional[str] = None,
    warn_threshold_seconds: float = 2.0,
) -> Callable[[F], F]:
    """
    Decorator to time a call and warn when it is slow.

    Args:
        operation_name: Name for the operation
        warn_threshold_seconds: Log warning if exceeds this duration

    Usage:
        @track_performance(operation_name="game_api", warn_threshold_seconds=2.0)
        def _request(self, method, path):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            name = operation_name or func.__name__
            start_time = time.monotonic()

            try:
                return func(*args, **kwargs)
            finally:
                duration = time.monotonic() - start_time

                add_breadcrumb(
                    message=f"{name} completed in {duration:.2f}s",
                    category="performance",
                    data={"duration_seconds": duration},
                )

                if duration > warn_threshold_seconds:
                    logger.warning(
                        "%s took %.2f seconds (threshold: %.2f)",
                        name,
                        duration,
                        warn_threshold_seconds,
                    )

        return cast(F, wrapper)

    return decorator
