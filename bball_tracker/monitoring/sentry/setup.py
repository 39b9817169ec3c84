"""
Sentry Setup and Context Management

Initializes Sentry SDK and attaches live game context to captured errors.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import MonitoringConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def is_initialized() -> bool:
    return _sentry_initialized


def init_sentry(config: Optional[MonitoringConfig] = None) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: MonitoringConfig with DSN

    Returns:
        True if initialized (now or earlier), False if Sentry is not configured
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    config = config or MonitoringConfig.from_env()

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # INFO and above become breadcrumbs
        event_level=logging.ERROR,  # ERROR and above become events
    )

    sentry_sdk.init(
        dsn=config.sentry_dsn,
        environment=config.sentry_environment,
        traces_sample_rate=config.sentry_traces_sample_rate,
        integrations=[logging_integration],
        send_default_pii=False,
        attach_stacktrace=True,
    )

    sentry_sdk.set_tag("app", config.app_name)
    if config.device_id:
        sentry_sdk.set_tag("device_id", config.device_id)

    _sentry_initialized = True
    logger.debug("Sentry initialized")
    return True


def set_game_context(
    game_id: str,
    status: Optional[str] = None,
    home_score: Optional[int] = None,
    away_score: Optional[int] = None,
    local_events: Optional[int] = None,
) -> None:
    """
    Set live game context for Sentry.

    Args:
        game_id: Game being tracked
        status: Game status
        home_score: Current home score
        away_score: Current opponent score
        local_events: Number of events in the local log
    """
    if not _sentry_initialized:
        return

    sentry_sdk.set_context("game", {
        "game_id": game_id,
        "status": status,
        "home_score": home_score,
        "away_score": away_score,
        "local_events": local_events,
    })
    sentry_sdk.set_tag("game_id", game_id)


def add_breadcrumb(
    message: str,
    category: str = "tracking",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Add a breadcrumb to the current Sentry scope.

    Breadcrumbs trace the taps and API calls leading up to an error.

    Args:
        message: Breadcrumb message
        category: Category (tracking, api, session)
        level: Level (debug, info, warning, error)
        data: Additional data
    """
    if not _sentry_initialized:
        return

    sentry_sdk.add_breadcrumb(
        message=message,
        category=category,
        level=level,
        data=data,
    )


def capture_exception(
    exception: Exception,
    level: str = "error",
    tags: Optional[Dict[str, str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Capture an exception and send to Sentry.

    Args:
        exception: The exception to capture
        level: Severity level (error, warning, info)
        tags: Additional tags
        extra: Additional context data

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        scope.level = level

        for key, value in (tags or {}).items():
            scope.set_tag(key, value)

        for key, value in (extra or {}).items():
            scope.set_extra(key, value)

        return sentry_sdk.capture_exception(exception)


def capture_message(
    message: str,
    level: str = "info",
    tags: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Capture a message and send to Sentry.

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        scope.level = level
        for key, value in (tags or {}).items():
            scope.set_tag(key, value)
        return sentry_sdk.capture_message(message)
