"""
Monitoring for the live tracker

Provides:
- Sentry error tracking with live game context
- Decorators for error capture and slow call warnings
"""

from .config import MonitoringConfig
from .decorators import capture_errors, track_performance
from .sentry import (
    init_sentry,
    set_game_context,
    add_breadcrumb,
    capture_exception,
    capture_message,
)

__all__ = [
    'MonitoringConfig',
    'capture_errors',
    'track_performance',
    'init_sentry',
    'set_game_context',
    'add_breadcrumb',
    'capture_exception',
    'capture_message',
]
