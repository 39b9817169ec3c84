"""
Sentry Error Tracking Module

Provides exception capture with live game context for debugging.
"""

from .setup import (
    init_sentry,
    is_initialized,
    set_game_context,
    add_breadcrumb,
    capture_exception,
    capture_message,
)

__all__ = [
    'init_sentry',
    'is_initialized',
    'set_game_context',
    'add_breadcrumb',
    'capture_exception',
    'capture_message',
]
