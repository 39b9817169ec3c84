"""Basketball live stat tracker - Main package.

This package records live game events, keeps running player stats and
syncs them with the team's game API.

Modules:
    models - Data models (dataclasses)
    tracking - Live tracking session and API sync
    api - Game API clients
    helpers - Pure utility functions (milestones, box scores)
    monitoring - Sentry error tracking
    config - Configuration
"""

from .config import Config, APIConfig, TrackingConfig
from .tracking import GameTrackingSession, LiveGameTracker

__all__ = [
    'Config',
    'APIConfig',
    'TrackingConfig',
    'GameTrackingSession',
    'LiveGameTracker',
]

__version__ = '1.0.0'
