"""Data models - Dataclass definitions for games and tracked events."""

from .event import (
    EventType,
    TrackedEvent,
    InvalidEventError,
    TRACKABLE_EVENT_TYPES,
    shot_metadata,
    rebound_metadata,
    normalize_metadata,
    generate_local_id,
)
from .game import Game, GameEvent, GameStatus, RosterPlayer

__all__ = [
    'EventType',
    'TrackedEvent',
    'InvalidEventError',
    'TRACKABLE_EVENT_TYPES',
    'shot_metadata',
    'rebound_metadata',
    'normalize_metadata',
    'generate_local_id',
    'Game',
    'GameEvent',
    'GameStatus',
    'RosterPlayer',
]
