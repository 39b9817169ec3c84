"""Tracking - Live game session state and the layer that syncs it with the API."""

from .session import GameTrackingSession, SessionState, SessionPhase
from .scheduler import Scheduler, PollingScheduler, ManualScheduler, TimerHandle
from .results import Result, ResultStatus
from .live_game import LiveGameTracker, StatType

__all__ = [
    'GameTrackingSession',
    'SessionState',
    'SessionPhase',
    'Scheduler',
    'PollingScheduler',
    'ManualScheduler',
    'TimerHandle',
    'Result',
    'ResultStatus',
    'LiveGameTracker',
    'StatType',
]
