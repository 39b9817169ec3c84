"""
Game Tracking Session

In-memory state for one visit to the live tracking screen: the selected
player, the optimistic local event log, running streak/point/rebound/assist
counters and the single-level undo of the most recent event.

The session performs no network I/O and raises no errors of its own. The
caller records an event, sends it to the server, and calls undo_last() to roll
back if the server call fails.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from ..helpers.milestones import HOT_STREAK_THRESHOLD, detect_milestone, hot_players
from ..models.event import (
    TRACKABLE_EVENT_TYPES,
    EventType,
    InvalidEventError,
    TrackedEvent,
    generate_local_id,
    utc_now_iso,
)
from .scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_UNDO_SECONDS = 5.0


class SessionPhase(Enum):
    IDLE = "idle"
    PLAYER_SELECTED = "player_selected"
    UNDO_PENDING = "undo_pending"
    LOCKED = "locked"


@dataclass
class SessionState:
    """Everything a tracking session holds. SessionState() is the empty session."""
    selected_player_id: Optional[str] = None
    selected_player_name: Optional[str] = None
    local_events: List[TrackedEvent] = field(default_factory=list)  # most recent first
    last_event: Optional[TrackedEvent] = None
    undo_timer: Optional[TimerHandle] = None
    player_streaks: Dict[str, int] = field(default_factory=dict)
    hot_players: Dict[str, int] = field(default_factory=dict)
    player_points: Dict[str, int] = field(default_factory=dict)
    player_rebounds: Dict[str, int] = field(default_factory=dict)
    player_assists: Dict[str, int] = field(default_factory=dict)
    last_milestone: Optional[str] = None


class GameTrackingSession:
    """
    Single-threaded reducer for live stat tracking.

    Usage:
        session = GameTrackingSession(scheduler=PollingScheduler())
        session.select_player("p1", "Jordan")
        event = session.record_event(EventType.SHOT, "p1", shot_metadata(True, 2), "Jordan")
        session.arm_undo_timer()
        ...
        session.undo_last()
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        undo_seconds: float = DEFAULT_UNDO_SECONDS,
        hot_streak_threshold: int = HOT_STREAK_THRESHOLD,
        id_factory: Callable[[], str] = generate_local_id,
        timestamp_factory: Callable[[], str] = utc_now_iso,
    ):
        """
        Args:
            scheduler: Used by arm_undo_timer(); optional if the caller manages timers
            undo_seconds: Length of the undo window armed by arm_undo_timer()
            hot_streak_threshold: Consecutive makes that mark a player as hot
            id_factory: Generates local event ids
            timestamp_factory: Generates created_at strings
        """
        self.scheduler = scheduler
        self.undo_seconds = undo_seconds
        self.hot_streak_threshold = hot_streak_threshold
        self._id_factory = id_factory
        self._timestamp_factory = timestamp_factory
        self._issued_ids = set()
        self.state = SessionState()

    # Read access

    @property
    def selected_player_id(self) -> Optional[str]:
        return self.state.selected_player_id

    @property
    def selected_player_name(self) -> Optional[str]:
        return self.state.selected_player_name

    @property
    def local_events(self) -> List[TrackedEvent]:
        return self.state.local_events

    @property
    def last_event(self) -> Optional[TrackedEvent]:
        return self.state.last_event

    @property
    def undo_timer(self) -> Optional[TimerHandle]:
        return self.state.undo_timer

    @property
    def player_streaks(self) -> Dict[str, int]:
        return self.state.player_streaks

    @property
    def hot_players(self) -> Dict[str, int]:
        return self.state.hot_players

    @property
    def player_points(self) -> Dict[str, int]:
        return self.state.player_points

    @property
    def player_rebounds(self) -> Dict[str, int]:
        return self.state.player_rebounds

    @property
    def player_assists(self) -> Dict[str, int]:
        return self.state.player_assists

    @property
    def last_milestone(self) -> Optional[str]:
        return self.state.last_milestone

    @property
    def can_undo(self) -> bool:
        return self.state.last_event is not None

    @property
    def phase(self) -> SessionPhase:
        if self.state.last_event is not None:
            return SessionPhase.UNDO_PENDING
        if self.state.selected_player_id is not None:
            return SessionPhase.PLAYER_SELECTED
        if self.state.local_events:
            return SessionPhase.LOCKED
        return SessionPhase.IDLE

    # Operations

    def select_player(self, player_id: Optional[str], player_name: Optional[str] = None) -> None:
        """Select a player, or clear the selection with None."""
        if player_id is None:
            player_name = None
        self.state.selected_player_id = player_id
        self.state.selected_player_name = player_name

    def record_event(
        self,
        event_type: Union[EventType, str],
        player_id: str,
        metadata: Optional[Dict[str, Any]] = None,
        player_name: Optional[str] = None,
    ) -> TrackedEvent:
        """
        Record an event locally and make it the undoable event.

        The caller must have a player selected and is responsible for sending
        the returned event to the server and arming the undo timer.

        Returns:
            The new TrackedEvent

        Raises:
            InvalidEventError: If the type is not trackable or the metadata does not match it
        """
        event = TrackedEvent(
            local_id=self._next_local_id(),
            event_type=event_type,
            player_id=player_id,
            metadata=metadata or {},
            player_name=player_name,
            created_at=self._timestamp_factory(),
        )
        if event.event_type not in TRACKABLE_EVENT_TYPES:
            raise InvalidEventError(f"{event.event_type.value} events are not recorded by the tracker")

        # Only the newest event is ever undoable
        self._cancel_timer()

        state = self.state
        if event.is_shot:
            if event.metadata['made']:
                state.player_streaks[player_id] = state.player_streaks.get(player_id, 0) + 1
            else:
                state.player_streaks[player_id] = 0
        state.hot_players = hot_players(state.player_streaks, self.hot_streak_threshold)

        before = self._totals(player_id)
        if event.is_made_shot:
            state.player_points[player_id] = before['points'] + event.metadata['points']
        elif event.event_type == EventType.REBOUND:
            state.player_rebounds[player_id] = before['rebounds'] + 1
        elif event.event_type == EventType.ASSIST:
            state.player_assists[player_id] = before['assists'] + 1
        after = self._totals(player_id)

        state.last_milestone = detect_milestone(event.display_name, before, after)
        if state.last_milestone:
            logger.info("Milestone: %s", state.last_milestone)

        state.local_events.insert(0, event)
        state.last_event = event
        state.undo_timer = None

        logger.debug("Recorded %s (%s)", event.describe(), event.local_id)
        return event

    def set_undo_timer(self, handle: Optional[TimerHandle]) -> None:
        """Remember the handle of the externally scheduled undo expiry, cancelling the one it replaces."""
        previous = self.state.undo_timer
        if previous is not None and previous is not handle:
            previous.cancel()
        self.state.undo_timer = handle

    def arm_undo_timer(self, delay: Optional[float] = None) -> TimerHandle:
        """
        Schedule expiry of the current undo window on the session's scheduler.

        Any previously armed timer is cancelled first.
        """
        if self.scheduler is None:
            raise RuntimeError("arm_undo_timer() requires a scheduler")
        self._cancel_timer()
        handle = self.scheduler.schedule(
            self.undo_seconds if delay is None else delay,
            self.clear_last_event,
        )
        self.set_undo_timer(handle)
        return handle

    def undo_seconds_remaining(self) -> float:
        if self.scheduler is None or self.state.last_event is None:
            return 0.0
        return self.scheduler.remaining(self.state.undo_timer)

    def clear_last_event(self) -> None:
        """Close the undo window. The event stays in local_events."""
        self._cancel_timer()
        if self.state.last_event is not None:
            logger.debug("Undo window closed for %s", self.state.last_event.local_id)
        self.state.last_event = None
        self.state.undo_timer = None

    def undo_last(self) -> Optional[TrackedEvent]:
        """
        Remove the most recent event if it is still undoable.

        A made shot takes one off the player's streak. A missed shot does not
        give the streak back, and point/rebound/assist totals and
        last_milestone are left as they are.

        Returns:
            The removed event, or None if there was nothing to undo
        """
        event = self.state.last_event
        if event is None:
            return None

        self._cancel_timer()

        state = self.state
        if event.is_made_shot:
            state.player_streaks[event.player_id] = max(0, state.player_streaks.get(event.player_id, 0) - 1)
        state.hot_players = hot_players(state.player_streaks, self.hot_streak_threshold)

        state.local_events = [e for e in state.local_events if e.local_id != event.local_id]
        state.last_event = None
        state.undo_timer = None

        logger.debug("Undid %s (%s)", event.describe(), event.local_id)
        return event

    def remove_local_event(self, local_id: str) -> None:
        """Drop one event from the local log without touching anything else."""
        self.state.local_events = [e for e in self.state.local_events if e.local_id != local_id]

    def clear_session(self) -> None:
        """Reset to an empty session, cancelling any pending undo timer."""
        self._cancel_timer()
        self.state = SessionState()

    # Internals

    def _cancel_timer(self) -> None:
        if self.state.undo_timer is not None:
            self.state.undo_timer.cancel()

    def _next_local_id(self) -> str:
        local_id = self._id_factory()
        while local_id in self._issued_ids:
            local_id = self._id_factory()
        self._issued_ids.add(local_id)
        return local_id

    def _totals(self, player_id: str) -> Dict[str, int]:
        return {
            'points': self.state.player_points.get(player_id, 0),
            'rebounds': self.state.player_rebounds.get(player_id, 0),
            'assists': self.state.player_assists.get(player_id, 0),
        }
