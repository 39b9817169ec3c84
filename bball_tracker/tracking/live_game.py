"""
Live Game Tracker

Sequences the tracking session with the game API for one live game: every
action updates the session first, then calls the server, and rolls the session
back with undo_last() if the server call fails.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from ..api.client import GameApiClient
from ..api.errors import ApiError, NotFoundError
from ..config import TrackingConfig
from ..helpers.box_score import team_points
from ..models.event import EventType, TrackedEvent, rebound_metadata, shot_metadata
from ..models.game import Game, GameEvent, GameStatus
from ..monitoring.sentry.setup import add_breadcrumb, capture_exception, capture_message, set_game_context
from .results import Result
from .scheduler import PollingScheduler, Scheduler
from .session import GameTrackingSession

logger = logging.getLogger(__name__)


class StatType(Enum):
    """Non-shot stat buttons."""
    OREB = "OREB"
    DREB = "DREB"
    STL = "STL"
    BLK = "BLK"
    AST = "AST"


# stat button -> (event type, rebound type, label)
STAT_EVENTS = {
    StatType.OREB: (EventType.REBOUND, 'offensive', "Off Rebound"),
    StatType.DREB: (EventType.REBOUND, 'defensive', "Def Rebound"),
    StatType.STL: (EventType.STEAL, None, "Steal"),
    StatType.BLK: (EventType.BLOCK, None, "Block"),
    StatType.AST: (EventType.ASSIST, None, "Assist"),
}


class LiveGameTracker:
    """
    Drives a GameTrackingSession against the game API.

    Usage:
        tracker = LiveGameTracker(ProductionGameApiClient(url, token), game_id)
        tracker.start()
        tracker.select_player("p1", "Jordan")
        tracker.record_shot(points=2, made=True)
        tracker.undo()
        tracker.end_game()
    """

    def __init__(
        self,
        api_client: GameApiClient,
        game_id: str,
        session: Optional[GameTrackingSession] = None,
        scheduler: Optional[Scheduler] = None,
        config: Optional[TrackingConfig] = None,
    ):
        self.api = api_client
        self.game_id = game_id
        self.config = config or TrackingConfig()
        if session is not None and session.scheduler is not None and scheduler is not None \
                and session.scheduler is not scheduler:
            raise ValueError("session and tracker must share one scheduler")
        self.scheduler = scheduler or (session.scheduler if session else None) or PollingScheduler()
        self.session = session or GameTrackingSession(
            scheduler=self.scheduler,
            undo_seconds=self.config.undo_seconds,
            hot_streak_threshold=self.config.hot_streak_threshold,
        )
        if self.session.scheduler is None:
            self.session.scheduler = self.scheduler

        self.game: Optional[Game] = None
        self.server_events: List[GameEvent] = []
        self.home_score = 0
        self.opponent_score = 0
        # local_id -> id of the server event created for it
        self._server_ids: Dict[str, str] = {}

    # Lifecycle

    def start(self) -> Result[Game]:
        """Load the game and start a fresh session. The game must be in progress."""
        self.session.clear_session()
        self._server_ids.clear()

        try:
            game = self.api.get_game(self.game_id)
            if not game.is_in_progress:
                return Result.error("This game is not in progress", game)
            events = self.api.list_events(self.game_id, limit=self.config.event_page_size)
        except ApiError as e:
            self._report(e, "start")
            return Result.error(e.message or "Game not found")

        self.game = game
        self.server_events = events
        self.home_score = team_points(events)
        self.opponent_score = game.away_score
        self._update_context()

        logger.info("Tracking %s", game)
        return Result.success(game)

    def leave(self) -> None:
        """Leave the tracking screen; the local session is discarded."""
        self.session.clear_session()
        self._server_ids.clear()

    def tick(self) -> int:
        """Poll the scheduler so an expired undo window locks the last event."""
        if isinstance(self.scheduler, PollingScheduler):
            return self.scheduler.run_due()
        return 0

    # Selection

    def select_player(self, player_id: Optional[str], player_name: Optional[str] = None) -> None:
        self.session.select_player(player_id, player_name)

    @property
    def undo_seconds_remaining(self) -> float:
        return self.session.undo_seconds_remaining()

    # Recording

    def record_shot(self, points: int, made: bool) -> Result[TrackedEvent]:
        """Record a 2 or 3 point attempt for the selected player."""
        if not self.session.selected_player_id:
            return Result.error("Please select a player before recording a shot.")
        return self._record(EventType.SHOT, shot_metadata(made, points), "shot")

    def record_stat(self, stat: StatType) -> Result[TrackedEvent]:
        """Record a rebound, steal, block or assist for the selected player."""
        if not self.session.selected_player_id:
            return Result.error("Please select a player before recording a stat.")
        event_type, rebound_type, label = STAT_EVENTS[StatType(stat)]
        metadata = rebound_metadata(rebound_type) if rebound_type else {}
        return self._record(event_type, metadata, label)

    def _record(self, event_type: EventType, metadata: dict, label: str) -> Result[TrackedEvent]:
        player_id = self.session.selected_player_id
        player_name = self.session.selected_player_name

        # Optimistic: the session reflects the tap before the server answers
        local_event = self.session.record_event(event_type, player_id, metadata, player_name)
        add_breadcrumb(f"Recorded {local_event.describe()}", data={"local_id": local_event.local_id})

        try:
            server_event = self.api.create_event(self.game_id, player_id, event_type, local_event.metadata)
            self._server_ids[local_event.local_id] = server_event.id
            self.server_events.insert(0, server_event)

            if local_event.is_made_shot:
                new_home_score = self.home_score + local_event.points_scored
                self.api.update_game(self.game_id, home_score=new_home_score)
                self.home_score = new_home_score
        except ApiError as e:
            # A created event whose score update failed is left on the server;
            # it still needs the compensating delete
            server_id = self._server_ids.pop(local_event.local_id, None)
            self.session.undo_last()
            if server_id:
                self._delete_quietly(server_id)
            self._report(e, f"record_{label.lower().replace(' ', '_')}")
            return Result.error(e.message or f"Failed to record {label}", local_event)

        self.session.arm_undo_timer(self.config.undo_seconds)
        # Deselect to prevent accidental double taps
        self.session.select_player(None)
        self._update_context()
        return Result.success(local_event, self.session.last_milestone or "")

    def undo(self) -> Result[TrackedEvent]:
        """Undo the last event if its undo window is still open."""
        undone = self.session.undo_last()
        if undone is None:
            return Result.skipped("Nothing to undo")

        server_id = self._server_ids.pop(undone.local_id, None)
        try:
            if server_id:
                try:
                    self.api.delete_event(self.game_id, server_id)
                except NotFoundError:
                    # a retried DELETE whose first attempt went through
                    logger.info("Server event %s already deleted", server_id)
                self._forget_server_event(server_id)
            else:
                logger.warning("No server event for %s, nothing to delete", undone.local_id)

            if undone.is_made_shot:
                new_home_score = max(0, self.home_score - undone.points_scored)
                self.api.update_game(self.game_id, home_score=new_home_score)
                self.home_score = new_home_score
        except ApiError as e:
            # Local state stays undone; nothing is re-applied
            self._report(e, "undo")
            return Result.error(e.message or "Failed to undo", undone)

        self._update_context()
        return Result.success(undone, f"Undid {undone.describe()}")

    # Opponent score

    def add_opponent_points(self, points: int) -> Result[int]:
        return self._set_opponent_score(self.opponent_score + points)

    def subtract_opponent_point(self) -> Result[int]:
        if self.opponent_score <= 0:
            return Result.skipped("Opponent score is already 0")
        return self._set_opponent_score(self.opponent_score - 1)

    def _set_opponent_score(self, new_score: int) -> Result[int]:
        previous = self.opponent_score
        self.opponent_score = new_score
        try:
            self.api.update_game(self.game_id, away_score=new_score)
        except ApiError as e:
            self.opponent_score = previous
            self._report(e, "opponent_score")
            return Result.error("Failed to update opponent score")
        self._update_context()
        return Result.success(new_score)

    # End of game

    def end_game(self) -> Result[Game]:
        """Mark the game FINISHED with the final scores and discard the session."""
        try:
            game = self.api.update_game(
                self.game_id,
                home_score=self.home_score,
                away_score=self.opponent_score,
                status=GameStatus.FINISHED,
            )
        except ApiError as e:
            self._report(e, "end_game")
            return Result.error(e.message or "Failed to end game")

        self.game = game
        self.session.clear_session()
        self._server_ids.clear()
        logger.info("Game finished: %s", game)
        capture_message(f"Game finished: {game}", tags={"game_id": self.game_id})
        return Result.success(game)

    # Internals

    def _delete_quietly(self, server_id: str) -> None:
        try:
            self.api.delete_event(self.game_id, server_id)
        except ApiError as e:
            logger.error("Could not remove server event %s after failed record: %s", server_id, e)
            capture_exception(e, tags={"action": "rollback_delete"})
            return
        self._forget_server_event(server_id)

    def _forget_server_event(self, server_id: str) -> None:
        self.server_events = [e for e in self.server_events if e.id != server_id]

    def _report(self, error: ApiError, action: str) -> None:
        logger.warning("%s failed for game %s: %s", action, self.game_id, error)
        capture_exception(
            error,
            level="warning",
            tags={"action": action, "game_id": self.game_id},
            extra={"status_code": error.status_code},
        )

    def _update_context(self) -> None:
        set_game_context(
            self.game_id,
            status=self.game.status.value if self.game else None,
            home_score=self.home_score,
            away_score=self.opponent_score,
            local_events=len(self.session.local_events),
        )
