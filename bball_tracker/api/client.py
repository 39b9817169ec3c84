"""Game API Client - Interface and implementations for the games/events REST API."""

import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests

from ..models.event import EventType
from ..models.game import Game, GameEvent, GameStatus
from ..monitoring.decorators import track_performance
from .errors import ApiError, NotFoundError, error_from_response
from .retry import NO_RETRY, RetryStrategy

logger = logging.getLogger(__name__)

T = TypeVar('T')


class GameApiClient(ABC):
    """Abstract interface for game API calls."""

    @abstractmethod
    def get_game(self, game_id: str) -> Game:
        """GET /games/{gameId}."""
        pass

    @abstractmethod
    def list_events(
        self,
        game_id: str,
        limit: int = 50,
        offset: int = 0,
        event_type: Optional[EventType] = None,
        player_id: Optional[str] = None,
    ) -> List[GameEvent]:
        """GET /games/{gameId}/events, newest first."""
        pass

    @abstractmethod
    def create_event(
        self,
        game_id: str,
        player_id: Optional[str],
        event_type: EventType,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> GameEvent:
        """POST /games/{gameId}/events."""
        pass

    @abstractmethod
    def delete_event(self, game_id: str, event_id: str) -> None:
        """DELETE /games/{gameId}/events/{eventId}."""
        pass

    @abstractmethod
    def update_game(
        self,
        game_id: str,
        home_score: Optional[int] = None,
        away_score: Optional[int] = None,
        status: Optional[GameStatus] = None,
    ) -> Game:
        """PATCH /games/{gameId} with only the fields given."""
        pass


def _game_patch(home_score, away_score, status) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if home_score is not None:
        body['homeScore'] = home_score
    if away_score is not None:
        body['awayScore'] = away_score
    if status is not None:
        body['status'] = status.value
    return body


def _parse(data: Dict[str, Any], key: str, parser: Callable[[Any], T]) -> T:
    """Parse data[key], turning a malformed 2xx body into an ApiError."""
    try:
        return parser(data[key])
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Malformed response: missing or invalid '{key}'") from e


class ProductionGameApiClient(GameApiClient):
    """Game API client over HTTP using requests."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10,
        retry: Optional[RetryStrategy] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: Server root, e.g. http://localhost:3000
            token: Bearer token for the Authorization header
            timeout: Per-request timeout in seconds
            retry: Strategy for idempotent requests (event creation is never retried)
            session: Pre-configured requests session
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.retry = retry or RetryStrategy()

        self.session = session or requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })
        if token:
            self.session.headers['Authorization'] = f"Bearer {token}"

    @track_performance(operation_name="game_api_request")
    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        retry: Optional[RetryStrategy] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{self.API_PREFIX}{path}"

        def send() -> Dict[str, Any]:
            try:
                response = self.session.request(
                    method, url, params=params, json=body, timeout=self.timeout
                )
            except requests.RequestException as e:
                raise ApiError(f"{method} {path} failed: {e}") from e

            if response.status_code >= 400:
                raise error_from_response(response)
            if response.status_code == 204 or not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise ApiError(f"{method} {path} returned invalid JSON", response.status_code) from e

        logger.debug("%s %s", method, path)
        return (retry or self.retry).execute(send)

    def get_game(self, game_id: str) -> Game:
        data = self._request('GET', f"/games/{game_id}")
        return _parse(data, 'game', Game.from_api)

    def list_events(self, game_id, limit=50, offset=0, event_type=None, player_id=None) -> List[GameEvent]:
        params: Dict[str, Any] = {'limit': limit, 'offset': offset}
        if event_type is not None:
            params['eventType'] = event_type.value
        if player_id:
            params['playerId'] = player_id
        data = self._request('GET', f"/games/{game_id}/events", params=params)
        return _parse(data, 'events', lambda items: [GameEvent.from_api(e) for e in items])

    def create_event(self, game_id, player_id, event_type, metadata=None) -> GameEvent:
        body: Dict[str, Any] = {'eventType': event_type.value, 'metadata': metadata or {}}
        if player_id:
            body['playerId'] = player_id
        # Not idempotent: a retried POST could record the event twice
        data = self._request('POST', f"/games/{game_id}/events", body=body, retry=NO_RETRY)
        return _parse(data, 'event', GameEvent.from_api)

    def delete_event(self, game_id: str, event_id: str) -> None:
        self._request('DELETE', f"/games/{game_id}/events/{event_id}")

    def update_game(self, game_id, home_score=None, away_score=None, status=None) -> Game:
        body = _game_patch(home_score, away_score, status)
        data = self._request('PATCH', f"/games/{game_id}", body=body)
        return _parse(data, 'game', Game.from_api)


class MockGameApiClient(GameApiClient):
    """In-memory client for testing."""

    def __init__(self):
        self.games: Dict[str, Game] = {}
        self.events: Dict[str, List[GameEvent]] = {}
        self.calls: List[tuple] = []
        self._failures: Dict[str, List[Exception]] = {}
        self._ids = itertools.count(1)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def calls_to(self, method: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == method]

    def add_game(self, game: Game, events: Optional[List[GameEvent]] = None) -> None:
        """Test helper to register a game and its existing events (newest first)."""
        self.games[game.id] = game
        self.events[game.id] = list(events or [])

    def fail_next(self, method: str, error: Optional[Exception] = None) -> None:
        """Test helper: make the next call to `method` raise `error`."""
        self._failures.setdefault(method, []).append(error or ApiError("Network request failed"))

    def _call(self, method: str, *args) -> None:
        self.calls.append((method,) + args)
        pending = self._failures.get(method)
        if pending:
            raise pending.pop(0)

    def _game(self, game_id: str) -> Game:
        if game_id not in self.games:
            raise NotFoundError("Game not found", 404)
        return self.games[game_id]

    def get_game(self, game_id: str) -> Game:
        self._call('get_game', game_id)
        return self._game(game_id)

    def list_events(self, game_id, limit=50, offset=0, event_type=None, player_id=None) -> List[GameEvent]:
        self._call('list_events', game_id)
        self._game(game_id)
        events = self.events.get(game_id, [])
        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]
        if player_id:
            events = [e for e in events if e.player_id == player_id]
        return events[offset:offset + limit]

    def create_event(self, game_id, player_id, event_type, metadata=None) -> GameEvent:
        self._call('create_event', game_id, player_id, event_type, metadata)
        self._game(game_id)
        event = GameEvent(
            id=f"evt-{next(self._ids)}",
            game_id=game_id,
            event_type=event_type,
            player_id=player_id,
            metadata=dict(metadata or {}),
        )
        self.events.setdefault(game_id, []).insert(0, event)
        return event

    def delete_event(self, game_id: str, event_id: str) -> None:
        self._call('delete_event', game_id, event_id)
        events = self.events.get(game_id, [])
        remaining = [e for e in events if e.id != event_id]
        if len(remaining) == len(events):
            raise NotFoundError("Game event not found", 404)
        self.events[game_id] = remaining

    def update_game(self, game_id, home_score=None, away_score=None, status=None) -> Game:
        self._call('update_game', game_id, _game_patch(home_score, away_score, status))
        game = self._game(game_id)
        if home_score is not None:
            game.home_score = home_score
        if away_score is not None:
            game.away_score = away_score
        if status is not None:
            game.status = status
        return game

    def reset(self) -> None:
        """Reset recorded calls and injected failures."""
        self.calls = []
        self._failures = {}

