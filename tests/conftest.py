"""Shared pytest fixtures for basketball tracker tests."""

import itertools

import pytest


@pytest.fixture
def scheduler():
    """Scheduler with a fake clock starting at 0."""
    from bball_tracker.tracking.scheduler import ManualScheduler
    return ManualScheduler()


@pytest.fixture
def local_ids():
    """Deterministic local id factory: local-1, local-2, ..."""
    counter = itertools.count(1)
    return lambda: f"local-{next(counter)}"


@pytest.fixture
def session(scheduler, local_ids):
    """Tracking session wired to the fake-clock scheduler."""
    from bball_tracker.tracking.session import GameTrackingSession
    return GameTrackingSession(
        scheduler=scheduler,
        id_factory=local_ids,
        timestamp_factory=lambda: "2026-01-10T18:00:00.000Z",
    )


@pytest.fixture
def mock_api():
    """Create a mock game API client."""
    from bball_tracker.api.client import MockGameApiClient
    return MockGameApiClient()


@pytest.fixture
def roster():
    from bball_tracker.models.game import RosterPlayer
    return [
        RosterPlayer(player_id="p1", name="Jordan Lee", jersey_number=23, position="G"),
        RosterPlayer(player_id="p2", name="Sam Ortiz", jersey_number=5, position="F"),
        RosterPlayer(player_id="p3", name="Alex Kim", jersey_number=12, position="C"),
    ]


@pytest.fixture
def live_game(roster):
    """An in-progress game with an empty score."""
    from bball_tracker.models.game import Game, GameStatus
    return Game(
        id="game-1",
        team_id="team-1",
        opponent="Rockets",
        date="2026-01-10T18:00:00.000Z",
        status=GameStatus.IN_PROGRESS,
        home_score=0,
        away_score=0,
        team_name="Hawks",
        roster=roster,
    )


@pytest.fixture
def tracker(mock_api, live_game, session, scheduler):
    """Started live tracker for game-1 backed by the mock API."""
    from bball_tracker.tracking.live_game import LiveGameTracker
    mock_api.add_game(live_game)
    tracker = LiveGameTracker(mock_api, live_game.id, session=session, scheduler=scheduler)
    result = tracker.start()
    assert result.is_success
    return tracker


@pytest.fixture
def sample_api_game():
    """GET /games/{id} payload as returned by the server."""
    return {
        "id": "game-1",
        "teamId": "team-1",
        "opponent": "Rockets",
        "date": "2026-01-10T18:00:00.000Z",
        "status": "IN_PROGRESS",
        "homeScore": 12,
        "awayScore": 9,
        "team": {
            "id": "team-1",
            "name": "Hawks",
            "members": [
                {
                    "id": "m1",
                    "playerId": "p1",
                    "jerseyNumber": 23,
                    "position": "G",
                    "player": {"id": "p1", "name": "Jordan Lee", "email": "jordan@example.com"},
                },
                {
                    "id": "m2",
                    "playerId": "p2",
                    "jerseyNumber": None,
                    "position": None,
                    "player": {"id": "p2", "name": "Sam Ortiz", "email": "sam@example.com"},
                },
            ],
        },
    }


@pytest.fixture
def sample_api_events():
    """GET /games/{id}/events payload, newest first."""
    return {
        "success": True,
        "events": [
            {
                "id": "e4",
                "gameId": "game-1",
                "playerId": "p2",
                "eventType": "REBOUND",
                "timestamp": "2026-01-10T18:04:00.000Z",
                "metadata": {"type": "offensive"},
                "player": {"id": "p2", "name": "Sam Ortiz"},
            },
            {
                "id": "e3",
                "gameId": "game-1",
                "playerId": "p1",
                "eventType": "SHOT",
                "timestamp": "2026-01-10T18:03:00.000Z",
                "metadata": {"made": True, "points": 3},
                "player": {"id": "p1", "name": "Jordan Lee"},
            },
            {
                "id": "e2",
                "gameId": "game-1",
                "playerId": "p1",
                "eventType": "SHOT",
                "timestamp": "2026-01-10T18:02:00.000Z",
                "metadata": {"made": False, "points": 2},
                "player": {"id": "p1", "name": "Jordan Lee"},
            },
            {
                "id": "e1",
                "gameId": "game-1",
                "playerId": "p2",
                "eventType": "ASSIST",
                "timestamp": "2026-01-10T18:01:00.000Z",
                "metadata": {},
                "player": {"id": "p2", "name": "Sam Ortiz"},
            },
        ],
        "total": 4,
        "limit": 100,
        "offset": 0,
    }
