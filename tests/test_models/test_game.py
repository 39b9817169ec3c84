"""Tests for game and roster models."""

from bball_tracker.models.event import EventType
from bball_tracker.models.game import Game, GameEvent, GameStatus


class TestGameFromApi:
    def test_parses_payload(self, sample_api_game):
        game = Game.from_api(sample_api_game)

        assert game.id == "game-1"
        assert game.team_id == "team-1"
        assert game.team_name == "Hawks"
        assert game.status == GameStatus.IN_PROGRESS
        assert (game.home_score, game.away_score) == (12, 9)
        assert game.is_in_progress

    def test_roster(self, sample_api_game):
        game = Game.from_api(sample_api_game)

        jordan, sam = game.roster
        assert jordan.player_id == "p1"
        assert jordan.label == "#23 Jordan Lee"
        assert sam.jersey_number is None
        assert sam.label == "Sam Ortiz"

    def test_minimal_payload(self):
        game = Game.from_api({"id": "g", "opponent": "Bulls"})
        assert game.status == GameStatus.SCHEDULED
        assert game.home_score == 0
        assert game.roster == []
        assert game.matchup == "Home vs Bulls"

    def test_str(self, live_game):
        assert str(live_game) == "Hawks vs Rockets: 0-0 (IN_PROGRESS)"


class TestFindPlayer:
    def test_by_id(self, live_game):
        assert live_game.find_player("p2").name == "Sam Ortiz"

    def test_by_jersey(self, live_game):
        assert live_game.find_player("23").player_id == "p1"
        assert live_game.find_player("#12").player_id == "p3"

    def test_by_name(self, live_game):
        assert live_game.find_player("alex kim").player_id == "p3"

    def test_missing(self, live_game):
        assert live_game.find_player("99") is None
        assert live_game.find_player("Nobody") is None


class TestGameEventFromApi:
    def test_parses_payload(self, sample_api_events):
        event = GameEvent.from_api(sample_api_events["events"][1])

        assert event.id == "e3"
        assert event.event_type == EventType.SHOT
        assert event.player_name == "Jordan Lee"
        assert event.is_made_shot

    def test_missing_metadata(self):
        event = GameEvent.from_api({"id": "x", "eventType": "TIMEOUT", "metadata": None})
        assert event.metadata == {}
        assert event.player_id is None
