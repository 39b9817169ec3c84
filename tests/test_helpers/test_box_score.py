"""Tests for box score calculations."""

import pytest

from bball_tracker.helpers.box_score import (
    BOX_SCORE_COLUMNS,
    box_score_frame,
    calculate_player_stats,
    calculate_team_totals,
    team_points,
)
from bball_tracker.models.event import EventType, TrackedEvent
from bball_tracker.models.game import GameEvent


def server_event(event_id, event_type, player_id, metadata=None):
    return GameEvent(
        id=event_id,
        game_id="game-1",
        event_type=event_type,
        player_id=player_id,
        metadata=metadata or {},
    )


@pytest.fixture
def events():
    return [
        server_event("e1", EventType.SHOT, "p1", {"made": True, "points": 3}),
        server_event("e2", EventType.SHOT, "p1", {"made": False, "points": 3}),
        server_event("e3", EventType.SHOT, "p1", {"made": True, "points": 2}),
        server_event("e4", EventType.SHOT, "p2", {"made": True, "points": 1}),
        server_event("e5", EventType.SHOT, "p2", {"made": False, "points": 1}),
        server_event("e6", EventType.REBOUND, "p2", {"type": "offensive"}),
        server_event("e7", EventType.REBOUND, "p2", {"type": "defensive"}),
        server_event("e8", EventType.ASSIST, "p1"),
        server_event("e9", EventType.STEAL, "p2"),
        server_event("e10", EventType.BLOCK, "p2"),
        server_event("e11", EventType.TURNOVER, "p1"),
        server_event("e12", EventType.FOUL, "p2"),
        server_event("e13", EventType.TIMEOUT, None),
    ]


class TestCalculatePlayerStats:
    def test_shooting(self, events):
        stats = {s.player_id: s for s in calculate_player_stats(events)}
        p1 = stats["p1"]

        assert p1.points == 5
        assert (p1.fgm, p1.fga) == (2, 3)
        assert (p1.fg3m, p1.fg3a) == (1, 2)
        assert p1.fg_pct == pytest.approx(66.7)
        assert p1.fg3_pct == 50.0
        assert p1.ft_pct == 0.0

    def test_free_throws(self, events):
        p2 = {s.player_id: s for s in calculate_player_stats(events)}["p2"]
        assert (p2.ftm, p2.fta) == (1, 2)
        assert p2.fga == 0
        assert p2.points == 1

    def test_other_stats(self, events):
        stats = {s.player_id: s for s in calculate_player_stats(events)}
        p1, p2 = stats["p1"], stats["p2"]

        assert (p2.rebounds, p2.offensive_rebounds, p2.defensive_rebounds) == (2, 1, 1)
        assert (p2.steals, p2.blocks, p2.fouls) == (1, 1, 1)
        assert (p1.assists, p1.turnovers) == (1, 1)

    def test_events_without_player_ignored(self, events):
        assert len(calculate_player_stats(events)) == 2

    def test_sorted_by_points(self, events):
        assert [s.player_id for s in calculate_player_stats(events)] == ["p1", "p2"]

    def test_roster_names(self, events, roster):
        stats = calculate_player_stats(events, roster)
        assert stats[0].player_name == "Jordan Lee"
        assert stats[0].jersey_number == 23

    def test_accepts_tracked_events(self):
        tracked = [
            TrackedEvent("local-1", EventType.SHOT, "p1", {"made": True, "points": 3}, "Jordan"),
            TrackedEvent("local-2", EventType.ASSIST, "p1", {}, "Jordan"),
        ]
        (line,) = calculate_player_stats(tracked)
        assert line.player_name == "Jordan"
        assert line.points == 3
        assert line.assists == 1

    def test_double_double(self):
        events = [server_event(f"r{i}", EventType.REBOUND, "p1", {"type": "defensive"}) for i in range(10)]
        events += [server_event(f"s{i}", EventType.SHOT, "p1", {"made": True, "points": 2}) for i in range(5)]
        (line,) = calculate_player_stats(events)
        assert line.is_double_double


class TestTeamTotals:
    def test_sums_lines(self, events):
        totals = calculate_team_totals("Hawks", calculate_player_stats(events))
        assert totals.team_name == "Hawks"
        assert totals.points == 6
        assert totals.rebounds == 2
        assert (totals.fgm, totals.fga) == (2, 3)
        assert (totals.ftm, totals.fta) == (1, 2)

    def test_team_points_matches(self, events):
        assert team_points(events) == 6

    def test_team_points_empty(self):
        assert team_points([]) == 0


class TestBoxScoreFrame:
    def test_columns_and_rows(self, events, roster):
        stats = calculate_player_stats(events, roster)
        frame = box_score_frame(stats, calculate_team_totals("Hawks", stats))

        assert list(frame.columns) == BOX_SCORE_COLUMNS
        assert list(frame["player"]) == ["#23 Jordan Lee", "#5 Sam Ortiz", "TOTAL"]
        assert frame.iloc[0]["fg"] == "2-3"
        assert frame.iloc[-1]["pts"] == 6

    def test_empty(self):
        frame = box_score_frame([])
        assert frame.empty
        assert list(frame.columns) == BOX_SCORE_COLUMNS
