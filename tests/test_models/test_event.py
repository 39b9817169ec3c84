"""Tests for tracked events and metadata validation."""

import re

import pytest

from bball_tracker.models.event import (
    EventType,
    InvalidEventError,
    TrackedEvent,
    generate_local_id,
    normalize_metadata,
    rebound_metadata,
    shot_metadata,
    utc_now_iso,
)


class TestNormalizeMetadata:
    def test_shot(self):
        assert shot_metadata(True, 3) == {"made": True, "points": 3}

    @pytest.mark.parametrize("metadata", [
        {"made": True, "points": 1},
        {"made": True, "points": 4},
        {"made": "yes", "points": 2},
        {"points": 2},
        {"made": True, "points": True},
        {"made": True, "points": 2, "extra": 1},
    ])
    def test_invalid_shot(self, metadata):
        with pytest.raises(InvalidEventError):
            normalize_metadata(EventType.SHOT, metadata)

    def test_rebound(self):
        assert rebound_metadata("defensive") == {"type": "defensive"}
        with pytest.raises(InvalidEventError):
            rebound_metadata("team")

    def test_plain_events_carry_nothing(self):
        assert normalize_metadata(EventType.STEAL, None) == {}
        with pytest.raises(InvalidEventError):
            normalize_metadata(EventType.ASSIST, {"type": "offensive"})

    def test_returns_copy(self):
        raw = {"made": False, "points": 2}
        assert normalize_metadata(EventType.SHOT, raw) is not raw


class TestTrackedEvent:
    def test_coerces_event_type(self):
        event = TrackedEvent("local-1", "BLOCK", "p1")
        assert event.event_type == EventType.BLOCK

    def test_unknown_event_type(self):
        with pytest.raises(InvalidEventError):
            TrackedEvent("local-1", "DUNK", "p1")

    def test_made_shot_properties(self):
        event = TrackedEvent("local-1", EventType.SHOT, "p1", {"made": True, "points": 3})
        assert event.is_shot
        assert event.is_made_shot
        assert event.points_scored == 3

    def test_missed_shot_scores_nothing(self):
        event = TrackedEvent("local-1", EventType.SHOT, "p1", {"made": False, "points": 3})
        assert not event.is_made_shot
        assert event.points_scored == 0

    @pytest.mark.parametrize("event_type,metadata,expected", [
        (EventType.SHOT, {"made": True, "points": 2}, "Jordan: 2PT made"),
        (EventType.SHOT, {"made": False, "points": 3}, "Jordan: 3PT missed"),
        (EventType.REBOUND, {"type": "offensive"}, "Jordan: Off Rebound"),
        (EventType.REBOUND, {"type": "defensive"}, "Jordan: Def Rebound"),
        (EventType.STEAL, {}, "Jordan: Steal"),
    ])
    def test_describe(self, event_type, metadata, expected):
        event = TrackedEvent("local-1", event_type, "p1", metadata, "Jordan")
        assert event.describe() == expected

    def test_display_name_falls_back_to_id(self):
        assert TrackedEvent("local-1", EventType.ASSIST, "p9").display_name == "p9"

    def test_to_request(self):
        event = TrackedEvent("local-1", EventType.REBOUND, "p1", {"type": "offensive"})
        assert event.to_request() == {
            "playerId": "p1",
            "eventType": "REBOUND",
            "metadata": {"type": "offensive"},
        }


class TestIds:
    def test_local_id_format(self):
        assert re.fullmatch(r"local-\d+-[a-z0-9]{9}", generate_local_id())

    def test_local_ids_differ(self):
        assert generate_local_id() != generate_local_id()

    def test_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())
