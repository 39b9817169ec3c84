"""Tests for streak and milestone helpers."""

from bball_tracker.helpers.milestones import (
    crossed_point_milestone,
    detect_milestone,
    double_digit_categories,
    hot_players,
)


def totals(points=0, rebounds=0, assists=0):
    return {"points": points, "rebounds": rebounds, "assists": assists}


class TestHotPlayers:
    def test_filters_by_threshold(self):
        assert hot_players({"p1": 3, "p2": 2, "p3": 5}) == {"p1": 3, "p3": 5}

    def test_custom_threshold(self):
        assert hot_players({"p1": 1, "p2": 2}, threshold=2) == {"p2": 2}

    def test_returns_new_dict(self):
        streaks = {"p1": 4}
        result = hot_players(streaks)
        result["p2"] = 9
        assert "p2" not in streaks


class TestCrossedPointMilestone:
    def test_ten(self):
        assert crossed_point_milestone(9, 11) == 10

    def test_exactly_reaching(self):
        assert crossed_point_milestone(8, 10) == 10
        assert crossed_point_milestone(17, 20) == 20

    def test_already_past(self):
        assert crossed_point_milestone(10, 12) is None
        assert crossed_point_milestone(20, 23) is None

    def test_prefers_twenty(self):
        assert crossed_point_milestone(8, 21) == 20


class TestDoubleDigitCategories:
    def test_counts(self):
        assert double_digit_categories(10, 9, 12) == 2
        assert double_digit_categories(0, 0, 0) == 0


class TestDetectMilestone:
    def test_points(self):
        assert detect_milestone("Jordan", totals(9), totals(11)) == "Jordan reached 10 points!"

    def test_double_double(self):
        message = detect_milestone("Sam", totals(12, 9), totals(12, 10))
        assert message == "Sam recorded a double-double!"

    def test_combined(self):
        message = detect_milestone("Sam", totals(8, 10), totals(10, 10))
        assert message == "Sam reached 10 points for a double-double!"

    def test_triple_double_is_not_another_double_double(self):
        assert detect_milestone("Sam", totals(12, 10, 9), totals(12, 10, 10)) is None

    def test_nothing_crossed(self):
        assert detect_milestone("Sam", totals(2), totals(4)) is None
        assert detect_milestone("Sam", totals(), totals()) is None
