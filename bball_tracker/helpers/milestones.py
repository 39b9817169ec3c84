"""Milestone Detection - Pure functions for streaks, hot players and milestones."""

from typing import Dict, Optional

HOT_STREAK_THRESHOLD = 3
POINT_MILESTONES = (20, 10)  # checked highest first
DOUBLE_DIGITS = 10


def hot_players(streaks: Dict[str, int], threshold: int = HOT_STREAK_THRESHOLD) -> Dict[str, int]:
    """
    Filter streaks down to players currently on a hot streak.

    Args:
        streaks: Mapping of player id to consecutive made shots
        threshold: Minimum streak to count as hot

    Returns:
        New dict with only the players whose streak is >= threshold
    """
    return {player_id: streak for player_id, streak in streaks.items() if streak >= threshold}


def crossed_point_milestone(previous: int, current: int) -> Optional[int]:
    """Return the highest point milestone crossed going from previous to current."""
    for milestone in POINT_MILESTONES:
        if previous < milestone <= current:
            return milestone
    return None


def double_digit_categories(points: int, rebounds: int, assists: int) -> int:
    """Count how many of points/rebounds/assists are in double digits."""
    return sum(1 for value in (points, rebounds, assists) if value >= DOUBLE_DIGITS)


def detect_milestone(
    player_name: str,
    before: Dict[str, int],
    after: Dict[str, int],
) -> Optional[str]:
    """
    Describe the milestone a single event pushed a player through.

    Only the transition from `before` to `after` is considered, so a milestone
    that was already reached never fires again.

    Args:
        player_name: Display name used in the message
        before: {'points', 'rebounds', 'assists'} totals before the event
        after: Same totals after the event

    Returns:
        One message, or None if nothing was newly crossed
    """
    points_milestone = crossed_point_milestone(before['points'], after['points'])

    categories_before = double_digit_categories(before['points'], before['rebounds'], before['assists'])
    categories_after = double_digit_categories(after['points'], after['rebounds'], after['assists'])
    double_double = categories_before < 2 <= categories_after

    if points_milestone and double_double:
        return f"{player_name} reached {points_milestone} points for a double-double!"
    if points_milestone:
        return f"{player_name} reached {points_milestone} points!"
    if double_double:
        return f"{player_name} recorded a double-double!"
    return None
