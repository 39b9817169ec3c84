"""Helpers - Pure utility functions with no side effects."""

from .milestones import (
    hot_players,
    detect_milestone,
    crossed_point_milestone,
    HOT_STREAK_THRESHOLD,
)
from .box_score import (
    PlayerGameStats,
    TeamGameStats,
    calculate_player_stats,
    calculate_team_totals,
    team_points,
    box_score_frame,
)

__all__ = [
    'hot_players',
    'detect_milestone',
    'crossed_point_milestone',
    'HOT_STREAK_THRESHOLD',
    'PlayerGameStats',
    'TeamGameStats',
    'calculate_player_stats',
    'calculate_team_totals',
    'team_points',
    'box_score_frame',
]
