"""Box Score Calculator - Per-player and team totals from a game's event log."""

from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from ..models.event import EventType, TrackedEvent
from ..models.game import GameEvent, RosterPlayer

AnyEvent = Union[GameEvent, TrackedEvent]


@dataclass
class PlayerGameStats:
    """One player's line in a box score."""
    player_id: str
    player_name: str
    jersey_number: Optional[int] = None
    points: int = 0
    rebounds: int = 0
    offensive_rebounds: int = 0
    defensive_rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0
    fgm: int = 0
    fga: int = 0
    fg3m: int = 0
    fg3a: int = 0
    ftm: int = 0
    fta: int = 0

    @property
    def fg_pct(self) -> float:
        return _pct(self.fgm, self.fga)

    @property
    def fg3_pct(self) -> float:
        return _pct(self.fg3m, self.fg3a)

    @property
    def ft_pct(self) -> float:
        return _pct(self.ftm, self.fta)

    @property
    def is_double_double(self) -> bool:
        return sum(1 for v in (self.points, self.rebounds, self.assists) if v >= 10) >= 2


@dataclass
class TeamGameStats:
    """Team totals summed over every player line."""
    team_name: str
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0
    fgm: int = 0
    fga: int = 0
    fg3m: int = 0
    fg3a: int = 0
    ftm: int = 0
    fta: int = 0

    @property
    def fg_pct(self) -> float:
        return _pct(self.fgm, self.fga)

    @property
    def fg3_pct(self) -> float:
        return _pct(self.fg3m, self.fg3a)

    @property
    def ft_pct(self) -> float:
        return _pct(self.ftm, self.fta)


def _pct(made: int, attempted: int) -> float:
    # one decimal, 0.0 when nothing was attempted
    return round(made / attempted * 100, 1) if attempted > 0 else 0.0


def _event_fields(event: AnyEvent):
    player_name = event.player_name or event.player_id
    return event.event_type, event.player_id, player_name, event.metadata


def calculate_player_stats(
    events: Iterable[AnyEvent],
    roster: Optional[List[RosterPlayer]] = None,
) -> List[PlayerGameStats]:
    """
    Build box score lines from server events or locally tracked events.

    Shots worth 3 count as three pointers and field goals, shots worth 1 as
    free throws, anything else as a two point field goal. Events without a
    player are ignored.

    Args:
        events: Events of a single game
        roster: Optional roster for names and jersey numbers

    Returns:
        Player lines sorted by points, highest first
    """
    members: Dict[str, RosterPlayer] = {m.player_id: m for m in roster or []}
    lines: Dict[str, PlayerGameStats] = {}

    for event in events:
        event_type, player_id, player_name, metadata = _event_fields(event)
        if not player_id:
            continue

        if player_id not in lines:
            member = members.get(player_id)
            lines[player_id] = PlayerGameStats(
                player_id=player_id,
                player_name=member.name if member else player_name,
                jersey_number=member.jersey_number if member else None,
            )
        line = lines[player_id]

        if event_type == EventType.SHOT:
            value = metadata.get('points') or 2
            made = bool(metadata.get('made'))
            if value == 1:
                line.fta += 1
                line.ftm += int(made)
            else:
                line.fga += 1
                line.fgm += int(made)
                if value == 3:
                    line.fg3a += 1
                    line.fg3m += int(made)
            if made:
                line.points += value
        elif event_type == EventType.REBOUND:
            line.rebounds += 1
            if metadata.get('type') == 'offensive':
                line.offensive_rebounds += 1
            else:
                line.defensive_rebounds += 1
        elif event_type == EventType.ASSIST:
            line.assists += 1
        elif event_type == EventType.STEAL:
            line.steals += 1
        elif event_type == EventType.BLOCK:
            line.blocks += 1
        elif event_type == EventType.TURNOVER:
            line.turnovers += 1
        elif event_type == EventType.FOUL:
            line.fouls += 1

    return sorted(lines.values(), key=lambda s: s.points, reverse=True)


def calculate_team_totals(team_name: str, player_stats: List[PlayerGameStats]) -> TeamGameStats:
    totals = TeamGameStats(team_name=team_name)
    for line in player_stats:
        for name in ('points', 'rebounds', 'assists', 'steals', 'blocks', 'turnovers',
                     'fouls', 'fgm', 'fga', 'fg3m', 'fg3a', 'ftm', 'fta'):
            setattr(totals, name, getattr(totals, name) + getattr(line, name))
    return totals


def team_points(events: Iterable[AnyEvent]) -> int:
    """Sum of made shot values, i.e. the home score implied by an event log."""
    total = 0
    for event in events:
        event_type, _, _, metadata = _event_fields(event)
        if event_type == EventType.SHOT and metadata.get('made'):
            total += metadata.get('points') or 0
    return total


BOX_SCORE_COLUMNS = [
    'player', 'pts', 'reb', 'oreb', 'dreb', 'ast', 'stl', 'blk', 'tov', 'pf',
    'fg', 'fg_pct', '3pt', 'fg3_pct', 'ft', 'ft_pct',
]


def box_score_frame(player_stats: List[PlayerGameStats], totals: Optional[TeamGameStats] = None) -> pd.DataFrame:
    """
    Tabulate player lines (and an optional totals row) for display.

    Returns:
        DataFrame with BOX_SCORE_COLUMNS, one row per player
    """
    rows = []
    for line in player_stats:
        name = line.player_name
        if line.jersey_number is not None:
            name = f"#{line.jersey_number} {name}"
        rows.append(_row(name, line))

    if totals is not None:
        rows.append(_row("TOTAL", totals))

    return pd.DataFrame(rows, columns=BOX_SCORE_COLUMNS)


def _row(label: str, stats: Union[PlayerGameStats, TeamGameStats]) -> dict:
    data = asdict(stats)
    return {
        'player': label,
        'pts': stats.points,
        'reb': stats.rebounds,
        'oreb': data.get('offensive_rebounds'),
        'dreb': data.get('defensive_rebounds'),
        'ast': stats.assists,
        'stl': stats.steals,
        'blk': stats.blocks,
        'tov': stats.turnovers,
        'pf': stats.fouls,
        'fg': f"{stats.fgm}-{stats.fga}",
        'fg_pct': stats.fg_pct,
        '3pt': f"{stats.fg3m}-{stats.fg3a}",
        'fg3_pct': stats.fg3_pct,
        'ft': f"{stats.ftm}-{stats.fta}",
        'ft_pct': stats.ft_pct,
    }
