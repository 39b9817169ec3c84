from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .event import EventType


class GameStatus(Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"


@dataclass
class RosterPlayer:
    """A team member as listed on a game's roster."""
    player_id: str
    name: str
    jersey_number: Optional[int] = None
    position: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'RosterPlayer':
        player = data.get('player') or {}
        return cls(
            player_id=data.get('playerId') or player.get('id'),
            name=player.get('name', ''),
            jersey_number=data.get('jerseyNumber'),
            position=data.get('position'),
        )

    @property
    def label(self) -> str:
        if self.jersey_number is not None:
            return f"#{self.jersey_number} {self.name}"
        return self.name


@dataclass
class Game:
    """A scheduled, live or completed game."""
    id: str
    team_id: str
    opponent: str
    date: str
    status: GameStatus = GameStatus.SCHEDULED
    home_score: int = 0
    away_score: int = 0
    team_name: Optional[str] = None
    roster: List[RosterPlayer] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Game':
        team = data.get('team') or {}
        return cls(
            id=data['id'],
            team_id=data.get('teamId') or team.get('id', ''),
            opponent=data.get('opponent', ''),
            date=data.get('date', ''),
            status=GameStatus(data.get('status', GameStatus.SCHEDULED.value)),
            home_score=data.get('homeScore') or 0,
            away_score=data.get('awayScore') or 0,
            team_name=team.get('name'),
            roster=[RosterPlayer.from_api(m) for m in team.get('members') or []],
        )

    @property
    def is_in_progress(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def matchup(self) -> str:
        return f"{self.team_name or 'Home'} vs {self.opponent}"

    def find_player(self, query: str) -> Optional[RosterPlayer]:
        """Look up a roster player by id, jersey number or (case-insensitive) name."""
        query = query.strip()
        for member in self.roster:
            if member.player_id == query:
                return member
        if query.lstrip('#').isdigit():
            number = int(query.lstrip('#'))
            for member in self.roster:
                if member.jersey_number == number:
                    return member
        lowered = query.lower()
        for member in self.roster:
            if member.name.lower() == lowered:
                return member
        return None

    def __str__(self) -> str:
        return f"{self.matchup}: {self.home_score}-{self.away_score} ({self.status.value})"


@dataclass
class GameEvent:
    """An event as stored by the server."""
    id: str
    game_id: str
    event_type: EventType
    player_id: Optional[str] = None
    timestamp: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    player_name: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'GameEvent':
        player = data.get('player') or {}
        return cls(
            id=data['id'],
            game_id=data.get('gameId', ''),
            event_type=EventType(data['eventType']),
            player_id=data.get('playerId'),
            timestamp=data.get('timestamp'),
            metadata=data.get('metadata') or {},
            player_name=player.get('name'),
        )

    @property
    def is_made_shot(self) -> bool:
        return self.event_type == EventType.SHOT and bool(self.metadata.get('made'))
