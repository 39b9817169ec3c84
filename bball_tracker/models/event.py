import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class EventType(Enum):
    """Game event types accepted by the events API."""
    SHOT = "SHOT"
    REBOUND = "REBOUND"
    ASSIST = "ASSIST"
    TURNOVER = "TURNOVER"
    FOUL = "FOUL"
    SUBSTITUTION = "SUBSTITUTION"
    STEAL = "STEAL"
    BLOCK = "BLOCK"
    TIMEOUT = "TIMEOUT"


# Event types a tracking session records; the rest are display-only
TRACKABLE_EVENT_TYPES = frozenset({
    EventType.SHOT,
    EventType.REBOUND,
    EventType.ASSIST,
    EventType.STEAL,
    EventType.BLOCK,
})

SHOT_POINT_VALUES = (2, 3)
REBOUND_TYPES = ('offensive', 'defensive')


class InvalidEventError(ValueError):
    """Raised when an event's metadata does not match its event type."""


def shot_metadata(made: bool, points: int) -> Dict[str, Any]:
    """Build SHOT metadata."""
    return normalize_metadata(EventType.SHOT, {'made': made, 'points': points})


def rebound_metadata(rebound_type: str) -> Dict[str, Any]:
    """Build REBOUND metadata ('offensive' or 'defensive')."""
    return normalize_metadata(EventType.REBOUND, {'type': rebound_type})


def normalize_metadata(event_type: EventType, metadata: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Validate metadata against the event type and return a clean copy.

    Args:
        event_type: Type of the event the metadata belongs to
        metadata: Raw metadata dict (None is treated as empty)

    Returns:
        New dict containing exactly the keys the event type carries

    Raises:
        InvalidEventError: If the payload does not match the event type
    """
    metadata = dict(metadata or {})

    if event_type == EventType.SHOT:
        made = metadata.get('made')
        points = metadata.get('points')
        if not isinstance(made, bool):
            raise InvalidEventError(f"SHOT metadata requires boolean 'made', got {made!r}")
        if isinstance(points, bool) or points not in SHOT_POINT_VALUES:
            raise InvalidEventError(f"SHOT metadata requires 'points' of 2 or 3, got {points!r}")
        extra = set(metadata) - {'made', 'points'}
        if extra:
            raise InvalidEventError(f"Unexpected SHOT metadata keys: {sorted(extra)}")
        return {'made': made, 'points': points}

    if event_type == EventType.REBOUND:
        rebound_type = metadata.get('type')
        if rebound_type not in REBOUND_TYPES:
            raise InvalidEventError(
                f"REBOUND metadata requires 'type' of offensive/defensive, got {rebound_type!r}"
            )
        extra = set(metadata) - {'type'}
        if extra:
            raise InvalidEventError(f"Unexpected REBOUND metadata keys: {sorted(extra)}")
        return {'type': rebound_type}

    if metadata:
        raise InvalidEventError(f"{event_type.value} events carry no metadata, got {metadata!r}")
    return {}


def generate_local_id() -> str:
    """Client-side event id: local-<epoch ms>-<9 random chars>."""
    suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"local-{int(time.time() * 1000)}-{suffix}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class TrackedEvent:
    """An event recorded on the device before (or while) the server confirms it."""
    local_id: str
    event_type: EventType
    player_id: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    player_name: Optional[str] = None
    created_at: str = field(default_factory=utc_now_iso)

    def __post_init__(self):
        if not isinstance(self.event_type, EventType):
            try:
                self.event_type = EventType(self.event_type)
            except ValueError:
                raise InvalidEventError(f"Unknown event type: {self.event_type!r}") from None
        self.metadata = normalize_metadata(self.event_type, self.metadata)

    @property
    def is_shot(self) -> bool:
        return self.event_type == EventType.SHOT

    @property
    def is_made_shot(self) -> bool:
        return self.is_shot and self.metadata['made']

    @property
    def points_scored(self) -> int:
        """Points this event adds to the team score."""
        return self.metadata['points'] if self.is_made_shot else 0

    @property
    def display_name(self) -> str:
        return self.player_name or self.player_id

    def describe(self) -> str:
        """Short label for undo banners and timelines."""
        if self.is_shot:
            result = "made" if self.metadata['made'] else "missed"
            return f"{self.display_name}: {self.metadata['points']}PT {result}"
        if self.event_type == EventType.REBOUND:
            kind = "Off" if self.metadata['type'] == 'offensive' else "Def"
            return f"{self.display_name}: {kind} Rebound"
        return f"{self.display_name}: {self.event_type.value.title()}"

    def to_request(self) -> Dict[str, Any]:
        """Body for POST /games/{gameId}/events."""
        return {
            'playerId': self.player_id,
            'eventType': self.event_type.value,
            'metadata': dict(self.metadata),
        }
