"""Value objects and small data models for the poker league scoring engine."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from .constants import POINTS_ELIGIBLE_POSITIONS, TOP_THREE
from .exceptions import InvalidArgument

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current time in UTC."""
    return datetime.now(timezone.utc)


def _as_int(value, message: str) -> int:
    """Coerce an integral number to int, raising InvalidArgument otherwise."""
    if isinstance(value, bool):
        raise InvalidArgument(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise InvalidArgument(message)


@dataclass(frozen=True, order=True)
class Position:
    """A player's 1-based finishing rank in a tournament."""
    value: int

    def __post_init__(self):
        value = _as_int(self.value, 'Position must be a positive integer')
        if value < 1:
            raise InvalidArgument('Position must be a positive integer')
        object.__setattr__(self, 'value', value)

    def qualifies_for_points(self) -> bool:
        """Check if this position is inside the points-eligible places (top 10)."""
        return self.value <= POINTS_ELIGIBLE_POSITIONS

    def is_winner(self) -> bool:
        return self.value == 1

    def is_top_three(self) -> bool:
        return self.value <= TOP_THREE

    def is_better_than(self, other: 'Position') -> bool:
        """A numerically smaller position is a better finish."""
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Points:
    """A non-negative integer score. Arithmetic returns new instances."""
    value: int

    def __post_init__(self):
        value = _as_int(self.value, 'Points must be a non-negative integer')
        if value < 0:
            raise InvalidArgument('Points must be a non-negative integer')
        object.__setattr__(self, 'value', value)

    @classmethod
    def zero(cls) -> 'Points':
        return cls(0)

    def add(self, other: 'Points') -> 'Points':
        return Points(self.value + other.value)

    def subtract(self, other: 'Points') -> 'Points':
        """
        Subtract points, returning a new instance.

        Raises:
            InvalidArgument: If the result would be negative
        """
        if other.value > self.value:
            raise InvalidArgument(
                f'Cannot subtract {other.value} points from {self.value} points'
            )
        return Points(self.value - other.value)

    def __add__(self, other: 'Points') -> 'Points':
        if not isinstance(other, Points):
            return NotImplemented
        return self.add(other)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        return self.value > 0

    def is_greater_than(self, other: 'Points') -> bool:
        return self.value > other.value

    def is_less_than(self, other: 'Points') -> bool:
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class GameTime:
    """
    The instant a tournament took place.

    Accepts a datetime or an ISO-8601 string. Naive datetimes are read as
    UTC so that every GameTime compares against every other.
    """
    value: datetime

    def __post_init__(self):
        raw = self.value
        if isinstance(raw, str):
            text = raw.strip()
            if text.endswith('Z'):
                text = text[:-1] + '+00:00'
            try:
                raw = datetime.fromisoformat(text)
            except ValueError as e:
                raise InvalidArgument('GameTime must be a valid date') from e
        if not isinstance(raw, datetime):
            raise InvalidArgument('GameTime must be a valid date')
        if raw.tzinfo is None:
            raw = raw.replace(tzinfo=timezone.utc)
        object.__setattr__(self, 'value', raw)

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> 'GameTime':
        """Create a GameTime for the current instant of the given clock."""
        return cls((clock or utc_now)())

    @classmethod
    def from_iso_string(cls, iso_string: str) -> 'GameTime':
        return cls(iso_string)

    def is_in_past(self, now: Optional['GameTime'] = None) -> bool:
        return self.value < (now or GameTime.now()).value

    def is_in_future(self, now: Optional['GameTime'] = None) -> bool:
        return self.value > (now or GameTime.now()).value

    def is_today(self, now: Optional['GameTime'] = None) -> bool:
        """Check if this falls on the same UTC calendar day as now."""
        reference = (now or GameTime.now()).value.astimezone(timezone.utc)
        return self.value.astimezone(timezone.utc).date() == reference.date()

    def is_before(self, other: 'GameTime') -> bool:
        return self.value < other.value

    def is_after(self, other: 'GameTime') -> bool:
        return self.value > other.value

    def to_date_string(self) -> str:
        """Date part in UTC as YYYY-MM-DD."""
        return self.value.astimezone(timezone.utc).date().isoformat()

    def to_iso_string(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()


class Player:
    """A league player. Results reference players; they never own them."""

    def __init__(
        self,
        id: str,
        name: str,
        email: Optional[str] = None,
        is_active: bool = True,
        notes: Optional[str] = None,
    ):
        if not id or not id.strip():
            raise InvalidArgument('Player ID cannot be empty')
        if not name or not name.strip():
            raise InvalidArgument('Player name cannot be empty')

        self._id = id
        self._name = name.strip()
        self._email = email.strip() if email is not None else None
        self._is_active = is_active
        self._notes = notes.strip() if notes is not None else None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    def update_name(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise InvalidArgument('Player name cannot be empty')
        self._name = new_name.strip()

    def activate(self) -> None:
        self._is_active = True

    def deactivate(self) -> None:
        self._is_active = False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f'Player({self._id}, {self._name})'


class GameType(str, Enum):
    """Bracket a game belongs to; selects the whole-game scorer."""
    TOURNAMENT = 'Tournament'
    CONSOLATION = 'Consolation'


@dataclass
class PlayerFinish:
    """One player's rank in a finished game. Tied players share a rank."""
    player_id: str
    rank: int


@dataclass
class TournamentGame:
    """Container for a finished game's field size and finishing order."""
    game_type: GameType
    total_players: int
    finishes: List[PlayerFinish] = field(default_factory=list)
