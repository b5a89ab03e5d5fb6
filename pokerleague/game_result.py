"""A single player's result in a tournament."""

from typing import Optional

from .constants import DEFAULT_BOUNTY_POINT_VALUE
from .exceptions import InvalidArgument
from .models import Clock, GameTime, Player, Points, Position


class GameResult:
    """
    A player's finish in one tournament.

    The position and base points are fixed at entry time. Bounty count,
    consolation flag and notes can be amended afterwards (late bounty
    corrections and the like). Two results are equal when their ids match.
    """

    def __init__(
        self,
        id: str,
        tournament_id: str,
        player: Player,
        position: Position,
        points: Points,
        game_time: GameTime,
        bounty_count: int = 0,
        is_consolation: bool = False,
        notes: Optional[str] = None,
    ):
        if not id or not id.strip():
            raise InvalidArgument('GameResult ID cannot be empty')
        if not tournament_id or not tournament_id.strip():
            raise InvalidArgument('Tournament ID cannot be empty')
        if bounty_count < 0:
            raise InvalidArgument('Bounty count cannot be negative')

        self._id = id
        self._tournament_id = tournament_id
        self._player = player
        self._position = position
        self._points = points
        self._game_time = game_time
        self._bounty_count = bounty_count
        self._is_consolation = is_consolation
        self._notes = notes.strip() if notes is not None else None

    @classmethod
    def create(
        cls,
        id: str,
        tournament_id: str,
        player: Player,
        position: Position,
        points: Points,
        game_time: Optional[GameTime] = None,
        bounty_count: int = 0,
        is_consolation: bool = False,
        notes: Optional[str] = None,
        clock: Optional[Clock] = None,
    ) -> 'GameResult':
        """Create a result, stamping the game time from the clock when not given."""
        return cls(
            id,
            tournament_id,
            player,
            position,
            points,
            game_time or GameTime.now(clock),
            bounty_count=bounty_count,
            is_consolation=is_consolation,
            notes=notes,
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def tournament_id(self) -> str:
        return self._tournament_id

    @property
    def player(self) -> Player:
        return self._player

    @property
    def position(self) -> Position:
        return self._position

    @property
    def points(self) -> Points:
        return self._points

    @property
    def game_time(self) -> GameTime:
        return self._game_time

    @property
    def bounty_count(self) -> int:
        return self._bounty_count

    @property
    def is_consolation(self) -> bool:
        return self._is_consolation

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    def add_bounty(self) -> None:
        self._bounty_count += 1

    def remove_bounty(self) -> None:
        """Remove one bounty; the count never drops below zero."""
        if self._bounty_count > 0:
            self._bounty_count -= 1

    def set_bounty_count(self, count: int) -> None:
        if count < 0:
            raise InvalidArgument('Bounty count cannot be negative')
        self._bounty_count = count

    def mark_as_consolation(self) -> None:
        self._is_consolation = True

    def unmark_as_consolation(self) -> None:
        self._is_consolation = False

    def update_notes(self, notes: Optional[str] = None) -> None:
        self._notes = notes.strip() if notes is not None else None

    def earned_points(self) -> bool:
        return self._points.is_positive()

    def is_winner(self) -> bool:
        return self._position.is_winner()

    def is_top_three(self) -> bool:
        return self._position.is_top_three()

    def qualifies_for_points(self) -> bool:
        return self._position.qualifies_for_points()

    def get_bounty_points(self, bounty_point_value: int = DEFAULT_BOUNTY_POINT_VALUE) -> Points:
        return Points(self._bounty_count * bounty_point_value)

    def get_total_points(self, bounty_point_value: int = DEFAULT_BOUNTY_POINT_VALUE) -> Points:
        """Base points plus bounty points at the given value per bounty."""
        return self._points.add(self.get_bounty_points(bounty_point_value))

    def is_better_than(self, other: 'GameResult') -> bool:
        return self._position.is_better_than(other._position)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameResult):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f'GameResult({self._player.name}, Position: {self._position}, Points: {self._points})'
