"""A player's running totals across a series."""

import logging
from typing import Iterable, NamedTuple, Optional

from .constants import FINAL_TABLE_SIZE
from .exceptions import InvalidArgument
from .models import Clock, GameTime, Points, utc_now
from .validators import validate_result_set

logger = logging.getLogger('pokerleague.scoreboard')


class TournamentResult(NamedTuple):
    """One tournament as seen by a scoreboard rebuild."""
    final_position: int
    points: Points


class Scoreboard:
    """
    Running aggregate of one player's results in a series.

    Keyed by (player_id, series_id, season_id). Only one scoreboard per key
    is expected; callers enforce that and serialize writes per key.

    A best_finish of 0 means no results yet. Removing a result does not
    recompute best_finish, since the remaining results are not known here:
    call recalculate() with the full remaining result set after a removal.
    """

    def __init__(
        self,
        id: str,
        player_id: str,
        series_id: str,
        season_id: str,
        created_at: Optional[GameTime] = None,
        tournament_count: int = 0,
        best_finish: int = 0,
        total_points: Optional[Points] = None,
        updated_at: Optional[GameTime] = None,
        clock: Optional[Clock] = None,
    ):
        if not id or not id.strip():
            raise InvalidArgument('Scoreboard ID cannot be empty')
        if not player_id or not player_id.strip():
            raise InvalidArgument('Player ID cannot be empty')
        if not series_id or not series_id.strip():
            raise InvalidArgument('Series ID cannot be empty')
        if not season_id or not season_id.strip():
            raise InvalidArgument('Season ID cannot be empty')
        if tournament_count < 0:
            raise InvalidArgument('Tournament count cannot be negative')
        if best_finish < 0:
            raise InvalidArgument('Best finish cannot be negative')

        self._clock = clock or utc_now
        self._id = id
        self._player_id = player_id
        self._series_id = series_id
        self._season_id = season_id
        self._tournament_count = tournament_count
        self._best_finish = best_finish
        self._total_points = total_points or Points.zero()
        self._created_at = created_at or GameTime.now(self._clock)
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(
        cls,
        id: str,
        player_id: str,
        series_id: str,
        season_id: str,
        tournament_count: int = 0,
        best_finish: int = 0,
        total_points: Optional[Points] = None,
        created_at: Optional[GameTime] = None,
        clock: Optional[Clock] = None,
    ) -> 'Scoreboard':
        return cls(
            id,
            player_id,
            series_id,
            season_id,
            created_at=created_at,
            tournament_count=tournament_count,
            best_finish=best_finish,
            total_points=total_points,
            clock=clock,
        )

    @classmethod
    def create_empty(
        cls,
        id: str,
        player_id: str,
        series_id: str,
        season_id: str,
        created_at: Optional[GameTime] = None,
        clock: Optional[Clock] = None,
    ) -> 'Scoreboard':
        """Create the scoreboard for a player's first appearance in a series."""
        return cls.create(id, player_id, series_id, season_id, created_at=created_at, clock=clock)

    @property
    def id(self) -> str:
        return self._id

    @property
    def player_id(self) -> str:
        return self._player_id

    @property
    def series_id(self) -> str:
        return self._series_id

    @property
    def season_id(self) -> str:
        return self._season_id

    @property
    def tournament_count(self) -> int:
        return self._tournament_count

    @property
    def best_finish(self) -> int:
        return self._best_finish

    @property
    def total_points(self) -> Points:
        return self._total_points

    @property
    def created_at(self) -> GameTime:
        return self._created_at

    @property
    def updated_at(self) -> GameTime:
        return self._updated_at

    def _touch(self) -> None:
        self._updated_at = GameTime.now(self._clock)

    def add_tournament_result(self, final_position: int, points: Points) -> None:
        """
        Fold one tournament into the totals.

        Args:
            final_position: Player's finishing position (1-based)
            points: Points earned in the tournament

        Raises:
            InvalidArgument: If final_position is not positive
        """
        if final_position <= 0:
            raise InvalidArgument('Final position must be greater than 0')

        self._tournament_count += 1
        self._total_points = self._total_points.add(points)

        if self._best_finish == 0 or final_position < self._best_finish:
            self._best_finish = final_position

        self._touch()

    def remove_tournament_result(self, final_position: int, points: Points) -> None:
        """
        Take one tournament back out of the totals.

        best_finish is left as is, even if the removed result set it.
        Use recalculate() when best_finish must be correct.

        Raises:
            InvalidArgument: If final_position is not positive, no tournaments
                are recorded, or more points would be removed than held
        """
        if final_position <= 0:
            raise InvalidArgument('Final position must be greater than 0')
        if self._tournament_count <= 0:
            raise InvalidArgument('Cannot remove tournament result: no tournaments recorded')

        total_points = self._total_points.subtract(points)

        self._tournament_count -= 1
        self._total_points = total_points
        self._touch()

    def update_best_finish(self, best_finish: int) -> None:
        if best_finish <= 0:
            raise InvalidArgument('Best finish must be greater than 0')
        self._best_finish = best_finish
        self._touch()

    def reset_best_finish(self) -> None:
        self._best_finish = 0
        self._touch()

    def recalculate(self, results: Iterable[TournamentResult]) -> None:
        """
        Rebuild every total from the authoritative result set.

        Args:
            results: Every remaining result, as objects with final_position and points

        Raises:
            InvalidArgument: If any final position is not positive (nothing changes)
        """
        results = list(results)
        errors = validate_result_set(results)
        if errors:
            raise InvalidArgument(errors[0])

        total_points = Points.zero()
        for result in results:
            total_points = total_points.add(result.points)

        self._tournament_count = len(results)
        self._total_points = total_points
        self._best_finish = min((r.final_position for r in results), default=0)
        self._touch()

        logger.debug(
            f'Recalculated {self}: {self._tournament_count} tournaments, '
            f'best finish {self._best_finish}'
        )

    def get_average_points_per_tournament(self) -> float:
        if self._tournament_count == 0:
            return 0
        return self._total_points.value / self._tournament_count

    def has_played_tournaments(self) -> bool:
        return self._tournament_count > 0

    def has_won_tournament(self) -> bool:
        return self._best_finish == 1

    def has_made_final_table(self) -> bool:
        return 0 < self._best_finish <= FINAL_TABLE_SIZE

    def get_points_efficiency(self) -> float:
        return self.get_average_points_per_tournament()

    def compare_for_ranking(self, other: 'Scoreboard') -> int:
        """
        Compare for standings order; negative means self ranks first.

        Tiers:
            1. More total points
            2. Lower (better) best finish
            3. More tournaments played

        Usable directly with functools.cmp_to_key.
        """
        points_diff = other._total_points.value - self._total_points.value
        if points_diff != 0:
            return points_diff

        best_finish_diff = self._best_finish - other._best_finish
        if best_finish_diff != 0:
            return best_finish_diff

        return other._tournament_count - self._tournament_count

    def __eq__(self, other) -> bool:
        if not isinstance(other, Scoreboard):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f'Scoreboard({self._id}, {self._player_id}, {self._total_points.value} pts)'
