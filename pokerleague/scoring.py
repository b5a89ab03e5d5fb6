"""Scoring strategies that turn a finishing position into league points."""

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from .constants import (
    CONSOLATION_POINTS,
    DEFAULT_FIXED_POINTS_TABLE,
    DEFAULT_MAX_POINT_POSITIONS,
    DEFAULT_MAX_POINTS,
    DEFAULT_MIN_POINTS_POSITION,
    DEFAULT_WINNER_POINTS,
    FIXED,
    PERCENTAGE,
    POINTS_ELIGIBLE_POSITIONS,
    WEIGHTED,
    WINNER_TAKES_ALL,
)
from .exceptions import InvalidArgument, UnknownStrategy
from .models import Points, Position, TournamentGame

logger = logging.getLogger('pokerleague.scoring')


def _check_total_players(total_players: int) -> None:
    if total_players < 1:
        raise InvalidArgument('Total players must be at least 1')


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up."""
    return math.floor(value + 0.5)


class ScoringStrategy(ABC):
    """
    Base class for league scoring strategies.

    A strategy is a stateless policy: given a finishing position and the
    size of the field it returns the base points for that finish.
    """

    @abstractmethod
    def calculate_points(self, position: Position, total_players: int) -> Points:
        """
        Calculate base points for a finish.

        Args:
            position: Finishing position (1-based)
            total_players: Number of players in the field

        Returns:
            Points earned for the finish

        Raises:
            InvalidArgument: If total_players is less than 1
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the strategy."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary of the scoring rule."""

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.description!r})'


class WeightedScoringStrategy(ScoringStrategy):
    """
    Field-size weighted scoring.

    Scoring:
        - Positions 1..max_point_positions: total_players * (max_point_positions + 1 - position)
        - Everyone else: 0
    """

    def __init__(self, max_point_positions: int = DEFAULT_MAX_POINT_POSITIONS):
        if max_point_positions < 1:
            raise InvalidArgument('Max point positions must be at least 1')
        self.max_point_positions = max_point_positions

    def calculate_points(self, position: Position, total_players: int) -> Points:
        _check_total_players(total_players)

        if position.value > self.max_point_positions:
            return Points.zero()

        return Points(total_players * (self.max_point_positions + 1 - position.value))

    @property
    def name(self) -> str:
        return 'Weighted Scoring'

    @property
    def description(self) -> str:
        return (
            f'Points = totalPlayers × ({self.max_point_positions + 1} - position) '
            f'for top {self.max_point_positions} positions'
        )


class FixedPointsScoringStrategy(ScoringStrategy):
    """
    Fixed points per position, regardless of field size.

    Positions missing from the table score 0. An empty or missing table
    falls back to the league default (100, 80, 60, 50, 40, 30, 25, 20, 15, 10).
    """

    def __init__(self, points_table: Optional[Dict[int, int]] = None):
        if not points_table:
            self.points_table = dict(DEFAULT_FIXED_POINTS_TABLE)
            return

        table = {}
        for position, points in points_table.items():
            if points < 0:
                raise InvalidArgument('Points cannot be negative')
            table[int(position)] = points
        self.points_table = table

    def calculate_points(self, position: Position, total_players: int) -> Points:
        _check_total_players(total_players)
        return Points(self.points_for_position(position.value))

    def points_for_position(self, position: int) -> int:
        return self.points_table.get(position, 0)

    @property
    def name(self) -> str:
        return 'Fixed Points'

    @property
    def description(self) -> str:
        positions = sorted(self.points_table)
        examples = ', '.join(f'{pos}: {self.points_table[pos]}' for pos in positions[:3])
        return f'Fixed points per position ({examples}, ...)'


class PercentageScoringStrategy(ScoringStrategy):
    """
    Points for the share of the field a player finished ahead of.

    Scoring:
        - Positions 1..min_points_position: round(((total_players - position) / total_players) * max_points)
        - Everyone else: 0

    Halves round up, so 2.5 scores 3.
    """

    def __init__(
        self,
        max_points: int = DEFAULT_MAX_POINTS,
        min_points_position: int = DEFAULT_MIN_POINTS_POSITION,
    ):
        if max_points <= 0:
            raise InvalidArgument('Max points must be positive')
        if min_points_position < 1:
            raise InvalidArgument('Min points position must be at least 1')

        self.max_points = max_points
        self.min_points_position = min_points_position

    def calculate_points(self, position: Position, total_players: int) -> Points:
        _check_total_players(total_players)

        if position.value > self.min_points_position:
            return Points.zero()

        share_beaten = (total_players - position.value) / total_players
        return Points(_round_half_up(share_beaten * self.max_points))

    @property
    def name(self) -> str:
        return 'Percentage Scoring'

    @property
    def description(self) -> str:
        return (
            f'Points based on percentage of field beaten (max {self.max_points} points, '
            f'top {self.min_points_position} positions only)'
        )


class WinnerTakesAllScoringStrategy(ScoringStrategy):
    """Only the winner scores."""

    def __init__(self, winner_points: int = DEFAULT_WINNER_POINTS):
        if winner_points <= 0:
            raise InvalidArgument('Winner points must be positive')
        self.winner_points = winner_points

    def calculate_points(self, position: Position, total_players: int) -> Points:
        _check_total_players(total_players)
        return Points(self.winner_points) if position.is_winner() else Points.zero()

    @property
    def name(self) -> str:
        return 'Winner Takes All'

    @property
    def description(self) -> str:
        return f'Winner gets {self.winner_points} points, all others get 0'


STRATEGY_CLASSES: Dict[str, type] = {
    WEIGHTED: WeightedScoringStrategy,
    FIXED: FixedPointsScoringStrategy,
    PERCENTAGE: PercentageScoringStrategy,
    WINNER_TAKES_ALL: WinnerTakesAllScoringStrategy,
}


StrategyFactory = Callable[[], ScoringStrategy]


class ScoringStrategyFactory:
    """
    Registry mapping strategy names to factories.

    Names are stored lowercase and looked up case-insensitively. Each
    instance is independent, so leagues (and tests) can register their own
    strategies without touching anyone else's.

    Example:
        factory = ScoringStrategyFactory()
        factory.register('bubble', lambda: FixedPointsScoringStrategy({1: 10}))
        strategy = factory.create('Bubble')
    """

    def __init__(self, include_builtins: bool = True):
        self._strategies: Dict[str, StrategyFactory] = {}
        if include_builtins:
            for key, strategy_class in STRATEGY_CLASSES.items():
                self.register(key, strategy_class)

    def register(self, name: str, factory: StrategyFactory) -> None:
        """
        Register (or replace) a named strategy.

        Args:
            name: Strategy name, matched case-insensitively
            factory: Zero-argument callable returning a ScoringStrategy
        """
        if not name or not name.strip():
            raise InvalidArgument('Strategy name is required')
        key = name.strip().lower()
        self._strategies[key] = factory
        logger.debug(f'Registered scoring strategy: {key}')

    def create(self, name: str) -> ScoringStrategy:
        """
        Build a strategy by name.

        Raises:
            UnknownStrategy: If no strategy is registered under the name
        """
        factory = self._strategies.get(name.strip().lower())
        if factory is None:
            raise UnknownStrategy(
                f'Unknown scoring strategy: {name}',
                name=name,
                available=self.available_strategies(),
            )
        return factory()

    def available_strategies(self) -> List[str]:
        return list(self._strategies)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


class TieAwareTournamentScoring:
    """
    Whole-game scoring for main tournaments.

    Every player on a rank inside the top 10 gets
    total_players * (11 - rank); tied players all get their shared rank's
    value. Players outside the top 10 are left out of the result.
    """

    def calculate_points(self, game: TournamentGame) -> Dict[str, int]:
        points: Dict[str, int] = {}
        for finish in sorted(game.finishes, key=lambda f: f.rank):
            if finish.rank > POINTS_ELIGIBLE_POSITIONS:
                break
            points[finish.player_id] = game.total_players * (
                POINTS_ELIGIBLE_POSITIONS + 1 - finish.rank
            )
        return points


class ConsolationScoring:
    """Consolation bracket: ranks 1-3 get 100/50/25, shared between ties."""

    def calculate_points(self, game: TournamentGame) -> Dict[str, int]:
        points: Dict[str, int] = {}
        for finish in sorted(game.finishes, key=lambda f: f.rank):
            if finish.rank > len(CONSOLATION_POINTS):
                break
            points[finish.player_id] = CONSOLATION_POINTS[finish.rank - 1]
        return points
