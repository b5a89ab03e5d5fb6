"""Points calculation entry points."""

import logging
from typing import Dict, Optional

from .config import build_factory
from .constants import DEFAULT_BOUNTY_POINT_VALUE
from .exceptions import InvalidArgument, UnknownStrategy
from .models import GameType, Points, Position, TournamentGame
from .schemas import PointsCalculationResult, ScoringConfig
from .scoring import ConsolationScoring, ScoringStrategyFactory, TieAwareTournamentScoring
from .validators import validate_game, validate_points_request

logger = logging.getLogger('pokerleague.scorer')


class PointsCalculationService:
    """
    Calculates how many league points a finish earns.

    Combines a strategy's base points with bounty points. The strategy
    factory is injected so each league (or test) can carry its own
    registered strategies.
    """

    def __init__(
        self,
        factory: Optional[ScoringStrategyFactory] = None,
        default_bounty_point_value: int = DEFAULT_BOUNTY_POINT_VALUE,
    ):
        """
        Initialize service.

        Args:
            factory: Strategy registry (default: built-in strategies only)
            default_bounty_point_value: Points per bounty when a call gives none
        """
        if default_bounty_point_value < 0:
            raise InvalidArgument('Bounty point value cannot be negative')
        self.factory = factory if factory is not None else ScoringStrategyFactory()
        self.default_bounty_point_value = default_bounty_point_value

    @classmethod
    def from_config(cls, config: ScoringConfig) -> 'PointsCalculationService':
        """Build a service with the configured strategies and bounty value."""
        return cls(
            factory=build_factory(config),
            default_bounty_point_value=config.bounty_point_value,
        )

    def calculate(
        self,
        position: int,
        total_players: int,
        strategy_name: str,
        bounty_count: Optional[int] = None,
        bounty_point_value: Optional[int] = None,
    ) -> PointsCalculationResult:
        """
        Calculate points for one player's finish.

        Args:
            position: Finishing position (1-based)
            total_players: Number of players in the field
            strategy_name: Registered strategy name (case-insensitive)
            bounty_count: Bounties collected (default: 0)
            bounty_point_value: Points per bounty (default: service default, normally 1)

        Returns:
            PointsCalculationResult with base, bounty and total points

        Raises:
            InvalidArgument: If any input is out of range
            UnknownStrategy: If the strategy name is not registered

        Example:
            service = PointsCalculationService()
            result = service.calculate(1, 20, 'weighted', bounty_count=3, bounty_point_value=5)
            result.total_points  # 215
        """
        errors = validate_points_request(
            position, total_players, strategy_name, bounty_count, bounty_point_value
        )
        if errors:
            raise InvalidArgument(errors[0])

        if strategy_name not in self.factory:
            available = self.factory.available_strategies()
            raise UnknownStrategy(
                f'Unknown scoring strategy: {strategy_name}. '
                f'Available strategies: {", ".join(available)}',
                name=strategy_name,
                available=available,
            )

        strategy = self.factory.create(strategy_name)
        base_points = strategy.calculate_points(Position(position), total_players)

        if bounty_point_value is None:
            bounty_point_value = self.default_bounty_point_value
        bounty_points = Points((bounty_count or 0) * bounty_point_value)

        total_points = base_points.add(bounty_points)

        logger.debug(
            f'{strategy.name}: position {position}/{total_players} -> '
            f'{base_points} base + {bounty_points} bounty = {total_points}'
        )

        return PointsCalculationResult(
            base_points=base_points.value,
            bounty_points=bounty_points.value,
            total_points=total_points.value,
            strategy_used=strategy.name,
        )


DEFAULT_GAME_SCORERS = {
    GameType.TOURNAMENT: TieAwareTournamentScoring(),
    GameType.CONSOLATION: ConsolationScoring(),
}


def score_game(game: TournamentGame, scorers: Optional[dict] = None) -> Dict[str, int]:
    """
    Score every player in a finished game, honouring ties.

    Args:
        game: TournamentGame with game type, field size and finishes
        scorers: Optional mapping of GameType to scorer (default: tournament and consolation)

    Returns:
        Dict mapping player id to points; players who score nothing are omitted

    Raises:
        InvalidArgument: If the game has an invalid field or finishes
        UnknownStrategy: If no scorer handles the game type
    """
    scorers = DEFAULT_GAME_SCORERS if scorers is None else scorers

    game_type = getattr(game.game_type, 'value', game.game_type)
    scorer = scorers.get(game.game_type)
    if scorer is None:
        raise UnknownStrategy(
            f'No scoring strategy for game type: {game_type}',
            name=str(game_type),
            available=[getattr(t, 'value', str(t)) for t in scorers],
        )

    errors = validate_game(game)
    if errors:
        raise InvalidArgument(errors[0])

    points = scorer.calculate_points(game)
    logger.debug(f'Scored {game_type} game: {len(points)} of {len(game.finishes)} players paid')
    return points
