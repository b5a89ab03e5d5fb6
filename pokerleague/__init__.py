from .exceptions import InvalidArgument, PokerLeagueError, UnknownStrategy
from .models import GameTime, GameType, Player, PlayerFinish, Points, Position, TournamentGame
from .scoring import (
    ScoringStrategy,
    WeightedScoringStrategy,
    FixedPointsScoringStrategy,
    PercentageScoringStrategy,
    WinnerTakesAllScoringStrategy,
    ScoringStrategyFactory,
    TieAwareTournamentScoring,
    ConsolationScoring,
)
from .scorer import PointsCalculationService, score_game
from .schemas import PointsCalculationResult, ScoringConfig, StrategySettings
from .game_result import GameResult
from .scoreboard import Scoreboard, TournamentResult
from .standings import StandingEntry, rank_scoreboards
from .config import build_factory, clear_config_cache, get_config, load_config
from .logging_config import get_logger, setup_logging

__all__ = [
    # Errors
    'PokerLeagueError',
    'InvalidArgument',
    'UnknownStrategy',
    # Value objects and models
    'Position',
    'Points',
    'GameTime',
    'Player',
    'GameType',
    'PlayerFinish',
    'TournamentGame',
    # Strategies
    'ScoringStrategy',
    'WeightedScoringStrategy',
    'FixedPointsScoringStrategy',
    'PercentageScoringStrategy',
    'WinnerTakesAllScoringStrategy',
    'ScoringStrategyFactory',
    'TieAwareTournamentScoring',
    'ConsolationScoring',
    # Calculation
    'PointsCalculationService',
    'PointsCalculationResult',
    'score_game',
    # Entities
    'GameResult',
    'Scoreboard',
    'TournamentResult',
    # Standings
    'StandingEntry',
    'rank_scoreboards',
    # Configuration
    'ScoringConfig',
    'StrategySettings',
    'get_config',
    'load_config',
    'build_factory',
    'clear_config_cache',
    # Logging
    'setup_logging',
    'get_logger',
]
