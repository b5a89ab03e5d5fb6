"""Unit tests for the points calculation service and whole-game scoring."""

import pytest
from pydantic import ValidationError

from pokerleague.exceptions import InvalidArgument, UnknownStrategy
from pokerleague.models import GameType, PlayerFinish, TournamentGame
from pokerleague.scorer import PointsCalculationService, score_game
from pokerleague.scoring import FixedPointsScoringStrategy, ScoringStrategyFactory


@pytest.fixture
def service():
    return PointsCalculationService()


class TestPointsCalculation:
    """Tests for PointsCalculationService.calculate."""

    def test_weighted_with_bounties(self, service):
        """Test base points plus bounty points end to end."""
        result = service.calculate(
            position=1,
            total_players=20,
            strategy_name='weighted',
            bounty_count=3,
            bounty_point_value=5,
        )
        assert result.base_points == 200
        assert result.bounty_points == 15
        assert result.total_points == 215
        assert result.strategy_used == 'Weighted Scoring'

    def test_strategy_used_is_display_name(self, service):
        """Test that the display name is reported, not the lookup key."""
        result = service.calculate(1, 10, 'WINNER-TAKES-ALL')
        assert result.strategy_used == 'Winner Takes All'
        assert result.total_points == 100

    def test_no_bounties(self, service):
        """Test that missing bounty fields add nothing."""
        result = service.calculate(3, 10, 'fixed')
        assert result.base_points == 60
        assert result.bounty_points == 0
        assert result.total_points == 60

    def test_bounty_value_defaults_to_one(self, service):
        """Test that each bounty is worth 1 point by default."""
        result = service.calculate(12, 20, 'weighted', bounty_count=4)
        assert result.base_points == 0
        assert result.bounty_points == 4
        assert result.total_points == 4

    def test_bounty_value_without_count(self, service):
        """Test that a bounty value alone adds nothing."""
        assert service.calculate(1, 5, 'fixed', bounty_point_value=10).bounty_points == 0

    def test_service_default_bounty_value(self):
        """Test a league-wide default value per bounty."""
        service = PointsCalculationService(default_bounty_point_value=25)
        assert service.calculate(2, 5, 'fixed', bounty_count=2).bounty_points == 50
        assert service.calculate(2, 5, 'fixed', bounty_count=2, bounty_point_value=0).bounty_points == 0

    def test_negative_default_bounty_value(self):
        """Test that the service rejects a negative default bounty value."""
        with pytest.raises(InvalidArgument, match='Bounty point value cannot be negative'):
            PointsCalculationService(default_bounty_point_value=-1)

    def test_result_is_frozen(self, service):
        """Test that results cannot be altered after calculation."""
        result = service.calculate(1, 20, 'weighted')
        with pytest.raises(ValidationError):
            result.total_points = 0

    def test_result_is_plain_record(self, service):
        """Test that the result dumps to a plain dict."""
        assert service.calculate(1, 20, 'percentage').model_dump() == {
            'base_points': 95,
            'bounty_points': 0,
            'total_points': 95,
            'strategy_used': 'Percentage Scoring',
        }

    def test_injected_factory(self):
        """Test that an injected registry supplies custom strategies."""
        factory = ScoringStrategyFactory()
        factory.register('league-night', lambda: FixedPointsScoringStrategy({1: 30, 2: 20}))
        service = PointsCalculationService(factory)
        result = service.calculate(2, 8, 'League-Night', bounty_count=1)
        assert result.total_points == 21
        assert result.strategy_used == 'Fixed Points'

    def test_empty_injected_factory_is_kept(self):
        """Test that an empty registry is used as given, not replaced."""
        service = PointsCalculationService(ScoringStrategyFactory(include_builtins=False))
        with pytest.raises(UnknownStrategy):
            service.calculate(1, 5, 'weighted')


class TestPointsCalculationValidation:
    """Tests for input validation order and messages."""

    @pytest.mark.parametrize('kwargs,message', [
        (dict(position=0, total_players=10, strategy_name='weighted'), 'Position must be greater than 0'),
        (dict(position=0, total_players=0, strategy_name=''), 'Position must be greater than 0'),
        (dict(position=1, total_players=0, strategy_name='weighted'), 'Total players must be greater than 0'),
        (dict(position=11, total_players=10, strategy_name='weighted'), 'Position cannot be greater than total players'),
        (dict(position=1, total_players=10, strategy_name='   '), 'Strategy name is required'),
        (dict(position=1, total_players=10, strategy_name=''), 'Strategy name is required'),
        (dict(position=1, total_players=10, strategy_name='nope', bounty_count=-1), 'Bounty count cannot be negative'),
        (
            dict(position=1, total_players=10, strategy_name='nope', bounty_count=1, bounty_point_value=-5),
            'Bounty point value cannot be negative',
        ),
    ])
    def test_first_failure_wins(self, service, kwargs, message):
        """Test each validation reason in its checking order."""
        with pytest.raises(InvalidArgument) as exc_info:
            service.calculate(**kwargs)
        assert str(exc_info.value) == message
        assert not isinstance(exc_info.value, UnknownStrategy)

    def test_unknown_strategy_lists_available(self, service):
        """Test that an unknown strategy reports every valid name."""
        with pytest.raises(UnknownStrategy) as exc_info:
            service.calculate(1, 10, 'nope')
        assert str(exc_info.value) == (
            'Unknown scoring strategy: nope. '
            'Available strategies: weighted, fixed, percentage, winner-takes-all'
        )
        assert exc_info.value.name == 'nope'

    def test_unknown_strategy_is_invalid_argument(self, service):
        """Test that callers can catch every input failure the same way."""
        with pytest.raises(InvalidArgument):
            service.calculate(1, 10, 'nope')

    def test_non_integer_position(self, service):
        """Test that fractional positions fail in the Position value object."""
        with pytest.raises(InvalidArgument, match='Position must be a positive integer'):
            service.calculate(1.5, 10, 'weighted')


class TestScoreGame:
    """Tests for tie-aware whole-game scoring."""

    def test_tournament_game(self):
        """Test dispatch to tournament scoring."""
        game = TournamentGame(
            game_type=GameType.TOURNAMENT,
            total_players=10,
            finishes=[PlayerFinish('a', 1), PlayerFinish('b', 2), PlayerFinish('c', 2)],
        )
        assert score_game(game) == {'a': 100, 'b': 90, 'c': 90}

    def test_consolation_game(self):
        """Test dispatch to consolation scoring."""
        game = TournamentGame(
            game_type=GameType.CONSOLATION,
            total_players=5,
            finishes=[PlayerFinish('a', 1), PlayerFinish('b', 4)],
        )
        assert score_game(game) == {'a': 100}

    def test_unmapped_game_type(self):
        """Test that a game type without a scorer is rejected."""
        game = TournamentGame(game_type=GameType.CONSOLATION, total_players=3)
        with pytest.raises(UnknownStrategy, match='No scoring strategy for game type: Consolation'):
            score_game(game, scorers={})

    @pytest.mark.parametrize('finishes,total_players', [
        ([PlayerFinish('a', 0)], 5),
        ([PlayerFinish('a', 6)], 5),
        ([PlayerFinish('a', 1), PlayerFinish('a', 2)], 5),
        ([], 0),
    ])
    def test_invalid_games(self, finishes, total_players):
        """Test that malformed games raise before scoring."""
        game = TournamentGame(GameType.TOURNAMENT, total_players, finishes)
        with pytest.raises(InvalidArgument):
            score_game(game)
