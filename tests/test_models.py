"""Unit tests for value objects and small models."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from pokerleague.exceptions import InvalidArgument
from pokerleague.models import GameTime, Player, Points, Position


class TestPosition:
    """Tests for the Position value object."""

    @pytest.mark.parametrize('value', [1, 2, 10, 11, 250])
    def test_valid_positions(self, value):
        """Test that any integer from 1 upwards keeps its value."""
        assert Position(value).value == value

    @pytest.mark.parametrize('value', [0, -1, 1.5, float('nan'), float('inf'), True, '3', None])
    def test_invalid_positions(self, value):
        """Test that zero, negatives and non-integers are rejected."""
        with pytest.raises(InvalidArgument, match='Position must be a positive integer'):
            Position(value)

    def test_integral_float_accepted(self):
        """Test that 3.0 is accepted and stored as an int."""
        position = Position(3.0)
        assert position.value == 3
        assert isinstance(position.value, int)

    def test_is_winner(self):
        """Test that only first place is the winner."""
        assert Position(1).is_winner()
        assert not Position(2).is_winner()

    def test_is_top_three(self):
        """Test podium detection."""
        assert Position(3).is_top_three()
        assert not Position(4).is_top_three()

    @pytest.mark.parametrize('value', range(1, 16))
    def test_qualifies_for_points(self, value):
        """Test that only the top 10 positions qualify for points."""
        assert Position(value).qualifies_for_points() == (value <= 10)

    def test_is_better_than(self):
        """Test that a lower position is the better finish."""
        assert Position(2).is_better_than(Position(5))
        assert not Position(5).is_better_than(Position(2))
        assert not Position(3).is_better_than(Position(3))

    def test_equality_and_str(self):
        """Test value equality and string form."""
        assert Position(4) == Position(4)
        assert Position(4) != Position(5)
        assert str(Position(7)) == '7'

    def test_immutable(self):
        """Test that a position cannot be changed after creation."""
        position = Position(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            position.value = 2


class TestPoints:
    """Tests for the Points value object."""

    @pytest.mark.parametrize('a,b', [(0, 0), (0, 5), (100, 15), (200, 1)])
    def test_add(self, a, b):
        """Test that add returns the sum."""
        assert Points(a).add(Points(b)).value == a + b

    def test_add_does_not_mutate(self):
        """Test that add leaves both operands untouched."""
        a = Points(10)
        b = Points(5)
        total = a.add(b)
        assert a.value == 10
        assert b.value == 5
        assert total is not a and total is not b

    def test_plus_operator(self):
        """Test that + delegates to add."""
        assert (Points(3) + Points(4)) == Points(7)

    @pytest.mark.parametrize('value', [-1, 2.5, float('nan'), float('inf'), False])
    def test_invalid_points(self, value):
        """Test that negatives, fractions, NaN and infinity are rejected."""
        with pytest.raises(InvalidArgument, match='Points must be a non-negative integer'):
            Points(value)

    def test_subtract(self):
        """Test subtraction and its non-negative floor."""
        assert Points(10).subtract(Points(4)).value == 6
        with pytest.raises(InvalidArgument):
            Points(3).subtract(Points(4))

    def test_queries(self):
        """Test zero, positive and comparison queries."""
        assert Points.zero().is_zero()
        assert not Points.zero().is_positive()
        assert Points(1).is_positive()
        assert Points(5).is_greater_than(Points(3))
        assert Points(3).is_less_than(Points(5))
        assert Points(5) == Points(5)
        assert str(Points(42)) == '42'


class TestGameTime:
    """Tests for the GameTime value object."""

    def test_parse_iso_string(self):
        """Test parsing an ISO string with a Z suffix."""
        game_time = GameTime('2025-03-01T19:30:00Z')
        assert game_time.value == datetime(2025, 3, 1, 19, 30, tzinfo=timezone.utc)
        assert game_time.to_date_string() == '2025-03-01'

    def test_naive_datetime_is_utc(self):
        """Test that naive datetimes are read as UTC."""
        game_time = GameTime(datetime(2025, 3, 1, 19, 30))
        assert game_time.value.tzinfo == timezone.utc
        assert game_time == GameTime('2025-03-01T19:30:00+00:00')

    @pytest.mark.parametrize('value', ['not a date', '', 12345, None])
    def test_invalid_values(self, value):
        """Test that garbage is rejected."""
        with pytest.raises(InvalidArgument, match='GameTime must be a valid date'):
            GameTime(value)

    def test_now_uses_clock(self):
        """Test that now() reads the injected clock."""
        fixed = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert GameTime.now(lambda: fixed).value == fixed

    def test_past_future_today(self):
        """Test time queries against an explicit reference instant."""
        now = GameTime('2025-06-01T12:00:00Z')
        earlier = GameTime(now.value - timedelta(hours=3))
        later = GameTime(now.value + timedelta(days=2))

        assert earlier.is_in_past(now)
        assert not earlier.is_in_future(now)
        assert later.is_in_future(now)
        assert earlier.is_today(now)
        assert not later.is_today(now)

    def test_ordering(self):
        """Test before/after comparisons."""
        first = GameTime('2025-01-01T00:00:00Z')
        second = GameTime('2025-01-02T00:00:00Z')
        assert first.is_before(second)
        assert second.is_after(first)
        assert first < second

    def test_round_trip_iso_string(self):
        """Test that from_iso_string reads what to_iso_string writes."""
        game_time = GameTime('2025-03-01T19:30:00+02:00')
        assert GameTime.from_iso_string(game_time.to_iso_string()) == game_time
        assert str(game_time) == game_time.to_iso_string()


class TestPlayer:
    """Tests for the Player model."""

    def test_trims_fields(self):
        """Test that name, email and notes are trimmed."""
        player = Player('p1', '  Doyle Brunson ', email=' doyle@example.com ', notes=' legend ')
        assert player.name == 'Doyle Brunson'
        assert player.email == 'doyle@example.com'
        assert player.notes == 'legend'
        assert player.is_active

    @pytest.mark.parametrize('player_id,name,message', [
        ('', 'Name', 'Player ID cannot be empty'),
        ('   ', 'Name', 'Player ID cannot be empty'),
        ('p1', '  ', 'Player name cannot be empty'),
    ])
    def test_required_fields(self, player_id, name, message):
        """Test that blank ids and names are rejected."""
        with pytest.raises(InvalidArgument, match=message):
            Player(player_id, name)

    def test_update_name_and_status(self):
        """Test renaming and activation toggles."""
        player = Player('p1', 'Phil')
        player.update_name(' Phil Ivey ')
        assert player.name == 'Phil Ivey'
        with pytest.raises(InvalidArgument):
            player.update_name('')
        assert player.name == 'Phil Ivey'

        player.deactivate()
        assert not player.is_active
        player.activate()
        assert player.is_active

    def test_equality_by_id(self):
        """Test that players with the same id are equal."""
        assert Player('p1', 'Phil') == Player('p1', 'Someone Else')
        assert Player('p1', 'Phil') != Player('p2', 'Phil')
