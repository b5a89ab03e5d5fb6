"""Validation functions for scoring requests, games and result sets."""

from typing import Iterable, Optional

from .models import TournamentGame


def validate_points_request(
    position: int,
    total_players: int,
    strategy_name: Optional[str],
    bounty_count: Optional[int] = None,
    bounty_point_value: Optional[int] = None,
) -> list[str]:
    """
    Validate the inputs of a single points calculation.

    Checks, in this order:
    - Position is at least 1
    - Field has at least 1 player
    - Position is inside the field
    - Strategy name is present
    - Bounty count and bounty value are not negative

    Strategy registration is not checked here; that needs the registry.

    Args:
        position: Finishing position
        total_players: Number of players in the field
        strategy_name: Requested strategy name
        bounty_count: Optional number of bounties collected
        bounty_point_value: Optional points per bounty

    Returns:
        List of validation error messages in check order (empty if valid)
    """
    errors = []

    if position < 1:
        errors.append('Position must be greater than 0')

    if total_players < 1:
        errors.append('Total players must be greater than 0')

    if position > total_players:
        errors.append('Position cannot be greater than total players')

    if not strategy_name or not strategy_name.strip():
        errors.append('Strategy name is required')

    if bounty_count is not None and bounty_count < 0:
        errors.append('Bounty count cannot be negative')

    if bounty_point_value is not None and bounty_point_value < 0:
        errors.append('Bounty point value cannot be negative')

    return errors


def validate_game(game: TournamentGame) -> list[str]:
    """
    Check that a finished game can be scored.

    Checks:
    - Field has at least 1 player
    - Every rank is between 1 and the field size
    - No player finishes twice

    Args:
        game: TournamentGame to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if game.total_players < 1:
        errors.append('Total players must be greater than 0')

    for finish in game.finishes:
        if finish.rank < 1:
            errors.append(f'{finish.player_id} has invalid rank {finish.rank}')
        elif finish.rank > game.total_players:
            errors.append(
                f'{finish.player_id} finished {finish.rank} in a field of {game.total_players}'
            )

    seen = set()
    duplicates = set()
    for finish in game.finishes:
        if finish.player_id in seen:
            duplicates.add(finish.player_id)
        seen.add(finish.player_id)

    if duplicates:
        errors.append(f'Game has duplicate players: {", ".join(sorted(duplicates))}')

    return errors


def validate_result_set(results: Iterable) -> list[str]:
    """
    Check a result set before a scoreboard is rebuilt from it.

    Args:
        results: Objects with final_position and points attributes

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    for index, result in enumerate(results):
        if result.final_position <= 0:
            errors.append(f'Result {index} has final position {result.final_position}')
    return errors
