"""Rank scoreboards into series standings."""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable

from .scoreboard import Scoreboard


@dataclass
class StandingEntry:
    """Container for one ranked row of a standings table."""
    rank: int
    player_id: str
    points: int
    tournaments: int
    best_finish: int
    average_points: float


def rank_scoreboards(scoreboards: Iterable[Scoreboard]) -> list[StandingEntry]:
    """
    Rank scoreboards into standings.

    Boards are ordered by Scoreboard.compare_for_ranking. Boards that tie on
    every tier share a rank and the next board skips ahead (1, 2, 2, 4).

    Args:
        scoreboards: Scoreboards for one series, in any order

    Returns:
        StandingEntry list, best first
    """
    ordered = sorted(scoreboards, key=cmp_to_key(Scoreboard.compare_for_ranking))

    standings = []
    rank = 0
    for index, board in enumerate(ordered, 1):
        if index == 1 or board.compare_for_ranking(ordered[index - 2]) != 0:
            rank = index
        standings.append(
            StandingEntry(
                rank=rank,
                player_id=board.player_id,
                points=board.total_points.value,
                tournaments=board.tournament_count,
                best_finish=board.best_finish,
                average_points=board.get_average_points_per_tournament(),
            )
        )

    return standings
