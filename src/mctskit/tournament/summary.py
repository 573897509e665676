"""Aggregate statistics over a set of games."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from mctskit.tournament.game_runner import GameResult, GameTermination


@dataclass
class MatchSummary:
    """Win/draw counts over a match."""

    games: int
    draws: int
    wins: dict[Any, int] = field(default_factory=dict)
    terminations: dict[GameTermination, int] = field(default_factory=dict)

    @property
    def draw_rate(self) -> float:
        """Draw rate (D/games)."""
        return self.draws / self.games if self.games > 0 else 0.0

    def win_rate(self, player: Any) -> float:
        """Win rate of ``player`` (W/games)."""
        return self.wins.get(player, 0) / self.games if self.games > 0 else 0.0

    def score(self, player: Any) -> float:
        """Score of ``player``: (wins + draws/2) / games."""
        if self.games == 0:
            return 0.0
        return (self.wins.get(player, 0) + 0.5 * self.draws) / self.games


def summarize(results: Iterable[GameResult]) -> MatchSummary:
    """Count wins, draws and termination kinds over ``results``."""
    results = list(results)
    wins = Counter(r.winner for r in results if r.winner is not None)
    terminations = Counter(r.termination for r in results)
    return MatchSummary(
        games=len(results),
        draws=sum(r.is_draw for r in results),
        wins=dict(wins),
        terminations=dict(terminations),
    )
