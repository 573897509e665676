"""Playing games between agents and summarizing the results."""

from mctskit.tournament.agents import Agent, RandomAgent
from mctskit.tournament.game_runner import GameConfig, GameResult, GameRunner, GameTermination
from mctskit.tournament.summary import MatchSummary, summarize

__all__ = [
    "Agent",
    "GameConfig",
    "GameResult",
    "GameRunner",
    "GameTermination",
    "MatchSummary",
    "RandomAgent",
    "summarize",
]
