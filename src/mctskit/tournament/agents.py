"""Agents that choose actions in a game."""

import random
from typing import Any, Protocol

from mctskit.core.game import Action, Game


class Agent(Protocol):
    """Protocol for anything that can pick an action for the side to move.

    Agents receive a game state and return an action without modifying the
    state. ``MCTSEngine`` satisfies this protocol.
    """

    @property
    def name(self) -> str:
        """Return the name of the agent for logging/display."""
        ...

    def select_action(self, state: Game) -> Action:
        """Select an action in the given state.

        Args:
            state: Current game state. The agent should not modify it.

        Returns:
            The selected action.
        """
        ...


class RandomAgent:
    """Agent that plays a uniformly random legal action."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "Random"

    def select_action(self, state: Game) -> Any:
        actions = state.legal_actions()
        if not actions:
            raise ValueError("no legal actions available")
        return self._rng.choice(list(actions))
