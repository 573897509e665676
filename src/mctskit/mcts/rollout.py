"""Random play-out used in the simulation phase."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from loguru import logger

from mctskit.core.game import IllegalActionError
from mctskit.mcts.errors import InvariantViolationError

if TYPE_CHECKING:
    from mctskit.core.game import Game, Player


class Chooser(Protocol):
    """Anything that can pick one element of a sequence (e.g. ``random.Random``)."""

    def choice(self, seq: Sequence[Any]) -> Any: ...


class RolloutPolicy(Protocol):
    """Protocol for simulation policies.

    A policy plays ``state`` (a private copy owned by the engine) to the end and
    reports the winner. It must not touch the search tree.
    """

    def __call__(self, state: Game, rng: Chooser) -> Player | None: ...


def random_rollout(state: Game, rng: Chooser) -> Player | None:
    """Play uniformly random legal actions until the game ends.

    Args:
        state: Game state to play out. Mutated in place.
        rng: Source of random choices.

    Returns:
        The winner, or None if the game ended without one.

    Raises:
        InvariantViolationError: If the game rejects an action it listed as legal.
    """
    while True:
        winner = state.check_winner()
        if winner is not None:
            return winner

        actions = state.legal_actions()
        if not actions:
            return None

        action = rng.choice(actions)
        try:
            state.step(action)
        except IllegalActionError as e:
            logger.error(f"Game rejected rollout action {action!r}: {e}")
            raise InvariantViolationError(
                f"game rejected legal action {action!r} during rollout: {e}"
            ) from e
