"""Game contract consumed by the search engine.

The engine never looks inside a game state. Everything it needs is exposed
through the small structural interface below, so any deterministic,
perfect-information, turn-based game can be searched as long as its state
implements these methods.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

Action = Hashable
Player = Hashable

GameT = TypeVar("GameT", bound="Game")


class IllegalActionError(ValueError):
    """Raised by ``Game.step`` when the action is not legal in the current state."""

    pass


@runtime_checkable
class Game(Protocol):
    """Protocol for game states that can be searched.

    Implementations mutate in place on ``step`` and must be cheap to ``copy``:
    the engine clones the caller's state once per iteration so the original is
    never modified.
    """

    def step(self, action: Action) -> float:
        """Apply ``action`` to the current state.

        Args:
            action: One of the actions returned by ``legal_actions()``.

        Returns:
            A scalar reward for the move. The search does not use it.

        Raises:
            IllegalActionError: If the action is not currently legal.
        """
        ...

    def legal_actions(self) -> Sequence[Action]:
        """Return every action valid from the current state (empty when none remain)."""
        ...

    def current_player(self) -> Player:
        """Return the player who chooses the next action."""
        ...

    def done(self) -> bool:
        """Return True iff the game has a winner or no legal actions remain."""
        ...

    def check_winner(self) -> Player | None:
        """Return the winner, or None while the game is ongoing or drawn."""
        ...

    def copy(self: GameT) -> GameT:
        """Return an independent copy of this state."""
        ...
