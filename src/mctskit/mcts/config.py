"""MCTS configuration."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MCTSConfig:
    """Configuration for MCTS search.

    Attributes:
        exploration_constant: The constant C in the UCB1 exploration term
            ``C * sqrt(2 * ln(N_parent) / N_child)``. Higher values spread
            visits more evenly across children. Must be non-negative.
        num_iterations: Default number of iterations (select, expand, simulate,
            backpropagate) per search. More iterations = stronger play but slower.
        seed: Seed for the engine's private random source. None draws from
            OS entropy, so repeated searches are not reproducible.
    """

    exploration_constant: float = math.sqrt(2)
    num_iterations: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.exploration_constant < 0:
            msg = f"exploration_constant must be non-negative, got {self.exploration_constant}"
            raise ValueError(msg)
        if self.num_iterations < 1:
            msg = f"num_iterations must be at least 1, got {self.num_iterations}"
            raise ValueError(msg)
