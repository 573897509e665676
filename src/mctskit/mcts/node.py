"""MCTS node data structure and UCB1 scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

NodeId = int


@dataclass
class MCTSNode:
    """A node in the MCTS search tree.

    Each node is a snapshot of one reachable game state. Tree links are stored
    as node ids into the owning ``NodeStore`` rather than as object references.

    Statistics:
        visits: How many completed simulations passed through this node.
        score: Accumulated outcome from the perspective of ``to_play``
            (+1 per win, -1 per loss, 0 per draw).

    ``to_play`` is the player who moves *at* this state, not the player whose
    move produced it. A child's statistics are therefore from the opponent's
    point of view when read from the parent.
    """

    to_play: Any
    parent: NodeId | None = None
    action: Any = None
    children: dict[Any, NodeId] = field(default_factory=dict)
    untried_actions: list[Any] = field(default_factory=list)
    terminal: bool = False

    visits: int = 0
    score: float = 0.0

    @property
    def is_root(self) -> bool:
        """Whether this node has no parent."""
        return self.parent is None

    @property
    def is_fully_expanded(self) -> bool:
        """Whether every legal action has been turned into a child."""
        return not self.untried_actions

    @property
    def mean_score(self) -> float:
        """Mean outcome in [-1, 1] for ``to_play``. Returns 0.0 for unvisited nodes."""
        return self.score / self.visits if self.visits > 0 else 0.0

    def record(self, winner: Any) -> None:
        """Add one simulation outcome to this node's statistics.

        Args:
            winner: The winning player, or None for a draw.
        """
        self.visits += 1
        if winner is None:
            return
        self.score += 1.0 if winner == self.to_play else -1.0

    def __repr__(self) -> str:
        action_str = "root" if self.action is None else repr(self.action)
        return (
            f"MCTSNode({action_str}, to_play={self.to_play!r}, N={self.visits}, "
            f"score={self.score:.1f}, children={len(self.children)}, "
            f"untried={len(self.untried_actions)})"
        )


def normalized_win_rate(node: MCTSNode) -> float:
    """Win rate of ``node.to_play`` rescaled to [0, 1] (a draw counts as 0.5).

    Raises:
        ValueError: If the node has never been visited.
    """
    if node.visits == 0:
        raise ValueError("win rate is undefined for an unvisited node")
    return (node.score / node.visits + 1.0) / 2.0


def parent_perspective_value(child: MCTSNode) -> float:
    """Value of ``child`` as seen by the player choosing it at the parent.

    The child's statistics belong to the child's mover, who is the parent's
    opponent, so the normalized rate is inverted.
    """
    return 1.0 - normalized_win_rate(child)


def ucb_score(child: MCTSNode, parent_visits: int, exploration_constant: float) -> float:
    """UCB1 value of ``child`` during tree descent.

    UCB = (1 - r_child) + C * sqrt(2 * ln(N_parent) / N_child)

    Args:
        child: Child node (must have at least one visit).
        parent_visits: Visit count of the parent.
        exploration_constant: The constant C.

    Returns:
        The UCB1 score.
    """
    exploitation = parent_perspective_value(child)
    exploration = exploration_constant * math.sqrt(2.0 * math.log(parent_visits) / child.visits)
    return exploitation + exploration
