"""Monte Carlo Tree Search over any game implementing the ``Game`` protocol."""

from mctskit.mcts.config import MCTSConfig
from mctskit.mcts.engine import ActionStats, MCTSEngine, SearchResult, search
from mctskit.mcts.errors import (
    InvariantViolationError,
    MCTSError,
    TerminalStateError,
    UnknownNodeError,
)
from mctskit.mcts.node import (
    MCTSNode,
    NodeId,
    normalized_win_rate,
    parent_perspective_value,
    ucb_score,
)
from mctskit.mcts.rollout import Chooser, RolloutPolicy, random_rollout
from mctskit.mcts.store import NodeStore

__all__ = [
    "ActionStats",
    "Chooser",
    "InvariantViolationError",
    "MCTSConfig",
    "MCTSEngine",
    "MCTSError",
    "MCTSNode",
    "NodeId",
    "NodeStore",
    "RolloutPolicy",
    "SearchResult",
    "TerminalStateError",
    "UnknownNodeError",
    "normalized_win_rate",
    "parent_perspective_value",
    "random_rollout",
    "search",
    "ucb_score",
]
