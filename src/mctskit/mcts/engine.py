"""MCTS engine using UCB1 selection and uniform random rollouts."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from mctskit.core.game import IllegalActionError
from mctskit.mcts.config import MCTSConfig
from mctskit.mcts.errors import InvariantViolationError, TerminalStateError
from mctskit.mcts.node import (
    MCTSNode,
    NodeId,
    parent_perspective_value,
    ucb_score,
)
from mctskit.mcts.rollout import Chooser, RolloutPolicy, random_rollout
from mctskit.mcts.store import NodeStore

if TYPE_CHECKING:
    from mctskit.core.game import Action, Game


@dataclass
class ActionStats:
    """Root-level statistics for one candidate action."""

    visits: int
    value: float  # Parent-perspective win rate in [0, 1]
    score: float  # Raw accumulated score of the child (child's perspective)


@dataclass
class SearchResult:
    """Snapshot of a finished search. Holds no references to tree nodes."""

    action: Any
    root_visits: int
    num_nodes: int
    stats: dict[Any, ActionStats] = field(default_factory=dict)
    principal_variation: list[Any] = field(default_factory=list)


class MCTSEngine:
    """MCTS engine using UCB1 selection.

    Children are chosen during descent by

        UCB(child) = (1 - r_child) + C * sqrt(2 * ln(N_parent) / N_child)

    Where:
        - r_child: normalized win rate of the child's mover, in [0, 1]
        - N_parent, N_child: visit counts
        - C: exploration constant

    The child's statistics are recorded for the player to move at the child,
    which is the opponent of the player choosing at the parent; hence the
    ``1 - r_child`` inversion, used both here and in the final choice.

    Each search proceeds in four phases per iteration:
        1. SELECT: descend fully-expanded nodes by UCB1
        2. EXPAND: turn one untried action of the leaf into a new child
        3. SIMULATE: play random moves from the new child to the end
        4. BACKPROPAGATE: update visits/score from the new child to the root

    After the budget is spent, the visited root child with the highest
    parent-perspective win rate is selected. A fresh tree is built for every
    call; nothing is kept between moves.
    """

    def __init__(
        self,
        config: MCTSConfig | None = None,
        *,
        rollout: RolloutPolicy = random_rollout,
        rng: Chooser | None = None,
    ) -> None:
        """Initialize the MCTSEngine.

        Args:
            config: MCTS configuration. Uses defaults if None.
            rollout: Simulation policy. Defaults to uniform random play-outs.
            rng: Source of random choices for rollouts. Defaults to a private
                ``random.Random`` seeded from ``config.seed``.
        """
        self.config = config or MCTSConfig()
        self.rollout = rollout
        self.rng: Chooser = rng if rng is not None else random.Random(self.config.seed)

        logger.debug(
            f"MCTSEngine initialized with num_iterations={self.config.num_iterations}, "
            f"exploration_constant={self.config.exploration_constant:.3f}"
        )

    @property
    def name(self) -> str:
        """Return the engine name."""
        return f"MCTS(n={self.config.num_iterations})"

    def select_action(self, state: Game) -> Action:
        """Run a search with the configured budget and return the chosen action."""
        return self.search(state)

    def search(self, state: Game, iterations: int | None = None) -> Action:
        """Run MCTS from ``state`` and return the recommended action.

        Args:
            state: Current game state. Not modified.
            iterations: Iteration budget. Defaults to ``config.num_iterations``.

        Returns:
            One of ``state.legal_actions()``.

        Raises:
            TerminalStateError: If ``state`` is terminal.
            ValueError: If ``iterations`` is less than 1.
            InvariantViolationError: If the game rejects an action the engine
                took from its own ``legal_actions()``.
        """
        store = self.build_tree(state, iterations)
        return self.best_action(store)

    def analyze(self, state: Game, iterations: int | None = None) -> SearchResult:
        """Run MCTS and return the chosen action together with root statistics."""
        store = self.build_tree(state, iterations)
        action = self.best_action(store)
        root = store.root

        stats: dict[Any, ActionStats] = {}
        for child_action, child_id in root.children.items():
            child = store.get(child_id)
            stats[child_action] = ActionStats(
                visits=child.visits,
                value=parent_perspective_value(child) if child.visits > 0 else 0.0,
                score=child.score,
            )

        return SearchResult(
            action=action,
            root_visits=root.visits,
            num_nodes=len(store),
            stats=stats,
            principal_variation=self.principal_variation(store),
        )

    def build_tree(self, state: Game, iterations: int | None = None) -> NodeStore:
        """Run the search loop and return the populated node store.

        Args:
            state: Root game state. Not modified.
            iterations: Iteration budget. Defaults to ``config.num_iterations``.

        Returns:
            The node store holding the finished tree.
        """
        budget = self.config.num_iterations if iterations is None else iterations
        if budget < 1:
            raise ValueError(f"iterations must be at least 1, got {budget}")

        if state.done() or not state.legal_actions():
            raise TerminalStateError("cannot search a terminal state: no legal actions")

        store = NodeStore()
        root_id = store.create(state)

        for _ in range(budget):
            self._run_iteration(store, root_id, state)

        logger.debug(f"Search finished: {budget} iterations, {len(store)} nodes")
        return store

    def best_action(self, store: NodeStore) -> Action:
        """Return the root action whose child has the highest parent-perspective value.

        Equal values are broken in favour of a terminal child, whose value is
        exact rather than estimated from rollouts, then by the higher visit
        count, then by expansion order. Unvisited children are never chosen
        while a visited child exists.
        """
        root = store.root
        if not root.children:
            raise InvariantViolationError("root has no children after search")

        best_key: tuple[float, bool, int] | None = None
        best_action: Action | None = None
        best_child: MCTSNode | None = None

        for action, child_id in root.children.items():
            child = store.get(child_id)
            if child.visits == 0:
                continue
            key = (parent_perspective_value(child), child.terminal, child.visits)
            if best_key is None or key > best_key:
                best_key = key
                best_action = action
                best_child = child

        if best_child is None:
            # No visited child, fall back to the first one
            best_action = next(iter(root.children))
        else:
            logger.debug(
                f"Best action {best_action!r}: value={best_key[0]:.3f}, "
                f"terminal={best_child.terminal}, visits={best_child.visits}/{root.visits}"
            )
        return best_action

    def principal_variation(self, store: NodeStore, max_depth: int = 10) -> list[Action]:
        """Most visited path from the root.

        Args:
            store: Node store of a finished search.
            max_depth: Maximum depth to traverse.

        Returns:
            List of actions forming the principal variation.
        """
        pv: list[Action] = []
        node = store.root

        for _ in range(max_depth):
            if not node.children:
                break
            action, child_id = max(node.children.items(), key=lambda kv: store.get(kv[1]).visits)
            pv.append(action)
            node = store.get(child_id)

        return pv

    def _run_iteration(self, store: NodeStore, root_id: NodeId, state: Game) -> None:
        """Run a single MCTS iteration.

        Args:
            store: Node store of the current search.
            root_id: Id of the root node.
            state: The root state (not modified).
        """
        scratch = state.copy()
        node_id = root_id
        node = store.get(node_id)

        # SELECT: descend while fully expanded and not terminal
        while not node.terminal and node.is_fully_expanded:
            action, node_id = self._select_child(store, node)
            self._apply(scratch, action)
            node = store.get(node_id)

        # EXPAND
        if not node.terminal:
            action = store.mutate(node_id, lambda n: n.untried_actions.pop())
            self._apply(scratch, action)
            child_id = store.create(scratch, parent=node_id, action=action)
            store.link(node_id, action, child_id)
            node_id = child_id

        # SIMULATE
        winner = self.rollout(scratch, self.rng)

        # BACKPROPAGATE
        self._backpropagate(store, node_id, winner)

    def _select_child(self, store: NodeStore, node: MCTSNode) -> tuple[Action, NodeId]:
        """Select the child with the highest UCB1 score.

        Args:
            store: Node store of the current search.
            node: Fully expanded, non-terminal parent.

        Returns:
            Tuple of (action, child_id). The first child wins ties.
        """
        if not node.children:
            logger.error(f"Node without children or untried actions: {node!r}")
            raise InvariantViolationError("non-terminal node has neither children nor untried actions")

        best_score = -float("inf")
        best: tuple[Action, NodeId] | None = None

        for action, child_id in node.children.items():
            child = store.get(child_id)
            if child.visits == 0:
                raise InvariantViolationError(f"child {child_id} was never visited")

            score = ucb_score(child, node.visits, self.config.exploration_constant)
            if score > best_score:
                best_score = score
                best = (action, child_id)

        if best is None:
            raise InvariantViolationError(f"no selectable child under node with {node.visits} visits")
        return best

    def _apply(self, state: Game, action: Action) -> None:
        """Apply an engine-chosen action, treating rejection as a fatal error."""
        try:
            state.step(action)
        except IllegalActionError as e:
            logger.error(f"Game rejected engine action {action!r}: {e}")
            raise InvariantViolationError(f"game rejected legal action {action!r}: {e}") from e

    def _backpropagate(self, store: NodeStore, node_id: NodeId, winner: Any) -> None:
        """Update statistics from ``node_id`` up to the root, inclusive.

        Each node scores the outcome from its own ``to_play`` perspective, so no
        sign flipping is needed on the way up.

        Args:
            store: Node store of the current search.
            node_id: The expanded (or terminal) node of this iteration.
            winner: The rollout's winner, or None for a draw.
        """
        current: NodeId | None = node_id
        while current is not None:
            node = store.get(current)
            node.record(winner)
            current = node.parent


def search(
    state: Game,
    iterations: int,
    config: MCTSConfig | None = None,
    rng: Chooser | None = None,
) -> Action:
    """Run a one-off MCTS search and return the recommended action.

    Args:
        state: Current game state. Not modified.
        iterations: Iteration budget.
        config: MCTS configuration. Uses defaults if None.
        rng: Optional source of random choices for rollouts.

    Returns:
        One of ``state.legal_actions()``.
    """
    return MCTSEngine(config, rng=rng).search(state, iterations)
