"""Arena that owns every node of a single search."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from mctskit.mcts.errors import InvariantViolationError, UnknownNodeError
from mctskit.mcts.node import MCTSNode, NodeId

if TYPE_CHECKING:
    from mctskit.core.game import Action, Game

T = TypeVar("T")


class NodeStore:
    """Node arena for one search tree.

    Nodes are addressed by integer ids handed out by a counter private to the
    store, so ids are unique within a tree and no state is shared between
    searches. Parent links are ids, which keeps the tree free of reference
    cycles. There is no deletion: the whole store is dropped after a search.
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeId, MCTSNode] = {}
        self._ids = itertools.count()
        self._root_id: NodeId | None = None

    @property
    def root_id(self) -> NodeId:
        """Id of the first node created in this store."""
        if self._root_id is None:
            raise InvariantViolationError("node store has no root yet")
        return self._root_id

    @property
    def root(self) -> MCTSNode:
        """The root node."""
        return self.get(self.root_id)

    def create(
        self,
        state: Game,
        parent: NodeId | None = None,
        action: Action | None = None,
    ) -> NodeId:
        """Snapshot ``state`` into a new node and return its id.

        Legal actions, the player to move and terminality are read once here.
        A state is terminal when it is done or has no legal actions left; it
        never gets untried actions, so it can never be expanded.

        Args:
            state: Game state the node represents. Not modified.
            parent: Id of the parent node, or None for the root.
            action: The action that led from the parent to this state.

        Returns:
            The id of the new node.
        """
        if parent is not None and parent not in self._nodes:
            raise UnknownNodeError(f"parent node {parent} does not exist")

        actions = list(state.legal_actions())
        terminal = state.done() or not actions
        node = MCTSNode(
            to_play=state.current_player(),
            parent=parent,
            action=action,
            untried_actions=[] if terminal else actions,
            terminal=terminal,
        )

        node_id = next(self._ids)
        self._nodes[node_id] = node
        if self._root_id is None:
            self._root_id = node_id
        return node_id

    def get(self, node_id: NodeId) -> MCTSNode:
        """Return the node with id ``node_id``.

        Raises:
            UnknownNodeError: If no such node exists.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(f"unknown node id: {node_id}") from None

    def mutate(self, node_id: NodeId, fn: Callable[[MCTSNode], T]) -> T:
        """Apply ``fn`` to the node with id ``node_id`` and return its result."""
        return fn(self.get(node_id))

    def link(self, parent_id: NodeId, action: Action, child_id: NodeId) -> None:
        """Record ``child_id`` as the child reached from ``parent_id`` by ``action``."""
        parent = self.get(parent_id)
        child = self.get(child_id)
        if child.parent != parent_id:
            raise InvariantViolationError(
                f"node {child_id} has parent {child.parent}, cannot link it under {parent_id}"
            )
        if action in parent.children:
            raise InvariantViolationError(f"node {parent_id} already has a child for {action!r}")
        parent.children[action] = child_id

    def path_to_root(self, node_id: NodeId) -> list[NodeId]:
        """Return ids from ``node_id`` up to the root, inclusive."""
        path = []
        current: NodeId | None = node_id
        while current is not None:
            path.append(current)
            current = self.get(current).parent
        return path

    def items(self) -> Iterator[tuple[NodeId, MCTSNode]]:
        """Iterate over (id, node) pairs in creation order."""
        return iter(self._nodes.items())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: Any) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"NodeStore(nodes={len(self._nodes)})"
