"""
In-memory implementation of the graph store.

Nodes live in an arena (a list indexed by integer handle) with a secondary
id -> handle table. Parents are kept as ids and resolved through the
table, so no node ever holds a reference to another node.
"""

from collections.abc import Sequence
from dataclasses import replace

from lanegraph.domain.exceptions import (
    DuplicateIdError,
    NotFoundError,
    UnknownParentError,
)
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.models import AgentLifecycle, AgentStatus, GraphNode


class InMemoryGraphStore(GraphStoreInterface):
    """Arena-backed node store for single-writer use."""

    def __init__(self) -> None:
        self._arena: list[GraphNode] = []
        self._handles: dict[str, int] = {}
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def add_node(
        self,
        node_id: str,
        label: str,
        parents: Sequence[str] = (),
        status: AgentStatus | None = None,
    ) -> GraphNode:
        if node_id in self._handles:
            raise DuplicateIdError(node_id)

        unique_parents = tuple(dict.fromkeys(parents))
        missing = tuple(p for p in unique_parents if p not in self._handles)
        if missing:
            raise UnknownParentError(node_id, missing)

        node = GraphNode(
            node_id=node_id,
            label=label,
            parents=unique_parents,
            sequence=len(self._arena),
            status=status,
        )
        self._handles[node_id] = len(self._arena)
        self._arena.append(node)
        self._revision += 1
        return node

    def get_node(self, node_id: str) -> GraphNode:
        return self._arena[self._handle(node_id)]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._handles

    def nodes(self) -> list[GraphNode]:
        return list(self._arena)

    def clear(self) -> None:
        self._arena.clear()
        self._handles.clear()
        self._revision += 1

    def update_state(self, node_id: str, state: AgentLifecycle | str) -> None:
        self._handle(node_id)
        lifecycle = AgentLifecycle(state)
        self._status(node_id).state = lifecycle

    def update_activity(self, node_id: str, activity: str) -> None:
        self._status(node_id).activity = activity

    def update_progress(self, node_id: str, progress: str) -> None:
        self._status(node_id).progress = progress

    def increment_turns(self, node_id: str, count: int = 1) -> int:
        if count < 0:
            raise ValueError(f"Turn count cannot decrease (got {count})")
        status = self._status(node_id)
        status.turns += count
        return status.turns

    def __len__(self) -> int:
        return len(self._arena)

    def _handle(self, node_id: str) -> int:
        if node_id not in self._handles:
            raise NotFoundError(node_id)
        return self._handles[node_id]

    def _status(self, node_id: str) -> AgentStatus:
        """Return the node's overlay, attaching a default one if absent."""
        handle = self._handle(node_id)
        node = self._arena[handle]
        status = node.status
        if status is None:
            status = AgentStatus()
            self._arena[handle] = replace(node, status=status)
        return status
