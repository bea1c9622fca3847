"""
Domain interfaces (Ports) for the graph engine.

These abstract base classes define the contracts that implementations must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lanegraph.domain.models import AgentLifecycle, AgentStatus, GraphNode


class GraphStoreInterface(ABC):
    """
    Port for node storage.

    The store exclusively owns node records. It enforces identity and
    edge-validity invariants on insert and exposes an ordered snapshot for
    the layout engine. Every topology change bumps revision so that
    cached layouts can be recognised as stale.

    Note (Overlay updates):
        Status updates mutate only the overlay of an existing node. They do
        not change revision: a status change needs a re-render, never a
        relayout.
    """

    @abstractmethod
    def add_node(
        self,
        node_id: str,
        label: str,
        parents: "Sequence[str]" = (),
        status: "AgentStatus | None" = None,
    ) -> "GraphNode":
        """
        Insert a node with the next insertion sequence number.

        Args:
            node_id: Unique, caller-supplied identifier
            label: Display label
            parents: Ids of existing nodes, first parent first
            status: Optional overlay record to attach

        Returns:
            The stored node

        Raises:
            DuplicateIdError: If node_id already exists
            UnknownParentError: If any parent id is absent
        """
        pass

    @abstractmethod
    def get_node(self, node_id: str) -> "GraphNode":
        """
        Retrieve a node by id.

        Raises:
            NotFoundError: If node_id is not in the store
        """
        pass

    @abstractmethod
    def has_node(self, node_id: str) -> bool:
        pass

    @abstractmethod
    def nodes(self) -> list["GraphNode"]:
        """
        Snapshot of all nodes in insertion order.

        Returns:
            A new list; the nodes themselves are shared, not copied
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every node and reset the insertion sequence."""
        pass

    @property
    @abstractmethod
    def revision(self) -> int:
        """Counter bumped by every topology change (add, clear)."""
        pass

    @abstractmethod
    def update_state(self, node_id: str, state: "AgentLifecycle | str") -> None:
        """
        Set the lifecycle state of a node's overlay.

        Raises:
            NotFoundError: If node_id is not in the store
            ValueError: If state is not a known lifecycle value
        """
        pass

    @abstractmethod
    def update_activity(self, node_id: str, activity: str) -> None:
        pass

    @abstractmethod
    def update_progress(self, node_id: str, progress: str) -> None:
        pass

    @abstractmethod
    def increment_turns(self, node_id: str, count: int = 1) -> int:
        """
        Add count to a node's turn counter.

        Returns:
            The new turn count

        Raises:
            NotFoundError: If node_id is not in the store
            ValueError: If count is negative
        """
        pass

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.has_node(node_id)

    def __len__(self) -> int:
        return len(self.nodes())
