"""
Domain exceptions for the graph engine.

These represent violations of graph invariants in the domain layer.
All of them are raised synchronously to the immediate caller and leave
the store unchanged.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lanegraph.domain.models import AgentLifecycle


class GraphError(Exception):
    """Base class for all graph engine failures."""


class DuplicateIdError(GraphError):
    """
    Raised when a node is added with an id that already exists.

    Node ids are caller-supplied and immutable, so a second add with the
    same id is always a caller error.
    """

    def __init__(self, node_id: str):
        """
        Args:
            node_id: The id that is already present in the store
        """
        super().__init__(f"Node already exists: {node_id}")
        self.node_id = node_id


class UnknownParentError(GraphError):
    """
    Raised when a node references parents that are not in the store.

    Parents must be added before their children, which keeps the graph
    free of dangling edges at every point of incremental construction.
    """

    def __init__(self, node_id: str, missing: tuple[str, ...]):
        """
        Args:
            node_id: The node whose declaration was rejected
            missing: Every parent id that could not be resolved
        """
        super().__init__(
            f"Node '{node_id}' references unknown parent(s): {', '.join(missing)}"
        )
        self.node_id = node_id
        self.missing = missing


class NotFoundError(GraphError, KeyError):
    """Raised when an operation targets a node id that does not exist."""

    def __init__(self, node_id: str):
        super().__init__(f"Node not found: {node_id}")
        self.node_id = node_id

    def __str__(self) -> str:
        return str(self.args[0])


class CycleDetectedError(GraphError):
    """
    Raised by the layout engine when the node set contains a cycle.

    Unreachable for graphs built through a store (parents must pre-exist),
    but checked so that layout never loops on a corrupted snapshot.
    """

    def __init__(self, node_ids: tuple[str, ...]):
        """
        Args:
            node_ids: Nodes that could not be placed in topological order
        """
        super().__init__(f"Cycle detected among nodes: {', '.join(node_ids)}")
        self.node_ids = node_ids


class InvalidTransitionError(GraphError):
    """
    Raised when a strict overlay rejects leaving a terminal state.

    Only raised by renderers constructed with strict_transitions=True.
    """

    def __init__(
        self,
        node_id: str,
        current: "AgentLifecycle",
        requested: "AgentLifecycle",
    ):
        super().__init__(
            f"Agent '{node_id}' is {current.value}; "
            f"cannot transition to {requested.value}"
        )
        self.node_id = node_id
        self.current = current
        self.requested = requested
