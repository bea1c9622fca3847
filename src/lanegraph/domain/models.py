"""
Domain models for the graph engine.

Nodes and layout records are immutable (frozen dataclasses) so that a
computed layout can be shared between renders without defensive copies.
The workflow overlay (AgentStatus) is the one mutable record: its fields
change on every status update without touching topology.
"""

from dataclasses import dataclass, field
from enum import Enum

from lanegraph.domain.exceptions import NotFoundError

# =============================================================================
# STATUS OVERLAY
# =============================================================================


class AgentLifecycle(Enum):
    """Lifecycle state of a tracked agent."""

    PENDING = "pending"  # Declared, not started
    RUNNING = "running"  # Currently doing work
    COMPLETED = "completed"  # Finished successfully (terminal)
    FAILED = "failed"  # Finished with an error (terminal)

    @property
    def is_terminal(self) -> bool:
        return self in (AgentLifecycle.COMPLETED, AgentLifecycle.FAILED)


@dataclass
class AgentStatus:
    """Mutable runtime fields layered on a graph node."""

    state: AgentLifecycle = AgentLifecycle.PENDING
    activity: str = ""  # Free-text current activity
    progress: str = ""  # Free-text progress indicator, e.g. "2/4 steps"
    turns: int = 0  # Conversation rounds, never decreases


# =============================================================================
# GRAPH NODE
# =============================================================================


@dataclass(frozen=True)
class GraphNode:
    """
    Immutable node in the graph store.

    Edges are implicit: one edge parent -> node for each entry in parents.
    Parents are stored as ids and resolved through the store, never as
    direct node references.
    """

    node_id: str
    label: str
    parents: tuple[str, ...] = ()
    sequence: int = 0  # Insertion order, used as layout tie-break
    status: AgentStatus | None = field(default=None, compare=False)

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


# =============================================================================
# LAYOUT
# =============================================================================


@dataclass(frozen=True)
class GraphStats:
    """Global counters computed during a layout pass."""

    node_count: int = 0
    edge_count: int = 0
    max_column: int = 0


@dataclass(frozen=True)
class LayoutRow:
    """
    Position of one node plus the lane occupancy around its row.

    Lane sets are sorted column tuples:
        incoming: lanes open when the row is entered
        merged:   lanes closed into this node (non-first parents)
        outgoing: lanes open after the row
        branched: lanes opened by this node for its later children
    """

    node_id: str
    row: int
    column: int
    incoming: tuple[int, ...] = ()
    merged: tuple[int, ...] = ()
    outgoing: tuple[int, ...] = ()
    branched: tuple[int, ...] = ()

    @property
    def passing(self) -> tuple[int, ...]:
        """Lanes drawn as verticals on the node line itself."""
        return tuple(
            col
            for col in self.incoming
            if col != self.column and col not in self.merged
        )

    @property
    def continuing(self) -> tuple[int, ...]:
        """Lanes drawn as verticals below the node, before any branch."""
        return tuple(col for col in self.outgoing if col not in self.branched)


@dataclass(frozen=True)
class Layout:
    """Derived row/column assignment for a node snapshot."""

    rows: tuple[LayoutRow, ...] = ()
    stats: GraphStats = field(default_factory=GraphStats)
    revision: int = 0  # Store revision this layout was computed from

    def position(self, node_id: str) -> LayoutRow:
        for row in self.rows:
            if row.node_id == node_id:
                return row
        raise NotFoundError(node_id)

    @property
    def width(self) -> int:
        """Number of columns the rendering must reserve."""
        return self.stats.max_column + 1 if self.rows else 0
