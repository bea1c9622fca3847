"""
Domain layer for the graph engine.

Contains the node model, the layout algorithm and the store port.
No third-party dependencies.
"""

from lanegraph.domain.exceptions import (
    CycleDetectedError,
    DuplicateIdError,
    GraphError,
    InvalidTransitionError,
    NotFoundError,
    UnknownParentError,
)
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.layout import compute_layout, topological_order
from lanegraph.domain.models import (
    AgentLifecycle,
    AgentStatus,
    GraphNode,
    GraphStats,
    Layout,
    LayoutRow,
)

__all__ = [
    # Models
    "AgentLifecycle",
    "AgentStatus",
    "GraphNode",
    "GraphStats",
    "Layout",
    "LayoutRow",
    # Layout engine
    "compute_layout",
    "topological_order",
    # Interfaces
    "GraphStoreInterface",
    # Exceptions
    "GraphError",
    "DuplicateIdError",
    "UnknownParentError",
    "NotFoundError",
    "CycleDetectedError",
    "InvalidTransitionError",
]
