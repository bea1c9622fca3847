"""
lanegraph: git-log style DAG layout and rendering for the terminal.

Lays out nodes declared with parent references into rows and lanes and
draws them with branch and merge connectors, optionally with live
per-node agent status.

Example:
    from lanegraph import GitGraphRenderer

    graph = GitGraphRenderer(style="unicode")
    graph.add_node("1", "Initial commit")
    graph.add_node("2", "Add feature", parents=["1"])
    graph.add_node("3", "Fix bug", parents=["1"])
    graph.add_node("4", "Merge fix", parents=["2", "3"])
    print(graph.render())
"""

# Application layer (most commonly used)
from lanegraph.application.agent_graph import AgentGraphRenderer
from lanegraph.application.git_graph import GitGraphRenderer, create_graph_from_tree

# Domain exceptions
from lanegraph.domain.exceptions import (
    CycleDetectedError,
    DuplicateIdError,
    GraphError,
    InvalidTransitionError,
    NotFoundError,
    UnknownParentError,
)

# Domain interfaces (for type hints and custom implementations)
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.layout import compute_layout
from lanegraph.domain.models import (
    AgentLifecycle,
    AgentStatus,
    GraphNode,
    GraphStats,
    Layout,
    LayoutRow,
)

# Infrastructure (explicit import encouraged for dependency injection)
from lanegraph.infrastructure.persistence import InMemoryGraphStore

# Rendering
from lanegraph.visualization import RenderOptions, StatusTextRenderer, TextRenderer

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "AgentLifecycle",
    "AgentStatus",
    "GraphNode",
    "GraphStats",
    "Layout",
    "LayoutRow",
    # Layout engine
    "compute_layout",
    # Domain interfaces
    "GraphStoreInterface",
    # Domain exceptions
    "GraphError",
    "DuplicateIdError",
    "UnknownParentError",
    "NotFoundError",
    "CycleDetectedError",
    "InvalidTransitionError",
    # Application layer
    "GitGraphRenderer",
    "AgentGraphRenderer",
    "create_graph_from_tree",
    # Infrastructure
    "InMemoryGraphStore",
    # Rendering
    "RenderOptions",
    "TextRenderer",
    "StatusTextRenderer",
]
