"""
Application layer for the graph engine.

Facades that own a store, cache its layout and render it.
"""

from lanegraph.application.agent_graph import AgentGraphRenderer
from lanegraph.application.git_graph import GitGraphRenderer, create_graph_from_tree

__all__ = [
    "GitGraphRenderer",
    "AgentGraphRenderer",
    "create_graph_from_tree",
]
