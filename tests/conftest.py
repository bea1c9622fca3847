"""Shared pytest fixtures for lanegraph tests."""

import pytest

from lanegraph.application.agent_graph import AgentGraphRenderer
from lanegraph.application.git_graph import GitGraphRenderer
from lanegraph.domain.models import GraphNode
from lanegraph.infrastructure.persistence.memory import InMemoryGraphStore


@pytest.fixture
def memory_store() -> InMemoryGraphStore:
    """Create an empty in-memory graph store."""
    return InMemoryGraphStore()


@pytest.fixture
def linear_nodes() -> list[GraphNode]:
    """Chain 1 -> 2 -> 3."""
    return [
        GraphNode("1", "Commit 1", (), 0),
        GraphNode("2", "Commit 2", ("1",), 1),
        GraphNode("3", "Commit 3", ("2",), 2),
    ]


@pytest.fixture
def branch_merge_nodes() -> list[GraphNode]:
    """1; 2 and 3 both from 1; 4 merges 2 and 3."""
    return [
        GraphNode("1", "1", (), 0),
        GraphNode("2", "2", ("1",), 1),
        GraphNode("3", "3", ("1",), 2),
        GraphNode("4", "4", ("2", "3"), 3),
    ]


@pytest.fixture
def branch_merge_graph() -> GitGraphRenderer:
    """Renderer holding the branch-and-merge diamond, ascii style."""
    graph = GitGraphRenderer()
    graph.add_node("1", "1")
    graph.add_node("2", "2", parents=["1"])
    graph.add_node("3", "3", parents=["1"])
    graph.add_node("4", "4", parents=["2", "3"])
    return graph


@pytest.fixture
def agent_graph() -> AgentGraphRenderer:
    """Agent renderer with a running coordinator and one pending worker."""
    graph = AgentGraphRenderer()
    graph.add_agent(
        "coord",
        "Coordinator",
        state="running",
        current_activity="Spawning workers",
        progress="0/1 workers",
    )
    graph.add_agent("w1", "Worker", parent_id="coord")
    return graph
