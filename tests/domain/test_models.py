"""Tests for domain models and exceptions."""

import pytest

from lanegraph.domain.exceptions import (
    CycleDetectedError,
    DuplicateIdError,
    GraphError,
    InvalidTransitionError,
    NotFoundError,
    UnknownParentError,
)
from lanegraph.domain.models import (
    AgentLifecycle,
    AgentStatus,
    GraphNode,
    GraphStats,
    Layout,
    LayoutRow,
)


class TestAgentLifecycle:
    """Tests for AgentLifecycle enum."""

    def test_lifecycle_values(self):
        """Verify all expected state values exist."""
        assert AgentLifecycle.PENDING.value == "pending"
        assert AgentLifecycle.RUNNING.value == "running"
        assert AgentLifecycle.COMPLETED.value == "completed"
        assert AgentLifecycle.FAILED.value == "failed"

    def test_all_states_accounted(self):
        """Ensure we have exactly 4 states."""
        assert len(AgentLifecycle) == 4

    def test_terminal_states(self):
        """Only completed and failed are terminal."""
        terminal = {s for s in AgentLifecycle if s.is_terminal}
        assert terminal == {AgentLifecycle.COMPLETED, AgentLifecycle.FAILED}

    def test_lookup_by_value(self):
        """States can be constructed from their string value."""
        assert AgentLifecycle("running") is AgentLifecycle.RUNNING
        with pytest.raises(ValueError):
            AgentLifecycle("sleeping")


class TestAgentStatus:
    """Tests for the mutable status overlay."""

    def test_defaults(self):
        """A fresh status is pending with no activity, progress or turns."""
        status = AgentStatus()
        assert status.state is AgentLifecycle.PENDING
        assert status.activity == ""
        assert status.progress == ""
        assert status.turns == 0

    def test_fields_are_mutable(self):
        """Overlay fields are updated in place."""
        status = AgentStatus()
        status.state = AgentLifecycle.RUNNING
        status.turns += 2
        assert status.state is AgentLifecycle.RUNNING
        assert status.turns == 2


class TestGraphNode:
    """Tests for GraphNode dataclass."""

    def test_root_node(self):
        """A node without parents is a root and not a merge."""
        node = GraphNode("1", "Initial commit")
        assert node.is_root
        assert not node.is_merge
        assert node.parents == ()

    def test_merge_node(self):
        """A node with two parents is a merge."""
        node = GraphNode("m", "Merge", ("a", "b"), sequence=3)
        assert node.is_merge
        assert not node.is_root
        assert node.sequence == 3

    def test_graph_node_immutable(self):
        """GraphNode should be immutable (frozen)."""
        node = GraphNode("1", "Initial commit")
        with pytest.raises(AttributeError):
            node.label = "changed"

    def test_status_ignored_in_equality(self):
        """Two nodes with the same topology compare equal regardless of status."""
        first = GraphNode("1", "x", status=AgentStatus(turns=1))
        second = GraphNode("1", "x", status=None)
        assert first == second


class TestLayoutRow:
    """Tests for derived lane sets on a row."""

    def test_passing_excludes_node_and_merged_columns(self):
        """Lanes that merge or hold the node are not drawn as passing."""
        row = LayoutRow("e", 4, column=0, incoming=(0, 1, 2), merged=(2,))
        assert row.passing == (1,)

    def test_continuing_excludes_branched_columns(self):
        """Freshly branched lanes are drawn by the branch connector only."""
        row = LayoutRow("r", 0, column=0, outgoing=(0, 1, 2), branched=(1, 2))
        assert row.continuing == (0,)


class TestLayout:
    """Tests for Layout lookups."""

    def test_position_lookup(self):
        """position() returns the row record for a node id."""
        row = LayoutRow("a", 0, 0)
        layout = Layout(rows=(row,), stats=GraphStats(1, 0, 0))
        assert layout.position("a") is row

    def test_position_unknown_raises(self):
        """position() raises NotFoundError for an id with no row."""
        with pytest.raises(NotFoundError):
            Layout().position("missing")

    def test_width(self):
        """Width is max_column + 1, or zero for an empty layout."""
        assert Layout().width == 0
        layout = Layout(rows=(LayoutRow("a", 0, 0),), stats=GraphStats(1, 0, 2))
        assert layout.width == 3


class TestExceptions:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "error",
        [
            DuplicateIdError("a"),
            UnknownParentError("b", ("x",)),
            NotFoundError("c"),
            CycleDetectedError(("a", "b")),
            InvalidTransitionError(
                "d", AgentLifecycle.COMPLETED, AgentLifecycle.RUNNING
            ),
        ],
    )
    def test_all_errors_are_graph_errors(self, error):
        """Every domain failure can be caught as GraphError."""
        assert isinstance(error, GraphError)

    def test_duplicate_message(self):
        """DuplicateIdError names the offending id."""
        error = DuplicateIdError("n1")
        assert str(error) == "Node already exists: n1"
        assert error.node_id == "n1"

    def test_unknown_parent_lists_all_missing(self):
        """UnknownParentError lists every unresolved parent."""
        error = UnknownParentError("n1", ("x", "y"))
        assert str(error) == "Node 'n1' references unknown parent(s): x, y"
        assert error.missing == ("x", "y")

    def test_not_found_is_key_error(self):
        """NotFoundError doubles as KeyError with a readable message."""
        error = NotFoundError("ghost")
        assert isinstance(error, KeyError)
        assert str(error) == "Node not found: ghost"

    def test_invalid_transition_message(self):
        """InvalidTransitionError names both states."""
        error = InvalidTransitionError(
            "w1", AgentLifecycle.FAILED, AgentLifecycle.RUNNING
        )
        assert "failed" in str(error)
        assert "running" in str(error)
        assert error.current is AgentLifecycle.FAILED
