"""Tests for InMemoryGraphStore."""

import pytest

from lanegraph.domain.exceptions import (
    DuplicateIdError,
    NotFoundError,
    UnknownParentError,
)
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.models import AgentLifecycle, AgentStatus
from lanegraph.infrastructure.persistence.memory import InMemoryGraphStore


class TestInMemoryGraphStore:
    """Tests for node storage."""

    def test_implements_interface(self, memory_store):
        """The in-memory store is a GraphStoreInterface."""
        assert isinstance(memory_store, GraphStoreInterface)

    def test_add_and_get(self, memory_store):
        """Added nodes can be fetched by id."""
        memory_store.add_node("1", "Initial commit")
        node = memory_store.get_node("1")
        assert node.node_id == "1"
        assert node.label == "Initial commit"
        assert node.parents == ()

    def test_sequence_follows_insertion(self, memory_store):
        """Each node records its insertion position."""
        memory_store.add_node("a", "a")
        memory_store.add_node("b", "b", ["a"])
        assert [n.sequence for n in memory_store.nodes()] == [0, 1]

    def test_nodes_in_insertion_order(self, memory_store):
        """nodes() returns a snapshot in insertion order."""
        for node_id in ("x", "y", "z"):
            memory_store.add_node(node_id, node_id)
        assert [n.node_id for n in memory_store.nodes()] == ["x", "y", "z"]

    def test_snapshot_is_a_copy(self, memory_store):
        """Mutating the returned list does not touch the store."""
        memory_store.add_node("a", "a")
        snapshot = memory_store.nodes()
        snapshot.clear()
        assert len(memory_store) == 1

    def test_contains_and_len(self, memory_store):
        """Membership and size reflect added nodes."""
        memory_store.add_node("a", "a")
        assert "a" in memory_store
        assert "b" not in memory_store
        assert memory_store.has_node("a")
        assert len(memory_store) == 1

    def test_duplicate_rejected(self, memory_store):
        """Adding an existing id raises DuplicateIdError."""
        memory_store.add_node("a", "first")
        with pytest.raises(DuplicateIdError):
            memory_store.add_node("a", "second")
        assert memory_store.get_node("a").label == "first"
        assert len(memory_store) == 1

    def test_unknown_parent_rejected_without_side_effects(self, memory_store):
        """A missing parent aborts the add and leaves the store unchanged."""
        memory_store.add_node("a", "a")
        revision = memory_store.revision
        with pytest.raises(UnknownParentError) as exc_info:
            memory_store.add_node("b", "b", ["a", "ghost", "phantom"])
        assert exc_info.value.missing == ("ghost", "phantom")
        assert not memory_store.has_node("b")
        assert memory_store.revision == revision

    def test_duplicate_checked_before_parents(self, memory_store):
        """An existing id is reported even when its parents are also bad."""
        memory_store.add_node("a", "a")
        with pytest.raises(DuplicateIdError):
            memory_store.add_node("a", "a", ["ghost"])

    def test_self_parent_rejected(self, memory_store):
        """A node cannot name itself as parent; it does not exist yet."""
        with pytest.raises(UnknownParentError) as exc_info:
            memory_store.add_node("a", "a", ["a"])
        assert exc_info.value.missing == ("a",)
        assert len(memory_store) == 0

    def test_duplicate_parents_deduplicated(self, memory_store):
        """Repeated parent ids are stored once, first occurrence kept."""
        memory_store.add_node("a", "a")
        memory_store.add_node("b", "b")
        node = memory_store.add_node("c", "c", ["b", "a", "b"])
        assert node.parents == ("b", "a")

    def test_get_unknown_raises(self, memory_store):
        """get_node on a missing id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            memory_store.get_node("missing")


class TestRevision:
    """Tests for the change counter used by layout caching."""

    def test_add_bumps_revision(self, memory_store):
        """Each successful add moves the revision."""
        start = memory_store.revision
        memory_store.add_node("a", "a")
        assert memory_store.revision == start + 1

    def test_clear_bumps_revision_and_empties(self, memory_store):
        """clear() removes everything and moves the revision."""
        memory_store.add_node("a", "a")
        revision = memory_store.revision
        memory_store.clear()
        assert len(memory_store) == 0
        assert memory_store.nodes() == []
        assert memory_store.revision > revision

    def test_ids_reusable_after_clear(self, memory_store):
        """Cleared ids can be added again."""
        memory_store.add_node("a", "a")
        memory_store.clear()
        node = memory_store.add_node("a", "again")
        assert node.sequence == 0

    def test_status_updates_keep_revision(self, memory_store):
        """Overlay updates do not change topology."""
        memory_store.add_node("a", "a", status=AgentStatus())
        revision = memory_store.revision
        memory_store.update_state("a", AgentLifecycle.RUNNING)
        memory_store.update_activity("a", "working")
        memory_store.increment_turns("a")
        assert memory_store.revision == revision


class TestStatusOverlay:
    """Tests for per-node status updates."""

    def test_update_fields(self, memory_store):
        """State, activity and progress are written to the node's status."""
        memory_store.add_node("a", "a", status=AgentStatus())
        memory_store.update_state("a", "running")
        memory_store.update_activity("a", "Scanning")
        memory_store.update_progress("a", "1/4")

        status = memory_store.get_node("a").status
        assert status.state is AgentLifecycle.RUNNING
        assert status.activity == "Scanning"
        assert status.progress == "1/4"

    def test_plain_node_gets_default_status(self, memory_store):
        """Updating a node without an overlay attaches a default one."""
        memory_store.add_node("a", "a")
        memory_store.update_activity("a", "busy")

        status = memory_store.get_node("a").status
        assert status.state is AgentLifecycle.PENDING
        assert status.activity == "busy"

    def test_increment_turns_accumulates(self, memory_store):
        """Turns only ever grow; the new total is returned."""
        memory_store.add_node("a", "a")
        assert memory_store.increment_turns("a") == 1
        assert memory_store.increment_turns("a", 3) == 4
        assert memory_store.get_node("a").status.turns == 4

    def test_negative_turns_rejected(self, memory_store):
        """A negative increment raises ValueError."""
        memory_store.add_node("a", "a")
        with pytest.raises(ValueError):
            memory_store.increment_turns("a", -1)

    def test_invalid_state_rejected(self, memory_store):
        """An unknown state string raises ValueError and changes nothing."""
        memory_store.add_node("a", "a", status=AgentStatus())
        with pytest.raises(ValueError):
            memory_store.update_state("a", "sleeping")
        assert memory_store.get_node("a").status.state is AgentLifecycle.PENDING

    @pytest.mark.parametrize(
        "update",
        [
            lambda s: s.update_state("ghost", "running"),
            lambda s: s.update_activity("ghost", "x"),
            lambda s: s.update_progress("ghost", "x"),
            lambda s: s.increment_turns("ghost"),
        ],
    )
    def test_unknown_node_raises(self, memory_store, update):
        """Every overlay update on a missing id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            update(memory_store)

    def test_unknown_node_checked_before_state(self):
        """A missing id is reported even when the state is also invalid."""
        store = InMemoryGraphStore()
        with pytest.raises(NotFoundError):
            store.update_state("ghost", "sleeping")
