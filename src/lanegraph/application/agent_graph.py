"""
AgentGraphRenderer: live status overlay for multi-agent workflows.

Same graph and layout as GitGraphRenderer; every node additionally
carries an AgentStatus (state, activity, progress, turns). Status updates
are O(1) field writes that never invalidate the layout; only add_agent
changes topology.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from lanegraph.application.git_graph import GitGraphRenderer
from lanegraph.domain.exceptions import InvalidTransitionError
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.models import AgentLifecycle, AgentStatus, GraphNode
from lanegraph.visualization.options import RenderOptions
from lanegraph.visualization.text_renderer import StatusTextRenderer, TextRenderer


class AgentGraphRenderer(GitGraphRenderer):
    """
    Git-style graph of agents with per-agent runtime status.

    Lifecycle is pending -> running -> completed | failed, driven entirely
    by the caller. By default any transition is accepted, including out of
    a terminal state; strict_transitions=True rejects those instead.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        store: GraphStoreInterface | None = None,
        strict_transitions: bool = False,
        **overrides: Any,
    ):
        """
        Args:
            options: Render configuration (defaults to RenderOptions())
            store: Node store (creates InMemory if None)
            strict_transitions: Reject state changes out of completed/failed
            **overrides: Individual RenderOptions fields
        """
        super().__init__(options=options, store=store, **overrides)
        self._strict = strict_transitions

    def _make_renderer(self, options: RenderOptions) -> TextRenderer:
        return StatusTextRenderer(options)

    def add_agent(
        self,
        agent_id: str,
        name: str,
        state: AgentLifecycle | str = AgentLifecycle.PENDING,
        parent_id: str | None = None,
        parents: Sequence[str] = (),
        current_activity: str = "",
        progress: str = "",
        turns: int = 0,
    ) -> GraphNode:
        """
        Add an agent node with its initial status.

        Args:
            agent_id: Unique identifier
            name: Display name
            state: Initial lifecycle state
            parent_id: Spawning agent, if any
            parents: Further parents (parent_id, when given, comes first)
            current_activity: Initial activity text
            progress: Initial progress text
            turns: Initial turn count

        Raises:
            DuplicateIdError: If agent_id already exists
            UnknownParentError: If a parent has not been added yet
            ValueError: If state is unknown or turns is negative
        """
        if turns < 0:
            raise ValueError(f"Turn count cannot be negative (got {turns})")
        all_parents = ([parent_id] if parent_id else []) + list(parents)
        status = AgentStatus(
            state=AgentLifecycle(state),
            activity=current_activity,
            progress=progress,
            turns=turns,
        )
        return self._store.add_node(agent_id, name, all_parents, status=status)

    def get_agent(self, agent_id: str) -> GraphNode:
        return self._store.get_node(agent_id)

    def update_agent_state(self, agent_id: str, state: AgentLifecycle | str) -> None:
        """
        Set an agent's lifecycle state.

        Raises:
            NotFoundError: If agent_id does not exist
            ValueError: If state is not a lifecycle value
            InvalidTransitionError: Strict mode only, when leaving a terminal state
        """
        requested = AgentLifecycle(state)
        if self._strict:
            current = self._current_state(agent_id)
            if current.is_terminal and requested is not current:
                raise InvalidTransitionError(agent_id, current, requested)
        self._store.update_state(agent_id, requested)

    def update_agent_activity(self, agent_id: str, activity: str) -> None:
        self._store.update_activity(agent_id, activity)

    def update_agent_progress(self, agent_id: str, progress: str) -> None:
        self._store.update_progress(agent_id, progress)

    def increment_agent_turns(self, agent_id: str, count: int = 1) -> int:
        """Add count conversation rounds; returns the new total."""
        return self._store.increment_turns(agent_id, count)

    def _current_state(self, agent_id: str) -> AgentLifecycle:
        status = self._store.get_node(agent_id).status
        return status.state if status else AgentLifecycle.PENDING
