"""
GitGraphRenderer: graph construction, layout caching and rendering.

Owns a graph store and a render configuration. Layout is derived state:
it is recomputed whenever the store revision moves and reused otherwise.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich.text import Text

from lanegraph.domain.exceptions import CycleDetectedError
from lanegraph.domain.interfaces import GraphStoreInterface
from lanegraph.domain.layout import compute_layout
from lanegraph.domain.models import GraphNode, GraphStats, Layout
from lanegraph.visualization.options import RenderOptions
from lanegraph.visualization.text_renderer import TextRenderer


class GitGraphRenderer:
    """
    Git-log style renderer for directed acyclic graphs.

    Callers add nodes (parents first), then render. Each render reflects
    the store exactly as it is at call time; there is no background work.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        store: GraphStoreInterface | None = None,
        **overrides: Any,
    ):
        """
        Args:
            options: Render configuration (defaults to RenderOptions())
            store: Node store (creates InMemory if None)
            **overrides: Individual RenderOptions fields, e.g. style="unicode"
        """
        # Lazy import to avoid circular dependency
        if store is None:
            from lanegraph.infrastructure.persistence import InMemoryGraphStore

            store = InMemoryGraphStore()

        self._store = store
        self._options = (options or RenderOptions()).merged(**overrides)
        self._renderer = self._make_renderer(self._options)
        self._layout: Layout | None = None

    @property
    def store(self) -> GraphStoreInterface:
        return self._store

    @property
    def options(self) -> RenderOptions:
        return self._options

    # -------------------------------------------------------------------------
    # Graph mutation
    # -------------------------------------------------------------------------

    def add_node(
        self, node_id: str, label: str, parents: Sequence[str] = ()
    ) -> GraphNode:
        """
        Add a node below its parents.

        Args:
            node_id: Unique identifier
            label: Display label
            parents: Existing node ids; the first parent keeps the lane

        Raises:
            DuplicateIdError: If node_id already exists
            UnknownParentError: If a parent has not been added yet
        """
        return self._store.add_node(node_id, label, parents)

    def get_node(self, node_id: str) -> GraphNode:
        return self._store.get_node(node_id)

    def clear(self) -> None:
        """Remove every node; the next layout is empty."""
        self._store.clear()
        self._layout = None

    # -------------------------------------------------------------------------
    # Layout and rendering
    # -------------------------------------------------------------------------

    def build_graph(self) -> Layout:
        """Recompute the layout from the current store contents."""
        self._layout = compute_layout(self._store.nodes(), self._store.revision)
        return self._layout

    def layout(self) -> Layout:
        """Return the cached layout, rebuilding it if the store has changed."""
        if self._layout is None or self._layout.revision != self._store.revision:
            return self.build_graph()
        return self._layout

    def get_stats(self) -> GraphStats:
        return self.layout().stats

    def render(self) -> str:
        return self._renderer.render(self.layout(), self._store.nodes())

    def render_ascii(self) -> str:
        """Alias of render(); the output style follows options.style."""
        return self.render()

    def render_text(self) -> Text:
        """Render as a rich Text, styled when options.colors is set."""
        return self._renderer.render_text(self.layout(), self._store.nodes())

    def __str__(self) -> str:
        return self.render()

    def _make_renderer(self, options: RenderOptions) -> TextRenderer:
        return TextRenderer(options)


def create_graph_from_tree(
    tree: Mapping[str, Sequence[str]],
    labels: Mapping[str, str] | None = None,
    options: RenderOptions | None = None,
) -> GitGraphRenderer:
    """Build a renderer from a {parent: [children]} mapping.

    Nodes that never appear as a child are roots. A child listed under
    several parents becomes a merge, parents in mapping order. Nodes are
    added breadth-first so every parent exists before its children.

    Args:
        tree: Parent id -> child ids
        labels: Optional display labels (defaults to the id)
        options: Render configuration for the new renderer

    Raises:
        CycleDetectedError: If the mapping contains a cycle
    """
    labels = labels or {}
    parents_of: dict[str, list[str]] = {}
    for parent_id, children in tree.items():
        parents_of.setdefault(parent_id, [])
        for child_id in children:
            parents_of.setdefault(child_id, [])
            if parent_id not in parents_of[child_id]:
                parents_of[child_id].append(parent_id)

    renderer = GitGraphRenderer(options=options)
    pending = list(parents_of)
    while pending:
        ready = [
            node_id
            for node_id in pending
            if all(renderer.store.has_node(p) for p in parents_of[node_id])
        ]
        if not ready:
            raise CycleDetectedError(tuple(pending))
        for node_id in ready:
            renderer.add_node(node_id, labels.get(node_id, node_id), parents_of[node_id])
        pending = [node_id for node_id in pending if node_id not in ready]

    return renderer
