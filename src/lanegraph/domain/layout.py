"""
Layout engine: row order and lane (column) assignment.

Implements the active-lanes model used by git-style graph renderers,
processed top-down (parents before children):

- Row order is a topological order; insertion sequence breaks ties.
- Every open lane carries exactly one pending edge (parent -> child).
  A node takes the lane carrying the edge from its first parent; lanes
  carrying edges from its other parents close at that row (merge).
- After a node is placed, its first child's edge continues in the node's
  own column and every later child gets a freshly opened lane (branch).
  A node without children frees its column.
- New lanes always take the lowest free column, so max_column stays below
  the peak number of simultaneously open lanes.

The pass is pure and deterministic: identical snapshots produce identical
layouts.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from lanegraph.domain.exceptions import CycleDetectedError, UnknownParentError
from lanegraph.domain.models import GraphNode, GraphStats, Layout, LayoutRow

# A lane either carries one pending (parent_id, child_id) edge or is free.
Lane = tuple[str, str] | None


def compute_layout(nodes: Sequence[GraphNode], revision: int = 0) -> Layout:
    """Compute the row/column layout for a node snapshot.

    Args:
        nodes: Node snapshot, normally store.nodes() in insertion order.
        revision: Store revision to stamp on the result.

    Returns:
        Layout with one LayoutRow per node, in row order.

    Raises:
        UnknownParentError: If a node references an id not in the snapshot.
        CycleDetectedError: If the snapshot is not acyclic.
    """
    if not nodes:
        return Layout(revision=revision)

    order = topological_order(nodes)
    row_of = {node.node_id: row for row, node in enumerate(order)}

    children: dict[str, list[str]] = {node.node_id: [] for node in order}
    for node in order:
        for parent_id in _unique(node.parents):
            children[parent_id].append(node.node_id)
    for kids in children.values():
        kids.sort(key=row_of.__getitem__)

    lanes: list[Lane] = []
    rows: list[LayoutRow] = []
    max_column = 0
    edge_count = 0

    for row, node in enumerate(order):
        incoming = _occupied(lanes)
        parents = _unique(node.parents)
        edge_count += len(parents)

        merged: list[int] = []
        if parents:
            column = lanes.index((parents[0], node.node_id))
            for parent_id in parents[1:]:
                lane = lanes.index((parent_id, node.node_id))
                lanes[lane] = None
                merged.append(lane)
            merged.sort()
        else:
            column = _claim(lanes)

        kids = children[node.node_id]
        branched: list[int] = []
        if kids:
            lanes[column] = (node.node_id, kids[0])
            for child_id in kids[1:]:
                lane = _claim(lanes)
                lanes[lane] = (node.node_id, child_id)
                branched.append(lane)
        else:
            lanes[column] = None

        max_column = max(max_column, len(lanes) - 1)
        _trim(lanes)

        rows.append(
            LayoutRow(
                node_id=node.node_id,
                row=row,
                column=column,
                incoming=incoming,
                merged=tuple(merged),
                outgoing=_occupied(lanes),
                branched=tuple(sorted(branched)),
            )
        )

    stats = GraphStats(
        node_count=len(order),
        edge_count=edge_count,
        max_column=max_column,
    )
    return Layout(rows=tuple(rows), stats=stats, revision=revision)


def topological_order(nodes: Sequence[GraphNode]) -> list[GraphNode]:
    """Order nodes parents-first, breaking ties by insertion sequence.

    Kahn's algorithm over a min-heap keyed by (sequence, node_id).

    Raises:
        UnknownParentError: If a node references an id not in the snapshot.
        CycleDetectedError: If some nodes can never become ready.
    """
    by_id = {node.node_id: node for node in nodes}

    for node in nodes:
        missing = tuple(p for p in _unique(node.parents) if p not in by_id)
        if missing:
            raise UnknownParentError(node.node_id, missing)

    waiting = {node.node_id: len(_unique(node.parents)) for node in nodes}
    dependents: dict[str, list[GraphNode]] = {node.node_id: [] for node in nodes}
    for node in nodes:
        for parent_id in _unique(node.parents):
            dependents[parent_id].append(node)

    ready = [(node.sequence, node.node_id) for node in nodes if not node.parents]
    heapq.heapify(ready)

    order: list[GraphNode] = []
    while ready:
        _, node_id = heapq.heappop(ready)
        order.append(by_id[node_id])
        for child in dependents[node_id]:
            waiting[child.node_id] -= 1
            if waiting[child.node_id] == 0:
                heapq.heappush(ready, (child.sequence, child.node_id))

    if len(order) < len(nodes):
        stuck = tuple(node.node_id for node in nodes if waiting[node.node_id] > 0)
        raise CycleDetectedError(stuck)

    return order


def _unique(parents: Sequence[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(parents))


def _occupied(lanes: list[Lane]) -> tuple[int, ...]:
    return tuple(col for col, lane in enumerate(lanes) if lane is not None)


def _claim(lanes: list[Lane]) -> int:
    """Return the lowest free column, appending a lane if none is free."""
    for col, lane in enumerate(lanes):
        if lane is None:
            return col
    lanes.append(None)
    return len(lanes) - 1


def _trim(lanes: list[Lane]) -> None:
    while lanes and lanes[-1] is None:
        lanes.pop()
