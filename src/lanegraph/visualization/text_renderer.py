"""
Text renderer for computed layouts.

Turns a Layout plus its node snapshot into git-log-style text. Every row
emits up to four kinds of line:

    merge connector   lanes of non-first parents converge on the node
    node line         marker, passing lanes and the label
    detail lines      overlay activity (StatusTextRenderer only)
    branch connector  lanes open towards the node's later children

Columns sit two cells apart; gap cells only ever carry horizontal runs.
Rendering is pure: it reads the layout and nodes and never mutates them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.cells import cell_len, get_character_cell_size
from rich.text import Text

from lanegraph.domain.models import AgentLifecycle, GraphNode, Layout, LayoutRow
from lanegraph.visualization.charset import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    VERTICAL,
    CharSet,
    get_charset,
)
from lanegraph.visualization.options import RenderOptions

EMPTY_GRAPH = "Empty graph"
LABEL_GAP = "  "

LANE_PALETTE = ("red", "green", "yellow", "blue", "magenta", "cyan")

STATE_STYLES = {
    AgentLifecycle.PENDING: "dim",
    AgentLifecycle.RUNNING: "bold yellow",
    AgentLifecycle.COMPLETED: "bold green",
    AgentLifecycle.FAILED: "bold red",
}

# (text, style) pairs; style is "" when unstyled.
Span = tuple[str, str]
Line = list[Span]


def truncate_label(label: str, max_width: int, ellipsis: str = "...") -> str:
    """Fit label into max_width terminal cells on a single line.

    Newlines collapse to spaces. Labels that are too wide are cut and end
    with the ellipsis marker; if even the marker does not fit, the label
    is cut hard to max_width cells.
    """
    label = " ".join(label.splitlines())
    if cell_len(label) <= max_width:
        return label

    budget = max_width - cell_len(ellipsis)
    marker = ellipsis
    if budget < 0:
        budget, marker = max_width, ""

    kept: list[str] = []
    used = 0
    for char in label:
        width = get_character_cell_size(char)
        if used + width > budget:
            break
        kept.append(char)
        used += width
    return "".join(kept) + marker


class TextRenderer:
    """Render a layout as plain text or as a rich Text."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.chars: CharSet = get_charset(self.options.style)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def render(self, layout: Layout, nodes: Iterable[GraphNode]) -> str:
        lines = self._lines(layout, nodes)
        if lines is None:
            return EMPTY_GRAPH
        return "\n".join("".join(text for text, _ in line) for line in lines)

    def render_text(self, layout: Layout, nodes: Iterable[GraphNode]) -> Text:
        lines = self._lines(layout, nodes)
        if lines is None:
            return Text(EMPTY_GRAPH, style="dim" if self.options.colors else "")

        result = Text()
        for index, line in enumerate(lines):
            if index:
                result.append("\n")
            for text, style in line:
                result.append(text, style=style if self.options.colors else "")
        return result

    # -------------------------------------------------------------------------
    # Line assembly
    # -------------------------------------------------------------------------

    def _lines(self, layout: Layout, nodes: Iterable[GraphNode]) -> list[Line] | None:
        if not layout.rows:
            return None

        by_id = {node.node_id: node for node in nodes}
        width = layout.width
        lines: list[Line] = []

        for row in layout.rows:
            node = by_id[row.node_id]
            if row.merged and not self.options.compact:
                lines.append(self._merge_line(row, width))
            lines.append(self._node_line(row, node, width))
            for detail in self._detail_lines(node):
                lines.append(self._lanes_line(row.continuing, width) + detail)
            if row.branched and not self.options.compact:
                lines.append(self._branch_line(row, width))

        return lines

    def _node_line(self, row: LayoutRow, node: GraphNode, width: int) -> Line:
        cells = [0] * _grid_size(width)
        for col in row.passing:
            cells[2 * col] |= VERTICAL

        line: Line = []
        for pos, directions in enumerate(cells):
            if pos == 2 * row.column:
                line.append((self.chars.commit, "bold"))
            else:
                line.append(
                    (self.chars.stroke(directions), self._lane_style(pos, directions))
                )

        tail = self._label(node) if self.options.show_labels else self._badge(node)
        if tail:
            line.append((LABEL_GAP, ""))
            line.extend(tail)
        else:
            while line and line[-1] == (" ", ""):
                line.pop()
        return line

    def _merge_line(self, row: LayoutRow, width: int) -> Line:
        verticals = [col for col in row.incoming if col not in row.merged]
        return self._connector(verticals, row.column, row.merged, UP, width)

    def _branch_line(self, row: LayoutRow, width: int) -> Line:
        return self._connector(row.continuing, row.column, row.branched, DOWN, width)

    def _lanes_line(self, verticals: Sequence[int], width: int) -> Line:
        """Verticals only, padded to the graph width plus the label gap."""
        cells = [0] * _grid_size(width)
        for col in verticals:
            cells[2 * col] |= VERTICAL
        line = self._cells_to_line(cells, strip=False)
        line.append((LABEL_GAP, ""))
        return line

    def _connector(
        self,
        verticals: Iterable[int],
        node_column: int,
        ends: Iterable[int],
        end_stroke: int,
        width: int,
    ) -> Line:
        """Draw lanes joining (UP) or leaving (DOWN) the node column.

        Each end column gets a corner pointing towards the node column;
        the cells in between carry a horizontal run, crossing any vertical
        lane they pass.
        """
        cells = [0] * _grid_size(width)
        for col in verticals:
            cells[2 * col] |= VERTICAL

        anchor = 2 * node_column
        for col in ends:
            end = 2 * col
            toward_node = RIGHT if end < anchor else LEFT
            cells[end] |= end_stroke | toward_node
            cells[anchor] |= LEFT if end < anchor else RIGHT
            for pos in range(min(end, anchor) + 1, max(end, anchor)):
                cells[pos] |= LEFT | RIGHT

        return self._cells_to_line(cells, strip=True)

    def _cells_to_line(self, cells: list[int], strip: bool) -> Line:
        if strip:
            while cells and not cells[-1]:
                cells.pop()
        return [
            (self.chars.stroke(directions), self._lane_style(pos, directions))
            for pos, directions in enumerate(cells)
        ]

    def _lane_style(self, pos: int, directions: int) -> str:
        if not directions:
            return ""
        # Gap cells take the colour of the lane to their right.
        return LANE_PALETTE[((pos + 1) // 2) % len(LANE_PALETTE)]

    # -------------------------------------------------------------------------
    # Labels (overridden by the status overlay)
    # -------------------------------------------------------------------------

    def _label(self, node: GraphNode) -> Line:
        return [(self._fit(node.label), "")]

    def _badge(self, node: GraphNode) -> Line:
        """Spans kept beside the marker when labels are hidden."""
        return []

    def _detail_lines(self, node: GraphNode) -> list[Line]:
        return []

    def _fit(self, text: str) -> str:
        return truncate_label(text, self.options.max_label_width, self.chars.ellipsis)


class StatusTextRenderer(TextRenderer):
    """Renderer for nodes carrying an AgentStatus overlay.

    Node line: ``<graph>  <state glyph> <label> [progress] (turns: N)``
    followed by one detail line with the current activity, if any.
    With labels hidden the state glyph still follows the graph.
    Nodes without an overlay render as pending.
    """

    def _badge(self, node: GraphNode) -> Line:
        state = node.status.state if node.status else AgentLifecycle.PENDING
        return [(self.chars.states[state], STATE_STYLES[state])]

    def _label(self, node: GraphNode) -> Line:
        status = node.status
        state = status.state if status else AgentLifecycle.PENDING

        line: Line = [
            *self._badge(node),
            (" ", ""),
            (self._fit(node.label), "bold" if state is AgentLifecycle.RUNNING else ""),
        ]
        if status and status.progress:
            line.append((f" [{self._fit(status.progress)}]", "cyan"))
        if status and status.turns > 0:
            line.append((f" (turns: {status.turns})", "dim"))
        return line

    def _detail_lines(self, node: GraphNode) -> list[Line]:
        if not self.options.show_labels:
            return []
        status = node.status
        if not status or not status.activity:
            return []
        # Indent past the state glyph so the activity lines up with the label.
        indent = " " * (cell_len(self.chars.states[status.state]) + 1)
        return [
            [
                (indent, ""),
                (f"{self.chars.activity_prefix} {self._fit(status.activity)}", "dim"),
            ]
        ]


def _grid_size(width: int) -> int:
    return max(2 * width - 1, 1)
