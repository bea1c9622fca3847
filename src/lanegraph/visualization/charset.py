"""
Glyph tables for the ascii and unicode styles.

Every cell of a connector line collects the directions its strokes leave
through (up, down, left, right); the table turns that set into a glyph so
corners, tees and crossings always agree with each other.
"""

from dataclasses import dataclass, field

from lanegraph.domain.models import AgentLifecycle

UP = 1
DOWN = 2
LEFT = 4
RIGHT = 8

VERTICAL = UP | DOWN
HORIZONTAL = LEFT | RIGHT


@dataclass(frozen=True)
class CharSet:
    """Glyphs for one output style."""

    name: str
    commit: str
    ellipsis: str
    activity_prefix: str
    strokes: dict[int, str] = field(hash=False)
    states: dict[AgentLifecycle, str] = field(hash=False)

    def stroke(self, directions: int) -> str:
        if not directions:
            return " "
        return self.strokes[directions]


ASCII_CHARS = CharSet(
    name="ascii",
    commit="*",
    ellipsis="...",
    activity_prefix=">",
    strokes={
        UP: "|",
        DOWN: "|",
        VERTICAL: "|",
        LEFT: "-",
        RIGHT: "-",
        HORIZONTAL: "-",
        DOWN | RIGHT: "/",
        UP | LEFT: "/",
        DOWN | LEFT: "\\",
        UP | RIGHT: "\\",
        VERTICAL | LEFT: "|",
        VERTICAL | RIGHT: "|",
        HORIZONTAL | UP: "+",
        HORIZONTAL | DOWN: "+",
        VERTICAL | HORIZONTAL: "+",
    },
    states={
        AgentLifecycle.PENDING: "[ ]",
        AgentLifecycle.RUNNING: "[~]",
        AgentLifecycle.COMPLETED: "[+]",
        AgentLifecycle.FAILED: "[x]",
    },
)

UNICODE_CHARS = CharSet(
    name="unicode",
    commit="●",
    ellipsis="…",
    activity_prefix="↳",
    strokes={
        UP: "│",
        DOWN: "│",
        VERTICAL: "│",
        LEFT: "─",
        RIGHT: "─",
        HORIZONTAL: "─",
        DOWN | RIGHT: "╭",
        DOWN | LEFT: "╮",
        UP | RIGHT: "╰",
        UP | LEFT: "╯",
        VERTICAL | RIGHT: "├",
        VERTICAL | LEFT: "┤",
        HORIZONTAL | UP: "┴",
        HORIZONTAL | DOWN: "┬",
        VERTICAL | HORIZONTAL: "┼",
    },
    states={
        AgentLifecycle.PENDING: "○",
        AgentLifecycle.RUNNING: "◐",
        AgentLifecycle.COMPLETED: "✓",
        AgentLifecycle.FAILED: "✗",
    },
)

CHARSETS = {"ascii": ASCII_CHARS, "unicode": UNICODE_CHARS}


def get_charset(style: str) -> CharSet:
    return CHARSETS[style]
