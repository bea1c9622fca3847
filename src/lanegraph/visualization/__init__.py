"""
Visualization module for lanegraph layouts.

Renders computed layouts as ascii or unicode text, plain or as rich Text.
"""

from lanegraph.visualization.charset import ASCII_CHARS, UNICODE_CHARS, CharSet
from lanegraph.visualization.options import RenderOptions
from lanegraph.visualization.text_renderer import (
    StatusTextRenderer,
    TextRenderer,
    truncate_label,
)

__all__ = [
    "ASCII_CHARS",
    "UNICODE_CHARS",
    "CharSet",
    "RenderOptions",
    "StatusTextRenderer",
    "TextRenderer",
    "truncate_label",
]
