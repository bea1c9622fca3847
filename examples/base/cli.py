"""Click CLI utilities for lanegraph examples."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click

from lanegraph import RenderOptions

F = TypeVar("F", bound=Callable[..., Any])


def common_options(func: F) -> F:
    """
    Decorator adding common rendering options to a click command.

    Options added:
        --style: ascii or unicode glyphs
        --compact: Omit connector lines
        --max-label-width: Truncate labels beyond this width
        --no-labels: Render the graph only
        --colors/--no-colors: Colour lanes and states
        --log-file: Path to log file
        -v/--verbose: Enable verbose logging
    """

    @click.option(
        "--style",
        type=click.Choice(["ascii", "unicode"]),
        default="unicode",
        help="Glyph style (default: unicode)",
    )
    @click.option(
        "--compact",
        is_flag=True,
        help="Omit branch and merge connector lines",
    )
    @click.option(
        "--max-label-width",
        default=40,
        type=click.IntRange(min=1),
        help="Truncate labels wider than this (default: 40)",
    )
    @click.option(
        "--no-labels",
        is_flag=True,
        help="Render the graph without labels",
    )
    @click.option(
        "--colors/--no-colors",
        default=True,
        help="Colour lanes and agent states (default: on)",
    )
    @click.option(
        "--log-file",
        default=None,
        type=click.Path(),
        help="Path to log file",
    )
    @click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose (DEBUG) logging to console",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def build_options(
    style: str,
    compact: bool,
    max_label_width: int,
    no_labels: bool,
    colors: bool,
) -> RenderOptions:
    """Translate common CLI options into RenderOptions."""
    return RenderOptions(
        style=style,  # type: ignore[arg-type]
        compact=compact,
        max_label_width=max_label_width,
        show_labels=not no_labels,
        colors=colors,
    )
