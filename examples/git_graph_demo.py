#!/usr/bin/env python3
"""
Git-style Graph Renderer Demo.

Renders the hand-authored histories in examples/histories.py, similar to
what you'd see with `git log --graph`, then shows how the engine reports
an invalid declaration.

Usage:
    python -m examples.git_graph_demo
    python -m examples.git_graph_demo --style ascii
    python -m examples.git_graph_demo --only "Git Flow Pattern" --compact
"""

from __future__ import annotations

import logging
import sys

import click
from examples.base import (
    build_options,
    common_options,
    console,
    print_error,
    print_graph,
    print_header,
    print_stats,
    setup_logging,
)
from examples.histories import HISTORIES, Entry

from lanegraph import GitGraphRenderer, GraphError, RenderOptions


def build_history(entries: list[Entry], options: RenderOptions) -> GitGraphRenderer:
    """Feed a history into a fresh renderer, in declaration order."""
    graph = GitGraphRenderer(options)
    for node_id, label, parents in entries:
        graph.add_node(node_id, label, parents)
    return graph


def run_demo(
    title: str,
    entries: list[Entry],
    options: RenderOptions,
    logger: logging.Logger,
) -> bool:
    """Render one history; print the error and stop this step on failure."""
    print_header(title)
    try:
        graph = build_history(entries, options)
        graph.build_graph()
    except GraphError as e:
        logger.error(f"{title}: {type(e).__name__}: {e}")
        print_error(str(e), "Declare every parent before its children.")
        return False

    print_graph(graph)
    print_stats(graph.get_stats())
    logger.debug(f"{title}: {graph.get_stats()}")
    return True


def demo_invalid_parent(options: RenderOptions, logger: logging.Logger) -> bool:
    """A node naming an unknown parent is rejected and the graph is unchanged."""
    print_header("Invalid Declaration", "a1 references a parent that does not exist")
    graph = GitGraphRenderer(options)
    graph.add_node("m1", "Main 1")
    try:
        graph.add_node("a1", "Branch A: Start", parents=["zzz"])
    except GraphError as e:
        logger.info(f"Rejected as expected: {e}")
        print_error(str(e))
    print_graph(graph)
    return graph.get_stats().node_count == 1


@click.command()
@common_options
@click.option(
    "--only",
    "only",
    type=click.Choice(sorted(HISTORIES)),
    default=None,
    help="Render a single named history",
)
def main(
    style: str,
    compact: bool,
    max_label_width: int,
    no_labels: bool,
    colors: bool,
    log_file: str | None,
    verbose: bool,
    only: str | None,
) -> None:
    """Git-style graph renderer demonstrations."""
    logger = setup_logging("git_graph_demo", log_file, verbose)
    options = build_options(style, compact, max_label_width, no_labels, colors)
    logger.debug(f"Render options: {options!r}")

    selected = {only: HISTORIES[only]} if only else HISTORIES
    ok = all([run_demo(title, entries, options, logger) for title, entries in selected.items()])
    if not only:
        ok = demo_invalid_parent(options, logger) and ok

    console.print("\n[bold green]Demos complete![/bold green]")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
