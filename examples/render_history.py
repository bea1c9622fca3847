#!/usr/bin/env python3
"""
Render a graph history stored as JSON.

The file is either a list of node entries or {"name": ..., "nodes": [...]}.
Entries carry "id", optional "label" and "parents", and optionally agent
status fields ("state", "activity", "progress", "turns"); any status field
switches the output to the agent overlay.

Usage:
    python -m examples.render_history examples/data/release.json
    python -m examples.render_history history.json --style ascii --no-colors
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from examples.base import (
    ConfigurationError,
    build_options,
    common_options,
    load_history,
    print_error,
    print_graph,
    print_header,
    print_stats,
    setup_logging,
)

from lanegraph import AgentGraphRenderer, GitGraphRenderer, GraphError, RenderOptions


def build_renderer(history: dict[str, Any], options: RenderOptions) -> GitGraphRenderer:
    """Create the renderer a loaded history asks for and populate it."""
    if not history["agents"]:
        graph = GitGraphRenderer(options)
        for node in history["nodes"]:
            graph.add_node(node["id"], node["label"], node["parents"])
        return graph

    agents = AgentGraphRenderer(options)
    for node in history["nodes"]:
        agents.add_agent(
            node["id"],
            node["label"],
            state=node.get("state", "pending"),
            parents=node["parents"],
            current_activity=node.get("activity", ""),
            progress=node.get("progress", ""),
            turns=node.get("turns", 0),
        )
    return agents


@click.command()
@click.argument("history_file", type=click.Path(exists=True, dir_okay=False))
@common_options
def main(
    history_file: str,
    style: str,
    compact: bool,
    max_label_width: int,
    no_labels: bool,
    colors: bool,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Render HISTORY_FILE as a git-style graph."""
    logger = setup_logging("render_history", log_file, verbose)
    options = build_options(style, compact, max_label_width, no_labels, colors)

    try:
        logger.debug(f"Loading history from: {history_file}")
        history = load_history(Path(history_file))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print_error(str(e), "Check that the history file is valid JSON.")
        sys.exit(1)

    try:
        graph = build_renderer(history, options)
        graph.build_graph()
    except (GraphError, ValueError) as e:
        logger.error(f"Invalid history: {type(e).__name__}: {e}")
        print_error(str(e), "Declare every parent before its children.")
        sys.exit(1)

    print_header(history["name"], f"{len(history['nodes'])} nodes")
    print_graph(graph)
    print_stats(graph.get_stats())


if __name__ == "__main__":
    main()
