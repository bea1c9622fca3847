#!/usr/bin/env python3
"""
Agent Workflow Tracker Example.

Shows how to integrate AgentGraphRenderer into an agent workflow to get a
live view of multi-agent execution: a coordinator spawns reviewers, each
reviewer reports activity, progress and turns, and the display is
re-rendered after every update.

Usage:
    python -m examples.agent_workflow_tracker
    python -m examples.agent_workflow_tracker --delay 0.3 --style ascii
    python -m examples.agent_workflow_tracker --fail-stage security-002

Integration tips:
    - call update_agent_activity() when an agent changes task
    - use update_agent_progress() for quantifiable progress
    - call increment_agent_turns() after each conversation round
    - set state to completed/failed when an agent finishes
    - call build_graph() + render_ascii() to refresh the display
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass

import click
from examples.base import (
    build_options,
    common_options,
    print_error,
    print_graph,
    print_header,
    print_success,
    setup_logging,
)

from lanegraph import AgentGraphRenderer, AgentLifecycle, GraphError


@dataclass(frozen=True)
class Stage:
    """One simulated reviewer agent."""

    agent_id: str
    name: str
    activities: tuple[str, ...]


STAGES = (
    Stage(
        "analyzer-001",
        "Code Analyzer",
        (
            "Scanning source files",
            "Analyzing code quality metrics",
            "Identifying potential issues",
            "Generating analysis report",
        ),
    ),
    Stage(
        "security-002",
        "Security Reviewer",
        (
            "Checking for security vulnerabilities",
            "Reviewing authentication patterns",
            "Analyzing data handling",
            "Security audit complete",
        ),
    ),
    Stage(
        "perf-003",
        "Performance Analyzer",
        (
            "Analyzing performance bottlenecks",
            "Checking memory usage patterns",
            "Reviewing algorithmic complexity",
        ),
    ),
    Stage(
        "docs-004",
        "Documentation Reviewer",
        (
            "Checking documentation completeness",
            "Validating code comments",
        ),
    ),
)


def run_stage(
    graph: AgentGraphRenderer,
    stage: Stage,
    parent_id: str,
    delay: float,
    fail: bool,
    logger: logging.Logger,
) -> bool:
    """Simulate one agent; returns False when the agent fails."""
    total = len(stage.activities)
    graph.add_agent(
        stage.agent_id,
        stage.name,
        state=AgentLifecycle.RUNNING,
        parent_id=parent_id,
        current_activity=stage.activities[0],
        progress=f"0/{total} tasks",
    )
    graph.build_graph()
    print_graph(graph, f"{stage.name} started:")

    for i, activity in enumerate(stage.activities, 1):
        time.sleep(delay)
        graph.update_agent_activity(stage.agent_id, activity)
        graph.update_agent_progress(stage.agent_id, f"{i}/{total} tasks")
        turns = graph.increment_agent_turns(stage.agent_id)
        logger.debug(f"{stage.agent_id}: turn {turns}: {activity}")

        if fail and i == total // 2 + 1:
            graph.update_agent_activity(stage.agent_id, f"Failed while: {activity}")
            graph.update_agent_state(stage.agent_id, AgentLifecycle.FAILED)
            logger.warning(f"{stage.agent_id} failed")
            print_graph(graph, f"{stage.name} failed:")
            return False

    graph.update_agent_activity(stage.agent_id, "Task completed successfully")
    graph.update_agent_state(stage.agent_id, AgentLifecycle.COMPLETED)
    print_graph(graph, f"{stage.name} completed:")
    return True


def track_workflow(
    graph: AgentGraphRenderer,
    delay: float,
    fail_stage: str | None,
    logger: logging.Logger,
) -> bool:
    """Run every stage under one coordinator; returns overall success."""
    workflow_id = "workflow-coordinator"
    graph.add_agent(
        workflow_id,
        "Code Review Workflow",
        state=AgentLifecycle.RUNNING,
        current_activity="Initializing code review process",
        progress=f"0/{len(STAGES)} stages",
    )
    print_graph(graph, "Workflow started:")

    completed = 0
    for stage in STAGES:
        if run_stage(
            graph, stage, workflow_id, delay, stage.agent_id == fail_stage, logger
        ):
            completed += 1
        graph.update_agent_progress(workflow_id, f"{completed}/{len(STAGES)} stages")

    # Fan-in: a summary agent merges every reviewer back into one lane
    graph.add_agent(
        "summary-005",
        "Review Summary",
        state=AgentLifecycle.COMPLETED,
        parents=[stage.agent_id for stage in STAGES],
        progress=f"{completed}/{len(STAGES)} reviews",
    )

    succeeded = completed == len(STAGES)
    graph.update_agent_activity(
        workflow_id,
        "All reviews completed successfully" if succeeded else "Review finished with failures",
    )
    graph.update_agent_state(
        workflow_id, AgentLifecycle.COMPLETED if succeeded else AgentLifecycle.FAILED
    )
    return succeeded


@click.command()
@common_options
@click.option(
    "--delay",
    default=0.0,
    type=click.FloatRange(min=0.0),
    help="Seconds to wait between simulated activities (default: 0)",
)
@click.option(
    "--fail-stage",
    type=click.Choice([stage.agent_id for stage in STAGES]),
    default=None,
    help="Make one stage fail halfway through",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Reject state changes out of completed/failed",
)
def main(
    style: str,
    compact: bool,
    max_label_width: int,
    no_labels: bool,
    colors: bool,
    log_file: str | None,
    verbose: bool,
    delay: float,
    fail_stage: str | None,
    strict: bool,
) -> None:
    """Agent workflow tracker with live status overlay."""
    logger = setup_logging("agent_workflow_tracker", log_file, verbose)
    options = build_options(style, compact, max_label_width, no_labels, colors)

    print_header("Agent Workflow Tracker")
    graph = AgentGraphRenderer(options, strict_transitions=strict)

    try:
        succeeded = track_workflow(graph, delay, fail_stage, logger)
    except GraphError as e:
        logger.error(f"Tracker error: {type(e).__name__}: {e}")
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        click.echo("\n\nInterrupted by user.")
        sys.exit(130)

    print_graph(graph, "Final workflow status:")
    if succeeded:
        print_success("Workflow complete")
        sys.exit(0)
    print_error("Workflow finished with failures", "Re-run without --fail-stage.")
    sys.exit(1)


if __name__ == "__main__":
    main()
