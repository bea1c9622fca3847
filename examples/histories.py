"""
Hand-authored commit histories used by the demos.

Each history is a list of (node_id, label, parents) in insertion order;
parents always appear before their children.
"""

from __future__ import annotations

Entry = tuple[str, str, tuple[str, ...]]

LINEAR: list[Entry] = [
    ("1", "Initial commit", ()),
    ("2", "Add feature A", ("1",)),
    ("3", "Fix bug in feature A", ("2",)),
    ("4", "Add documentation", ("3",)),
    ("5", "Update tests", ("4",)),
]

SIMPLE_BRANCH: list[Entry] = [
    ("m1", "Initial commit", ()),
    ("m2", "Main: Add core feature", ("m1",)),
    ("f1", "Feature: Start new feature", ("m1",)),
    ("f2", "Feature: Complete feature", ("f1",)),
    ("m3", "Merge feature into main", ("m2", "f2")),
    ("m4", "Main: Continue development", ("m3",)),
]

COMPLEX_BRANCHING: list[Entry] = [
    ("main1", "Initial release", ()),
    ("main2", "Update README", ("main1",)),
    ("feat1-1", "Feature 1: Start", ("main1",)),
    ("feat1-2", "Feature 1: Add tests", ("feat1-1",)),
    ("feat1-3", "Feature 1: Complete", ("feat1-2",)),
    ("feat2-1", "Feature 2: Config", ("main2",)),
    ("feat2-2", "Feature 2: Implementation", ("feat2-1",)),
    ("hotfix1", "Hotfix: Critical bug", ("main2",)),
    ("main3", "Merge hotfix", ("main2", "hotfix1")),
    ("main4", "Merge feature 1", ("main3", "feat1-3")),
    ("main5", "Merge feature 2", ("main4", "feat2-2")),
    ("main6", "Release v2.0", ("main5",)),
]

PARALLEL_TEAMS: list[Entry] = [
    ("trunk", "Production release v1.0", ()),
    ("teamA-1", "Team A: Database refactor", ("trunk",)),
    ("teamA-2", "Team A: Add migrations", ("teamA-1",)),
    ("teamA-3", "Team A: Performance optimizations", ("teamA-2",)),
    ("teamB-1", "Team B: New API endpoints", ("trunk",)),
    ("teamB-2", "Team B: API documentation", ("teamB-1",)),
    ("teamB-3", "Team B: Integration tests", ("teamB-2",)),
    ("teamC-1", "Team C: UI redesign", ("teamA-1",)),
    ("teamC-2", "Team C: Add dark mode", ("teamC-1",)),
    ("int-1", "Integration: Merge Team A", ("trunk", "teamA-3")),
    ("int-2", "Integration: Merge Team B", ("int-1", "teamB-3")),
    ("int-3", "Integration: Merge Team C", ("int-2", "teamC-2")),
    ("trunk2", "Production release v2.0", ("int-3",)),
]

AGENT_WORKFLOW: list[Entry] = [
    ("coord-1", "Coordinator: Initialize workflow", ()),
    ("coord-2", "Coordinator: Analyze requirements", ("coord-1",)),
    ("agent1-1", "Agent 1: Code analysis", ("coord-2",)),
    ("agent2-1", "Agent 2: Security scan", ("coord-2",)),
    ("agent3-1", "Agent 3: Performance check", ("coord-2",)),
    ("agent1-2", "Agent 1: Generate fixes", ("agent1-1",)),
    ("agent1-3", "Agent 1: Apply patches", ("agent1-2",)),
    ("agent2-2", "Agent 2: Vulnerability found", ("agent2-1",)),
    ("agent2-3", "Agent 2: Apply security patch", ("agent2-2",)),
    ("agent3-2", "Agent 3: Bottleneck detected", ("agent3-1",)),
    ("agent3-3", "Agent 3: Optimize algorithm", ("agent3-2",)),
    ("coord-3", "Coordinator: Collect Agent 1 results", ("coord-2", "agent1-3")),
    ("coord-4", "Coordinator: Collect Agent 2 results", ("coord-3", "agent2-3")),
    ("coord-5", "Coordinator: Collect Agent 3 results", ("coord-4", "agent3-3")),
    ("coord-6", "Coordinator: Workflow complete", ("coord-5",)),
]

GIT_FLOW: list[Entry] = [
    ("master-1", "master: v1.0.0", ()),
    ("develop-1", "develop: Start v1.1", ("master-1",)),
    ("feature1-1", "feature/auth: Start", ("develop-1",)),
    ("feature1-2", "feature/auth: Add OAuth", ("feature1-1",)),
    ("feature1-3", "feature/auth: Complete", ("feature1-2",)),
    ("feature2-1", "feature/api: Start", ("develop-1",)),
    ("feature2-2", "feature/api: REST endpoints", ("feature2-1",)),
    ("develop-2", "develop: Merge auth", ("develop-1", "feature1-3")),
    ("develop-3", "develop: Merge api", ("develop-2", "feature2-2")),
    ("release-1", "release/1.1: Start", ("develop-3",)),
    ("release-2", "release/1.1: Fix bug", ("release-1",)),
    ("release-3", "release/1.1: Ready", ("release-2",)),
    ("master-2", "master: v1.1.0", ("master-1", "release-3")),
    ("develop-4", "develop: Sync from release", ("develop-3", "release-3")),
    ("hotfix-1", "hotfix/1.1.1: Critical fix", ("master-2",)),
    ("master-3", "master: v1.1.1", ("master-2", "hotfix-1")),
    ("develop-5", "develop: Merge hotfix", ("develop-4", "hotfix-1")),
]

HISTORIES: dict[str, list[Entry]] = {
    "Linear History": LINEAR,
    "Simple Branch and Merge": SIMPLE_BRANCH,
    "Complex Branching": COMPLEX_BRANCHING,
    "Parallel Development (Multiple Teams)": PARALLEL_TEAMS,
    "Multi-Agent Workflow": AGENT_WORKFLOW,
    "Git Flow Pattern": GIT_FLOW,
}
