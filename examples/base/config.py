"""History file loading utilities for lanegraph examples."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from lanegraph import AgentLifecycle

from .exceptions import ConfigurationError

STATUS_FIELDS = ("state", "activity", "progress", "turns")
STATES = tuple(state.value for state in AgentLifecycle)


def _require_field(data: dict[str, Any], field: str, index: int) -> str:
    """Extract a required string field from a node entry.

    Args:
        data: Node entry dictionary
        field: Field name to extract
        index: Entry position for error messages

    Returns:
        The field value

    Raises:
        ConfigurationError: If field is missing, empty or not a string
    """
    value = data.get(field)
    if not value or not isinstance(value, str):
        raise ConfigurationError(f"nodes[{index}] missing required field '{field}'")
    return value


def _status_field(data: dict[str, Any], field: str, index: int) -> Any:
    """Check an optional agent status field of a node entry.

    Raises:
        ConfigurationError: If the value has the wrong type or is out of range
    """
    value = data[field]
    if field == "turns":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(
                f"nodes[{index}]: 'turns' must be a non-negative integer"
            )
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"nodes[{index}]: '{field}' must be a string")
    if field == "state" and value not in STATES:
        raise ConfigurationError(
            f"nodes[{index}]: unknown state '{value}' "
            f"(expected one of: {', '.join(STATES)})"
        )
    return value


def load_history(path: Path) -> dict[str, Any]:
    """
    Load a graph history from a JSON file.

    Accepted shapes are a bare list of node entries, or an object with a
    "nodes" list and an optional "name". Each entry needs "id"; "label"
    defaults to the id and "parents" to an empty list. Entries may carry
    agent status fields (state, activity, progress, turns).

    Args:
        path: Path to the history JSON file

    Returns:
        Dict with "name" (str), "nodes" (list of normalised entries)
        and "agents" (True when any entry carries status fields)

    Raises:
        ConfigurationError: If file is missing or invalid
    """
    if not path.exists():
        raise ConfigurationError(f"History file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        data = {"nodes": data}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected list or dict in {path}, got {type(data).__name__}"
        )

    raw_nodes = data.get("nodes")
    if not isinstance(raw_nodes, list):
        raise ConfigurationError(f"'nodes' must be a list in {path}")

    nodes = []
    for index, entry in enumerate(raw_nodes):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"nodes[{index}]: expected dict")
        node_id = _require_field(entry, "id", index)
        parents = entry.get("parents", [])
        if not isinstance(parents, list) or not all(
            isinstance(p, str) for p in parents
        ):
            raise ConfigurationError(f"nodes[{index}]: 'parents' must be a list of ids")
        node = {
            "id": node_id,
            "label": str(entry.get("label", node_id)),
            "parents": parents,
        }
        for field in STATUS_FIELDS:
            if field in entry:
                node[field] = _status_field(entry, field, index)
        nodes.append(node)

    return {
        "name": str(data.get("name", path.stem)),
        "nodes": nodes,
        "agents": any(
            field in node for node in nodes for field in STATUS_FIELDS
        ),
    }
