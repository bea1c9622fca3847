"""
Infrastructure layer for the graph engine.

Contains concrete implementations of domain interfaces.
"""

from lanegraph.infrastructure.persistence import InMemoryGraphStore

__all__ = ["InMemoryGraphStore"]
