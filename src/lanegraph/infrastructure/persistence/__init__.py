"""
Persistence adapters for the graph store.
"""

from lanegraph.infrastructure.persistence.memory import InMemoryGraphStore

__all__ = ["InMemoryGraphStore"]
