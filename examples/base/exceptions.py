"""Shared exceptions for lanegraph examples."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a history file is invalid or missing."""

    pass
