"""
Base module for lanegraph examples.

Provides reusable utilities for building demo drivers:
- History loading (load_history)
- Logging setup (setup_logging)
- CLI utilities (common_options, build_options)
- Console output (print_header, print_error, print_graph, etc.)
"""

from .cli import build_options, common_options
from .config import load_history
from .console import (
    console,
    error_console,
    print_error,
    print_graph,
    print_header,
    print_stats,
    print_success,
)
from .exceptions import ConfigurationError
from .logging_setup import setup_logging

__all__ = [
    # Exceptions
    "ConfigurationError",
    # Config
    "load_history",
    # Logging
    "setup_logging",
    # CLI
    "common_options",
    "build_options",
    # Console
    "console",
    "error_console",
    "print_header",
    "print_error",
    "print_success",
    "print_graph",
    "print_stats",
]
