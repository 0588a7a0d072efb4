"""
Command-line application layer.

This package contains:
- Config: CLI argument parsing and configuration
- Runner: wires the controller and runs a single search

The search logic itself lives in estate_search.search.
"""

from .config import (
    add_args,
    check_config,
    config_to_dict,
    get_config,
    parse_point,
    setup_logging,
)
from .runner import build_controller, main, run_search

__all__ = [
    "add_args",
    "build_controller",
    "check_config",
    "config_to_dict",
    "get_config",
    "main",
    "parse_point",
    "run_search",
    "setup_logging",
]
