"""
Command-line interface for wordgraph.

- wordgraph_cli.py: subcommands per analysis plus an interactive menu
"""

from __future__ import annotations

from .wordgraph_cli import WordGraphCLI, create_cli, main

__all__ = [
    "WordGraphCLI",
    "create_cli",
    "main",
]
