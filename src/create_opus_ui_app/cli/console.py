"""Shared Rich console for the CLI layer.

Everything user-facing, from stage messages to errors, is written to
stderr so stdout stays free for the child processes' own output.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, highlight=False)
