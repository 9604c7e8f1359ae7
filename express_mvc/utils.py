"""Shared utility functions for the Express MVC scaffolder.

Provides async command execution, Rich-based status output and small
formatting helpers.  Every function that talks to the operator goes through
the module-level ``console`` so tests can redirect or silence it in one place.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command with the parent's standard streams and wait for it.

    The child inherits stdin/stdout/stderr, so its output goes straight to
    the operator's terminal.  There is no timeout.

    Args:
        cmd: Program followed by its arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit code.

    Raises:
        FileNotFoundError: If the program does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold bright_green] {title} [/bold bright_green]", style="bright_green"))
    console.print()


def print_step(message: str) -> None:
    """Print a dimmed progress line."""
    console.print(f"  [dim]{message}[/dim]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
