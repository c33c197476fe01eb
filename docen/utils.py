"""Shared utility functions for docen.

Provides the Rich console used for all status output, a few message helpers,
the summary table printed by the command-line entry point, and the plain file
writer used for the generated ``Dockerfile``.
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.table import Table

# Status output goes to stderr; stdout is reserved for ``--print``.
console = Console(stderr=True)

# Mode for the generated file: owner read/write, group/other read.
DEFAULT_FILE_MODE = 0o644


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text_file(path: str | Path, content: str, mode: int = DEFAULT_FILE_MODE) -> Path:
    """Write *content* to *path*, replacing any existing file.

    The file is opened with ``O_TRUNC`` so an existing file is fully
    overwritten.  The write is not atomic.  Any ``OSError`` (permission
    denied, missing directory, disk full) is raised unchanged.

    Args:
        path: Destination file.
        content: Text to write, encoded as UTF-8.
        mode: Permission bits used when the file is created.

    Returns:
        The destination as a ``Path``.
    """
    file_path = Path(path)
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with open(fd, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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


def print_note(message: str) -> None:
    """Print a dim informational note."""
    console.print(f"[dim]{message}[/dim]")
