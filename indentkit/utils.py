"""Shared utility functions for indentkit.

Provides the Rich console used for all diagnostics, small print helpers, and
the filesystem capabilities the scaffold interpreter and symbols loader rely
on (path probing, reading, writing, directory creation and clearing).
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.table import Table

console = Console()

PathType = Literal["dir", "file", "missing", "other"]


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


def print_debug(message: str) -> None:
    """Print a dimmed trace line.

    Markup is disabled so that brackets in parsed text are shown verbatim.
    """
    console.print(message, style="dim", markup=False, highlight=False)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def path_type(path: str | Path) -> PathType:
    """Classify *path* as ``"dir"``, ``"file"``, ``"missing"`` or ``"other"``."""
    p = Path(path)
    if not p.exists():
        return "missing"
    if p.is_dir():
        return "dir"
    if p.is_file():
        return "file"
    return "other"


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | Path, contents: str) -> Path:
    """Write *contents* to *path*, creating missing parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(contents, encoding="utf-8")
    return file_path


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def clear_dir(path: str | Path) -> Path:
    """Remove everything inside the directory at *path*, keeping the directory."""
    dir_path = Path(path)
    for child in dir_path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
    return dir_path
