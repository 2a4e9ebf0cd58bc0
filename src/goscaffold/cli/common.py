"""Shared CLI output helpers.

Status lines carry a coloured marker so success, info, warning and failure
read apart at a glance; errors and warnings go to stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

stdout_console = Console(soft_wrap=True)
stderr_console = Console(stderr=True, soft_wrap=True)


def print_success(message: str, *, console: Console | None = None) -> None:
    (console or stdout_console).print(f"[green]✓[/green] {escape(message)}")


def print_info(message: str, *, console: Console | None = None) -> None:
    (console or stdout_console).print(f"[cyan]→[/cyan] {escape(message)}")


def print_warning(message: str, *, console: Console | None = None) -> None:
    (console or stderr_console).print(f"[yellow]! warning:[/yellow] {escape(message)}")


def print_error(message: str, *, console: Console | None = None) -> None:
    (console or stderr_console).print(f"[bold red]✗ error:[/bold red] {escape(message)}")


def format_tree(root: str, directories: list[str], files: list[str]) -> list[str]:
    """Return one display line per path, directories first, sorted within each group."""
    lines = [f"{root}/"]
    lines.extend(f"{root}/{d}/" for d in sorted(directories))
    lines.extend(f"{root}/{f}" for f in sorted(files))
    return lines


__all__ = ["format_tree", "print_error", "print_info", "print_success", "print_warning", "stderr_console", "stdout_console"]
