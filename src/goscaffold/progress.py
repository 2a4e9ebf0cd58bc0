"""Progress reporting for tree materialization.

The materializer emits one event per created directory or file; consumers
(e.g. the CLI's Rich output) implement ``ScaffoldProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape


class ScaffoldProgress(ABC):
    """Observer interface for scaffold progress events."""

    @abstractmethod
    def start(self, total: int) -> None:
        """Materialization is starting; *total* paths will be created."""
        ...  # pragma: no cover

    @abstractmethod
    def created(self, path: Path) -> None:
        """*path* (a directory or file) was created successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def failed(self, path: Path, error: BaseException) -> None:
        """Creating *path* was interrupted by *error*."""
        ...  # pragma: no cover

    @abstractmethod
    def done(self) -> None:
        """Every planned path has been created."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """No-op implementation used when no progress display is requested."""

    def start(self, total: int) -> None:
        pass

    def created(self, path: Path) -> None:
        pass

    def failed(self, path: Path, error: BaseException) -> None:
        pass

    def done(self) -> None:
        pass


class RichScaffoldProgress(ScaffoldProgress):
    """Prints a checkmark line per created path.

    Paths are shown relative to *base_dir* when possible so the output reads
    ``✓ demo/cmd`` rather than an absolute path.
    """

    def __init__(self, console: Console | None = None, *, base_dir: Path | None = None) -> None:
        self._console = console or Console()
        self._base_dir = base_dir
        self._created = 0

    @property
    def created_count(self) -> int:
        return self._created

    def _display(self, path: Path) -> str:
        suffix = "/" if path.is_dir() else ""
        if self._base_dir is not None:
            try:
                path = path.relative_to(self._base_dir)
            except ValueError:
                pass
        return escape(f"{path.as_posix()}{suffix}")

    def start(self, total: int) -> None:
        self._created = 0

    def created(self, path: Path) -> None:
        self._created += 1
        self._console.print(f"[green]✓[/green] {self._display(path)}")

    def failed(self, path: Path, error: BaseException) -> None:
        self._console.print(f"[red]✗[/red] {self._display(path)}")

    def done(self) -> None:
        self._console.print(f"[green]Created {self._created} paths[/green]")


__all__ = ["NullScaffoldProgress", "RichScaffoldProgress", "ScaffoldProgress"]
