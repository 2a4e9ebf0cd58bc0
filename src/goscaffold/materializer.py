"""Writes the project skeleton to disk.

Materialization is fail-fast: the first directory or file that cannot be
created aborts the run. Nothing already written is rolled back.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from goscaffold.config import ProjectConfig
from goscaffold.exceptions import (
    DirectoryCreateError,
    FileCreateError,
    RootAlreadyExistsError,
    WriteError,
)
from goscaffold.progress import NullScaffoldProgress, ScaffoldProgress
from goscaffold.render import render
from goscaffold.templates import FILE_TABLE, SCAFFOLD_DIRECTORIES, FileEntry, get_template

logger = logging.getLogger(__name__)


class ScaffoldPlan(BaseModel):
    """Everything a run will create, relative to the project root."""

    root: str
    directories: list[str] = Field(default_factory=list)
    files: list[FileEntry] = Field(default_factory=list)

    @property
    def total(self) -> int:
        # +1 for the root itself
        return 1 + len(self.directories) + len(self.files)


class ScaffoldResult(BaseModel):
    root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)


def plan_tree(config: ProjectConfig) -> ScaffoldPlan:
    return ScaffoldPlan(
        root=config.project_name,
        directories=list(SCAFFOLD_DIRECTORIES),
        files=list(FILE_TABLE),
    )


def _make_directory(path: Path, progress: ScaffoldProgress, *, root: bool = False) -> None:
    try:
        path.mkdir()
    except FileExistsError as exc:
        error = RootAlreadyExistsError(path) if root else DirectoryCreateError(path)
        progress.failed(path, error)
        raise error from exc
    except OSError as exc:
        error = DirectoryCreateError(path)
        progress.failed(path, error)
        raise error from exc
    logger.debug("created directory %s", path)
    progress.created(path)


def _write_file(path: Path, content: str, progress: ScaffoldProgress) -> None:
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        error = FileCreateError(path)
        progress.failed(path, error)
        raise error from exc
    with handle:
        try:
            handle.write(content)
        except OSError as exc:
            error = WriteError(path)
            progress.failed(path, error)
            raise error from exc
    logger.debug("wrote %s (%d bytes)", path, len(content.encode("utf-8")))
    progress.created(path)


def materialize(
    config: ProjectConfig,
    *,
    base_dir: Path | None = None,
    progress: ScaffoldProgress | None = None,
) -> ScaffoldResult:
    """Create the project tree for *config* under *base_dir* (default: cwd).

    Raises:
        RootAlreadyExistsError: The project directory is already present.
        DirectoryCreateError: A directory could not be created.
        FileCreateError: A file could not be opened for writing.
        WriteError: Rendered content could not be written.
        TemplateError: A template body failed to render. Files written
            before the failing one stay on disk.
    """
    progress = progress or NullScaffoldProgress()
    plan = plan_tree(config)
    root = (base_dir or Path.cwd()) / plan.root
    progress.start(plan.total)
    logger.debug("materializing %d paths under %s", plan.total, root)

    _make_directory(root, progress, root=True)
    result = ScaffoldResult(root=root)

    for rel_dir in plan.directories:
        path = root / rel_dir
        _make_directory(path, progress)
        result.directories.append(path)

    for entry in plan.files:
        content = render(get_template(entry.template), config, template_name=entry.template)
        path = root / entry.path
        _write_file(path, content, progress)
        result.files.append(path)

    progress.done()
    return result


__all__ = ["ScaffoldPlan", "ScaffoldResult", "materialize", "plan_tree"]
