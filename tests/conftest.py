"""Shared test fixtures for goscaffold tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from goscaffold.config import ProjectConfig


@pytest.fixture
def demo_config() -> ProjectConfig:
    """The configuration produced by the canonical demo session."""
    return ProjectConfig(project_name="demo", module_name="example.com/demo", runtime_version="1.21")


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def buffered_console(console_buffer: io.StringIO) -> Console:
    """A wide, colourless console whose output lands in ``console_buffer``."""
    return Console(file=console_buffer, width=200, color_system=None)
