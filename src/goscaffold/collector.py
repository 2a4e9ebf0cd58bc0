"""Interactive collection of project parameters."""

from __future__ import annotations

import logging
from typing import NamedTuple, TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.text import TextType

from goscaffold.config import DEFAULT_RUNTIME_VERSION, ProjectConfig
from goscaffold.exceptions import InputError

logger = logging.getLogger(__name__)

BANNER = "goscaffold - new Go project"


class PromptSpec(NamedTuple):
    field: str
    label: str
    default: str | None = None


PROMPTS: tuple[PromptSpec, ...] = (
    PromptSpec("project_name", "Project name"),
    PromptSpec("module_name", "Module name (e.g. example.com/my-app)"),
    PromptSpec("runtime_version", "Go version", DEFAULT_RUNTIME_VERSION),
)


class LinePrompt(Prompt):
    """A :class:`~rich.prompt.Prompt` that reports end of input.

    ``Console.input`` returns an empty string when an explicit stream is
    exhausted; a line read from a live stream always ends in a newline, so an
    empty read means EOF.
    """

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        line = console.input(prompt, password=password, stream=stream)
        if stream is not None and line == "":
            raise EOFError
        return line


def ask(spec: PromptSpec, *, console: Console, stream: TextIO | None = None) -> str:
    """Ask a single question and return the trimmed answer (or its default)."""
    try:
        if spec.default is None:
            raw = LinePrompt.ask(spec.label, console=console, stream=stream)
        else:
            raw = LinePrompt.ask(spec.label, console=console, stream=stream, default=spec.default)
    except EOFError as exc:
        raise InputError(f"input closed while reading {spec.label.lower()}") from exc
    except (OSError, ValueError, RuntimeError) as exc:
        # closed stdin raises ValueError, a lost fd 0 RuntimeError
        raise InputError(f"cannot read {spec.label.lower()}: {exc}") from exc
    value = raw.strip()
    if not value and spec.default is not None:
        value = spec.default
    logger.debug("%s=%r", spec.field, value)
    return value


def collect(*, console: Console | None = None, stream: TextIO | None = None) -> ProjectConfig:
    """Prompt for every project parameter, in order.

    Reads one line per prompt from *stream* (standard input when ``None``).

    Raises:
        InputError: Input ended or became unreadable before every prompt was answered.
    """
    console = console or Console()
    console.rule(f"[bold cyan]{BANNER}[/bold cyan]")
    answers = {spec.field: ask(spec, console=console, stream=stream) for spec in PROMPTS}
    return ProjectConfig(**answers)


__all__ = ["BANNER", "PROMPTS", "LinePrompt", "PromptSpec", "ask", "collect"]
