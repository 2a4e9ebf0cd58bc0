"""Custom exception hierarchy for goscaffold.

All goscaffold exceptions inherit from :class:`ScaffoldError`, so the CLI can
catch any library error with a single ``except`` clause while still mapping
each failure family to its own exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for all goscaffold errors."""


class InputError(ScaffoldError):
    """Raised when interactive input cannot be read (closed stream or EOF)."""


class ValidationError(ScaffoldError):
    """Raised when a collected configuration fails validation.

    Attributes:
        field: Name of the offending ``ProjectConfig`` field.
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class EmptyProjectNameError(ValidationError):
    """Project name is blank."""

    def __init__(self) -> None:
        super().__init__("project name must not be empty", field="project_name")


class EmptyModuleNameError(ValidationError):
    """Module name is blank."""

    def __init__(self) -> None:
        super().__init__("module name must not be empty", field="module_name")


class InvalidRuntimeVersionError(ValidationError):
    """Runtime version does not have the accepted ``1.<minor>`` shape."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"runtime version {version!r} is not supported (expected 1.<minor>, e.g. 1.21)",
            field="runtime_version",
        )
        self.version = version


class FilesystemError(ScaffoldError):
    """Raised when the tree cannot be written.

    Attributes:
        path: The directory or file the operation failed on.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class RootAlreadyExistsError(FilesystemError):
    """The project root directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__("project directory already exists", path=path)


class DirectoryCreateError(FilesystemError):
    """A directory could not be created."""

    def __init__(self, path: Path) -> None:
        super().__init__("failed creating directory", path=path)


class FileCreateError(FilesystemError):
    """A file could not be opened for writing."""

    def __init__(self, path: Path) -> None:
        super().__init__("failed creating file", path=path)


class WriteError(FilesystemError):
    """Rendered content could not be written to an opened file."""

    def __init__(self, path: Path) -> None:
        super().__init__("failed writing file", path=path)


class TemplateError(ScaffoldError):
    """Raised when a template cannot be rendered.

    Attributes:
        template: Logical name of the template being rendered.
    """

    def __init__(self, message: str, *, template: str) -> None:
        super().__init__(f"template {template!r}: {message}")
        self.template = template


class UnknownPlaceholderError(TemplateError):
    """A ``{{...}}`` token does not name a known configuration field."""

    def __init__(self, placeholder: str, *, template: str) -> None:
        super().__init__(f"unknown placeholder {{{{{placeholder}}}}}", template=template)
        self.placeholder = placeholder


class TemplateParseError(TemplateError):
    """Template body contains malformed placeholder syntax."""


class UnknownTemplateError(TemplateError):
    """The file table names a template missing from the template table."""

    def __init__(self, template: str) -> None:
        super().__init__("no such template", template=template)
