"""Public API surface for goscaffold."""

__version__ = "0.1.0"

from goscaffold.collector import collect
from goscaffold.config import DEFAULT_RUNTIME_VERSION, ProjectConfig, validate_config
from goscaffold.exceptions import (
    DirectoryCreateError,
    EmptyModuleNameError,
    EmptyProjectNameError,
    FileCreateError,
    FilesystemError,
    InputError,
    InvalidRuntimeVersionError,
    RootAlreadyExistsError,
    ScaffoldError,
    TemplateError,
    TemplateParseError,
    UnknownPlaceholderError,
    UnknownTemplateError,
    ValidationError,
    WriteError,
)
from goscaffold.materializer import ScaffoldPlan, ScaffoldResult, materialize, plan_tree
from goscaffold.progress import NullScaffoldProgress, RichScaffoldProgress, ScaffoldProgress
from goscaffold.render import render
from goscaffold.templates import FILE_TABLE, SCAFFOLD_DIRECTORIES, TEMPLATES

__all__ = [
    "DEFAULT_RUNTIME_VERSION",
    "FILE_TABLE",
    "SCAFFOLD_DIRECTORIES",
    "TEMPLATES",
    "DirectoryCreateError",
    "EmptyModuleNameError",
    "EmptyProjectNameError",
    "FileCreateError",
    "FilesystemError",
    "InputError",
    "InvalidRuntimeVersionError",
    "NullScaffoldProgress",
    "ProjectConfig",
    "RichScaffoldProgress",
    "RootAlreadyExistsError",
    "ScaffoldError",
    "ScaffoldPlan",
    "ScaffoldProgress",
    "ScaffoldResult",
    "TemplateError",
    "TemplateParseError",
    "UnknownPlaceholderError",
    "UnknownTemplateError",
    "ValidationError",
    "WriteError",
    "collect",
    "materialize",
    "plan_tree",
    "render",
    "validate_config",
]
