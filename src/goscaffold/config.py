"""Project parameters collected for a scaffold run.

:class:`ProjectConfig` is built once from the interactive prompts, checked by
:func:`validate_config`, and then handed read-only to the materializer.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from goscaffold.exceptions import EmptyModuleNameError, EmptyProjectNameError, InvalidRuntimeVersionError

DEFAULT_RUNTIME_VERSION = "1.21"

_RUNTIME_VERSION_RE = re.compile(r"^1\.\d+(?:\.\d+)?$")


class ProjectConfig(BaseModel):
    """Parameters substituted into the generated tree.

    Attributes:
        project_name: Root directory name; also used in greeting and README text.
        module_name: Module path declared in ``go.mod`` and used for imports.
        runtime_version: Go version written to ``go.mod``.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    project_name: str
    module_name: str
    runtime_version: str = DEFAULT_RUNTIME_VERSION


def is_supported_runtime_version(value: str) -> bool:
    return _RUNTIME_VERSION_RE.match(value.strip()) is not None


def validate_config(config: ProjectConfig) -> ProjectConfig:
    """Check *config* field by field, stopping at the first failure.

    Order is fixed: project name, module name, runtime version.
    """
    if not config.project_name.strip():
        raise EmptyProjectNameError()
    if not config.module_name.strip():
        raise EmptyModuleNameError()
    if not is_supported_runtime_version(config.runtime_version):
        raise InvalidRuntimeVersionError(config.runtime_version)
    return config


__all__ = ["DEFAULT_RUNTIME_VERSION", "ProjectConfig", "is_supported_runtime_version", "validate_config"]
