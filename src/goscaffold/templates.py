"""Fixed template table and generated tree layout.

Bodies reference configuration fields through ``{{ProjectName}}``,
``{{ModuleName}}`` and ``{{RuntimeVersion}}``. All tables are read-only and
built at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from goscaffold.exceptions import UnknownTemplateError

_ROOT_FILE = """package main

import (
    "fmt"
    "os"
)

func main() {
    fmt.Println("Hello from {{ProjectName}}!")
    os.Exit(0)
}
"""

_PACKAGE_FILE = """package mypackage

// Add your package functionality here.

// Name returns the name of the project this package belongs to.
func Name() string {
    return "{{ProjectName}}"
}
"""

_MANIFEST_FILE = """module {{ModuleName}}

go {{RuntimeVersion}}
"""

_ENTRY_FILE = """package main

import (
    "fmt"

    mypackage "{{ModuleName}}/pkg"
)

func main() {
    // Entry point for your application
    fmt.Println(mypackage.Name())
}
"""

_README_FILE = """# {{ProjectName}}
This is a simple CLI application created with Go.

## Install

```sh
go install {{ModuleName}}@latest
```

## Usage

```sh
go run .
go run ./cmd
```

Requires Go {{RuntimeVersion}} or newer.

## License

Add your license here.
"""

TEMPLATES: MappingProxyType[str, str] = MappingProxyType(
    {
        "root-file": _ROOT_FILE,
        "package-file": _PACKAGE_FILE,
        "manifest-file": _MANIFEST_FILE,
        "entry-file": _ENTRY_FILE,
        "readme-file": _README_FILE,
    }
)


class FileEntry(NamedTuple):
    """A generated file: its path relative to the project root and its template."""

    path: str
    template: str


SCAFFOLD_DIRECTORIES: tuple[str, ...] = ("cmd", "pkg", "internal", "docs", "scripts")

FILE_TABLE: tuple[FileEntry, ...] = (
    FileEntry("cmd/root.go", "root-file"),
    FileEntry("pkg/mypackage.go", "package-file"),
    FileEntry("go.mod", "manifest-file"),
    FileEntry("main.go", "entry-file"),
    FileEntry("README.md", "readme-file"),
)


def get_template(name: str) -> str:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise UnknownTemplateError(name) from None


__all__ = ["FILE_TABLE", "SCAFFOLD_DIRECTORIES", "TEMPLATES", "FileEntry", "get_template"]
