from __future__ import annotations

import argparse
import io
import logging
import runpy
import sys
import tomllib
from pathlib import Path
from typing import Any

import pytest

from goscaffold.cli import build_parser, main
from goscaffold.exceptions import (
    DirectoryCreateError,
    EmptyModuleNameError,
    InputError,
    RootAlreadyExistsError,
    UnknownPlaceholderError,
)


def _raise(exc: BaseException) -> Any:
    def _runner(args: argparse.Namespace) -> int:
        raise exc

    return _runner


def test_build_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.directory is None
    assert args.dry_run is False
    assert args.verbose is False


def test_build_parser_accepts_options() -> None:
    args = build_parser().parse_args(["-C", "/tmp/work", "--dry-run", "-v"])

    assert args.directory == "/tmp/work"
    assert args.dry_run is True
    assert args.verbose is True


def test_build_parser_version_prints_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    parser = build_parser()

    with pytest.raises(SystemExit) as exc:
        parser.parse_args(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("goscaffold ")


def test_build_parser_rejects_unknown_flag() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--force"])

    assert exc.value.code == 2


# ---------------------------------------------------------------------------
# main: error mapping
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("exc", "code", "fragment"),
    [
        (InputError("input closed while reading project name"), 2, "input closed"),
        (EmptyModuleNameError(), 3, "module name must not be empty"),
        (RootAlreadyExistsError(Path("demo")), 4, "project directory already exists"),
        (UnknownPlaceholderError("Author", template="readme-file"), 5, "unknown placeholder"),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    exc: Exception,
    code: int,
    fragment: str,
) -> None:
    monkeypatch.setattr("goscaffold.cli._run_scaffold", _raise(exc))

    assert main([]) == code
    err = capsys.readouterr().err
    assert "✗ error:" in err
    assert fragment in err


def test_main_validation_error_names_field(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("goscaffold.cli._run_scaffold", _raise(EmptyModuleNameError()))

    main([])

    assert "(field: module_name)" in capsys.readouterr().err


def test_main_filesystem_error_includes_os_reason(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    error = DirectoryCreateError(Path("docs"))
    error.__cause__ = PermissionError(13, "Permission denied")
    monkeypatch.setattr("goscaffold.cli._run_scaffold", _raise(error))

    assert main([]) == 4
    assert "Permission denied" in capsys.readouterr().err


def test_main_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("goscaffold.cli._run_scaffold", _raise(KeyboardInterrupt()))

    assert main([]) == 2
    assert "Aborted." in capsys.readouterr().out


def test_main_verbose_configures_debug_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr("goscaffold.cli.logging.basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr("goscaffold.cli._run_scaffold", lambda args: 0)

    assert main(["--verbose"]) == 0
    assert calls and calls[0]["level"] == logging.DEBUG


def test_main_without_verbose_leaves_logging_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr("goscaffold.cli.logging.basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr("goscaffold.cli._run_scaffold", lambda args: 0)

    assert main([]) == 0
    assert calls == []


# ---------------------------------------------------------------------------
# main: scaffold command
# ---------------------------------------------------------------------------


def test_main_writes_project_into_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("demo\nexample.com/demo\n\n"))

    assert main(["--directory", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "✓ demo/cmd/" in out
    assert "✓ demo/README.md" in out
    assert "Next steps:" in out
    assert (tmp_path / "demo" / "go.mod").is_file()


def test_main_dry_run_writes_nothing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("demo\nexample.com/demo\n1.22\n"))

    assert main(["--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "demo/cmd/root.go" in out
    assert "demo/internal/" in out
    assert "Dry run: nothing was written" in out
    assert list(tmp_path.iterdir()) == []


def test_main_dry_run_warns_when_root_exists(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "demo").mkdir()
    monkeypatch.setattr("sys.stdin", io.StringIO("demo\nexample.com/demo\n\n"))

    assert main(["-C", str(tmp_path), "--dry-run"]) == 0

    assert "already exists" in capsys.readouterr().err


def test_main_validation_failure_creates_nothing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("demo\nexample.com/demo\n2.0\n"))

    assert main(["-C", str(tmp_path)]) == 3

    assert "is not supported" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


# ---------------------------------------------------------------------------
# entry points
# ---------------------------------------------------------------------------


def test_python_dash_m_exits_with_main_return_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("goscaffold.cli.main", lambda: 3)
    monkeypatch.delitem(sys.modules, "goscaffold.__main__", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("goscaffold", run_name="__main__")

    assert exc_info.value.code == 3


def test_console_script_points_at_main() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"

    with pyproject.open("rb") as fh:
        scripts = tomllib.load(fh)["project"]["scripts"]

    assert scripts == {"goscaffold": "goscaffold.cli:main"}
