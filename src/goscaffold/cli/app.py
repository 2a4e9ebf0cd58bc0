"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from goscaffold.exceptions import FilesystemError, InputError, TemplateError, ValidationError


def main(argv: list[str] | None = None) -> int:
    import goscaffold.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return cli._run_scaffold(args)
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except InputError as exc:
        cli.print_error(str(exc))
        return 2
    except ValidationError as exc:
        cli.print_error(f"{exc} (field: {exc.field})")
        return 3
    except FilesystemError as exc:
        cause = exc.__cause__
        cli.print_error(f"{exc} ({cause.strerror or cause})" if isinstance(cause, OSError) else str(exc))
        return 4
    except TemplateError as exc:
        cli.print_error(str(exc))
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        cli.print_error(str(exc))
        return 1


__all__ = ["main"]
