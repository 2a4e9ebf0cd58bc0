"""Scaffold command handler."""

from __future__ import annotations

import argparse
from pathlib import Path


def run_scaffold(args: argparse.Namespace) -> int:
    """Collect, validate and materialize one project.

    Library errors propagate to :func:`goscaffold.cli.app.main`, which maps
    them to exit codes.
    """
    import goscaffold.cli as cli

    base_dir = Path(args.directory) if args.directory else Path.cwd()

    config = cli.validate_config(cli.collect(console=cli.stdout_console))
    cli.print_info(
        f"Project {config.project_name} (module {config.module_name}, Go {config.runtime_version})",
    )

    if args.dry_run:
        plan = cli.plan_tree(config)
        root = base_dir / plan.root
        if root.exists():
            cli.print_warning(f"{root} already exists; a real run would abort")
        for line in cli.format_tree(plan.root, plan.directories, [entry.path for entry in plan.files]):
            cli.stdout_console.print(f"  {line}", markup=False, highlight=False)
        cli.print_info("Dry run: nothing was written")
        return 0

    progress = cli.RichScaffoldProgress(cli.stdout_console, base_dir=base_dir)
    result = cli.materialize(config, base_dir=base_dir, progress=progress)

    cli.print_success(f"Project written to {result.root}")
    print("\nNext steps:")
    print(f"  cd {result.root}")
    print("  go run .")
    return 0


__all__ = ["run_scaffold"]
