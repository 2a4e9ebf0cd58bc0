"""Command-line interface for goscaffold."""

from __future__ import annotations

import logging as logging

from goscaffold import collect as collect
from goscaffold import materialize as materialize
from goscaffold import plan_tree as plan_tree
from goscaffold import validate_config as validate_config
from goscaffold.cli.app import main as main
from goscaffold.cli.commands import scaffold as scaffold_command
from goscaffold.cli.common import format_tree as format_tree
from goscaffold.cli.common import print_error as print_error
from goscaffold.cli.common import print_info as print_info
from goscaffold.cli.common import print_success as print_success
from goscaffold.cli.common import print_warning as print_warning
from goscaffold.cli.common import stdout_console as stdout_console
from goscaffold.cli.parser import build_parser as build_parser
from goscaffold.progress import RichScaffoldProgress as RichScaffoldProgress

_run_scaffold = scaffold_command.run_scaffold
