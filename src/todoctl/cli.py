# src/todoctl/cli.py

"""
Command-line interface for todoctl.

This module:
- defines argument parsing and subcommands,
- delegates document logic to engine modules,
- turns TodoError into a printed message and exit status 1.

One invocation, one command: load, mutate, save, exit.
"""

import argparse
import logging
import sys

from todoctl.config import Settings, load_settings
from todoctl.engine.actions import add_task, complete_task, list_tasks, remove_task, update_task
from todoctl.engine.render import print_sections, use_color
from todoctl.engine.store import Store
from todoctl.engine.validate import ConfigError, TodoError
from todoctl.logging_setup import setup_logging

logger = logging.getLogger(__name__)

USAGE = (
    "Please specify a subcommand:\n"
    "\t- 'ls' to fetch tasks.\n"
    "\t- 'add' to add a new task.\n"
    "\t- 'rm' to delete a task.\n"
    "\t- 'update' to update a task.\n"
    "\t- 'done' to mark a task as complete."
)

_DIR_HELP = "Path of the directory containing the 'todo.json' to read/write"


# ---------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------

def _add_dir_option(p: argparse.ArgumentParser) -> None:
    p.add_argument("-d", "--dir", type=str, default="", help=_DIR_HELP)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo")
    sub = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # Read-only commands
    # ------------------------------------------------------------------

    p_ls = sub.add_parser("ls", help="List tasks")
    p_ls.add_argument(
        "-a",
        "--all",
        dest="show_all",
        action="store_true",
        help="Show also completed tasks",
    )
    p_ls.add_argument(
        "-s",
        "--search",
        type=str,
        default="",
        help="Only tasks whose name or message contains this string",
    )
    _add_dir_option(p_ls)
    p_ls.set_defaults(func=cmd_ls)

    # ------------------------------------------------------------------
    # Write commands
    # ------------------------------------------------------------------

    p_add = sub.add_parser("add", help="Add a new task")
    p_add.add_argument("-n", "--name", type=str, default="", help="Name of the task to add")
    p_add.add_argument("-m", "--message", type=str, default="", help="Message of the task to add")
    p_add.add_argument(
        "-p",
        "--priority",
        type=str,
        default=None,
        help="Priority of the task to add (high - mid - low, default: low)",
    )
    _add_dir_option(p_add)
    p_add.set_defaults(func=cmd_add)

    p_rm = sub.add_parser("rm", help="Delete a task")
    p_rm.add_argument("-n", "--name", type=str, default="", help="Name of the task to remove")
    _add_dir_option(p_rm)
    p_rm.set_defaults(func=cmd_rm)

    p_update = sub.add_parser("update", help="Update a task")
    p_update.add_argument("-n", "--name", type=str, default="", help="Name of the task to update")
    p_update.add_argument("-m", "--message", type=str, default="", help="Updated message")
    p_update.add_argument(
        "-p",
        "--priority",
        type=str,
        default="",
        help="Updated priority (high - mid - low)",
    )
    _add_dir_option(p_update)
    p_update.set_defaults(func=cmd_update)

    p_done = sub.add_parser("done", help="Mark a task as complete")
    p_done.add_argument("-n", "--name", type=str, default="", help="Name of the task to complete")
    _add_dir_option(p_done)
    p_done.set_defaults(func=cmd_done)

    return parser


COMMANDS = ("ls", "add", "rm", "update", "done")


# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------

def cmd_ls(args: argparse.Namespace) -> int:
    sections = list_tasks(Store.resolve(args.dir), search=args.search, show_all=args.show_all)
    print_sections(sections, color=use_color(args.color, sys.stdout))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    add_task(Store.resolve(args.dir), name=args.name, message=args.message, priority=args.priority)
    return 0


def cmd_rm(args: argparse.Namespace) -> int:
    remove_task(Store.resolve(args.dir), name=args.name)
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    written = update_task(
        Store.resolve(args.dir),
        name=args.name,
        message=args.message,
        priority=args.priority,
    )
    if not written:
        logger.debug("Nothing to update for %r", args.name)
    return 0


def cmd_done(args: argparse.Namespace) -> int:
    complete_task(Store.resolve(args.dir), name=args.name)
    return 0


# ---------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv or argv[0] not in COMMANDS:
        print(USAGE)
        return 1

    # Settings only tune output; a broken config never blocks a command.
    setup_logging()
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.warning("Ignoring settings, using defaults: %s", e)
        settings = Settings()

    setup_logging(settings.log_level_value)

    parser = _build_parser()
    args = parser.parse_args(argv)
    args.color = settings.color

    try:
        return args.func(args)
    except TodoError as e:
        logger.debug("%s failed: %r", args.command, e)
        print(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
