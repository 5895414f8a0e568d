"""CLI commands for todo-app."""

import argparse
import logging
import sys
from collections.abc import Callable

from todo_app.config import Config, load_config
from todo_app.errors import TodoError
from todo_app.formatting import color_enabled, format_json, format_table
from todo_app.repository import JsonTaskRepository
from todo_app.service import TodoService
from todo_app.status_parser import StatusParser

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="TodoApp - CLI Task Manager",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("--name", type=str, help="Task name")
    add_parser.add_argument("--owner", type=str, help="Task owner (default: Unassigned)")
    add_parser.add_argument("--status", type=str, help="Task status (default: Todo)")
    add_parser.add_argument("--description", type=str, help="Task description")

    # list command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument("--status", type=str, help="Filter by status")
    list_parser.add_argument("--owner", type=str, help="Filter by owner")
    list_parser.add_argument(
        "--json", action="store_true", dest="json_output", help="Output as JSON"
    )

    # update command
    update_parser = subparsers.add_parser("update", help="Update an existing task")
    update_parser.add_argument("--id", type=str, dest="task_id", help="Task ID")
    update_parser.add_argument("--name", type=str, help="New name")
    update_parser.add_argument("--owner", type=str, help="New owner")
    update_parser.add_argument("--status", type=str, help="New status")
    update_parser.add_argument("--description", type=str, help="New description")

    # delete / complete commands
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("--id", type=str, dest="task_id", help="Task ID")
    complete_parser = subparsers.add_parser("complete", help="Mark a task as complete")
    complete_parser.add_argument("--id", type=str, dest="task_id", help="Task ID")

    # assign command
    assign_parser = subparsers.add_parser("assign", help="Assign a task to someone")
    assign_parser.add_argument("--id", type=str, dest="task_id", help="Task ID")
    assign_parser.add_argument("--owner", type=str, help="Owner")

    subparsers.add_parser("browse", help="Browse tasks interactively")

    return parser


def build_service(config: Config) -> TodoService:
    """Wire the JSON repository into a TodoService.

    Raises:
        TodoError: If the data directory cannot be created or tasks cannot
            be loaded.
    """
    try:
        config.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TodoError.persistence(f"Error loading tasks: {exc}") from exc
    return TodoService(JsonTaskRepository(config.tasks_file), StatusParser())


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _parse_task_id(raw: str) -> int | None:
    """Parse an --id value, or None if it is not an integer."""
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_add(args: argparse.Namespace, config: Config) -> int:
    """Add a task."""
    if not args.name or not args.name.strip():
        return _error("Error: --name parameter is required")

    service = build_service(config)
    task = service.add_task(args.name, args.owner, args.status, args.description)
    print(f"Task '{task.name}' added successfully with ID {task.id}")
    return 0


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    """List tasks, optionally filtered by status and owner."""
    service = build_service(config)
    tasks = service.list_tasks(args.status, args.owner)

    if args.json_output:
        print(format_json(tasks))
        return 0

    if not tasks:
        print("No tasks found.")
        return 0

    use_color = color_enabled(sys.stdout, config.color)
    print()
    for line in format_table(tasks, color=use_color):
        print(line)
    print()
    return 0


def cmd_update(args: argparse.Namespace, config: Config) -> int:
    """Update the given fields of a task."""
    if args.task_id is None:
        return _error("Error: --id parameter is required")
    task_id = _parse_task_id(args.task_id)
    if task_id is None:
        return _error("Error: Invalid task ID")

    service = build_service(config)
    changed = service.update_task(task_id, args.name, args.owner, args.status, args.description)
    if not changed:
        print("Warning: No properties specified to update", file=sys.stderr)
        return 0

    print(f"Task {task_id} updated successfully")
    return 0


def cmd_delete(args: argparse.Namespace, config: Config) -> int:
    """Delete a task."""
    if args.task_id is None:
        return _error("Error: --id parameter is required")
    task_id = _parse_task_id(args.task_id)
    if task_id is None:
        return _error("Error: Invalid task ID")

    task = build_service(config).delete_task(task_id)
    print(f"Task '{task.name}' (ID: {task_id}) deleted successfully")
    return 0


def cmd_complete(args: argparse.Namespace, config: Config) -> int:
    """Mark a task as complete."""
    if args.task_id is None:
        return _error("Error: --id parameter is required")
    task_id = _parse_task_id(args.task_id)
    if task_id is None:
        return _error("Error: Invalid task ID")

    task = build_service(config).complete_task(task_id)
    print(f"Task '{task.name}' (ID: {task_id}) marked as complete")
    return 0


def cmd_assign(args: argparse.Namespace, config: Config) -> int:
    """Assign a task to a new owner."""
    if args.task_id is None or args.owner is None:
        return _error("Error: --id and --owner parameters are required")
    task_id = _parse_task_id(args.task_id)
    if task_id is None:
        return _error("Error: Invalid task ID")

    task = build_service(config).assign_owner(task_id, args.owner)
    print(f"Task '{task.name}' (ID: {task_id}) assigned to {task.owner}")
    return 0


def cmd_browse(args: argparse.Namespace, config: Config) -> int:
    """Open the interactive task browser."""
    from todo_app.app import TaskBrowserApp

    service = build_service(config)
    TaskBrowserApp(service).run()
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace, Config], int]] = {
    "add": cmd_add,
    "list": cmd_list,
    "update": cmd_update,
    "delete": cmd_delete,
    "complete": cmd_complete,
    "assign": cmd_assign,
    "browse": cmd_browse,
}


def run_cli(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Parse arguments and dispatch to command handlers.

    Returns:
        Exit code (0 for success, non-zero for error). With no command the
        help text is printed.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if config is None:
        config = load_config()

    try:
        return COMMANDS[args.command](args, config)
    except TodoError as exc:
        logger.debug("Command %s failed: %r", args.command, exc)
        return _error(exc.message)
