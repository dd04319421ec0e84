"""Taskbook CLI - task tracking for the address book."""

import json
import logging
import sys

import click

from .adapters.json_source import JsonTaskSource
from .adapters.memory_model import InMemoryTaskModel
from .commands import (
    CommandResult,
    EditTaskCommand,
    FilterTaskCommand,
    ListTasksCommand,
    SortTasksCommand,
)
from .config import load_config
from .core.descriptors import EditTaskDescriptor, FilterTaskDescriptor
from .core.values import (
    Description,
    Email,
    Priority,
    TaskCategory,
    TaskDeadline,
    TaskName,
)
from .exceptions import TaskbookError

CATEGORY_HELP = "Category (database/frontend/backend/uiux/presentation/others)"

file_option = click.option(
    "--file", "tasks_file", default=None, type=click.Path(dir_okay=False),
    help="Task file to read (defaults to TASKS_FILE from config)",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Taskbook - track tasks linked to your contacts."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )


def _load_model(tasks_file: str | None) -> InMemoryTaskModel:
    path = tasks_file or load_config().tasks_file
    return InMemoryTaskModel(JsonTaskSource(path).fetch_all())


def _category(category: str | None, level: int | None) -> TaskCategory | None:
    if category is None:
        if level is not None:
            raise click.UsageError("--level requires --category")
        return None
    if level is None:
        level = load_config().default_category_level
    return TaskCategory.parse(category, level)


def _show(result: CommandResult, as_json: bool) -> None:
    if as_json:
        click.echo(
            json.dumps(
                {"message": result.feedback, "tasks": [t.to_dict() for t in result.tasks]},
                indent=2,
            )
        )
        return

    click.echo(result.feedback)
    for i, task in enumerate(result.tasks, start=1):
        marker = "x" if task.is_done else " "
        email = f" <{task.email}>" if task.email else ""
        click.echo(
            f"{i:>3}. [{marker}] {task.name} ({task.category}, {task.priority}, "
            f"due {task.deadline}){email}"
        )


def _run(command, tasks_file: str | None, as_json: bool) -> None:
    try:
        model = _load_model(tasks_file)
        result = command.execute(model)
    except TaskbookError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _show(result, as_json)


@main.command("list")
@file_option
@json_option
def list_tasks(tasks_file: str | None, as_json: bool):
    """List all tasks."""
    _run(ListTasksCommand(), tasks_file, as_json)


@main.command("filter")
@click.option("--category", "-c", default=None, help=CATEGORY_HELP)
@click.option("--level", "-l", type=int, default=None, help="Category level")
@click.option("--before", "-d", default=None, help="Show tasks due before this date (YYYY-MM-DD)")
@file_option
@json_option
def filter_tasks(
    category: str | None,
    level: int | None,
    before: str | None,
    tasks_file: str | None,
    as_json: bool,
):
    """Filter tasks by category and/or deadline."""
    try:
        descriptor = FilterTaskDescriptor(
            category=_category(category, level),
            date=TaskDeadline.parse(before) if before is not None else None,
        )
        command = FilterTaskCommand(descriptor)
    except TaskbookError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _run(command, tasks_file, as_json)


@main.command("edit")
@click.argument("index", type=int)
@click.option("--name", "-n", default=None, help="New task name")
@click.option("--description", default=None, help="New description")
@click.option("--category", "-c", default=None, help=CATEGORY_HELP)
@click.option("--level", "-l", type=int, default=None, help="Category level")
@click.option("--priority", "-p", default=None, help="Priority (low/medium/high)")
@click.option("--deadline", "-d", default=None, help="Deadline (YYYY-MM-DD)")
@click.option("--email", "-e", default=None, help="Email of the linked contact")
@click.option("--done/--not-done", "is_done", default=None, help="Mark the task done or not done")
@file_option
@json_option
def edit_task(
    index: int,
    name: str | None,
    description: str | None,
    category: str | None,
    level: int | None,
    priority: str | None,
    deadline: str | None,
    email: str | None,
    is_done: bool | None,
    tasks_file: str | None,
    as_json: bool,
):
    """Edit the task at INDEX (1-based). Changes are not saved."""
    try:
        descriptor = EditTaskDescriptor(
            name=TaskName(name) if name is not None else None,
            category=_category(category, level),
            description=Description(description) if description is not None else None,
            priority=Priority.parse(priority) if priority is not None else None,
            deadline=TaskDeadline.parse(deadline) if deadline is not None else None,
            email=Email(email) if email is not None else None,
            is_done=is_done,
        )
        command = EditTaskCommand(index, descriptor)
    except TaskbookError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _run(command, tasks_file, as_json)


@main.command("sort")
@file_option
@json_option
def sort_tasks(tasks_file: str | None, as_json: bool):
    """List tasks with incomplete ones first."""
    _run(SortTasksCommand(), tasks_file, as_json)
