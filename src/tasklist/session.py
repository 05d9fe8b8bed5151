"""Interactive task session.

Reads one action at a time and runs it to completion against a task store.
All prompting and re-prompting lives here; the core only sees validated values.
"""

import logging
from collections.abc import Callable
from datetime import date, time
from enum import Enum

import click

from .core.table import render_table
from .core.tasks import ParseError, Task, TaskPriority, current_date, parse_date, parse_time
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

NO_TASKS = "No tasks have been input"


class Action(Enum):
    ADD = "add"
    PRINT = "print"
    EDIT = "edit"
    DELETE = "delete"
    END = "end"


def ask(message: str) -> str:
    """Print a message on its own line and read one line of input."""
    click.echo(message)
    return click.prompt("", prompt_suffix="", default="", show_default=False)


def ask_priority() -> TaskPriority:
    tags = ", ".join(p.tag for p in TaskPriority)
    while True:
        answer = ask(f"Input the task priority ({tags}):").strip()
        if len(answer) != 1:
            continue
        try:
            return TaskPriority.from_tag(answer)
        except ValueError:
            continue


def ask_date() -> date:
    while True:
        try:
            return parse_date(ask("Input the date (yyyy-mm-dd):"))
        except ParseError:
            click.echo("The input date is invalid")


def ask_time() -> time:
    while True:
        try:
            return parse_time(ask("Input the time (hh:mm):"))
        except ParseError:
            click.echo("The input time is invalid")


def ask_content() -> list[str] | None:
    """Collect task lines until a blank one. Returns None if nothing was entered."""
    click.echo("Input a new task (enter a blank line to end):")
    lines = []
    while True:
        line = click.prompt("", prompt_suffix="", default="", show_default=False).strip()
        if not line:
            break
        lines.append(line)

    if not lines:
        click.echo("The task is blank")
        return None
    return lines


class TaskSession:
    """
    One interactive run over a task store.

    `save` is called on END; pass the file store's save method to persist.
    """

    def __init__(
        self,
        store: TaskStore,
        today: date | None = None,
        timezone: str = "UTC",
        save: Callable[[], None] | None = None,
        plain: bool = False,
    ):
        self.store = store
        self._today = today
        self.timezone = timezone
        self._save = save
        self.plain = plain

    @property
    def today(self) -> date:
        return self._today or current_date(self.timezone)

    def run(self) -> None:
        """Process actions until END."""
        while True:
            action = self.ask_action()
            self.handle(action)
            if action is Action.END:
                break

    def ask_action(self) -> Action:
        names = ", ".join(a.value for a in Action)
        while True:
            answer = ask(f"Input an action ({names}):")
            try:
                return Action(answer)
            except ValueError:
                click.echo("The input action is invalid")

    def handle(self, action: Action) -> None:
        logger.debug(f"Handling action {action.value}")
        match action:
            case Action.ADD:
                self.add_task()
            case Action.PRINT:
                self.print_tasks()
            case Action.EDIT:
                self.edit_task()
            case Action.DELETE:
                self.delete_task()
            case Action.END:
                if self._save is not None:
                    self._save()
                click.echo("Tasklist exiting!")

    def add_task(self) -> None:
        priority = ask_priority()
        due_date = ask_date()
        due_time = ask_time()
        content = ask_content()
        if content is None:
            return
        self.store.add(Task(content=content, priority=priority, due_date=due_date, due_time=due_time))

    def print_tasks(self) -> None:
        lines = render_table(self.store.list(), self.today, plain=self.plain)
        if not lines:
            click.echo(NO_TASKS)
            return
        for line in lines:
            click.echo(line)

    def choose_task(self) -> int:
        """Show the table, then read a 1-based task number."""
        self.print_tasks()
        count = len(self.store)
        while True:
            answer = ask(f"Input the task number (1-{count}):")
            number = int(answer) if answer.isascii() and answer.isdigit() else -1
            if 1 <= number <= count:
                return number
            click.echo("Invalid task number")

    def delete_task(self) -> None:
        if not len(self.store):
            click.echo(NO_TASKS)
            return
        number = self.choose_task()
        self.store.remove(number - 1)
        click.echo("The task is deleted")

    def edit_task(self) -> None:
        if not len(self.store):
            click.echo(NO_TASKS)
            return
        index = self.choose_task() - 1
        task = self.store.get(index)

        while True:
            field_name = ask("Input a field to edit (priority, date, time, task):")
            match field_name:
                case "priority":
                    task.priority = ask_priority()
                case "date":
                    task.due_date = ask_date()
                case "time":
                    task.due_time = ask_time()
                case "task":
                    content = ask_content()
                    if content is None:
                        return
                    task.content = content
                case _:
                    click.echo("Invalid field")
                    continue
            break

        self.store.replace(index, task)
        click.echo("The task is changed")
