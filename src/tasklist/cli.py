"""tasklist CLI - interactive task manager."""

import json
import logging
import sys

import click

from .adapters.json_file import JsonFileTaskStore, TaskStoreError
from .config import load_config
from .core.table import render_table
from .core.tasks import current_date
from .session import NO_TASKS, TaskSession


def _open_store(ctx: click.Context) -> JsonFileTaskStore:
    """Load the tasks file chosen by --file or the config."""
    store = JsonFileTaskStore(ctx.obj["tasks_file"])
    try:
        store.load()
    except TaskStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return store


@click.group(invoke_without_command=True)
@click.version_option(package_name="tasklist")
@click.option("--file", "-f", "tasks_file", default=None, help="Tasks file (default from config)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, tasks_file: str | None, debug: bool):
    """tasklist - interactive task manager."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["tasks_file"] = tasks_file or config.tasks_path

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@main.command()
@click.option("--no-color", "plain", is_flag=True, help="Show tag letters instead of color swatches")
@click.pass_context
def run(ctx, plain: bool = False):
    """Start the interactive session (the default)."""
    config = ctx.obj["config"]
    store = _open_store(ctx)

    def save():
        try:
            store.save()
        except TaskStoreError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    session = TaskSession(store, timezone=config.timezone, save=save, plain=plain)
    session.run()


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-color", "plain", is_flag=True, help="Show tag letters instead of color swatches")
@click.pass_context
def list_tasks(ctx, as_json: bool, plain: bool):
    """Print the task table."""
    config = ctx.obj["config"]
    store = _open_store(ctx)
    tasks = store.list()
    today = current_date(config.timezone)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {**t.to_dict(), "due": t.due_tag(today).name}
                    for t in tasks
                ],
                indent=2,
            )
        )
        return

    lines = render_table(tasks, today, plain=plain)
    if not lines:
        click.echo(NO_TASKS)
        return
    for line in lines:
        click.echo(line)


if __name__ == "__main__":
    main()
