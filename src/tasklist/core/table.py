"""Pure table rendering logic - no I/O dependencies.

Column layout (content widths, excluding the one-space padding on each side):

    | N  |    Date    | Time  | P | D |                   Task                     |

Color columns hold ANSI escape swatches that display as a single cell, so they
are inserted as-is and never go through width padding.
"""

from collections.abc import Sequence
from datetime import date

from .tasks import Task

INDEX_WIDTH = 2
DATE_WIDTH = 10
TIME_WIDTH = 5
CONTENT_WIDTH = 44

BLANK_MARKER = " "

_HEADER = "| N  |    Date    | Time  | P | D |                   Task                     |"


def wrap_line(line: str, width: int = CONTENT_WIDTH) -> list[str]:
    """
    Split a line into contiguous chunks of at most `width` characters.

    Pure function - no I/O. Breaks mid-word. An empty line yields one empty
    chunk so that it still occupies a table row; a line whose length is an
    exact multiple of `width` yields no trailing empty chunk.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    return [line[i : i + width] for i in range(0, len(line), width)] or [""]


def horizontal_line() -> str:
    """Full-width separator line."""
    cells = [INDEX_WIDTH + 2, DATE_WIDTH + 2, TIME_WIDTH + 2, 3, 3, CONTENT_WIDTH]
    return "+" + "+".join("-" * n for n in cells) + "+"


def table_header() -> list[str]:
    return [horizontal_line(), _HEADER, horizontal_line()]


def format_row(
    content: str,
    index: str = "",
    date_str: str = "",
    time_str: str = "",
    priority_marker: str = BLANK_MARKER,
    due_marker: str = BLANK_MARKER,
) -> str:
    """Format one table row. Markers are treated as single display cells."""
    return (
        f"| {index:<{INDEX_WIDTH}} | {date_str:<{DATE_WIDTH}} | {time_str:<{TIME_WIDTH}} "
        f"| {priority_marker} | {due_marker} |{content:<{CONTENT_WIDTH}}|"
    )


def task_rows(task: Task, number: int, today: date, plain: bool = False) -> list[str]:
    """
    Rows for a single task, without the trailing separator.

    Only the first chunk of the first content line carries the task's
    number, date, time and markers.
    """
    due = task.due_tag(today)
    if plain:
        priority_marker, due_marker = task.priority.tag, due.tag
    else:
        priority_marker, due_marker = task.priority.color, due.color

    rows = []
    for line in task.content:
        for chunk in wrap_line(line, CONTENT_WIDTH):
            if not rows:
                rows.append(
                    format_row(
                        chunk,
                        index=str(number),
                        date_str=task.date_str,
                        time_str=task.time_str,
                        priority_marker=priority_marker,
                        due_marker=due_marker,
                    )
                )
            else:
                rows.append(format_row(chunk))
    return rows


def render_table(tasks: Sequence[Task], today: date, plain: bool = False) -> list[str]:
    """
    Render tasks as a bordered table, one separator after each task.

    Pure function - no I/O. Returns no lines at all for an empty task list;
    callers print their own "no tasks" message instead.
    """
    if not tasks:
        return []

    lines = table_header()
    for number, task in enumerate(tasks, start=1):
        lines.extend(task_rows(task, number, today, plain))
        lines.append(horizontal_line())
    return lines
