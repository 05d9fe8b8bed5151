"""Functional core - pure business logic with no I/O."""

from .tasks import (
    DueTag,
    ParseError,
    Task,
    TaskPriority,
    classify_due,
    current_date,
    parse_date,
    parse_time,
)
from .table import render_table, wrap_line

__all__ = [
    # Tasks
    "Task",
    "TaskPriority",
    "DueTag",
    "ParseError",
    "classify_due",
    "current_date",
    "parse_date",
    "parse_time",
    # Table
    "render_table",
    "wrap_line",
]
