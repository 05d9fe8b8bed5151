"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from zoneinfo import ZoneInfo


class ParseError(ValueError):
    """Raised when user-supplied date or time text is not a valid value."""


def _marker(code: int) -> str:
    """A one-cell ANSI background swatch."""
    return f"\x1b[{code}m \x1b[0m"


class TaskPriority(Enum):
    """User-assigned importance level, with its tag letter and color marker."""

    CRITICAL = ("C", _marker(101))
    HIGH = ("H", _marker(103))
    NORMAL = ("N", _marker(102))
    LOW = ("L", _marker(104))

    def __init__(self, tag: str, color: str):
        self.tag = tag
        self.color = color

    @classmethod
    def from_tag(cls, tag: str) -> "TaskPriority":
        """Look up a priority by its single-letter tag (case-insensitive)."""
        tag = tag.strip().upper()
        for priority in cls:
            if priority.tag == tag:
                return priority
        raise ValueError(f"Unknown priority tag: {tag!r}")

    @classmethod
    def parse(cls, value: str) -> "TaskPriority":
        """Accept either a tag letter or a member name, as found in saved files."""
        value = value.strip().upper()
        if value in cls.__members__:
            return cls[value]
        return cls.from_tag(value)


class DueTag(Enum):
    """Urgency derived from the due date. Never persisted."""

    IN_TIME = ("I", _marker(102))
    TODAY = ("T", _marker(103))
    OVERDUE = ("O", _marker(101))

    def __init__(self, tag: str, color: str):
        self.tag = tag
        self.color = color


def classify_due(due_date: date, today: date) -> DueTag:
    """
    Classify a due date relative to today.

    Pure function - no I/O.
    """
    days_until = (due_date - today).days
    if days_until == 0:
        return DueTag.TODAY
    elif days_until > 0:
        return DueTag.IN_TIME
    else:
        return DueTag.OVERDUE


def current_date(tz: str = "UTC") -> date:
    """Today's calendar date in the given zone."""
    return datetime.now(ZoneInfo(tz)).date()


@dataclass
class Task:
    """A task: multi-line text plus priority and due date/time."""

    content: list[str] = field(default_factory=list)
    priority: TaskPriority = TaskPriority.NORMAL
    due_date: date = field(default_factory=current_date)
    due_time: time = field(default_factory=time)

    @property
    def date_str(self) -> str:
        return self.due_date.isoformat()

    @property
    def time_str(self) -> str:
        return self.due_time.strftime("%H:%M")

    def due_tag(self, today: date | None = None) -> DueTag:
        today = today or current_date()
        return classify_due(self.due_date, today)

    def to_dict(self) -> dict:
        """Serialize to the on-disk record layout."""
        return {
            "task": list(self.content),
            "priority": self.priority.name,
            "taskDate": self.date_str,
            "taskTime": self.time_str,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from a saved record."""
        content = data["task"]
        if not isinstance(content, list) or not all(isinstance(line, str) for line in content):
            raise ValueError("task must be a list of strings")
        if not any(line.strip() for line in content):
            raise ValueError("task has no non-blank line")
        return cls(
            content=list(content),
            priority=TaskPriority.parse(data.get("priority", "NORMAL")),
            due_date=parse_date(data["taskDate"]),
            due_time=parse_time(data["taskTime"]),
        )


def parse_date(text: str) -> date:
    """
    Parse a yyyy-mm-dd date, tolerating unpadded components ("2023-6-5").

    Raises ParseError on anything that is not a real calendar date.
    """
    parts = text.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ParseError(f"Invalid date: {text!r}")
    year, month, day = parts
    padded = f"{year.zfill(4)}-{month.zfill(2)}-{day.zfill(2)}"
    try:
        return date.fromisoformat(padded)
    except ValueError as e:
        raise ParseError(f"Invalid date: {text!r}") from e


def parse_time(text: str) -> time:
    """
    Parse an hh:mm time, tolerating unpadded components ("9:5").

    Raises ParseError unless there are exactly two in-range parts.
    """
    parts = text.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() and len(p) <= 2 for p in parts):
        raise ParseError(f"Invalid time: {text!r}")
    try:
        return time(int(parts[0]), int(parts[1]))
    except ValueError as e:
        raise ParseError(f"Invalid time: {text!r}") from e
