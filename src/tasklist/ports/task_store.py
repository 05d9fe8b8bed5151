"""Task store interface."""

from typing import Protocol

from tasklist.core.tasks import Task


class TaskStore(Protocol):
    """Interface for an ordered task collection. Indices are 0-based."""

    def list(self) -> list[Task]:
        """Snapshot of all tasks in display order."""
        ...

    def add(self, task: Task) -> None:
        """Append a task."""
        ...

    def get(self, index: int) -> Task:
        """Return the task at index. Raises IndexError if out of range."""
        ...

    def remove(self, index: int) -> Task:
        """Remove and return the task at index."""
        ...

    def replace(self, index: int, task: Task) -> None:
        """Swap in a new task at index."""
        ...

    def __len__(self) -> int:
        ...
