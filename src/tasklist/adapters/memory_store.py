"""In-memory task store adapter."""

from tasklist.core.tasks import Task


class InMemoryTaskStore:
    """
    List-backed task store.

    Implements TaskStore protocol. Insertion order is display order.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def replace(self, index: int, task: Task) -> None:
        self._check_index(index)
        self._tasks[index] = task

    def _check_index(self, index: int) -> None:
        # Negative indices would silently wrap around.
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"Task index out of range: {index}")

    def __len__(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        return list(self._tasks)
