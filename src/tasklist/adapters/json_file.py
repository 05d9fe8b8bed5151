"""JSON file-backed task store adapter."""

import json
import logging
from pathlib import Path

from tasklist.core.tasks import Task

from .memory_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


class TaskStoreError(RuntimeError):
    """Raised when the tasks file cannot be read or written."""


class JsonFileTaskStore(InMemoryTaskStore):
    """
    Task store persisted as a JSON array.

    Implements TaskStore protocol. Each record has the keys
    task, priority, taskDate and taskTime.
    """

    def __init__(self, path: Path | str):
        super().__init__()
        self.path = Path(path).expanduser()

    def load(self) -> None:
        """Replace the in-memory tasks with the file's contents. Missing file means no tasks."""
        if not self.path.exists():
            logger.info(f"No tasks file at {self.path}, starting empty")
            self._tasks = []
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise TaskStoreError(f"Tasks file {self.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise TaskStoreError(f"Tasks file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise TaskStoreError(f"Cannot read tasks file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise TaskStoreError(f"Tasks file {self.path} must contain a JSON array")

        tasks = []
        for position, record in enumerate(data):
            if record is None:
                continue
            try:
                tasks.append(Task.from_dict(record))
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise TaskStoreError(f"Bad task record #{position + 1} in {self.path}: {e}") from e

        self._tasks = tasks
        logger.info(f"Loaded {len(tasks)} task(s) from {self.path}")

    def save(self) -> None:
        """Write all tasks to the file, overwriting it."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps([t.to_dict() for t in self._tasks], indent=2), encoding="utf-8")
        except OSError as e:
            raise TaskStoreError(f"Cannot write tasks file {self.path}: {e}") from e
        logger.info(f"Saved {len(self._tasks)} task(s) to {self.path}")
