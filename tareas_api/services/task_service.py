"""In-memory task store with identifier assignment."""

import logging
from threading import RLock
from typing import List, Optional, Tuple

from ..errors import ErrorKind, TaskError
from ..models.task import Task, TaskPriority, TaskStatus, utc_now
from ..schemas import TaskPayload

logger = logging.getLogger(__name__)


class TaskStore:
    """Process-lifetime collection of tasks kept in creation order.

    Every public method runs under a single re-entrant lock, so the
    composite operations below can call the primitives while holding it.
    Records handed out are copies; the stored objects never leave the store.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._tasks: List[Task] = []
        self._last_id = 0
        self._lock = RLock()
        logger.info("Task store initialized with in-memory storage")

    # Primitive operations

    def next_id(self) -> int:
        """Return the next identifier, starting at 1. Ids are never reused."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    def find(self, task_id: int) -> Optional[Tuple[Task, int]]:
        """Find a task by ID.

        Args:
            task_id: Task ID

        Returns:
            ``(task, position)`` of the first match, None if absent
        """
        with self._lock:
            for position, task in enumerate(self._tasks):
                if task.id == task_id:
                    return task, position
            return None

    def insert(self, task: Task) -> None:
        with self._lock:
            self._tasks.append(task)

    def replace_at(self, position: int, task: Task) -> None:
        with self._lock:
            self._tasks[position] = task

    def remove_at(self, position: int) -> None:
        with self._lock:
            del self._tasks[position]

    def list_all(self) -> List[Task]:
        """List every task in store order."""
        with self._lock:
            tasks = [task.model_copy() for task in self._tasks]
            logger.debug(f"Listed {len(tasks)} tasks")
            return tasks

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    # Composite operations

    def create_task(self, payload: TaskPayload) -> Task:
        """Create a task from a decoded payload.

        Empty status and priority fall back to ``pending`` and ``medium``;
        any other value is stored as given.

        Args:
            payload: Decoded request body

        Returns:
            The stored task, with id and creation time assigned

        Raises:
            TaskError: MISSING_TITLE if the title is empty
        """
        if payload.title == "":
            raise TaskError(ErrorKind.MISSING_TITLE)

        with self._lock:
            task = Task(
                id=self.next_id(),
                title=payload.title,
                description=payload.description,
                status=payload.status or TaskStatus.PENDING.value,
                priority=payload.priority or TaskPriority.MEDIUM.value,
                created_at=utc_now(),
            )
            self.insert(task)

            logger.info(f"Created task {task.id}: {task.title}")
            return task.model_copy()

    def get_task(self, task_id: int) -> Task:
        """Get a task by ID.

        Raises:
            TaskError: NOT_FOUND if no task has this ID
        """
        with self._lock:
            found = self.find(task_id)
            if found is None:
                logger.debug(f"Task {task_id} not found")
                raise TaskError(ErrorKind.NOT_FOUND)

            task, _ = found
            logger.debug(f"Retrieved task {task_id}: {task.title}")
            return task.model_copy()

    def update_task(self, task_id: int, payload: TaskPayload) -> Task:
        """Replace a task with the payload, keeping its id and creation time.

        This is a full replacement: fields missing from the payload become
        empty. Status and priority are not checked against the enumerations.

        Args:
            task_id: Task ID
            payload: Decoded request body

        Returns:
            The updated task

        Raises:
            TaskError: NOT_FOUND if no task has this ID, EMPTY_TITLE if the
                payload title is empty
        """
        with self._lock:
            found = self.find(task_id)
            if found is None:
                logger.warning(f"Task {task_id} not found for update")
                raise TaskError(ErrorKind.NOT_FOUND)

            if payload.title == "":
                raise TaskError(ErrorKind.EMPTY_TITLE)

            existing, position = found
            task = Task(
                id=existing.id,
                title=payload.title,
                description=payload.description,
                status=payload.status,
                priority=payload.priority,
                created_at=existing.created_at,
            )
            self.replace_at(position, task)

            logger.info(f"Updated task {task_id}: {task.title}")
            return task.model_copy()

    def delete_task(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            TaskError: NOT_FOUND if no task has this ID
        """
        with self._lock:
            found = self.find(task_id)
            if found is None:
                logger.warning(f"Task {task_id} not found for deletion")
                raise TaskError(ErrorKind.NOT_FOUND)

            task, position = found
            self.remove_at(position)
            logger.info(f"Deleted task {task_id}: {task.title}")

    def clear(self) -> int:
        """Remove all tasks (for testing/development).

        The id counter is left untouched so ids are still never reused.

        Returns:
            Number of tasks that were cleared
        """
        with self._lock:
            count = len(self._tasks)
            self._tasks.clear()
            logger.warning(f"Cleared all {count} tasks")
            return count
