"""In-memory task storage.

Tasks live in an insertion-ordered ``dict`` keyed by id. A single lock guards
the mapping and the id counter; every record handed out is a copy, so callers
never hold a live reference into the store.
"""
import logging
import threading
from typing import Dict, List, Optional

from .models import Priority, Task

logger = logging.getLogger(__name__)


class TodoNotFound(Exception):
    def __init__(self, todo_id: int):
        super().__init__(f"Todo with ID {todo_id} not found")
        self.todo_id = todo_id


def _snapshot(task: Task) -> Task:
    return Task(**task.model_dump())


class TodoStore:
    def __init__(self) -> None:
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, title: Optional[str], priority: Optional[str] = None) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                completed=False,
                priority=priority if priority is not None else Priority.MEDIUM.value,
            )
            self._next_id += 1
            self._tasks[task.id] = task
            created = _snapshot(task)
        logger.info("Created new todo: %s", created)
        return created

    def list_all(self) -> List[Task]:
        with self._lock:
            tasks = [_snapshot(t) for t in self._tasks.values()]
        logger.info("Retrieved all todos. Total count: %d", len(tasks))
        return tasks

    def get(self, todo_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(todo_id)
            found = _snapshot(task) if task is not None else None
        if found is None:
            logger.warning("Todo with ID %s not found", todo_id)
            raise TodoNotFound(todo_id)
        logger.info("Retrieved todo with ID: %s", todo_id)
        return found

    def replace(self, todo_id: int, todo: Task) -> Task:
        """Overwrite a stored todo, keeping its id, creation time and position."""
        with self._lock:
            current = self._tasks.get(todo_id)
            if current is not None:
                updated = Task(
                    id=todo_id,
                    title=todo.title,
                    completed=todo.completed,
                    created_at=current.created_at,
                    priority=todo.priority,
                )
                # re-assigning an existing key keeps its place in the dict
                self._tasks[todo_id] = updated
                updated = _snapshot(updated)
        if current is None:
            logger.warning("Todo with ID %s not found for update", todo_id)
            raise TodoNotFound(todo_id)
        logger.info("Updated todo with ID: %s", todo_id)
        return updated

    def delete(self, todo_id: int) -> None:
        with self._lock:
            removed = self._tasks.pop(todo_id, None)
        if removed is None:
            logger.warning("Todo with ID %s not found for deletion", todo_id)
            raise TodoNotFound(todo_id)
        logger.info("Deleted todo with ID: %s", todo_id)

    def toggle_completed(self, todo_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(todo_id)
            if task is not None:
                task.completed = not task.completed
                toggled = _snapshot(task)
        if task is None:
            logger.warning("Todo with ID %s not found for completion toggle", todo_id)
            raise TodoNotFound(todo_id)
        logger.info("Toggled completion status for todo ID: %s to %s", todo_id, toggled.completed)
        return toggled

    def list_by_completion(self, completed: bool) -> List[Task]:
        with self._lock:
            tasks = [_snapshot(t) for t in self._tasks.values() if t.completed == completed]
        logger.info("Retrieved %d todos with completion status: %s", len(tasks), completed)
        return tasks


store = TodoStore()

def get_store() -> TodoStore:
    return store
