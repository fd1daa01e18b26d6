# backend/todo_api/client.py
import logging
from typing import Any, Optional

import requests

from .core.config import settings

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    pass


class TodoClient:
    """Thin requests-based client for the /api/todos endpoints."""

    def __init__(self, base_url: str = settings.API_URL, timeout: float = settings.CLIENT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _call(self, method: str, path: str, error: str, json: Optional[dict] = None) -> requests.Response:
        try:
            r = requests.request(method, f"{self.base_url}{path}", json=json, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TodoApiError(error) from e
        return r

    def health(self) -> dict:
        return self._call("GET", "/health", "API server is not reachable.").json()

    def fetch_todos(self) -> list:
        r = self._call("GET", "/todos", "Failed to fetch todos. Please ensure the API server is running.")
        return r.json()

    def create_todo(self, title: str, priority: Optional[str] = None) -> dict:
        payload: dict[str, Any] = {"title": title}
        if priority is not None:
            payload["priority"] = priority
        return self._call("POST", "/todos", "Failed to create todo. Please try again.", json=payload).json()

    def update_todo(self, todo: dict) -> dict:
        r = self._call("PUT", f"/todos/{todo['id']}", "Failed to update todo. Please try again.", json=todo)
        return r.json()

    def delete_todo(self, todo_id: int) -> bool:
        self._call("DELETE", f"/todos/{todo_id}", "Failed to delete todo. Please try again.")
        return True

    def toggle_todo_complete(self, todo_id: int) -> dict:
        r = self._call("PATCH", f"/todos/{todo_id}/complete", "Failed to update todo status. Please try again.")
        return r.json()

    def get_todos_by_completion_status(self, completed: bool) -> list:
        status = "true" if completed else "false"
        r = self._call("GET", f"/todos/completed/{status}", "Failed to filter todos. Please try again.")
        return r.json()

    def get_todo_by_id(self, todo_id: int) -> dict:
        return self._call("GET", f"/todos/{todo_id}", "Failed to fetch todo. Please try again.").json()


if __name__ == "__main__":
    client = TodoClient()
    print("--- Testing Todo API ---")
    print("Health:", client.health())
    created = client.create_todo("Buy milk")
    print("Create:", created)
    print("Create:", client.create_todo("Pay bills", "HIGH"))
    print("Toggle:", client.toggle_todo_complete(created["id"]))
    print("Completed:", client.get_todos_by_completion_status(True))
    print("Delete:", client.delete_todo(created["id"]))
    print("List:", client.fetch_todos())
