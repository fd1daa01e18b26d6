# tests/test_todo_store.py

import threading
from datetime import datetime

import pytest

from todo_api.db.models import Task
from todo_api.db.store import TodoNotFound, TodoStore


def test_create_then_get(store: TodoStore) -> None:
    created = store.create("Buy milk")
    assert created.id == 1
    assert created.completed is False
    assert created.priority == "MEDIUM"

    fetched = store.get(created.id)
    assert fetched.title == "Buy milk"
    assert fetched.priority == "MEDIUM"
    assert fetched.created_at == created.created_at


def test_ids_strictly_increase_and_are_not_reused(store: TodoStore) -> None:
    ids = [store.create(f"task {i}").id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]

    store.delete(5)
    assert store.create("after delete").id == 6


def test_create_accepts_missing_title_and_free_text_priority(store: TodoStore) -> None:
    task = store.create(None, "URGENT")
    assert task.title is None
    assert task.priority == "URGENT"


def test_replace_keeps_created_at_and_path_id(store: TodoStore) -> None:
    original = store.create("Draft", "LOW")
    store.create("Other")

    incoming = Task(id=99, title="Final", completed=True, created_at=datetime(2000, 1, 1), priority="HIGH")
    updated = store.replace(original.id, incoming)

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert (updated.title, updated.completed, updated.priority) == ("Final", True, "HIGH")
    # position in the listing is unchanged
    assert [t.id for t in store.list_all()] == [1, 2]


def test_delete_then_get_is_not_found(store: TodoStore) -> None:
    task = store.create("Temporary")
    store.delete(task.id)
    with pytest.raises(TodoNotFound):
        store.get(task.id)


def test_double_toggle_restores_state(store: TodoStore) -> None:
    task = store.create("Flip me")
    assert store.toggle_completed(task.id).completed is True
    assert store.toggle_completed(task.id).completed is False


def test_completion_filters_partition_listing(store: TodoStore) -> None:
    for i in range(6):
        store.create(f"t{i}")
    store.toggle_completed(2)
    store.toggle_completed(5)
    store.delete(3)
    store.replace(4, Task(title="t3 redone", completed=True))

    done = store.list_by_completion(True)
    todo = store.list_by_completion(False)
    done_ids = {t.id for t in done}
    todo_ids = {t.id for t in todo}

    assert done_ids == {2, 4, 5}
    assert done_ids.isdisjoint(todo_ids)
    assert done_ids | todo_ids == {t.id for t in store.list_all()}


def test_filter_on_empty_store_is_empty(store: TodoStore) -> None:
    assert store.list_by_completion(True) == []
    assert store.list_all() == []


@pytest.mark.parametrize("op", ["get", "delete", "toggle_completed"])
def test_unknown_id_is_not_found(store: TodoStore, op: str) -> None:
    store.create("exists")
    with pytest.raises(TodoNotFound) as exc:
        getattr(store, op)(42)
    assert exc.value.todo_id == 42


def test_replace_unknown_id_is_not_found(store: TodoStore) -> None:
    with pytest.raises(TodoNotFound):
        store.replace(7, Task(title="ghost"))


def test_returned_records_are_copies(store: TodoStore) -> None:
    task = store.create("Snapshot")
    task.title = "mutated outside"
    task.completed = True
    stored = store.get(task.id)
    assert stored.title == "Snapshot"
    assert stored.completed is False


def test_worked_example(store: TodoStore) -> None:
    milk = store.create("Buy milk")
    bills = store.create("Pay bills", "HIGH")
    assert (milk.id, milk.priority) == (1, "MEDIUM")
    assert (bills.id, bills.priority) == (2, "HIGH")

    store.delete(1)
    with pytest.raises(TodoNotFound):
        store.get(1)
    assert [t.id for t in store.list_all()] == [2]


def test_concurrent_creates_get_unique_ids(store: TodoStore) -> None:
    def worker() -> None:
        for _ in range(50):
            store.create("parallel")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [t.id for t in store.list_all()]
    assert len(ids) == 400
    assert sorted(ids) == list(range(1, 401))
