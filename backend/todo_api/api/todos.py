from fastapi import APIRouter, Depends, HTTPException, Response
from ..db.models import Task
from ..db.store import TodoNotFound, TodoStore, get_store
from ..schemas.todos import TodoCreate, TodoOut, TodoUpdate
from ..services.status import parse_completion_status
from typing import List

router = APIRouter(prefix="/todos", tags=["todos"])

def _not_found(e: TodoNotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))

@router.post("", response_model=TodoOut)
def create(body: TodoCreate, store: TodoStore = Depends(get_store)):
    return store.create(body.title, body.priority)

@router.get("", response_model=List[TodoOut])
def list_all(store: TodoStore = Depends(get_store)):
    return store.list_all()

@router.get("/completed/{status}", response_model=List[TodoOut])
def list_by_completion(status: str, store: TodoStore = Depends(get_store)):
    try:
        completed = parse_completion_status(status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return store.list_by_completion(completed)

@router.get("/{todo_id}", response_model=TodoOut)
def get_one(todo_id: int, store: TodoStore = Depends(get_store)):
    try:
        return store.get(todo_id)
    except TodoNotFound as e:
        raise _not_found(e)

@router.put("/{todo_id}", response_model=TodoOut)
def replace(todo_id: int, body: TodoUpdate, store: TodoStore = Depends(get_store)):
    try:
        return store.replace(todo_id, Task(**body.model_dump()))
    except TodoNotFound as e:
        raise _not_found(e)

@router.delete("/{todo_id}")
def delete(todo_id: int, store: TodoStore = Depends(get_store)):
    try:
        store.delete(todo_id)
    except TodoNotFound as e:
        raise _not_found(e)
    return Response(status_code=200)

@router.patch("/{todo_id}/complete", response_model=TodoOut)
def toggle_complete(todo_id: int, store: TodoStore = Depends(get_store)):
    try:
        return store.toggle_completed(todo_id)
    except TodoNotFound as e:
        raise _not_found(e)
