"""Todo Routes — CRUD over the in-memory todo store.

Invariants:
    - Unknown ids → 404 RESOURCE_NOT_FOUND (the store itself returns None/False)
    - PATCH applies only the fields present in the body
    - Ids in responses come from the store, never from the client

Design Decisions:
    - Handlers are async with no awaits inside store calls: each operation
      runs to completion on the event loop
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_todo_store
from app.core.errors import ResourceNotFoundError
from app.core.todo_store import Todo, TodoStore
from app.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/todos", tags=["todos"])


def _to_response(todo: Todo) -> TodoResponse:
    return TodoResponse(id=todo.id, title=todo.title, completed=todo.completed)


def _not_found(todo_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError("Todo", str(todo_id))


@router.get("", response_model=list[TodoResponse])
async def list_todos(store: TodoStore = Depends(get_todo_store)):
    """List todos in creation order."""
    return [_to_response(t) for t in store.list()]


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    todo = store.get(todo_id)
    if todo is None:
        raise _not_found(todo_id)
    return _to_response(todo)


@router.post(
    "", response_model=TodoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, store: TodoStore = Depends(get_todo_store),
):
    todo = store.create(body.title)
    logger.info("Todo created", extra={"todo_id": todo.id})
    return _to_response(todo)


@router.patch("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: int, body: TodoUpdate, store: TodoStore = Depends(get_todo_store),
):
    """Update title and/or completed flag."""
    todo = store.update(todo_id, **body.model_dump(exclude_unset=True))
    if todo is None:
        raise _not_found(todo_id)
    return _to_response(todo)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    if not store.remove(todo_id):
        raise _not_found(todo_id)
    logger.info("Todo deleted", extra={"todo_id": todo_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
