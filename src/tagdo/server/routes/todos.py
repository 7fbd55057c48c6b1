"""Todo routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from tagdo.repositories import CreateTodo, Todo, TodoRepository, UpdateTodo
from tagdo.server.routes.deps import get_todo_repository

router = APIRouter()

TodoRepo = Annotated[TodoRepository, Depends(get_todo_repository)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo(payload: CreateTodo, repository: TodoRepo) -> Todo:
    return await repository.create(payload)


@router.get("")
async def all_todo(repository: TodoRepo) -> list[Todo]:
    return await repository.all()


@router.get("/{id}")
async def find_todo(id: int, repository: TodoRepo) -> Todo:
    return await repository.find(id)


@router.patch("/{id}", status_code=status.HTTP_201_CREATED)
async def update_todo(id: int, payload: UpdateTodo, repository: TodoRepo) -> Todo:
    return await repository.update(id, payload)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(id: int, repository: TodoRepo) -> Response:
    await repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
