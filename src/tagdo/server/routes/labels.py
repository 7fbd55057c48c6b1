"""Label routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from tagdo.repositories import CreateLabel, Label, LabelRepository
from tagdo.server.routes.deps import get_label_repository

router = APIRouter()

LabelRepo = Annotated[LabelRepository, Depends(get_label_repository)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_label(payload: CreateLabel, repository: LabelRepo) -> Label:
    return await repository.create(payload.name)


@router.get("")
async def all_label(repository: LabelRepo) -> list[Label]:
    return await repository.all()


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_label(id: int, repository: LabelRepo) -> Response:
    await repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
