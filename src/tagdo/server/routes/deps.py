"""Request dependencies for the resource routes."""

from fastapi import Request

from tagdo.repositories import LabelRepository, TodoRepository


def get_todo_repository(request: Request) -> TodoRepository:
    return request.app.state.repositories.todos


def get_label_repository(request: Request) -> LabelRepository:
    return request.app.state.repositories.labels
