from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ..schemas.common import Message
from ..schemas.task import TaskOut, TaskSaved, TaskWithResponsibles
from ..services.tasks import TaskService, get_task_service

router = APIRouter()


@router.get("", response_model=List[TaskOut])
def get_tasks(
    q: Optional[str] = Query(None, description="Substring of the title or description"),
    service: TaskService = Depends(get_task_service),
):
    return service.list_tasks(q)


@router.get("/users", response_model=List[TaskWithResponsibles])
def get_tasks_with_responsibles(service: TaskService = Depends(get_task_service)):
    return service.list_tasks_with_responsibles()


@router.post("", response_model=TaskSaved, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: Dict[str, Any] = Body(default={}),
    service: TaskService = Depends(get_task_service),
):
    return service.create_task(payload)


@router.put("/{task_id}", response_model=TaskSaved)
def update_task(
    task_id: str,
    payload: Dict[str, Any] = Body(default={}),
    service: TaskService = Depends(get_task_service),
):
    return service.update_task(task_id, payload)


@router.delete("/{task_id}", response_model=Message)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return service.delete_task(task_id)


@router.post("/{task_id}/users/{user_id}", response_model=Message, status_code=status.HTTP_201_CREATED)
def assign_user_to_task(
    task_id: str,
    user_id: str,
    service: TaskService = Depends(get_task_service),
):
    return service.assign_user(task_id, user_id)


@router.delete("/{task_id}/users/{user_id}", response_model=Message)
def remove_user_from_task(
    task_id: str,
    user_id: str,
    service: TaskService = Depends(get_task_service),
):
    return service.unassign_user(task_id, user_id)
