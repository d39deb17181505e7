from typing import List
from pydantic import BaseModel, ConfigDict
from .user import UserOut


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    created_at: str
    status: int


class TaskWithResponsibles(TaskOut):
    responsibles: List[UserOut] = []


class TaskSaved(BaseModel):
    """Response body for task create and update."""
    message: str
    task: TaskOut
