"""Task operations, including the partial update merge."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlmodel import Session

from ..crud import TaskStorage, UserStorage
from ..db.session import get_session
from ..errors import ConflictError, NotFoundError
from ..models import Task
from ..schemas.common import Message
from ..schemas.task import TaskOut, TaskSaved, TaskWithResponsibles
from ..schemas.user import UserOut
from ..validation import TASK_UPDATE_FIELDS, validate_new_task, validate_task_update

logger = logging.getLogger(__name__)


def merge_task_changes(task: Task, changes: Dict[str, Any]) -> Dict[str, Any]:
    """Merge supplied values over the stored ones.

    A supplied value only wins when it is truthy: an empty string or a 0
    keeps whatever is stored, so this endpoint can neither blank a text
    field nor reset status to 0.
    """
    merged = {}
    for column in TASK_UPDATE_FIELDS.values():
        new_value = changes.get(column)
        merged[column] = new_value if new_value else getattr(task, column)
    return merged


class TaskService:
    def __init__(self, storage: TaskStorage, users: UserStorage):
        self.storage = storage
        self.users = users

    def list_tasks(self, search: Optional[str] = None) -> List[TaskOut]:
        return [TaskOut.model_validate(task) for task in self.storage.list_tasks(search)]

    def create_task(self, payload: dict) -> TaskSaved:
        """Validate and insert a task.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the id is already taken
        """
        new_task = validate_new_task(payload)

        if self.storage.get_task_by_id(new_task.id) is not None:
            raise ConflictError("'id' already exists")

        task = self.storage.add_task(
            task_id=new_task.id,
            title=new_task.title,
            description=new_task.description,
        )
        logger.info(f"Task created: {task.id}")
        return TaskSaved(message="Task created successfully", task=TaskOut.model_validate(task))

    def update_task(self, task_id: str, payload: dict) -> TaskSaved:
        """Apply a partial update to an existing task.

        Raises:
            ValidationError: If a supplied field is malformed
            NotFoundError: If no task has task_id
            ConflictError: If the task is renamed to an id already in use
        """
        changes = validate_task_update(payload)

        task = self.storage.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError("'id' not found")

        merged = merge_task_changes(task, changes)
        if merged["id"] != task.id and self.storage.get_task_by_id(merged["id"]) is not None:
            raise ConflictError("'id' already exists")

        task = self.storage.update_task(task, merged)
        logger.info(f"Task updated: {task_id} -> {task.id}")
        return TaskSaved(message="Task updated successfully", task=TaskOut.model_validate(task))

    def delete_task(self, task_id: str) -> Message:
        task = self.storage.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError("'id' not found")

        self.storage.delete_task(task)
        logger.info(f"Task deleted: {task_id}")
        return Message(message="Task deleted successfully")

    def assign_user(self, task_id: str, user_id: str) -> Message:
        """Make a user responsible for a task.

        Raises:
            NotFoundError: If the task or the user does not exist
            ConflictError: If the user is already assigned
        """
        if self.storage.get_task_by_id(task_id) is None:
            raise NotFoundError("'taskId' not found")
        if self.users.get_user_by_id(user_id) is None:
            raise NotFoundError("'userId' not found")
        if self.storage.get_assignment(task_id, user_id) is not None:
            raise ConflictError("User is already assigned to this task")

        self.storage.assign_user(task_id, user_id)
        logger.info(f"User {user_id} assigned to task {task_id}")
        return Message(message="User assigned to task successfully")

    def unassign_user(self, task_id: str, user_id: str) -> Message:
        if self.storage.get_task_by_id(task_id) is None:
            raise NotFoundError("'taskId' not found")
        if self.users.get_user_by_id(user_id) is None:
            raise NotFoundError("'userId' not found")

        link = self.storage.get_assignment(task_id, user_id)
        if link is None:
            raise NotFoundError("User is not assigned to this task")

        self.storage.unassign_user(link)
        logger.info(f"User {user_id} removed from task {task_id}")
        return Message(message="User removed from task successfully")

    def list_tasks_with_responsibles(self) -> List[TaskWithResponsibles]:
        result = []
        for task, users in self.storage.list_tasks_with_users():
            item = TaskWithResponsibles.model_validate(task)
            item.responsibles = [UserOut.model_validate(user) for user in users]
            result.append(item)
        return result


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    return TaskService(TaskStorage(session), UserStorage(session))
