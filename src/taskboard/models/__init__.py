"""Models package."""
from .user import User
from .task import Task, TaskStatus
from .user_task import UserTask

__all__ = ["User", "Task", "TaskStatus", "UserTask"]
