"""Storage layer for persisting users and tasks to the relational store."""

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, or_, select

from .errors import ConflictError, StoreError
from .models import Task, User, UserTask

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def store_operation(operation: str) -> Callable[[F], F]:
    """Roll back and re-raise driver failures as StoreError.

    Errors that are already part of the API taxonomy pass through untouched.
    """
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                self.session.rollback()
                logger.error(f"Store failure during {operation}: {e}")
                raise StoreError(str(e.orig) if getattr(e, "orig", None) else str(e), operation) from e
        return wrapper  # type: ignore[return-value]
    return decorator


class UserStorage:
    """Reads and writes rows of the users table.

    Attributes:
        session: Session bound to the current request
    """

    def __init__(self, session: Session):
        self.session = session

    @store_operation("list users")
    def list_users(self, search: Optional[str] = None) -> List[User]:
        """Get all users, optionally filtered by a substring of their name.

        Args:
            search: Case-insensitive substring to match against name

        Returns:
            List of User objects
        """
        statement = select(User)
        if search is not None:
            statement = statement.where(User.name.ilike(f"%{search}%"))
        return list(self.session.exec(statement).all())

    @store_operation("get user")
    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    @store_operation("get user")
    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    @store_operation("insert user")
    def add_user(self, user_id: str, name: str, email: str, password_hash: str) -> User:
        """Insert a new user.

        The unique constraints on id and email are the final word on
        duplicates; a violation is reported as a conflict on whichever
        field already exists.

        Raises:
            ConflictError: If the id or the email is already taken
        """
        user = User(id=user_id, name=name, email=email, password=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            if self.session.get(User, user_id) is not None:
                raise ConflictError("'id' already exists")
            raise ConflictError("'email' already exists")
        self.session.refresh(user)
        return user

    @store_operation("delete user")
    def delete_user(self, user: User) -> None:
        """Delete a user and its task assignments in a single transaction."""
        links = self.session.exec(select(UserTask).where(UserTask.user_id == user.id)).all()
        for link in links:
            self.session.delete(link)
        self.session.flush()
        self.session.delete(user)
        self.session.commit()


class TaskStorage:
    """Reads and writes rows of the tasks and users_tasks tables.

    Attributes:
        session: Session bound to the current request
    """

    def __init__(self, session: Session):
        self.session = session

    @store_operation("list tasks")
    def list_tasks(self, search: Optional[str] = None) -> List[Task]:
        """Get all tasks, optionally filtered by keyword.

        Args:
            search: Case-insensitive substring matched against title or description

        Returns:
            List of Task objects
        """
        statement = select(Task)
        if search is not None:
            pattern = f"%{search}%"
            statement = statement.where(
                or_(Task.title.ilike(pattern), Task.description.ilike(pattern))
            )
        return list(self.session.exec(statement).all())

    @store_operation("get task")
    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self.session.get(Task, task_id)

    @store_operation("insert task")
    def add_task(self, task_id: str, title: str, description: str) -> Task:
        """Insert a new task; created_at and status take their defaults.

        Raises:
            ConflictError: If the id is already taken
        """
        task = Task(id=task_id, title=title, description=description)
        self.session.add(task)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("'id' already exists")
        self.session.refresh(task)
        return task

    @store_operation("update task")
    def update_task(self, task: Task, changes: Dict[str, Any]) -> Task:
        """Write already-merged field values onto an existing task.

        Args:
            task: Task loaded in this session
            changes: Column names and their new values

        Returns:
            The refreshed Task
        """
        for field, value in changes.items():
            setattr(task, field, value)
        self.session.add(task)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("'id' already exists")
        self.session.refresh(task)
        return task

    @store_operation("delete task")
    def delete_task(self, task: Task) -> None:
        """Delete a task and its user assignments in a single transaction."""
        links = self.session.exec(select(UserTask).where(UserTask.task_id == task.id)).all()
        for link in links:
            self.session.delete(link)
        self.session.flush()
        self.session.delete(task)
        self.session.commit()

    @store_operation("get assignment")
    def get_assignment(self, task_id: str, user_id: str) -> Optional[UserTask]:
        return self.session.get(UserTask, (user_id, task_id))

    @store_operation("assign user")
    def assign_user(self, task_id: str, user_id: str) -> UserTask:
        link = UserTask(user_id=user_id, task_id=task_id)
        self.session.add(link)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("User is already assigned to this task")
        return link

    @store_operation("unassign user")
    def unassign_user(self, link: UserTask) -> None:
        self.session.delete(link)
        self.session.commit()

    @store_operation("list tasks with users")
    def list_tasks_with_users(self) -> List[Tuple[Task, List[User]]]:
        """Get every task paired with the users assigned to it."""
        statement = (
            select(Task, User)
            .join(UserTask, UserTask.task_id == Task.id, isouter=True)
            .join(User, User.id == UserTask.user_id, isouter=True)
        )
        grouped: Dict[str, Tuple[Task, List[User]]] = {}
        for task, user in self.session.exec(statement).all():
            entry = grouped.setdefault(task.id, (task, []))
            if user is not None:
                entry[1].append(user)
        return list(grouped.values())
