from datetime import datetime
from enum import IntEnum
from sqlalchemy import text
from sqlmodel import Field, SQLModel


class TaskStatus(IntEnum):
    INCOMPLETE = 0
    COMPLETE = 1


def current_timestamp() -> str:
    """UTC timestamp in the same format as SQL CURRENT_TIMESTAMP."""
    return datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S")


class Task(SQLModel, table=True):
    """A single task.

    Attributes:
        id: Caller-supplied identifier
        title: Task title
        description: Free text, may be empty
        created_at: Creation timestamp as text, assigned on insert
        status: 0 while incomplete, 1 once complete
    """
    __tablename__ = "tasks"

    id: str = Field(primary_key=True)
    title: str
    description: str = Field(default="")
    created_at: str = Field(
        default_factory=current_timestamp,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )
    status: int = Field(
        default=TaskStatus.INCOMPLETE.value,
        sa_column_kwargs={"server_default": text("0")},
    )
