from sqlalchemy import Column, ForeignKey, String
from sqlmodel import Field, SQLModel


class UserTask(SQLModel, table=True):
    """Join row assigning a user to a task."""
    __tablename__ = "users_tasks"

    user_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        )
    )
    # follows a task whose id is edited
    task_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("tasks.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        )
    )
