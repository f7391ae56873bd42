from sqlmodel import SQLModel, Field, Relationship
from typing import Optional
from datetime import date, datetime, timezone
import uuid
from enum import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    due_date: date = Field(nullable=False, index=True)

    # completed_at is set exactly while completed is true
    completed: bool = Field(default=False, index=True)
    completed_at: Optional[datetime] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)

    # Relationship to user
    user: Optional["User"] = Relationship(back_populates="tasks")

    def set_completed(self, completed: bool) -> None:
        if completed and not self.completed:
            self.completed_at = utcnow()
        elif not completed:
            self.completed_at = None
        self.completed = completed
