import datetime as dt
import uuid
from sqlmodel import SQLModel, Field


class DailyStat(SQLModel, table=True):
    """Cached per-user, per-day completion counts.

    Rebuilt from the tasks table by ``services.daily_stats.recompute``; never
    edited directly and never deleted once created.
    """
    __tablename__ = "daily_stats"

    user_id: uuid.UUID = Field(foreign_key="users.id", primary_key=True)
    date: dt.date = Field(primary_key=True)
    tasks_completed: int = Field(default=0, nullable=False)
    total_tasks: int = Field(default=0, nullable=False)
