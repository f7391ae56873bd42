from sqlmodel import SQLModel
import datetime as dt
from decimal import Decimal, ROUND_HALF_UP
import uuid

from ..models.task import TaskPriority


def completion_rate(completed: int, total: int) -> float:
    """Percentage of completed tasks, one decimal place with halves rounded up; 0.0 for no tasks."""
    if total <= 0:
        return 0.0
    rate = Decimal(completed * 100) / Decimal(total)
    return float(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class StatsWindow(SQLModel):
    completed: int = 0
    total: int = 0
    completion_rate: float = 0.0

    @classmethod
    def of(cls, completed: int, total: int) -> "StatsWindow":
        return cls(
            completed=completed,
            total=total,
            completion_rate=completion_rate(completed, total),
        )


class StatsSummary(SQLModel):
    all_time: StatsWindow
    last_month: StatsWindow
    last_week: StatsWindow


class CalendarDay(SQLModel):
    date: dt.date
    tasks_completed: int = 0
    total_tasks: int = 0
    has_tasks: bool = False


class DailyStatRead(SQLModel):
    user_id: uuid.UUID
    date: dt.date
    tasks_completed: int
    total_tasks: int


class PriorityStats(SQLModel):
    priority: TaskPriority
    completed: int = 0
    total: int = 0
