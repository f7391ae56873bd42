"""
Stats Summary Service

Completion numbers for fixed windows, counted straight from the tasks table
rather than from the cached daily stats, so summary numbers never inherit a
stale aggregate.
"""

import logging
import uuid
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy import case, func
from sqlmodel import Session, select

from ..models.task import Task, TaskPriority
from ..schemas.stats import PriorityStats, StatsSummary, StatsWindow

logger = logging.getLogger(__name__)


LAST_MONTH_DAYS = 30
LAST_WEEK_DAYS = 7


def _completed_count():
    return func.count(case((Task.completed == True, 1)))  # noqa: E712


def window_counts(
    session: Session,
    user_id: uuid.UUID,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> StatsWindow:
    """Completed and total tasks due within [start, end]; open bounds are unbounded."""
    statement = select(_completed_count(), func.count(Task.id)).where(
        Task.user_id == user_id
    )
    if start is not None:
        statement = statement.where(Task.due_date >= start)
    if end is not None:
        statement = statement.where(Task.due_date <= end)

    completed, total = session.exec(statement).one()
    return StatsWindow.of(completed or 0, total or 0)


def summary(
    session: Session, user_id: uuid.UUID, today: Optional[date] = None
) -> StatsSummary:
    """
    All-time, last-month and last-week completion for a user.

    Args:
        today: Reference day for the rolling windows, defaults to the server's date

    Returns:
        StatsSummary whose windows are independent of each other
    """
    today = today or date.today()

    result = StatsSummary(
        all_time=window_counts(session, user_id),
        last_month=window_counts(
            session, user_id, today - timedelta(days=LAST_MONTH_DAYS), today
        ),
        last_week=window_counts(
            session, user_id, today - timedelta(days=LAST_WEEK_DAYS), today
        ),
    )
    logger.debug(f"Stats summary for user {user_id} as of {today}: {result}")
    return result


def priority_breakdown(session: Session, user_id: uuid.UUID) -> List[PriorityStats]:
    """Completed/total per priority, every priority listed even without tasks."""
    statement = (
        select(Task.priority, _completed_count(), func.count(Task.id))
        .where(Task.user_id == user_id)
        .group_by(Task.priority)
    )
    counts = {
        TaskPriority(priority): (completed, total)
        for priority, completed, total in session.exec(statement).all()
    }

    breakdown = []
    for priority in TaskPriority:
        completed, total = counts.get(priority, (0, 0))
        breakdown.append(PriorityStats(priority=priority, completed=completed, total=total))
    return breakdown
