"""
Daily Stats Service

Keeps the ``daily_stats`` table in step with the tasks table:
- ``recompute`` rebuilds one (user, date) row from a full count of the
  user's tasks due that day and upserts it in a single statement
- ``recompute_many`` does the same for several days (a task moved between days)
- ``list_daily_stats`` reads stored rows for a date range

Recompute failures are logged and swallowed. The triggering task write is
already committed, so a failed recompute only leaves one day's numbers stale
until the next successful recompute for that day.
"""

import logging
import uuid
from datetime import date
from typing import Iterable, List

from sqlalchemy import Date, case, func, literal
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import InvalidInputError
from ..models.daily_stat import DailyStat
from ..models.task import Task

logger = logging.getLogger(__name__)


# Dialects whose insert() supports ON CONFLICT ... DO UPDATE
UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def _upsert_statement(session: Session, user_id: uuid.UUID, day: date):
    dialect = session.get_bind().dialect.name
    insert = UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"daily stats upsert is not supported on {dialect}")

    table = DailyStat.__table__
    counts = select(
        literal(user_id, type_=table.c.user_id.type),
        literal(day, type_=Date()),
        func.count(case((Task.completed == True, 1))),  # noqa: E712
        func.count(Task.id),
    ).where(
        Task.user_id == user_id,
        Task.due_date == day,
    )

    stmt = insert(table).from_select(
        ["user_id", "date", "tasks_completed", "total_tasks"], counts
    )
    return stmt.on_conflict_do_update(
        index_elements=[table.c.user_id, table.c.date],
        set_={
            "tasks_completed": stmt.excluded.tasks_completed,
            "total_tasks": stmt.excluded.total_tasks,
        },
    )


def recompute(session: Session, user_id: uuid.UUID, day: date) -> bool:
    """
    Rebuild the daily stats row for ``(user_id, day)``.

    Counting and upserting happen in one INSERT ... SELECT ... ON CONFLICT
    statement, so concurrent recomputes for the same day always leave the row
    matching the tasks that were committed when the last one ran.

    Returns:
        True when the row was written, False when the failure was swallowed
    """
    try:
        session.connection().execute(_upsert_statement(session, user_id, day))
        session.commit()
    except (SQLAlchemyError, NotImplementedError):
        session.rollback()
        logger.exception(f"Failed to recompute daily stats for user {user_id} on {day}")
        return False

    logger.debug(f"Recomputed daily stats for user {user_id} on {day}")
    return True


def recompute_many(session: Session, user_id: uuid.UUID, days: Iterable[date]) -> bool:
    """Recompute each distinct day once; True only if every day succeeded."""
    ok = True
    for day in sorted(set(days)):
        ok = recompute(session, user_id, day) and ok
    return ok


def get_daily_stat(session: Session, user_id: uuid.UUID, day: date):
    return session.get(DailyStat, (user_id, day))


def list_daily_stats(
    session: Session, user_id: uuid.UUID, start: date, end: date
) -> List[DailyStat]:
    if start > end:
        raise InvalidInputError("start_date must not be after end_date")

    statement = (
        select(DailyStat)
        .where(
            DailyStat.user_id == user_id,
            DailyStat.date >= start,
            DailyStat.date <= end,
        )
        .order_by(DailyStat.date)
    )
    return list(session.exec(statement).all())
