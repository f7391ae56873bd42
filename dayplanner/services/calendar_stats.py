import calendar
import logging
import uuid
from datetime import date
from typing import List

from sqlmodel import Session

from ..schemas.stats import CalendarDay
from .daily_stats import list_daily_stats

logger = logging.getLogger(__name__)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """
    Weekday of the 1st of the month, Monday is 0.

    Not needed to build the month itself; callers laying the days out on a
    week grid use it to find the leading blank cells.
    """
    return calendar.monthrange(year, month)[0]


def materialize_month(
    session: Session, user_id: uuid.UUID, year: int, month: int
) -> List[CalendarDay]:
    """
    One CalendarDay per day of the month, in date order.

    Days with a stored daily stats row carry its counts; every other day is
    filled with zeros. ``month`` is 1-based and assumed already validated.
    """
    last_day = days_in_month(year, month)
    start = date(year, month, 1)
    end = date(year, month, last_day)

    stored = {row.date: row for row in list_daily_stats(session, user_id, start, end)}
    logger.debug(f"Calendar {year}-{month:02d} for user {user_id}: {len(stored)} stored days")

    days = []
    for day_number in range(1, last_day + 1):
        day = date(year, month, day_number)
        row = stored.get(day)
        if row is None:
            days.append(CalendarDay(date=day))
            continue
        days.append(
            CalendarDay(
                date=day,
                tasks_completed=row.tasks_completed,
                total_tasks=row.total_tasks,
                has_tasks=row.tasks_completed > 0,
            )
        )
    return days
