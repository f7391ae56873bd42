from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List
from datetime import date

from dayplanner.db.session import get_session
from dayplanner.models.user import User
from dayplanner.schemas.stats import CalendarDay, DailyStatRead, PriorityStats, StatsSummary
from dayplanner.services import calendar_stats, daily_stats, summary as summary_service
from dayplanner.api.deps import get_user

router = APIRouter()


@router.get("/{user_id}/stats/summary", response_model=StatsSummary)
def get_stats_summary(
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return summary_service.summary(session, user.id)

@router.get("/{user_id}/stats/calendar", response_model=List[CalendarDay])
def get_calendar_stats(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return calendar_stats.materialize_month(session, user.id, year, month)

@router.get("/{user_id}/stats/daily", response_model=List[DailyStatRead])
def get_daily_stats(
    start_date: date,
    end_date: date,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return daily_stats.list_daily_stats(session, user.id, start_date, end_date)

@router.get("/{user_id}/stats/priority", response_model=List[PriorityStats])
def get_priority_stats(
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return summary_service.priority_breakdown(session, user.id)
