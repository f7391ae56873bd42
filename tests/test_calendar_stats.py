from datetime import date

import pytest

from dayplanner.models.daily_stat import DailyStat
from dayplanner.services import calendar_stats


@pytest.mark.parametrize(
    "year, month, expected",
    [(2024, 2, 29), (2023, 2, 28), (1900, 2, 28), (2000, 2, 29), (2024, 4, 30), (2024, 12, 31)],
)
def test_days_in_month(year, month, expected):
    assert calendar_stats.days_in_month(year, month) == expected


def test_first_weekday():
    # 1 Feb 2024 was a Thursday, 1 Sep 2025 a Monday
    assert calendar_stats.first_weekday(2024, 2) == 3
    assert calendar_stats.first_weekday(2025, 9) == 0


class TestMaterializeMonth:
    def test_fills_gaps_around_stored_days(self, session, user):
        session.add(DailyStat(user_id=user.id, date=date(2024, 5, 5), tasks_completed=2, total_tasks=2))
        session.add(DailyStat(user_id=user.id, date=date(2024, 5, 17), tasks_completed=0, total_tasks=1))
        session.commit()

        days = calendar_stats.materialize_month(session, user.id, 2024, 5)

        assert len(days) == 31
        assert [d.date for d in days] == [date(2024, 5, n) for n in range(1, 32)]

        fifth, seventeenth = days[4], days[16]
        assert (fifth.tasks_completed, fifth.total_tasks, fifth.has_tasks) == (2, 2, True)
        assert (seventeenth.tasks_completed, seventeenth.total_tasks, seventeenth.has_tasks) == (0, 1, False)

        others = [d for d in days if d.date.day not in (5, 17)]
        assert all((d.tasks_completed, d.total_tasks, d.has_tasks) == (0, 0, False) for d in others)

    def test_empty_month_is_all_zero(self, session, user):
        days = calendar_stats.materialize_month(session, user.id, 2024, 6)

        assert len(days) == 30
        assert not any(d.has_tasks or d.total_tasks for d in days)

    def test_every_day_stored(self, session, user):
        for n in range(1, 29):
            session.add(DailyStat(user_id=user.id, date=date(2023, 2, n), tasks_completed=1, total_tasks=n))
        session.commit()

        days = calendar_stats.materialize_month(session, user.id, 2023, 2)

        assert [d.total_tasks for d in days] == list(range(1, 29))
        assert all(d.has_tasks for d in days)

    def test_leap_year_february(self, session, user):
        assert len(calendar_stats.materialize_month(session, user.id, 2024, 2)) == 29
        assert len(calendar_stats.materialize_month(session, user.id, 2023, 2)) == 28

    def test_ignores_neighbouring_months_and_other_users(self, session, user, other_user):
        session.add(DailyStat(user_id=user.id, date=date(2024, 4, 30), tasks_completed=3, total_tasks=3))
        session.add(DailyStat(user_id=user.id, date=date(2024, 6, 1), tasks_completed=3, total_tasks=3))
        session.add(DailyStat(user_id=other_user.id, date=date(2024, 5, 10), tasks_completed=1, total_tasks=1))
        session.commit()

        days = calendar_stats.materialize_month(session, user.id, 2024, 5)

        assert sum(d.total_tasks for d in days) == 0
