from datetime import date, timedelta

import pytest

from dayplanner.models.task import TaskPriority
from dayplanner.schemas.stats import StatsWindow, completion_rate
from dayplanner.schemas.task import TaskCreate
from dayplanner.services import summary as summary_service
from dayplanner.services import tasks as task_service


TODAY = date(2024, 3, 31)


def window(stats_window: StatsWindow):
    return stats_window.completed, stats_window.total


@pytest.mark.parametrize(
    "completed, total, expected",
    [
        (0, 0, 0.0), (2, 3, 66.7), (1, 1, 100.0), (1, 8, 12.5), (0, 4, 0.0),
        # exact halves round up
        (1, 16, 6.3), (5, 16, 31.3), (1, 80, 1.3),
    ],
)
def test_completion_rate(completed, total, expected):
    assert completion_rate(completed, total) == expected


class TestSummary:
    def test_user_without_tasks(self, session, user):
        result = summary_service.summary(session, user.id, today=TODAY)

        for stats_window in (result.all_time, result.last_month, result.last_week):
            assert window(stats_window) == (0, 0)
            assert stats_window.completion_rate == 0.0

    def test_seven_days_ago_counts_in_every_window(self, session, user, add_task):
        add_task(user, TODAY - timedelta(days=7), completed=True)

        result = summary_service.summary(session, user.id, today=TODAY)

        assert window(result.all_time) == (1, 1)
        assert window(result.last_month) == (1, 1)
        assert window(result.last_week) == (1, 1)

    def test_thirty_one_days_ago_counts_only_all_time(self, session, user, add_task):
        add_task(user, TODAY - timedelta(days=31), completed=True)

        result = summary_service.summary(session, user.id, today=TODAY)

        assert window(result.all_time) == (1, 1)
        assert window(result.last_month) == (0, 0)
        assert window(result.last_week) == (0, 0)

    def test_window_bounds(self, session, user, add_task):
        add_task(user, TODAY - timedelta(days=30))
        add_task(user, TODAY - timedelta(days=8), completed=True)
        add_task(user, TODAY, completed=True)
        add_task(user, TODAY + timedelta(days=1))

        result = summary_service.summary(session, user.id, today=TODAY)

        assert window(result.all_time) == (2, 4)
        assert window(result.last_month) == (2, 3)
        assert window(result.last_week) == (1, 1)
        assert result.last_month.completion_rate == 66.7

    def test_reads_tasks_not_daily_stats(self, session, user, add_task):
        # Tasks inserted without any recompute still count
        add_task(user, TODAY, completed=True)

        result = summary_service.summary(session, user.id, today=TODAY)

        assert window(result.last_week) == (1, 1)

    def test_other_users_are_excluded(self, session, user, other_user, add_task):
        add_task(other_user, TODAY, completed=True)

        result = summary_service.summary(session, user.id, today=TODAY)

        assert window(result.all_time) == (0, 0)


def test_priority_breakdown_lists_every_priority(session, user):
    for priority, title in ((TaskPriority.high, "a"), (TaskPriority.high, "b"), (TaskPriority.low, "c")):
        task = task_service.create_task(
            session, user.id, TaskCreate(title=title, priority=priority, due_date=TODAY)
        )
        if title == "a":
            task_service.toggle_task(session, user.id, task.id)

    breakdown = {row.priority: (row.completed, row.total) for row in summary_service.priority_breakdown(session, user.id)}

    assert breakdown == {
        TaskPriority.low: (0, 1),
        TaskPriority.medium: (0, 0),
        TaskPriority.high: (1, 2),
    }
