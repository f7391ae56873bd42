"""
Task Service

CRUD for a user's tasks. Every mutation commits the task first and only then
recomputes the daily stats of the day(s) it could have changed:
- create, delete and toggle recompute the task's due date
- an update that moves a task recomputes both the old and the new due date
- an update that changes completion recomputes the due date
- title, description and priority changes leave daily stats alone
"""

import logging
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlmodel import Session, select

from ..core.errors import InvalidInputError, NotFoundError, StoreUnavailableError
from ..models.task import Task, TaskPriority, utcnow
from ..models.user import User
from ..schemas.task import TaskCreate, TaskUpdate
from . import daily_stats

logger = logging.getLogger(__name__)


def _commit(session: Session, action: str) -> None:
    try:
        session.commit()
    except (OperationalError, InterfaceError) as exc:
        session.rollback()
        logger.error(f"Store unavailable while trying to {action}: {exc}")
        raise StoreUnavailableError(f"Could not {action}, please retry") from exc


def _clean_title(title: str) -> str:
    title = title.strip()
    if not title:
        raise InvalidInputError("Title must not be blank")
    return title


def get_user(session: Session, user_id: uuid.UUID) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_task(session: Session, user_id: uuid.UUID, task_id: uuid.UUID) -> Task:
    task = session.get(Task, task_id)
    if task is None or task.user_id != user_id:
        raise NotFoundError("Task not found")
    return task


def list_tasks_for_date(
    session: Session,
    user_id: uuid.UUID,
    day: date,
    completed: Optional[bool] = None,
    priority: Optional[TaskPriority] = None,
) -> List[Task]:
    statement = select(Task).where(Task.user_id == user_id, Task.due_date == day)
    if completed is not None:
        statement = statement.where(Task.completed == completed)
    if priority is not None:
        statement = statement.where(Task.priority == priority)
    return list(session.exec(statement.order_by(Task.created_at.desc())).all())


def overdue_tasks(
    session: Session, user_id: uuid.UUID, today: Optional[date] = None
) -> List[Task]:
    today = today or date.today()
    statement = (
        select(Task)
        .where(
            Task.user_id == user_id,
            Task.completed == False,  # noqa: E712
            Task.due_date < today,
        )
        .order_by(Task.due_date, Task.created_at)
    )
    return list(session.exec(statement).all())


# Highest priority first
PRIORITY_RANK = case(
    (Task.priority == TaskPriority.high, 0),
    (Task.priority == TaskPriority.medium, 1),
    else_=2,
)


def today_tasks(
    session: Session, user_id: uuid.UUID, today: Optional[date] = None
) -> List[Task]:
    today = today or date.today()
    statement = (
        select(Task)
        .where(Task.user_id == user_id, Task.due_date == today)
        .order_by(PRIORITY_RANK, Task.created_at)
    )
    return list(session.exec(statement).all())


def create_task(session: Session, user_id: uuid.UUID, task_create: TaskCreate) -> Task:
    task = Task(
        user_id=user_id,
        title=_clean_title(task_create.title),
        description=task_create.description,
        priority=task_create.priority,
        due_date=task_create.due_date,
    )
    session.add(task)
    _commit(session, "create task")
    session.refresh(task)
    logger.info(f"Created task {task.id} for user {user_id} due {task.due_date}")

    session.expunge(task)
    daily_stats.recompute(session, user_id, task.due_date)
    return task


def update_task(
    session: Session, user_id: uuid.UUID, task_id: uuid.UUID, task_update: TaskUpdate
) -> Task:
    task = get_task(session, user_id, task_id)
    old_due_date = task.due_date
    old_completed = task.completed

    task_data = task_update.model_dump(exclude_unset=True)
    # Explicit nulls only make sense for the description
    for key in ("title", "priority", "due_date", "completed"):
        if key in task_data and task_data[key] is None:
            del task_data[key]

    if "title" in task_data:
        task.title = _clean_title(task_data.pop("title"))
    if "completed" in task_data:
        task.set_completed(task_data.pop("completed"))
    for key, value in task_data.items():
        setattr(task, key, value)

    task.updated_at = utcnow()
    session.add(task)
    _commit(session, "update task")
    session.refresh(task)
    logger.info(f"Updated task {task.id} for user {user_id}")

    days = set()
    if task.due_date != old_due_date:
        days.update({old_due_date, task.due_date})
    if task.completed != old_completed:
        days.add(task.due_date)
    if days:
        session.expunge(task)
        daily_stats.recompute_many(session, user_id, days)
    return task


def delete_task(session: Session, user_id: uuid.UUID, task_id: uuid.UUID) -> None:
    task = get_task(session, user_id, task_id)
    due_date = task.due_date

    session.delete(task)
    _commit(session, "delete task")
    logger.info(f"Deleted task {task_id} for user {user_id}")

    daily_stats.recompute(session, user_id, due_date)


def toggle_task(session: Session, user_id: uuid.UUID, task_id: uuid.UUID) -> Task:
    task = get_task(session, user_id, task_id)
    task.set_completed(not task.completed)
    task.updated_at = utcnow()
    session.add(task)
    _commit(session, "toggle task")
    session.refresh(task)
    logger.info(f"Task {task.id} for user {user_id} marked completed={task.completed}")

    session.expunge(task)
    daily_stats.recompute(session, user_id, task.due_date)
    return task


def set_priority(
    session: Session, user_id: uuid.UUID, task_id: uuid.UUID, priority: TaskPriority
) -> Task:
    try:
        priority = TaskPriority(priority)
    except ValueError:
        raise InvalidInputError("Priority must be low, medium, or high")

    task = get_task(session, user_id, task_id)
    task.priority = priority
    task.updated_at = utcnow()
    session.add(task)
    _commit(session, "update task priority")
    session.refresh(task)
    return task
