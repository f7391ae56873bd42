from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import List, Optional
from datetime import date
import uuid

from dayplanner.db.session import get_session
from dayplanner.models.user import User
from dayplanner.models.task import TaskPriority
from dayplanner.schemas.task import TaskCreate, TaskRead, TaskUpdate, PriorityUpdate
from dayplanner.services import tasks as task_service
from dayplanner.api.deps import get_user

router = APIRouter()


@router.get("/{user_id}/tasks", response_model=List[TaskRead])
def list_tasks_by_date(
    day: date = Query(..., alias="date"),
    completed: Optional[bool] = None,
    priority: Optional[TaskPriority] = None,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.list_tasks_for_date(
        session, user.id, day, completed=completed, priority=priority
    )

@router.get("/{user_id}/tasks/overdue", response_model=List[TaskRead])
def list_overdue_tasks(
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.overdue_tasks(session, user.id)

@router.get("/{user_id}/tasks/today", response_model=List[TaskRead])
def list_today_tasks(
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.today_tasks(session, user.id)

@router.post("/{user_id}/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    task_create: TaskCreate,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.create_task(session, user.id, task_create)

@router.get("/{user_id}/tasks/{task_id}", response_model=TaskRead)
def get_task(
    task_id: uuid.UUID,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.get_task(session, user.id, task_id)

@router.put("/{user_id}/tasks/{task_id}", response_model=TaskRead)
def update_task(
    task_id: uuid.UUID,
    task_update: TaskUpdate,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.update_task(session, user.id, task_id, task_update)

@router.delete("/{user_id}/tasks/{task_id}")
def delete_task(
    task_id: uuid.UUID,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    task_service.delete_task(session, user.id, task_id)
    return {"ok": True}

@router.patch("/{user_id}/tasks/{task_id}/toggle", response_model=TaskRead)
def toggle_task(
    task_id: uuid.UUID,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.toggle_task(session, user.id, task_id)

@router.patch("/{user_id}/tasks/{task_id}/priority", response_model=TaskRead)
def update_task_priority(
    task_id: uuid.UUID,
    priority_update: PriorityUpdate,
    user: User = Depends(get_user),
    session: Session = Depends(get_session)
):
    return task_service.set_priority(session, user.id, task_id, priority_update.priority)
