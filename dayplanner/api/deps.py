import uuid

from fastapi import Depends
from sqlmodel import Session

from dayplanner.db.session import get_session
from dayplanner.models.user import User
from dayplanner.services import tasks as task_service


# NotFoundError becomes a 404 through the app's DayPlannerError handler
def get_user(user_id: uuid.UUID, session: Session = Depends(get_session)) -> User:
    return task_service.get_user(session, user_id)
