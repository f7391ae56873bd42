import logging
from datetime import date, timedelta

from sqlmodel import SQLModel, Session, select

from .session import sync_engine
from .. import models  # noqa: F401  registers every table on SQLModel.metadata
from ..models.task import Task, TaskPriority
from ..models.user import User
from ..services import daily_stats

logger = logging.getLogger(__name__)


DEMO_USERS = [
    {"username": "test_user_1", "display_name": "Test User 1", "timezone": "Europe/Moscow",
     "motivational_message": "Time to reach new heights!"},
    {"username": "test_user_2", "display_name": "Test User 2", "timezone": "UTC",
     "motivational_message": "Every day is a new opportunity!"},
]


def create_db_and_tables(engine=sync_engine):
    SQLModel.metadata.create_all(engine)


def seed_demo_data(engine=sync_engine):
    """Insert the demo users and two tasks for the first one, skipping existing users."""
    with Session(engine) as session:
        for data in DEMO_USERS:
            existing = session.exec(select(User).where(User.username == data["username"])).first()
            if existing is None:
                session.add(User(**data))
        session.commit()

        user = session.exec(select(User).where(User.username == DEMO_USERS[0]["username"])).one()
        if session.exec(select(Task).where(Task.user_id == user.id)).first() is not None:
            return

        today = date.today()
        done = Task(user_id=user.id, title="Example task 1", description="An example task",
                    priority=TaskPriority.high, due_date=today)
        done.set_completed(True)
        session.add(done)
        session.add(Task(user_id=user.id, title="Example task 2", description="Another example task",
                         priority=TaskPriority.medium, due_date=today + timedelta(days=1)))
        session.commit()

        daily_stats.recompute_many(session, user.id, [today, today + timedelta(days=1)])
        logger.info(f"Seeded demo data for {user.username}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_db_and_tables()
    seed_demo_data()
    logger.info("Database initialised")
