"""
Shared fixtures: an in-memory SQLite database per test, a user that owns the
tasks, and a TestClient wired to the same session.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from dayplanner import models  # noqa: F401
from dayplanner.db.session import get_session
from dayplanner.main import app
from dayplanner.models.task import Task
from dayplanner.models.user import User


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


def create_user(session, username):
    user = User(username=username, display_name=username.title())
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user(session):
    return create_user(session, "alice")


@pytest.fixture
def other_user(session):
    return create_user(session, "bob")


@pytest.fixture
def add_task(session):
    """Insert a task row directly, without touching daily stats."""

    def _add_task(user, due_date: date, completed: bool = False, title: str = "Task"):
        task = Task(user_id=user.id, title=title, due_date=due_date)
        task.set_completed(completed)
        session.add(task)
        session.commit()
        session.refresh(task)
        return task

    return _add_task


@pytest.fixture
def client(session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
