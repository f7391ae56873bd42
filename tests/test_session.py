import pytest

from dayplanner.db import session as db_session


@pytest.mark.parametrize(
    "configured, expected",
    [
        ("sqlite+aiosqlite:///./todo.db", "sqlite:///./todo.db"),
        ("postgres://u:p@db/planner", "postgresql://u:p@db/planner"),
        ("postgresql+asyncpg://u:p@db/planner", "postgresql://u:p@db/planner"),
    ],
)
def test_database_url_is_normalised(monkeypatch, configured, expected):
    monkeypatch.setattr(db_session.settings, "DATABASE_URL", configured)

    assert db_session.get_db_url() == expected


@pytest.mark.parametrize("configured", ["mysql://u:p@db/planner", "mssql+pyodbc://u:p@db/planner"])
def test_database_without_upsert_support_is_rejected(monkeypatch, configured):
    monkeypatch.setattr(db_session.settings, "DATABASE_URL", configured)

    with pytest.raises(ValueError, match="Unsupported DATABASE_URL scheme"):
        db_session.get_db_url()
