from sqlmodel import create_engine, Session
from ..core.config import settings

# Daily stats upserts rely on ON CONFLICT, available on these backends only
SUPPORTED_SCHEMES = ("sqlite", "postgresql")

# Helper function to ensure URL format is correct
def get_db_url():
    url = settings.DATABASE_URL
    if not url:
        return "sqlite:///dayplanner.db"
    # Only the sync drivers are used
    url = url.replace("postgres://", "postgresql://")
    url = url.replace("+aiosqlite", "").replace("+asyncpg", "")

    scheme = url.split(":", 1)[0].split("+", 1)[0]
    if scheme not in SUPPORTED_SCHEMES:
        raise ValueError(f"Unsupported DATABASE_URL scheme '{scheme}', use sqlite or postgresql")
    return url

db_url = get_db_url()

# --- CONFIGURATION FOR SQLITE ---
if db_url.startswith("sqlite"):
    sync_engine = create_engine(
        db_url,
        echo=settings.DB_ECHO,
        connect_args={"check_same_thread": False}
    )

# --- CONFIGURATION FOR POSTGRESQL ---
else:
    # Uses psycopg2-binary
    sync_engine = create_engine(
        db_url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10
    )


# Dependency: one session per request
def get_session():
    with Session(sync_engine) as session:
        yield session
