import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from .core.config import settings

# Log configuration (before other imports)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

from .api.v1.api import router as api_router  # noqa: E402
from .core.errors import DayPlannerError  # noqa: E402
from .db.init_db import create_db_and_tables, seed_demo_data  # noqa: E402
from .db.session import get_session  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup
    create_db_and_tables()
    if settings.SEED_DEMO_DATA:
        seed_demo_data()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for daily tasks and completion statistics",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DayPlannerError)
async def day_planner_error_handler(request: Request, exc: DayPlannerError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_STR)

@app.get("/")
def read_root():
    return {"message": settings.PROJECT_NAME}

@app.get("/health")
def health_check():
    return {"status": "healthy"}

@app.get("/health/db")
def database_check(session: Session = Depends(get_session)):
    try:
        session.connection().execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"Database check failed: {exc}")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "healthy"}
