from fastapi import APIRouter
from .endpoints import tasks, stats

router = APIRouter()

# Every resource hangs off the owning user
router.include_router(tasks.router, prefix="/users", tags=["tasks"])
router.include_router(stats.router, prefix="/users", tags=["stats"])
