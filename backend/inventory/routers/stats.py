# backend/inventory/routers/stats.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.api import ok
from ..core.db import get_db
from ..services.stats_service import StatsService

router = APIRouter(prefix="/api/stats", tags=["stats"])


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(db)


@router.get("/inventory")
def inventory_stats(svc: StatsService = Depends(get_stats_service)):
    return ok(svc.inventory_stats().model_dump(mode="json"))


@router.get("/categories")
def category_stats(svc: StatsService = Depends(get_stats_service)):
    return ok([c.model_dump(mode="json") for c in svc.category_stats()])
