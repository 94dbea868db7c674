# backend/inventory/routers/parts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.api import ok, created
from ..core.db import get_db
from ..schemas.part import PartCreate, PartSearch, PartUpdate
from ..services.part_service import PartService

router = APIRouter(prefix="/api/parts", tags=["parts"])


def get_part_service(db: Session = Depends(get_db)) -> PartService:
    return PartService(db)


@router.get("")
def list_parts(svc: PartService = Depends(get_part_service)):
    return ok([p.model_dump(mode="json") for p in svc.list_parts()])


# must stay above /{part_id}
@router.get("/low-stock")
def low_stock_parts(svc: PartService = Depends(get_part_service)):
    """Parts with currentStock <= minimumStock."""
    return ok([p.model_dump(mode="json") for p in svc.low_stock_parts()])


@router.post("/search")
def search_parts(payload: PartSearch, svc: PartService = Depends(get_part_service)):
    """
    Substring match (case-insensitive) on name / partNumber / description,
    optional categoryId and lowStock filters, 1-indexed pages.
    Example data:
    {"data": [...], "page": 2, "limit": 20, "total": 45, "totalPages": 3}
    """
    return ok(svc.search_parts(payload).model_dump(mode="json"))


@router.get("/{part_id}")
def get_part(part_id: int, svc: PartService = Depends(get_part_service)):
    return ok(svc.get_part(part_id).model_dump(mode="json"))


@router.post("", status_code=201)
def create_part(payload: PartCreate, svc: PartService = Depends(get_part_service)):
    return created(svc.create_part(payload).model_dump(mode="json"))


@router.put("/{part_id}")
def update_part(part_id: int, payload: PartUpdate, svc: PartService = Depends(get_part_service)):
    return ok(svc.update_part(part_id, payload).model_dump(mode="json"))


@router.delete("/{part_id}")
def delete_part(part_id: int, svc: PartService = Depends(get_part_service)):
    return ok(svc.delete_part(part_id), message="Part deleted")
