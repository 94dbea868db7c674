# backend/inventory/routers/categories.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.api import ok, created
from ..core.db import get_db
from ..schemas.category import CategoryIn
from ..services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


@router.get("")
def list_categories(svc: CategoryService = Depends(get_category_service)):
    return ok([c.model_dump(mode="json") for c in svc.list_categories()])


@router.get("/{category_id}")
def get_category(category_id: int, svc: CategoryService = Depends(get_category_service)):
    return ok(svc.get_category(category_id).model_dump(mode="json"))


@router.post("", status_code=201)
def create_category(payload: CategoryIn, svc: CategoryService = Depends(get_category_service)):
    return created(svc.create_category(payload).model_dump(mode="json"))


@router.put("/{category_id}")
def update_category(category_id: int, payload: CategoryIn, svc: CategoryService = Depends(get_category_service)):
    return ok(svc.update_category(category_id, payload).model_dump(mode="json"))


@router.delete("/{category_id}")
def delete_category(category_id: int, svc: CategoryService = Depends(get_category_service)):
    return ok(svc.delete_category(category_id), message="Category deleted")
