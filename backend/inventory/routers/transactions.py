# backend/inventory/routers/transactions.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..core.api import ok, created
from ..core.db import get_db
from ..domain.constants import FAST_MOVING_DEFAULT_LIMIT
from ..schemas.transaction import PaymentUpdate, TransactionCreate
from ..services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


@router.get("")
def list_transactions(svc: TransactionService = Depends(get_transaction_service)):
    return ok([t.model_dump(mode="json") for t in svc.list_transactions()])


@router.get("/fast-moving")
def fast_moving_parts(
    limit: int = Query(FAST_MOVING_DEFAULT_LIMIT, ge=1, le=500),
    svc: TransactionService = Depends(get_transaction_service),
):
    """averagePerMonth = totalOutQuantity / 12 (fixed divisor, all-time total)."""
    return ok([r.model_dump(mode="json") for r in svc.fast_moving_parts(limit)])


@router.get("/part/{part_id}")
def transactions_for_part(part_id: int, svc: TransactionService = Depends(get_transaction_service)):
    return ok([t.model_dump(mode="json") for t in svc.transactions_for_part(part_id)])


@router.get("/{txn_id}")
def get_transaction(txn_id: int, svc: TransactionService = Depends(get_transaction_service)):
    return ok(svc.get_transaction(txn_id).model_dump(mode="json"))


@router.post("", status_code=201)
def create_transaction(payload: TransactionCreate, svc: TransactionService = Depends(get_transaction_service)):
    return created(svc.create_transaction(payload).model_dump(mode="json"))


@router.put("/{txn_id}/payment")
def update_payment(txn_id: int, payload: PaymentUpdate, svc: TransactionService = Depends(get_transaction_service)):
    return ok(svc.update_payment(txn_id, payload).model_dump(mode="json"))


@router.delete("/{txn_id}")
def delete_transaction(txn_id: int, svc: TransactionService = Depends(get_transaction_service)):
    # stock is not reversed
    return ok(svc.delete_transaction(txn_id), message="Transaction deleted")
