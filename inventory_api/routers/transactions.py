from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from inventory_api.dependencies import PageParams, get_db, page_params
from inventory_api.schemas.common import Pagination, dump, envelope
from inventory_api.schemas.transaction import TransactionCreate, TransactionRead, TransactionUpdate
from inventory_api.services import transaction_service

router = APIRouter(prefix="/transactions", tags=["Transactions"])


def _read(transaction) -> dict:
    return dump(TransactionRead.model_validate(transaction))


@router.get("/reports/summary")
def get_transaction_summary(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    return envelope(transaction_service.transaction_summary(db, start_date, end_date))


@router.get("")
def list_transactions(
    params: PageParams = Depends(page_params),
    transaction_type: Optional[Literal["PURCHASE", "SALE", "ADJUSTMENT"]] = Query(None, alias="type"),
    product_id: Optional[int] = Query(None, alias="productId"),
    supplier_id: Optional[int] = Query(None, alias="supplierId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    transactions, total = transaction_service.list_transactions(
        db,
        page=params.page,
        limit=params.limit,
        transaction_type=transaction_type,
        product_id=product_id,
        supplier_id=supplier_id,
        start_date=start_date,
        end_date=end_date,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
    )
    return envelope(
        [_read(transaction) for transaction in transactions],
        pagination=Pagination.build(params.page, params.limit, total),
    )


@router.get("/{transaction_id}")
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    return envelope(_read(transaction_service.get_transaction(db, transaction_id)))


@router.post("", status_code=201)
def create_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    transaction = transaction_service.create_transaction(db, payload)
    return envelope(_read(transaction), message="Transaction created successfully")


@router.put("/{transaction_id}")
def update_transaction(
    transaction_id: int, payload: TransactionUpdate, db: Session = Depends(get_db)
):
    transaction = transaction_service.update_transaction(db, transaction_id, payload)
    return envelope(_read(transaction), message="Transaction updated successfully")


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    transaction_service.delete_transaction(db, transaction_id)
    return envelope(message="Transaction deleted successfully")


__all__ = ["router"]
