from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from inventory_api.dependencies import PageParams, get_db, page_params
from inventory_api.schemas.common import Pagination, dump, envelope
from inventory_api.schemas.product import ProductBrief
from inventory_api.schemas.supplier import (
    SupplierCreate,
    SupplierListItem,
    SupplierRead,
    SupplierUpdate,
    SupplierWithProducts,
)
from inventory_api.services import supplier_service

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("/reports/performance")
def get_supplier_performance(db: Session = Depends(get_db)):
    return envelope(supplier_service.supplier_performance_report(db))


@router.get("")
def list_suppliers(
    params: PageParams = Depends(page_params),
    search: Optional[str] = Query(None, description="Name, email or contact person"),
    active_only: bool = Query(True, alias="activeOnly"),
    db: Session = Depends(get_db),
):
    rows, total = supplier_service.list_suppliers(
        db,
        page=params.page,
        limit=params.limit,
        search=search,
        active_only=active_only,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
    )
    data = []
    for supplier, product_count in rows:
        item = SupplierListItem.model_validate(supplier).model_copy(
            update={"product_count": product_count}
        )
        data.append(dump(item))
    return envelope(data, pagination=Pagination.build(params.page, params.limit, total))


@router.get("/{supplier_id}")
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    supplier = supplier_service.get_supplier(db, supplier_id)
    products = supplier_service.supplier_products(db, supplier.id)
    item = SupplierWithProducts.model_validate(supplier).model_copy(
        update={"products": [ProductBrief.model_validate(product) for product in products]}
    )
    return envelope(dump(item))


@router.post("", status_code=201)
def create_supplier(payload: SupplierCreate, db: Session = Depends(get_db)):
    supplier = supplier_service.create_supplier(db, payload)
    return envelope(
        dump(SupplierRead.model_validate(supplier)),
        message="Supplier created successfully",
    )


@router.put("/{supplier_id}")
def update_supplier(supplier_id: int, payload: SupplierUpdate, db: Session = Depends(get_db)):
    supplier = supplier_service.update_supplier(db, supplier_id, payload)
    return envelope(
        dump(SupplierRead.model_validate(supplier)),
        message="Supplier updated successfully",
    )


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    supplier_service.delete_supplier(db, supplier_id)
    return envelope(message="Supplier deleted successfully")


__all__ = ["router"]
