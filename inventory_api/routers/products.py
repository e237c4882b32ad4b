from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from inventory_api.dependencies import PageParams, get_db, page_params
from inventory_api.schemas.common import Pagination, dump, envelope
from inventory_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from inventory_api.services import product_service

router = APIRouter(prefix="/products", tags=["Products"])


def _read(product) -> dict:
    return dump(ProductRead.model_validate(product))


@router.get("/reports/low-stock")
def get_low_stock_products(db: Session = Depends(get_db)):
    products = product_service.low_stock_products(db)
    return envelope([_read(product) for product in products], count=len(products))


@router.get("/reports/inventory-value")
def get_inventory_value(db: Session = Depends(get_db)):
    return envelope(product_service.inventory_value_report(db))


@router.get("/reports/by-supplier")
def get_products_by_supplier(db: Session = Depends(get_db)):
    return envelope(product_service.products_by_supplier_report(db))


@router.get("")
def list_products(
    params: PageParams = Depends(page_params),
    search: Optional[str] = Query(None, description="Name, SKU or description"),
    category: Optional[str] = Query(None),
    supplier_id: Optional[int] = Query(None, alias="supplierId"),
    stock_status: Optional[Literal["IN_STOCK", "LOW_STOCK", "OUT_OF_STOCK"]] = Query(
        None, alias="stockStatus"
    ),
    db: Session = Depends(get_db),
):
    products, total = product_service.list_products(
        db,
        page=params.page,
        limit=params.limit,
        search=search,
        category=category,
        supplier_id=supplier_id,
        stock_status=stock_status,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
    )
    return envelope(
        [_read(product) for product in products],
        pagination=Pagination.build(params.page, params.limit, total),
    )


@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    return envelope(_read(product_service.get_product(db, product_id)))


@router.post("", status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    product = product_service.create_product(db, payload)
    return envelope(_read(product), message="Product created successfully")


@router.put("/{product_id}")
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    product = product_service.update_product(db, product_id, payload)
    return envelope(_read(product), message="Product updated successfully")


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    if product_service.delete_product(db, product_id):
        return envelope(message="Product deleted successfully")
    return envelope(message="Product deactivated (has transaction history)")


__all__ = ["router"]
