import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from inventory_api.core.errors import ConflictError, NotFoundError
from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.services.query import paginate, resolve_sort

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = (
    "created_at",
    "updated_at",
    "name",
    "sku",
    "quantity",
    "price",
    "minimum_stock",
    "category",
)

# Columns that cannot be cleared through an update.
_REQUIRED_FIELDS = frozenset(
    ("name", "sku", "quantity", "price", "supplier_id", "minimum_stock", "is_active")
)


def _stock_status_condition(stock_status):
    if stock_status == "LOW_STOCK":
        return Product.quantity <= Product.minimum_stock
    if stock_status == "OUT_OF_STOCK":
        return Product.quantity == 0
    if stock_status == "IN_STOCK":
        return Product.quantity > Product.minimum_stock
    return None


def list_products(
    db: Session,
    *,
    page: int = 1,
    limit: int = 10,
    search: str | None = None,
    category: str | None = None,
    supplier_id: int | None = None,
    stock_status: str | None = None,
    sort_by: str | None = None,
    sort_order: str = "desc",
) -> tuple[list[Product], int]:
    conditions = [Product.is_active.is_(True)]
    if search:
        conditions.append(
            or_(
                Product.name.icontains(search, autoescape=True),
                Product.sku.icontains(search, autoescape=True),
                Product.description.icontains(search, autoescape=True),
            )
        )
    if category:
        conditions.append(Product.category.icontains(category, autoescape=True))
    if supplier_id is not None:
        conditions.append(Product.supplier_id == supplier_id)
    status_condition = _stock_status_condition(stock_status)
    if status_condition is not None:
        conditions.append(status_condition)

    order_by = resolve_sort(Product, SORTABLE_FIELDS, sort_by, sort_order)
    return paginate(db, Product, conditions, order_by, page, limit)


def get_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def _ensure_supplier_exists(db: Session, supplier_id: int) -> None:
    if db.get(Supplier, supplier_id) is None:
        raise ConflictError("Supplier not found")


def _ensure_sku_available(db: Session, sku: str, exclude_id: int | None = None) -> None:
    stmt = select(Product.id).where(func.upper(Product.sku) == sku.upper())
    if exclude_id is not None:
        stmt = stmt.where(Product.id != exclude_id)
    if db.execute(stmt.limit(1)).first():
        raise ConflictError("SKU already exists")


def create_product(db: Session, payload: ProductCreate) -> Product:
    _ensure_supplier_exists(db, payload.supplier_id)
    _ensure_sku_available(db, payload.sku)

    product = Product(**payload.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product %s (sku=%s)", product.id, product.sku)
    return product


def update_product(db: Session, product_id: int, payload: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    values = payload.model_dump(exclude_unset=True)

    if values.get("sku"):
        _ensure_sku_available(db, values["sku"], exclude_id=product.id)
    if values.get("supplier_id") is not None:
        _ensure_supplier_exists(db, values["supplier_id"])

    for field, value in values.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(product, field, value)

    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product_id: int) -> bool:
    """Remove a product, or deactivate it when transactions reference it.

    Returns True for a hard delete, False for a soft delete.
    """
    product = get_product(db, product_id)
    transaction_count = db.execute(
        select(func.count(Transaction.id)).where(Transaction.product_id == product.id)
    ).scalar_one()

    if transaction_count > 0:
        product.is_active = False
        db.commit()
        logger.info(
            "Deactivated product %s: referenced by %d transactions",
            product.id,
            transaction_count,
        )
        return False

    db.delete(product)
    db.commit()
    logger.info("Deleted product %s", product_id)
    return True


def low_stock_products(db: Session) -> list[Product]:
    products = (
        db.execute(
            select(Product)
            .where(
                Product.is_active.is_(True),
                Product.quantity <= Product.minimum_stock,
            )
            .order_by(Product.quantity.asc(), Product.id)
        )
        .scalars()
        .all()
    )
    return list(products)


def inventory_value_report(db: Session) -> dict:
    value_expr = Product.quantity * Product.price
    totals = db.execute(
        select(
            func.count(Product.id),
            func.coalesce(func.sum(Product.quantity), 0),
            func.coalesce(func.sum(value_expr), 0.0),
            func.coalesce(func.avg(Product.price), 0.0),
        ).where(Product.is_active.is_(True))
    ).one()

    total_value_label = func.coalesce(func.sum(value_expr), 0.0).label("total_value")
    rows = db.execute(
        select(
            Product.category,
            func.count(Product.id).label("count"),
            func.coalesce(func.sum(Product.quantity), 0).label("total_quantity"),
            total_value_label,
        )
        .where(Product.is_active.is_(True))
        .group_by(Product.category)
        .order_by(total_value_label.desc())
    ).mappings().all()

    return {
        "summary": {
            "totalProducts": int(totals[0]),
            "totalQuantity": int(totals[1]),
            "totalValue": float(totals[2]),
            "averagePrice": float(totals[3]),
        },
        "categoryBreakdown": [
            {
                "category": row["category"],
                "count": int(row["count"]),
                "totalQuantity": int(row["total_quantity"]),
                "totalValue": float(row["total_value"]),
            }
            for row in rows
        ],
    }


def products_by_supplier_report(db: Session) -> list[dict]:
    rows = db.execute(
        select(Product, Supplier.name, Supplier.email)
        .join(Supplier, Supplier.id == Product.supplier_id)
        .where(Product.is_active.is_(True))
        .order_by(Product.id)
    ).all()

    groups = {}
    for product, supplier_name, supplier_email in rows:
        group = groups.get(product.supplier_id)
        if group is None:
            group = {
                "supplierId": product.supplier_id,
                "supplierName": supplier_name,
                "supplierEmail": supplier_email,
                "productCount": 0,
                "totalQuantity": 0,
                "totalValue": 0.0,
                "products": [],
            }
            groups[product.supplier_id] = group
        group["productCount"] += 1
        group["totalQuantity"] += product.quantity
        group["totalValue"] += product.total_value
        group["products"].append(
            {
                "id": product.id,
                "name": product.name,
                "sku": product.sku,
                "quantity": product.quantity,
                "price": product.price,
                "category": product.category,
            }
        )

    return sorted(groups.values(), key=lambda item: item["totalValue"], reverse=True)
