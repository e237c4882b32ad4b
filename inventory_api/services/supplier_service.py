import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from inventory_api.core.errors import ConflictError, NotFoundError
from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction
from inventory_api.schemas.supplier import SupplierCreate, SupplierUpdate
from inventory_api.services.query import paginate, resolve_sort

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = (
    "created_at",
    "updated_at",
    "name",
    "email",
    "rating",
    "payment_terms",
)

_ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


def _active_product_counts(db: Session, supplier_ids) -> dict[int, int]:
    if not supplier_ids:
        return {}
    rows = db.execute(
        select(Product.supplier_id, func.count(Product.id))
        .where(
            Product.supplier_id.in_(supplier_ids),
            Product.is_active.is_(True),
        )
        .group_by(Product.supplier_id)
    ).all()
    return {supplier_id: int(count) for supplier_id, count in rows}


def list_suppliers(
    db: Session,
    *,
    page: int = 1,
    limit: int = 10,
    search: str | None = None,
    active_only: bool = True,
    sort_by: str | None = None,
    sort_order: str = "desc",
) -> tuple[list[tuple[Supplier, int]], int]:
    """Page of suppliers, each paired with its active product count."""
    conditions = []
    if active_only:
        conditions.append(Supplier.active_status.is_(True))
    if search:
        conditions.append(
            or_(
                Supplier.name.icontains(search, autoescape=True),
                Supplier.email.icontains(search, autoescape=True),
                Supplier.contact_person.icontains(search, autoescape=True),
            )
        )

    order_by = resolve_sort(Supplier, SORTABLE_FIELDS, sort_by, sort_order)
    suppliers, total = paginate(db, Supplier, conditions, order_by, page, limit)
    counts = _active_product_counts(db, [supplier.id for supplier in suppliers])
    return [(supplier, counts.get(supplier.id, 0)) for supplier in suppliers], total


def get_supplier(db: Session, supplier_id: int) -> Supplier:
    supplier = db.get(Supplier, supplier_id)
    if supplier is None:
        raise NotFoundError("Supplier not found")
    return supplier


def supplier_products(db: Session, supplier_id: int) -> list[Product]:
    products = (
        db.execute(
            select(Product)
            .where(Product.supplier_id == supplier_id, Product.is_active.is_(True))
            .order_by(Product.name)
        )
        .scalars()
        .all()
    )
    return list(products)


def _ensure_email_available(db: Session, email: str, exclude_id: int | None = None) -> None:
    stmt = select(Supplier.id).where(func.lower(Supplier.email) == email.lower())
    if exclude_id is not None:
        stmt = stmt.where(Supplier.id != exclude_id)
    if db.execute(stmt.limit(1)).first():
        raise ConflictError("Email already exists")


def _flatten(values: dict) -> dict:
    address = values.pop("address", None)
    if address:
        for field in _ADDRESS_FIELDS:
            values[field] = address.get(field)
    return values


def create_supplier(db: Session, payload: SupplierCreate) -> Supplier:
    _ensure_email_available(db, payload.email)

    supplier = Supplier(**_flatten(payload.model_dump()))
    db.add(supplier)
    db.commit()
    db.refresh(supplier)
    logger.info("Created supplier %s (%s)", supplier.id, supplier.email)
    return supplier


def update_supplier(db: Session, supplier_id: int, payload: SupplierUpdate) -> Supplier:
    supplier = get_supplier(db, supplier_id)
    values = _flatten(payload.model_dump(exclude_unset=True))

    if values.get("email"):
        _ensure_email_available(db, values["email"], exclude_id=supplier.id)

    for field, value in values.items():
        if value is None and field not in ("contact_person", "state", "zip_code"):
            continue
        setattr(supplier, field, value)

    db.commit()
    db.refresh(supplier)
    return supplier


def delete_supplier(db: Session, supplier_id: int) -> None:
    supplier = get_supplier(db, supplier_id)
    product_count = _active_product_counts(db, [supplier.id]).get(supplier.id, 0)
    if product_count > 0:
        raise ConflictError(
            "Cannot delete supplier. {} products are associated with this supplier.".format(
                product_count
            )
        )

    db.delete(supplier)
    db.commit()
    logger.info("Deleted supplier %s", supplier_id)


def supplier_performance_report(db: Session) -> list[dict]:
    product_rows = db.execute(
        select(
            Product.supplier_id,
            func.count(Product.id),
            func.coalesce(func.sum(Product.quantity * Product.price), 0.0),
        ).group_by(Product.supplier_id)
    ).all()
    inventory = {row[0]: (int(row[1]), float(row[2])) for row in product_rows}

    transaction_rows = db.execute(
        select(
            Transaction.supplier_id,
            func.count(Transaction.id),
            func.coalesce(func.sum(Transaction.total), 0.0),
        ).group_by(Transaction.supplier_id)
    ).all()
    activity = {row[0]: (int(row[1]), float(row[2])) for row in transaction_rows}

    suppliers = (
        db.execute(select(Supplier).where(Supplier.active_status.is_(True)))
        .scalars()
        .all()
    )

    results = []
    for supplier in suppliers:
        product_count, inventory_value = inventory.get(supplier.id, (0, 0.0))
        transaction_count, transaction_value = activity.get(supplier.id, (0, 0.0))
        results.append(
            {
                "id": supplier.id,
                "name": supplier.name,
                "email": supplier.email,
                "contactPerson": supplier.contact_person,
                "rating": supplier.rating,
                "productCount": product_count,
                "totalInventoryValue": inventory_value,
                "transactionCount": transaction_count,
                "totalTransactionValue": transaction_value,
                "createdAt": supplier.created_at.isoformat() if supplier.created_at else None,
            }
        )

    results.sort(key=lambda item: item["totalInventoryValue"], reverse=True)
    return results
