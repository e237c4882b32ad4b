"""Transaction recording and reversal.

Recording a transaction moves the product's on-hand quantity according to
``core.stock_rules``. The transaction row and the product quantity are
written in the same session and committed together.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.constants import TOP_PRODUCTS_LIMIT
from inventory_api.core.errors import ConflictError, NotFoundError
from inventory_api.core.stock_rules import apply_transaction, reverse_transaction, transaction_total
from inventory_api.models.product import Product
from inventory_api.models.transaction import Transaction
from inventory_api.schemas.transaction import TransactionCreate, TransactionUpdate
from inventory_api.services.query import date_range_conditions, paginate, resolve_sort

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = (
    "created_at",
    "updated_at",
    "type",
    "quantity",
    "unit_price",
    "total",
    "status",
)


def list_transactions(
    db: Session,
    *,
    page: int = 1,
    limit: int = 10,
    transaction_type: str | None = None,
    product_id: int | None = None,
    supplier_id: int | None = None,
    start_date=None,
    end_date=None,
    sort_by: str | None = None,
    sort_order: str = "desc",
) -> tuple[list[Transaction], int]:
    conditions = date_range_conditions(Transaction.created_at, start_date, end_date)
    if transaction_type:
        conditions.append(Transaction.type == transaction_type)
    if product_id is not None:
        conditions.append(Transaction.product_id == product_id)
    if supplier_id is not None:
        conditions.append(Transaction.supplier_id == supplier_id)

    order_by = resolve_sort(Transaction, SORTABLE_FIELDS, sort_by, sort_order)
    return paginate(db, Transaction, conditions, order_by, page, limit)


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    transaction = db.get(Transaction, transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction not found")
    return transaction


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def create_transaction(db: Session, payload: TransactionCreate) -> Transaction:
    product = db.get(Product, payload.product_id)
    if product is None:
        raise ConflictError("Product not found")

    previous_quantity = product.quantity
    # Raises InsufficientStockError before anything is written.
    new_quantity = apply_transaction(previous_quantity, payload.type, payload.quantity)

    transaction = Transaction(
        product_id=product.id,
        supplier_id=product.supplier_id,
        type=payload.type,
        quantity=payload.quantity,
        unit_price=payload.unit_price,
        total=transaction_total(payload.quantity, payload.unit_price),
        reference=payload.reference,
        notes=payload.notes,
        status=payload.status,
    )
    db.add(transaction)
    product.quantity = new_quantity
    _commit(db)
    db.refresh(transaction)

    logger.info(
        "Recorded %s #%s on product %s: quantity %d -> %d",
        transaction.type,
        transaction.id,
        product.id,
        previous_quantity,
        new_quantity,
    )
    return transaction


def update_transaction(
    db: Session, transaction_id: int, payload: TransactionUpdate
) -> Transaction:
    """Edit metadata of a recorded transaction. Product stock is not touched."""
    transaction = get_transaction(db, transaction_id)
    values = payload.model_dump(exclude_unset=True)

    new_quantity = values.get("quantity")
    if new_quantity is not None:
        if transaction.status == "COMPLETED":
            raise ConflictError("Cannot modify quantity of completed transaction")
        if transaction.type in ("PURCHASE", "SALE") and new_quantity < 1:
            raise ConflictError("Quantity must be at least 1")

    for field, value in values.items():
        if value is None and field in ("quantity", "unit_price", "status"):
            continue
        setattr(transaction, field, value)
    transaction.total = transaction_total(transaction.quantity, transaction.unit_price)

    _commit(db)
    db.refresh(transaction)
    return transaction


def delete_transaction(db: Session, transaction_id: int) -> None:
    transaction = get_transaction(db, transaction_id)

    if transaction.status == "COMPLETED":
        product = db.get(Product, transaction.product_id)
        if product is not None:
            reversed_quantity = reverse_transaction(
                product.quantity, transaction.type, transaction.quantity
            )
            if reversed_quantity is None:
                logger.warning(
                    "Deleting %s #%s leaves product %s at quantity %d; "
                    "adjustments have no defined reversal",
                    transaction.type,
                    transaction.id,
                    product.id,
                    product.quantity,
                )
            else:
                logger.info(
                    "Reversing %s #%s on product %s: quantity %d -> %d",
                    transaction.type,
                    transaction.id,
                    product.id,
                    product.quantity,
                    reversed_quantity,
                )
                product.quantity = reversed_quantity

    db.delete(transaction)
    _commit(db)


def transaction_summary(db: Session, start_date=None, end_date=None) -> dict:
    conditions = date_range_conditions(Transaction.created_at, start_date, end_date)

    summary_rows = db.execute(
        select(
            Transaction.type,
            func.count(Transaction.id),
            func.coalesce(func.sum(Transaction.quantity), 0),
            func.coalesce(func.sum(Transaction.total), 0.0),
        )
        .where(*conditions)
        .group_by(Transaction.type)
        .order_by(Transaction.type)
    ).all()

    day = func.date(Transaction.created_at)
    trend_rows = db.execute(
        select(
            day.label("day"),
            Transaction.type,
            func.count(Transaction.id),
            func.coalesce(func.sum(Transaction.total), 0.0),
        )
        .where(*conditions)
        .group_by(day, Transaction.type)
        .order_by(day, Transaction.type)
    ).all()

    total_value = func.coalesce(func.sum(Transaction.total), 0.0).label("total_value")
    top_rows = db.execute(
        select(
            Transaction.product_id,
            Product.name,
            Product.sku,
            func.count(Transaction.id),
            func.coalesce(func.sum(Transaction.quantity), 0),
            total_value,
        )
        .join(Product, Product.id == Transaction.product_id)
        .where(*conditions)
        .group_by(Transaction.product_id, Product.name, Product.sku)
        .order_by(total_value.desc())
        .limit(TOP_PRODUCTS_LIMIT)
    ).all()

    return {
        "summary": [
            {
                "type": row[0],
                "count": int(row[1]),
                "totalQuantity": int(row[2]),
                "totalValue": float(row[3]),
            }
            for row in summary_rows
        ],
        "dailyTrends": [
            {
                "date": str(row[0]),
                "type": row[1],
                "count": int(row[2]),
                "totalValue": float(row[3]),
            }
            for row in trend_rows
        ],
        "topProducts": [
            {
                "productId": row[0],
                "productName": row[1],
                "productSku": row[2],
                "transactionCount": int(row[3]),
                "totalQuantity": int(row[4]),
                "totalValue": float(row[5]),
            }
            for row in top_rows
        ],
    }
