"""Stock ledger rules.

Pure functions that decide how a product's on-hand quantity moves when a
transaction is recorded or reversed. Persistence lives in
``inventory_api.services.transaction_service``.
"""

from typing import Optional

from inventory_api.core.errors import InsufficientStockError


def clamp_quantity(value: int) -> int:
    return max(0, int(value))


def apply_transaction(current_quantity: int, transaction_type: str, quantity: int) -> int:
    """Return the quantity a product holds after ``transaction_type`` is recorded.

    PURCHASE adds, SALE subtracts (and fails if stock is short), ADJUSTMENT
    sets the absolute quantity. The result never drops below zero.
    """
    current_quantity = int(current_quantity or 0)
    quantity = int(quantity)

    if transaction_type == "PURCHASE":
        new_quantity = current_quantity + quantity
    elif transaction_type == "SALE":
        if current_quantity < quantity:
            raise InsufficientStockError(available=current_quantity, requested=quantity)
        new_quantity = current_quantity - quantity
    elif transaction_type == "ADJUSTMENT":
        new_quantity = quantity
    else:
        raise ValueError("Unknown transaction type: {}".format(transaction_type))

    return clamp_quantity(new_quantity)


def reverse_transaction(
    current_quantity: int, transaction_type: str, quantity: int
) -> Optional[int]:
    """Quantity after undoing a completed transaction.

    Returns None when the type has no defined inverse (ADJUSTMENT); the
    caller leaves stock untouched in that case.
    """
    current_quantity = int(current_quantity or 0)
    quantity = int(quantity)

    if transaction_type == "PURCHASE":
        return clamp_quantity(current_quantity - quantity)
    if transaction_type == "SALE":
        return clamp_quantity(current_quantity + quantity)
    return None


def stock_status(quantity: int, minimum_stock: int) -> str:
    quantity = int(quantity or 0)
    if quantity <= 0:
        return "OUT_OF_STOCK"
    if quantity <= int(minimum_stock or 0):
        return "LOW_STOCK"
    return "IN_STOCK"


def transaction_total(quantity: int, unit_price: float) -> float:
    return round(int(quantity) * float(unit_price), 2)
