from inventory_api.services.product_service import (
    create_product,
    delete_product,
    inventory_value_report,
    low_stock_products,
    products_by_supplier_report,
    update_product,
)
from inventory_api.services.supplier_service import (
    create_supplier,
    delete_supplier,
    supplier_performance_report,
    update_supplier,
)
from inventory_api.services.transaction_service import (
    create_transaction,
    delete_transaction,
    transaction_summary,
    update_transaction,
)

__all__ = [
    "create_product",
    "create_supplier",
    "create_transaction",
    "delete_product",
    "delete_supplier",
    "delete_transaction",
    "inventory_value_report",
    "low_stock_products",
    "products_by_supplier_report",
    "supplier_performance_report",
    "transaction_summary",
    "update_product",
    "update_supplier",
    "update_transaction",
]
