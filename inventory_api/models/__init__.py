import importlib

from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction


def import_all_models() -> None:
    for module_name in (
        "inventory_api.models.product",
        "inventory_api.models.supplier",
        "inventory_api.models.transaction",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Product",
    "Supplier",
    "Transaction",
    "import_all_models",
]
