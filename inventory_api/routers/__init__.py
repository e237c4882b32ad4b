from inventory_api.routers.health import router as health_router
from inventory_api.routers.products import router as products_router
from inventory_api.routers.suppliers import router as suppliers_router
from inventory_api.routers.transactions import router as transactions_router

__all__ = [
    "health_router",
    "products_router",
    "suppliers_router",
    "transactions_router",
]
