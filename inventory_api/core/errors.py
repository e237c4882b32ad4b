class InventoryError(Exception):
    """Base class for failures surfaced to API clients."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    status_code = 404


class ConflictError(InventoryError):
    pass


class InsufficientStockError(ConflictError):
    def __init__(self, available: int, requested: int):
        super().__init__(
            "Insufficient stock. Available: {}, Requested: {}".format(available, requested)
        )
        self.available = available
        self.requested = requested


__all__ = [
    "ConflictError",
    "InsufficientStockError",
    "InventoryError",
    "NotFoundError",
]
