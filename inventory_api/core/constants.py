DEFAULT_MINIMUM_STOCK = 10
DEFAULT_COUNTRY = "USA"
DEFAULT_PAYMENT_TERMS = "NET_30"
DEFAULT_RATING = 3
DEFAULT_TRANSACTION_STATUS = "COMPLETED"

TOP_PRODUCTS_LIMIT = 10

SKU_PATTERN = r"^[A-Z0-9_-]+$"
PHONE_PATTERN = r"^\+?[1-9]\d{0,15}$"
