from .stock_lookup import (
    InsufficientStockError,
    ProductNotFoundError,
    ProductSnapshot,
    StockError,
    decrement_stock,
    lookup_product,
)

__all__ = [
    "StockError",
    "ProductNotFoundError",
    "InsufficientStockError",
    "ProductSnapshot",
    "lookup_product",
    "decrement_stock",
]
