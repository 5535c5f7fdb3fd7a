# sales/services/exceptions.py

"""
Checkout domain errors.

Product-level failures (missing product, not enough stock) are raised by
the stock lookup service and re-exported here so callers can import every
checkout failure from one place.
"""

from products.services.stock_lookup import (  # noqa: F401
    InsufficientStockError,
    ProductNotFoundError,
    StockError,
)


class CheckoutError(Exception):
    """Base checkout exception"""


class EmptyCheckoutError(CheckoutError):
    pass


class PersistenceError(CheckoutError):
    """The store rejected a read or write while the checkout was open."""


__all__ = [
    "CheckoutError",
    "EmptyCheckoutError",
    "PersistenceError",
    "StockError",
    "ProductNotFoundError",
    "InsufficientStockError",
]
