# products/services/stock_lookup.py

"""
STOCK & PRICING LOOKUP

Purpose:
- Read a product's current name / price / stock for the checkout engine.
- Guarded stock decrement used by the same engine.

Hard rules:
- Both helpers MUST run inside the caller's transaction.atomic() block.
  The lookup takes a row lock (SELECT ... FOR UPDATE) so that two checkouts
  touching the same product serialize on that row instead of both passing
  validation against the same stale stock count.
- No caching: every call reads the latest committed state.
- Soft-deleted products are treated as missing.
"""

from __future__ import annotations

from typing import NamedTuple

from django.db import connection
from django.db.models import F

from products.models import Product


# ============================================================
# DOMAIN ERRORS
# ============================================================

class StockError(Exception):
    """Base class for product/stock failures raised during a sale."""


class ProductNotFoundError(StockError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"product id {product_id} not found")


class InsufficientStockError(StockError):
    def __init__(self, *, product_id, product_name: str, available: int, requested: int):
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"insufficient stock for product '{product_name}' "
            f"(available: {available}, requested: {requested})"
        )


class ProductSnapshot(NamedTuple):
    id: int
    name: str
    price: int
    stock: int


def lookup_product(product_id, *, for_update: bool = True) -> ProductSnapshot:
    qs = Product.objects.active().filter(pk=product_id)
    if for_update:
        qs = qs.select_for_update()

    row = qs.values_list("id", "name", "price", "stock").first()
    if row is None:
        raise ProductNotFoundError(product_id)

    return ProductSnapshot(*row)


def decrement_stock(*, product: ProductSnapshot, quantity: int) -> None:
    """
    Atomic, guarded decrement:

        UPDATE product SET stock = stock - q WHERE id = ? AND stock >= q

    Zero affected rows means someone else consumed the stock after our
    read (only possible on backends without row locks); we re-read and fail.
    """
    updated = (
        Product.objects.active()
        .filter(pk=product.id, stock__gte=quantity)
        .update(stock=F("stock") - quantity)
    )
    if updated == 1:
        return

    current = lookup_product(product.id, for_update=connection.features.has_select_for_update)
    raise InsufficientStockError(
        product_id=product.id,
        product_name=current.name,
        available=current.stock,
        requested=quantity,
    )
