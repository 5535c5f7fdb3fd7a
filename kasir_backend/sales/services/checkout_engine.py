# sales/services/checkout_engine.py

"""
CHECKOUT ENGINE (APPLICATION SERVICE)

Purpose:
- Turn a list of (product_id, quantity) lines into one persisted Transaction.
- Validate + deduct stock and write the sold-line snapshots atomically.

Passes (all inside ONE transaction.atomic() block):
1. validate  - row-locked lookup per product in product_id order, fail
               fast on the first missing product or short stock
2. compute   - subtotal = price x quantity, total = sum(subtotals)
3. mutate    - guarded decrement (stock = stock - q WHERE stock >= q)
4. persist   - insert Transaction, bulk insert TransactionDetail rows

Hard rules:
- Quantities are positive integer units; money is integer minor units.
- Totals are computed server-side only.
- Any failure rolls back everything: no stock moves without a Transaction.
- Lines repeating the same product are checked against their combined
  quantity so stock can never go negative.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, transaction

from products.services.stock_lookup import (
    InsufficientStockError,
    ProductSnapshot,
    decrement_stock,
    lookup_product,
)
from sales.models import Transaction, TransactionDetail
from sales.services.exceptions import EmptyCheckoutError, PersistenceError

logger = logging.getLogger(__name__)


def _normalize_items(items) -> list[tuple[int, int]]:
    """
    Accepts dicts ({"product_id", "quantity"}) or objects with the same attributes.
    """
    out = []
    for item in items or []:
        if isinstance(item, dict):
            product_id = item.get("product_id")
            quantity = item.get("quantity")
        else:
            product_id = getattr(item, "product_id", None)
            quantity = getattr(item, "quantity", None)

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValueError(f"quantity for product {product_id} must be a positive whole number")

        out.append((int(product_id), quantity))
    return out


def _validate(lines) -> dict[int, ProductSnapshot]:
    requested: dict[int, int] = {}
    for product_id, quantity in lines:
        requested[product_id] = requested.get(product_id, 0) + quantity

    # Locks are always taken in product_id order so that two carts listing
    # the same products in a different order cannot deadlock.
    products: dict[int, ProductSnapshot] = {}
    for product_id in sorted(requested):
        product = lookup_product(product_id)
        if product.stock < requested[product_id]:
            raise InsufficientStockError(
                product_id=product_id,
                product_name=product.name,
                available=product.stock,
                requested=requested[product_id],
            )
        products[product_id] = product

    return products


def _compute(lines, products) -> tuple[int, list[TransactionDetail]]:
    total = 0
    details = []
    for product_id, quantity in lines:
        product = products[product_id]
        subtotal = product.price * quantity
        total += subtotal
        details.append(
            TransactionDetail(
                product_id=product_id,
                product_name=product.name,
                quantity=quantity,
                subtotal=subtotal,
            )
        )
    return total, details


def checkout(*, items) -> Transaction:
    """
    Run one checkout and return the persisted Transaction
    (details available via transaction.details).

    Raises:
    - EmptyCheckoutError       no lines
    - ProductNotFoundError     unknown or soft-deleted product
    - InsufficientStockError   requested > available
    - PersistenceError         the database failed mid-checkout
    """
    lines = _normalize_items(items)
    if not lines:
        raise EmptyCheckoutError("checkout requires at least one item")

    try:
        with transaction.atomic():
            products = _validate(lines)

            total, details = _compute(lines, products)

            for product_id, quantity in sorted(lines):
                decrement_stock(product=products[product_id], quantity=quantity)

            txn = Transaction.objects.create(total_amount=total)
            for detail in details:
                detail.transaction = txn
            TransactionDetail.objects.bulk_create(details)
    except DatabaseError as exc:
        logger.exception("Checkout failed in the database", extra={"lines": len(lines)})
        raise PersistenceError(str(exc)) from exc

    logger.info(
        "Checkout committed",
        extra={"transaction_id": txn.pk, "total_amount": total, "lines": len(lines)},
    )
    return txn
