# products/models/product.py

from django.db import models
from django.db.models import Q
from django.utils import timezone

from .category import Category


class ProductQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)


class Product(models.Model):
    """
    Represents a sellable product.

    STOCK MODEL (IMPORTANT):
    - stock lives directly on the product row (integer units)
    - stock is mutated ONLY by the checkout engine (guarded decrement) or by
      staff edits through the product endpoints
    - price is an integer in the minor currency unit; the sold price is
      snapshotted into TransactionDetail.subtotal at checkout

    GUARANTEES:
    - stock never goes negative (DB check constraint + guarded UPDATE)
    - soft-deleted products (deleted_at set) cannot be sold
    """

    name = models.CharField(max_length=255, db_index=True)
    price = models.PositiveIntegerField(default=0)
    stock = models.PositiveIntegerField(default=0)

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
    )

    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = "product"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(stock__gte=0),
                name="product_stock_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name="product_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.name} (#{self.pk})"

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self):
        if self.deleted_at is None:
            self.deleted_at = timezone.now()
            self.save(update_fields=["deleted_at"])
