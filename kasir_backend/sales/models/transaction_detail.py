# sales/models/transaction_detail.py

"""
TRANSACTION DETAIL (IMMUTABLE SNAPSHOT)

One sold line. product_name and subtotal are frozen at checkout time so
later renames or price changes never rewrite sales history.
"""

from django.core.exceptions import ValidationError
from django.db import models

from products.models import Product

from .transaction import Transaction


class TransactionDetail(models.Model):
    transaction = models.ForeignKey(
        Transaction,
        on_delete=models.PROTECT,
        related_name="details",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="transaction_details",
    )

    product_name = models.CharField(max_length=255, blank=True, default="")
    quantity = models.PositiveIntegerField()

    # unit price x quantity at time of sale; never recomputed
    subtotal = models.PositiveIntegerField()

    class Meta:
        db_table = "transaction_details"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="transaction_detail_quantity_positive",
            ),
        ]

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            raise ValidationError("TransactionDetail records are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("TransactionDetail records cannot be deleted")

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
