# sales/models/transaction.py

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


class TransactionQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)


class Transaction(models.Model):
    """
    Represents a completed checkout.

    GUARANTEES:
    - Immutable financial record: once written, only deleted_at may change
    - total_amount == sum(details.subtotal), computed server-side at checkout
    - Soft-deleted transactions are excluded from every report
    """

    total_amount = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = "transactions"
        ordering = ["-created_at", "-id"]

    _IMMUTABLE_FIELDS = ("total_amount", "created_at")

    def _validate_immutable(self, previous: "Transaction"):
        for field in self._IMMUTABLE_FIELDS:
            if getattr(self, field) != getattr(previous, field):
                raise ValidationError(
                    f"Transaction is immutable. Field '{field}' cannot be changed."
                )

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            previous = Transaction.objects.filter(pk=self.pk).first()
            if previous is not None:
                self._validate_immutable(previous)

        super().save(*args, **kwargs)

    def soft_delete(self):
        if self.deleted_at is None:
            self.deleted_at = timezone.now()
            self.save(update_fields=["deleted_at"])

    def delete(self, *args, **kwargs):
        raise ValidationError("Transactions cannot be deleted; use soft_delete()")

    def __str__(self):
        return f"#{self.pk} | {self.total_amount}"
