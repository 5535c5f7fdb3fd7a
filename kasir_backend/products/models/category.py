# products/models/category.py

from django.db import models
from django.utils import timezone


class CategoryQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)


class Category(models.Model):
    """
    Product grouping shown on the cashier screen.

    Soft-deleted via deleted_at; rows are never removed so old products
    keep their category reference.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = CategoryQuerySet.as_manager()

    class Meta:
        db_table = "category"
        ordering = ["id"]

    def __str__(self):
        return self.name

    def soft_delete(self):
        if self.deleted_at is None:
            self.deleted_at = timezone.now()
            self.save(update_fields=["deleted_at"])
