# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Admin rules:
- Categories and products are editable here for back-office fixes.
- Hard delete is disabled; use the soft-delete action so sold products keep
  their history (TransactionDetail rows point at them).
"""

from django.contrib import admin

from products.models import Category, Product


@admin.action(description="Soft delete selected rows")
def soft_delete_selected(modeladmin, request, queryset):
    for obj in queryset:
        obj.soft_delete()


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "deleted_at")
    search_fields = ("name",)
    ordering = ("name",)
    actions = [soft_delete_selected]

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "price", "stock", "deleted_at")
    list_filter = ("category",)
    search_fields = ("name",)
    ordering = ("name",)
    readonly_fields = ("deleted_at",)
    actions = [soft_delete_selected]

    def has_delete_permission(self, request, obj=None):
        return False
