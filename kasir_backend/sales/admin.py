# sales/admin.py

from django.contrib import admin

from sales.models import Transaction, TransactionDetail


# ======================================================
# TRANSACTION DETAIL INLINE (READ-ONLY)
# ======================================================

class TransactionDetailInline(admin.TabularInline):
    model = TransactionDetail
    extra = 0
    can_delete = False
    fields = ("product", "product_name", "quantity", "subtotal")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


# ======================================================
# TRANSACTION ADMIN
# ======================================================

@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    Transactions are created only by checkout; admin is view-only.
    """

    list_display = ("id", "total_amount", "created_at", "deleted_at")
    list_filter = ("created_at",)
    readonly_fields = ("total_amount", "created_at", "deleted_at")
    inlines = [TransactionDetailInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
