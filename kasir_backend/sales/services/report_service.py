# sales/services/report_service.py

"""
SALES REPORT SERVICE

Read-only aggregation over committed, non-deleted transactions:

    {
      "total_revenue":   sum(total_amount),
      "total_transaksi": count(transactions),
      "produk_terlaris": {"nama": <product name>, "qty_terjual": <units>} | None
    }

Bounds are inclusive on both ends. Day bounds are computed in the single
configured TIME_ZONE (00:00:00 .. 23:59:59).
"""

from __future__ import annotations

from datetime import date, datetime, time

from django.db.models import Count, IntegerField, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from sales.models import Transaction, TransactionDetail


def day_bounds(start_day: date, end_day: date | None = None):
    """
    Returns timezone-aware datetime bounds [start 00:00:00, end 23:59:59].
    """
    end_day = end_day or start_day
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(start_day, time.min), tz)
    end = timezone.make_aware(datetime.combine(end_day, time(23, 59, 59)), tz)
    return start, end


def get_sales_report(start: datetime, end: datetime) -> dict:
    txns = Transaction.objects.active().filter(created_at__gte=start, created_at__lte=end)

    totals = txns.aggregate(
        total_revenue=Coalesce(Sum("total_amount"), 0, output_field=IntegerField()),
        total_transaksi=Count("id"),
    )

    top = (
        TransactionDetail.objects.filter(
            transaction__deleted_at__isnull=True,
            transaction__created_at__gte=start,
            transaction__created_at__lte=end,
        )
        .values("product_id", "product__name")
        .annotate(qty_terjual=Sum("quantity"))
        .order_by("-qty_terjual", "product_id")
        .first()
    )

    return {
        "total_revenue": int(totals["total_revenue"] or 0),
        "total_transaksi": int(totals["total_transaksi"] or 0),
        "produk_terlaris": (
            {"nama": top["product__name"], "qty_terjual": int(top["qty_terjual"])}
            if top
            else None
        ),
    }


def get_daily_sales_report() -> dict:
    start, end = day_bounds(timezone.localdate())
    return get_sales_report(start, end)


def get_sales_report_for_dates(start_day: date, end_day: date) -> dict:
    start, end = day_bounds(start_day, end_day)
    return get_sales_report(start, end)
