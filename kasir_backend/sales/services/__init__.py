from .checkout_engine import checkout
from .report_service import get_daily_sales_report, get_sales_report

__all__ = [
    "checkout",
    "get_sales_report",
    "get_daily_sales_report",
]
