from .checkout import CheckoutItemSerializer, CheckoutRequestSerializer
from .report import ReportRangeQuerySerializer, SalesReportSerializer
from .transaction import TransactionDetailSerializer, TransactionSerializer

__all__ = [
    "CheckoutItemSerializer",
    "CheckoutRequestSerializer",
    "TransactionSerializer",
    "TransactionDetailSerializer",
    "SalesReportSerializer",
    "ReportRangeQuerySerializer",
]
