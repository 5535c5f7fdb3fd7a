# sales/models/__init__.py

"""
SALES MODELS PACKAGE EXPORTS

Purpose:
- Central export surface for sales app models.
"""

from .transaction import Transaction
from .transaction_detail import TransactionDetail

__all__ = [
    "Transaction",
    "TransactionDetail",
]
