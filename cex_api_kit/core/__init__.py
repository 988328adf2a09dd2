"""
Core client and transaction history components.
"""

from .api_client import CexAPIClient, create_api_client
from .batch_hook import BatchLoadHook, PageTransform
from .order_transactions import OrderTransactions
from .transactions import TransactionStream, prepare_filters
from .types import TransactionSource

__all__ = [
    "BatchLoadHook",
    "CexAPIClient",
    "OrderTransactions",
    "PageTransform",
    "TransactionSource",
    "TransactionStream",
    "create_api_client",
    "prepare_filters",
]
