"""
Utility modules for cex-api-kit.

Constants and exceptions, transaction classification, response parsing,
input validation and credential handling.
"""

from .constants import (
    APIRequestError,
    CexAPIError,
    ConfigurationError,
    OrderSide,
    RemoteFetchError,
    TransactionKind,
    TransactionType,
    UnknownTransactionType,
)
from .transactions import get_order_id, get_transaction_kind, is_non_deal_transaction

__all__ = [
    "APIRequestError",
    "CexAPIError",
    "ConfigurationError",
    "OrderSide",
    "RemoteFetchError",
    "TransactionKind",
    "TransactionType",
    "UnknownTransactionType",
    "get_order_id",
    "get_transaction_kind",
    "is_non_deal_transaction",
]
