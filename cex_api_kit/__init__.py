"""
cex-api-kit - CEX.IO REST API client with lazy transaction history streams.

This package provides:
- An authenticated REST client with per-client nonce state
- A restartable, cursor-driven stream over the transaction history
- Page transforms applied to every loaded page
- Per-order views of trade transactions and transaction classification
"""

__version__ = "1.0.0"

from .config import ClientConfig
from .core import (
    BatchLoadHook,
    CexAPIClient,
    OrderTransactions,
    TransactionSource,
    TransactionStream,
    create_api_client,
)
from .utilities.constants import (
    APIRequestError,
    CexAPIError,
    ConfigurationError,
    RemoteFetchError,
    TransactionKind,
    TransactionType,
    UnknownTransactionType,
)
from .utilities.transactions import get_order_id, get_transaction_kind, is_non_deal_transaction

__all__ = [
    "APIRequestError",
    "BatchLoadHook",
    "CexAPIClient",
    "CexAPIError",
    "ClientConfig",
    "ConfigurationError",
    "OrderTransactions",
    "RemoteFetchError",
    "TransactionKind",
    "TransactionSource",
    "TransactionStream",
    "TransactionType",
    "UnknownTransactionType",
    "create_api_client",
    "get_order_id",
    "get_transaction_kind",
    "is_non_deal_transaction",
]
