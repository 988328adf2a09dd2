"""
Test fixtures package for cex-api-kit.
"""

from .transaction_data import (
    error_response,
    history_response,
    make_page,
    make_transaction,
    mixed_order_records,
    tx_time,
)

__all__ = [
    "error_response",
    "history_response",
    "make_page",
    "make_transaction",
    "mixed_order_records",
    "tx_time",
]
