"""
Transaction classification helpers.

Buy and sell records store the id of the order that produced them under a key
named after their own type (``{"type": "sell", "sell": "5"}``), while holds,
cancels and returns only carry the generic ``order`` reference.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from .constants import TransactionKind, UnknownTransactionType

NON_DEAL_KINDS = frozenset({TransactionKind.HOLD, TransactionKind.RETURN})


def get_order_id(tx: Mapping[str, Any]) -> Any:
    """Resolve the id of the order that owns a transaction."""
    owner = tx.get(tx.get("type"))
    return owner if owner else tx.get("order")


def get_transaction_kind(tx: Mapping[str, Any]) -> TransactionKind:
    """
    Resolve the semantic kind of a transaction.

    Args:
        tx: Raw transaction record

    Returns:
        TransactionKind of the record

    Raises:
        UnknownTransactionType: If the raw type cannot be classified
    """
    if tx.get("order") is not None and _is_negative(tx.get("amount")):
        return TransactionKind.HOLD

    tx_type = tx.get("type")
    if tx_type == "cancel":
        return TransactionKind.RETURN
    if tx_type == "buy":
        return TransactionKind.BUY
    if tx_type == "sell":
        return TransactionKind.SELL

    raise UnknownTransactionType(tx_type)


def is_non_deal_transaction(tx: Mapping[str, Any]) -> bool:
    """Whether a transaction holds funds on balance or returns them, rather than trades."""
    return get_transaction_kind(tx) in NON_DEAL_KINDS


def _is_negative(amount: Any) -> bool:
    if amount is None:
        return False
    try:
        return Decimal(str(amount)) < 0
    except InvalidOperation:
        return False
