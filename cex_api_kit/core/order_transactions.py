"""
Trade transactions belonging to a single order.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from ..utilities.constants import DEFAULT_BATCH_SIZE, TransactionType
from ..utilities.transactions import get_order_id
from .transactions import TransactionStream
from .types import TransactionSource


class OrderTransactions:
    """
    Lazy sequence of the trade transactions owned by one order.

    The underlying stream is filtered server-side to trade transactions created
    at or after the order; records owned by other orders are dropped here.
    Paging, restarts and page transforms are those of ``transactions``.
    """

    def __init__(
        self,
        source: TransactionSource,
        order_id: int | str,
        created_at: Any,
        limit: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.order_id = str(order_id)
        self.transactions = TransactionStream(
            source,
            {"start": created_at, "type": TransactionType.TRADE.value},
            limit=limit,
        )

    @classmethod
    def from_order(
        cls, source: TransactionSource, order: Mapping[str, Any], limit: int = DEFAULT_BATCH_SIZE
    ) -> "OrderTransactions":
        """Create from an order record carrying ``id`` and ``createdAt``."""
        return cls(source, order["id"], order["createdAt"], limit=limit)

    def accepts(self, tx: Mapping[str, Any]) -> bool:
        """Whether a transaction is owned by this order."""
        owner = get_order_id(tx)
        return owner is not None and str(owner) == self.order_id

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        return filter(self.accepts, self.transactions)
