"""
Constants, enums and exception types shared across the library.
"""

from enum import Enum

DEFAULT_BASE_URL = "https://cex.io"
DEFAULT_PAIR = "GHS/BTC"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "cex-api-kit"

# Transactions per page, also sent to the remote as ``limit``
DEFAULT_BATCH_SIZE = 100

# Cursor used for the very first page of a stream
INITIAL_CURSOR_TXID = "1"
INITIAL_CURSOR_TIME = "1970-01-01T00:00:00.000Z"

# Filter keys expressed in seconds by callers and in milliseconds by the remote
TIME_FILTER_KEYS = ("start", "end")
CURSOR_FILTER_KEYS = ("next", "prev")


class TransactionType(str, Enum):
    """Server-side transaction history filter values."""

    TRADE = "trade"  # buy, sell, cancel
    MINING = "mining"  # mining, maintenance
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class TransactionKind(str, Enum):
    """Semantic kind of a single transaction record."""

    HOLD = "hold"
    RETURN = "return"
    BUY = "buy"
    SELL = "sell"


class OrderSide(str, Enum):
    """Order side enumeration."""

    BUY = "buy"
    SELL = "sell"


class CexAPIError(Exception):
    """Base exception for all library errors."""


class RemoteFetchError(CexAPIError):
    """The remote reported an error while fetching a transaction page."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownTransactionType(CexAPIError):
    """A transaction's raw type is outside the classifiable set."""

    def __init__(self, transaction_type: object) -> None:
        super().__init__(f"Unknown transaction type: {transaction_type!r}")
        self.transaction_type = transaction_type


class APIRequestError(CexAPIError):
    """HTTP transport failure or undecodable response."""


class ConfigurationError(CexAPIError):
    """Missing or invalid client configuration."""
