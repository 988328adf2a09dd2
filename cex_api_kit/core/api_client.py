"""
API client for CEX.IO.

Every call is a form-encoded POST to ``{base_url}/api/{method}/[{pair}/]``.
Private calls are authenticated with a key, an HMAC-SHA256 signature and a
strictly increasing nonce owned by the client instance.
"""

import hashlib
import hmac
import logging
import time
from collections.abc import Mapping
from typing import Any

import requests

from ..config import ClientConfig
from ..utilities.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_PAIR,
    APIRequestError,
    ConfigurationError,
    OrderSide,
)
from ..utilities.validators import validate_non_empty_string, validate_positive_number
from .order_transactions import OrderTransactions
from .transactions import TransactionStream

logger = logging.getLogger(__name__)


class CexAPIClient:
    """
    API client that handles CEX.IO communication.

    Implements the TransactionSource protocol through ``get_raw_transactions``
    and builds transaction streams on top of itself.
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None) -> None:
        """Initialize API client with configuration and an optional HTTP session."""
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})
        self._nonce = round(time.time() * 100)

    @property
    def nonce(self) -> int:
        """Nonce the next private call will use."""
        return self._nonce

    def api_call(
        self,
        method: str,
        params: Mapping[str, Any] | None = None,
        private: bool = False,
        pair: str = "",
    ) -> Any:
        """
        Send an API call and return the decoded JSON body.

        Args:
            method: API method name (e.g., "ticker", "raw_tx_history")
            params: Request parameters
            private: Whether to authenticate the call
            pair: Currency pair appended to the URL (e.g., "BTC/USD")

        An HTTP error status whose body carries ``{"error": ...}`` is returned
        like any other error body, so the remote's message reaches the caller.

        Raises:
            APIRequestError: If the request fails or the body is not JSON
        """
        validate_non_empty_string(method, "method")

        url = f"{self.config.base_url}/api/{method.strip('/')}/"
        if pair:
            url += f"{pair.strip('/')}/"

        payload = dict(params or {})
        if private:
            payload = {**self._auth_params(), **payload}

        logger.debug(f"POST {url} ({'private' if private else 'public'})")
        try:
            response = self.session.post(
                url,
                data=payload,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as e:
            raise APIRequestError(f"Failed to call {method}: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            body = self._error_body(response)
            if body is None:
                raise APIRequestError(f"Failed to call {method}: {e}") from e
            logger.warning(f"{method} returned HTTP error with remote message: {body['error']}")
            return body

        try:
            return response.json()
        except ValueError as e:
            raise APIRequestError(f"Invalid JSON response from {method}: {e}") from e

    def ticker(self, pair: str = DEFAULT_PAIR) -> Any:
        """Get the current ticker for a pair."""
        return self.api_call("ticker", pair=self._validate_pair(pair))

    def order_book(self, pair: str = DEFAULT_PAIR) -> Any:
        """Get current bids and asks for a pair."""
        return self.api_call("order_book", pair=self._validate_pair(pair))

    def trade_history(self, pair: str = DEFAULT_PAIR, since: int | None = None) -> Any:
        """Get public trade history for a pair, optionally after a trade id."""
        params = {"since": since} if since is not None else {}
        return self.api_call("trade_history", params, pair=self._validate_pair(pair))

    def balance(self) -> Any:
        """Get account balance."""
        return self.api_call("balance", private=True)

    def open_orders(self, pair: str = DEFAULT_PAIR) -> Any:
        """Get open orders for a pair."""
        return self.api_call("open_orders", private=True, pair=self._validate_pair(pair))

    def archived_orders(self, pair: str = DEFAULT_PAIR) -> Any:
        """Get archived orders for a pair."""
        return self.api_call("archived_orders", private=True, pair=self._validate_pair(pair))

    def cancel_order(self, order_id: int | str) -> Any:
        """Cancel a single order by ID."""
        return self.api_call("cancel_order", {"id": order_id}, private=True)

    def get_order(self, order_id: int | str) -> Any:
        """Get order information by ID."""
        return self.api_call("get_order", {"id": order_id}, private=True)

    def get_raw_transactions(self, filters: Mapping[str, Any]) -> Any:
        """Fetch one page of raw transaction history."""
        return self.api_call("raw_tx_history", filters, private=True)

    def place_order(
        self,
        side: str | OrderSide,
        amount: float,
        price: float,
        pair: str = DEFAULT_PAIR,
    ) -> Any:
        """
        Place a limit order.

        Args:
            side: Order side ("buy"/"sell" or OrderSide enum)
            amount: Order amount (positive number)
            price: Limit price (positive number)
            pair: Currency pair

        Raises:
            ValueError: If parameters are invalid
        """
        normalized_side = self._normalize_side(side)
        validate_positive_number(amount, "amount")
        validate_positive_number(price, "price")

        return self.api_call(
            "place_order",
            {"type": normalized_side.value, "amount": amount, "price": price},
            private=True,
            pair=self._validate_pair(pair),
        )

    def place_market_order(self, side: str | OrderSide, amount: float, pair: str) -> Any:
        """Place a market order; amounts in the response are returned as received."""
        normalized_side = self._normalize_side(side)
        validate_positive_number(amount, "amount")

        return self.api_call(
            "place_order",
            {"type": normalized_side.value, "amount": amount, "order_type": "market"},
            private=True,
            pair=self._validate_pair(pair),
        )

    def transactions(
        self, filters: Mapping[str, Any] | None = None, limit: int = DEFAULT_BATCH_SIZE
    ) -> TransactionStream:
        """Create a lazy stream over the account's transaction history."""
        return TransactionStream(self, filters, limit=limit)

    def order_transactions(
        self, order: Mapping[str, Any], limit: int = DEFAULT_BATCH_SIZE
    ) -> OrderTransactions:
        """Create a lazy sequence of the trade transactions of an order record."""
        return OrderTransactions.from_order(self, order, limit=limit)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "CexAPIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _auth_params(self) -> dict[str, Any]:
        if not self.config.has_credentials:
            raise ConfigurationError("Private API calls require username, API key and secret")

        nonce = self._nonce
        self._nonce += 1
        return {
            "key": self.config.api_key,
            "signature": self._signature(nonce),
            "nonce": nonce,
        }

    @staticmethod
    def _error_body(response: requests.Response) -> dict[str, Any] | None:
        """Decoded body of a failed response when it carries a remote error message."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, Mapping) and body.get("error"):
            return dict(body)
        return None

    def _signature(self, nonce: int) -> str:
        message = f"{nonce}{self.config.username}{self.config.api_key}"
        digest = hmac.new(
            self.config.api_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return digest.upper()

    def _normalize_side(self, side: str | OrderSide) -> OrderSide:
        """Normalize order side to OrderSide enum."""
        if isinstance(side, OrderSide):
            return side

        side_str = side.lower().strip()
        if side_str == "buy":
            return OrderSide.BUY
        elif side_str == "sell":
            return OrderSide.SELL
        else:
            raise ValueError(f"Invalid order side: {side}. Must be 'buy' or 'sell'")

    def _validate_pair(self, pair: str) -> str:
        validate_non_empty_string(pair, "pair")
        return pair


def create_api_client(config: ClientConfig) -> CexAPIClient:
    """
    Factory function to create a CEX.IO API client.

    Args:
        config: Client configuration

    Returns:
        CexAPIClient instance
    """
    return CexAPIClient(config)
