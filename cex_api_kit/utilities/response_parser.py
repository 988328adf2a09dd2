"""
Parsing utilities for raw transaction history responses.

The history endpoint answers either ``{"error": "..."}`` or
``{"data": {"vtx": [...], "prev": bool}}`` with records sorted newest first.
This module turns that payload into an oldest-first page plus a continuation flag.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .constants import RemoteFetchError

logger = logging.getLogger(__name__)


class TransactionResponseParser:
    """Parser for transaction history responses."""

    @staticmethod
    def extract_error(response: Any) -> str | None:
        """Return the error message carried by a response, if any."""
        if not isinstance(response, Mapping):
            return None

        error = response.get("error")
        return str(error) if error else None

    @staticmethod
    def extract_records(response: Mapping[str, Any]) -> list[dict[str, Any]]:
        """
        Extract transaction records in oldest-first order.

        A missing ``data`` or ``vtx`` is an empty page.
        """
        data = response.get("data")
        if not isinstance(data, Mapping):
            return []

        records = data.get("vtx") or []
        return list(reversed(records))

    @staticmethod
    def extract_has_more(response: Mapping[str, Any]) -> bool:
        """Return the ``prev`` flag; older records remain when it is set."""
        data = response.get("data")
        if not isinstance(data, Mapping):
            return False
        return bool(data.get("prev", False))

    @classmethod
    def parse_page(cls, response: Any) -> tuple[list[dict[str, Any]], bool]:
        """
        Parse a full history response.

        Args:
            response: Decoded JSON body from the history endpoint

        Returns:
            Tuple of (records oldest-first, has_more flag)

        Raises:
            RemoteFetchError: If the response carries an error
        """
        error = cls.extract_error(response)
        if error:
            logger.error(f"Transaction history request failed: {error}")
            raise RemoteFetchError(error)

        if not isinstance(response, Mapping):
            cls.log_response_debug_info(response, "parse_page")
            return [], False

        return cls.extract_records(response), cls.extract_has_more(response)

    @staticmethod
    def log_response_debug_info(response: Any, context: str = "") -> None:
        """Log the shape of an unexpected response."""
        context_prefix = f"[{context}] " if context else ""
        logger.debug(f"{context_prefix}Unexpected response type: {type(response)}")
        if isinstance(response, Mapping):
            logger.debug(f"{context_prefix}  Keys: {list(response.keys())}")
