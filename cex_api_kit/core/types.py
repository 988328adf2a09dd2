"""
Shared protocol types for structural typing across streams and clients.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransactionSource(Protocol):
    """Minimal contract a transaction stream needs from the remote side.

    Structural typing keeps the stream independent of the HTTP layer, so the
    real client and scripted test sources can be used interchangeably.
    """

    def get_raw_transactions(self, filters: Mapping[str, Any]) -> Mapping[str, Any]: ...
