"""
Lazy, restartable stream over the paginated transaction history endpoint.

The remote returns records newest first and marks with ``prev`` that older
records remain. Each page is reversed before buffering and the next request
continues from the last record of the previous page, so the stream yields
records in ascending id order across page boundaries.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from ..utilities.constants import (
    CURSOR_FILTER_KEYS,
    DEFAULT_BATCH_SIZE,
    INITIAL_CURSOR_TIME,
    INITIAL_CURSOR_TXID,
    TIME_FILTER_KEYS,
)
from ..utilities.response_parser import TransactionResponseParser
from ..utilities.validators import to_milliseconds, validate_page_size
from .batch_hook import BatchLoadHook
from .types import TransactionSource

logger = logging.getLogger(__name__)


def prepare_filters(filters: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Normalize caller filters to the units the remote expects.

    ``start`` and ``end`` are given in seconds and sent in milliseconds;
    ``next`` and ``prev`` are coerced to integers.
    """
    prepared = dict(filters or {})

    for key in TIME_FILTER_KEYS:
        if prepared.get(key) is not None:
            prepared[key] = to_milliseconds(prepared[key])

    for key in CURSOR_FILTER_KEYS:
        if prepared.get(key) is not None:
            prepared[key] = int(prepared[key])

    return prepared


class TransactionStream:
    """
    Forward-only, restartable sequence of transaction records.

    Nothing is fetched until the stream is first accessed. Iterating the
    stream restarts it and yields every record until the remote reports that
    no more data is available; the cursor-style methods (``current``,
    ``valid``, ``key``, ``advance``, ``rewind``) expose the same walk step by
    step.

    Page transforms attached to ``batch_hook`` run on every loaded page and
    must not advance or rewind the stream they belong to.
    """

    def __init__(
        self,
        source: TransactionSource,
        filters: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        validate_page_size(limit)

        self._source = source
        self._limit = limit
        self._filters = self._take_page_size(prepare_filters(filters))
        self._batch_hook = BatchLoadHook()

        self._position = 0
        self._elements: list[Mapping[str, Any]] | None = None
        self._has_more: bool | None = None
        self._cursor: tuple[Any, Any] | None = None

    @property
    def filters(self) -> dict[str, Any]:
        return dict(self._filters)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def batch_hook(self) -> BatchLoadHook:
        return self._batch_hook

    def set_filters(self, filters: Mapping[str, Any] | None) -> None:
        """Replace the filter set; buffered records and cursor state are discarded."""
        self._filters = self._take_page_size(prepare_filters(filters))
        self._reset()

    def set_limit(self, limit: int) -> None:
        """Set the page size used by subsequent fetches."""
        validate_page_size(limit)
        self._limit = limit

    def rewind(self) -> None:
        """Restart the stream and fetch its first page."""
        self._reset()
        self._load()

    def current(self) -> Mapping[str, Any] | None:
        """Return the record at the current position, or None at stream end."""
        self._ensure_rewound()
        if not self._is_valid_position(self._position):
            return None
        return self._elements[self._position]

    def key(self) -> Any:
        """Return the id of the current record, or None at stream end."""
        record = self.current()
        return record.get("id") if record is not None else None

    def valid(self) -> bool:
        """Whether a record is available at the current position."""
        self._ensure_rewound()
        return self._is_valid_position(self._position)

    def advance(self) -> None:
        """Move to the next record, fetching the next page when the buffer is spent."""
        self._ensure_rewound()

        self._position += 1
        if not self._is_valid_position(self._position):
            self._load()
            self._position = 0

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        self.rewind()
        while self.valid():
            yield self._elements[self._position]
            self.advance()

    def _take_page_size(self, filters: dict[str, Any]) -> dict[str, Any]:
        # The page size sent to the remote and the buffer bound must stay equal,
        # otherwise records between them are skipped by the next cursor
        if "limit" in filters:
            self.set_limit(filters.pop("limit"))
        return filters

    def _reset(self) -> None:
        self._position = 0
        self._elements = None
        self._has_more = None
        self._cursor = None

    def _ensure_rewound(self) -> None:
        if not self._is_rewound():
            self.rewind()

    def _is_rewound(self) -> bool:
        return self._elements is not None

    def _is_valid_position(self, position: int) -> bool:
        return position < self._limit and position < len(self._elements or ())

    def _load(self) -> None:
        """
        Load the next page into the buffer.

        State is only replaced once the page has been fetched, parsed and
        transformed; on failure the previous buffer and cursor are kept so the
        same page can be requested again.
        """
        if self._is_rewound() and not self._has_more:
            logger.debug("Transaction stream exhausted")
            self._elements = []
            return

        self._load_page()
        while not self._elements and self._has_more:
            logger.debug("Page emptied by transforms, fetching the next one")
            self._load_page()

    def _load_page(self) -> None:
        """
        Fetch, parse and transform one page.

        The continuation cursor is the newest record as fetched, taken before
        page transforms run, so dropped or injected records never move it.
        """
        params = {**self._pagination_params(), **self._filters}
        logger.debug(f"Fetching transactions with {params}")

        response = self._source.get_raw_transactions(params)
        records, has_more = TransactionResponseParser.parse_page(response)

        if has_more and not records:
            logger.warning("Remote reported more transactions but returned an empty page")
            has_more = False

        cursor = (records[-1].get("id"), records[-1].get("time")) if records else None

        self._batch_hook.batch = records
        elements = self._batch_hook.notify()

        self._elements = list(elements)
        self._has_more = has_more
        self._cursor = cursor
        logger.debug(
            f"Loaded {len(self._elements)} transactions (fetched {len(records)}, more: {has_more})"
        )

    def _pagination_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"limit": self._limit}

        if not self._is_rewound():
            # The remote has no "from the beginning" query; an id/time before
            # every real transaction stands in for it
            params["txid"] = INITIAL_CURSOR_TXID
            params["time"] = INITIAL_CURSOR_TIME
            params["prev"] = 1
        elif self._has_more and self._cursor is not None:
            params["txid"], params["time"] = self._cursor
            params["prev"] = 1

        return params
