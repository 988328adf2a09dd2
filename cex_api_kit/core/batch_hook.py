"""
Batch load hook for transaction streams.

Every page a stream loads is handed to the hook before it becomes visible.
Registered transforms run in attachment order; each receives the current batch
and may return a replacement sequence (or ``None`` to keep the batch as is).
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

Batch = list[Mapping[str, Any]]
PageTransform = Callable[[Batch], Sequence[Mapping[str, Any]] | None]


class BatchLoadHook:
    """Ordered list of page transforms with a current batch."""

    def __init__(self) -> None:
        self._transforms: list[PageTransform] = []
        self._batch: Batch = []

    @property
    def batch(self) -> Batch:
        return self._batch

    @batch.setter
    def batch(self, records: Sequence[Mapping[str, Any]]) -> None:
        self._batch = list(records)

    def attach(self, transform: PageTransform) -> PageTransform:
        """
        Register a page transform.

        Attaching the same callable twice has no effect. The transform is
        returned so this method can be used as a decorator.
        """
        if transform not in self._transforms:
            self._transforms.append(transform)
        return transform

    def detach(self, transform: PageTransform) -> None:
        """Remove a page transform; unknown transforms are ignored."""
        if transform in self._transforms:
            self._transforms.remove(transform)

    def notify(self) -> Batch:
        """
        Run every transform against the current batch.

        Exceptions raised by a transform propagate to the caller.

        Returns:
            The batch left after all transforms
        """
        for transform in list(self._transforms):
            replacement = transform(self._batch)
            if replacement is not None:
                self.batch = replacement

        if self._transforms:
            logger.debug(f"Applied {len(self._transforms)} page transforms")
        return self._batch

    def __len__(self) -> int:
        return len(self._transforms)

    def __contains__(self, transform: object) -> bool:
        return transform in self._transforms
