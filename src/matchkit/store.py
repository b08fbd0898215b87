"""RecordStore — bounded, insertion-ordered record collection with matcher search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from .config import StoreConfig
from .exceptions import CapacityExceededError
from .records import Record

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .base import IMatcher

logger = logging.getLogger("matchkit.store")

R = TypeVar("R", bound=Record)


class RecordStore(Generic[R]):
    """Fixed-capacity, ordered, owning collection of records.

    Records are kept in insertion order, which is also the scan order of
    :meth:`find`. There is no internal locking: ``add`` must not run
    concurrently with any other call.

    Usage::

        store: RecordStore[ModelRecord] = RecordStore(capacity=64)
        store.add(ModelRecord(name="ResNet", version=1))
        store.find(name_matcher(equal_to("ResNet")))
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        capacity: int | None = None,
    ) -> None:
        if config is not None and capacity is not None:
            raise ValueError("Pass either config or capacity, not both")
        if config is None:
            config = (
                StoreConfig() if capacity is None else StoreConfig(capacity=capacity)
            )
        self._config = config
        self._records: list[R] = []

    @property
    def capacity(self) -> int:
        return self._config.capacity

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._config.capacity

    def add(self, record: R) -> None:
        """
        Append *record*, taking ownership of it.

        Raises:
            CapacityExceededError: If the store is full. The store is
                left unchanged and the record stays with the caller.
        """
        if self.is_full:
            logger.warning(
                "Rejected %s: store is at capacity (%d)",
                type(record).__name__,
                self.capacity,
            )
            raise CapacityExceededError(self.capacity)
        self._records.append(record)
        logger.debug(
            "Added %s (%d/%d)",
            type(record).__name__,
            len(self._records),
            self.capacity,
        )

    def find(self, matcher: IMatcher[R]) -> R | None:
        """Return the first record, in insertion order, that *matcher* accepts."""
        for index, record in enumerate(self._records):
            if matcher.matches(record):
                logger.debug("find: match at position %d", index)
                return record
        logger.debug("find: no match among %d record(s)", len(self._records))
        return None

    def find_all(self, matcher: IMatcher[R]) -> list[R]:
        """Return every record *matcher* accepts, in insertion order."""
        return [record for record in self._records if matcher.matches(record)]

    def count(self, matcher: IMatcher[R]) -> int:
        return sum(1 for record in self._records if matcher.matches(record))

    # ── Lifecycle ────────────────────────────────────────────────

    def clear(self) -> None:
        """Release every owned record."""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(tuple(self._records))
