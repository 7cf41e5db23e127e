from __future__ import annotations
import logging
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .errors import InvalidCountError, UnknownItemError

log = logging.getLogger(__name__)

T = TypeVar("T")


def _check_k(k: int) -> None:
    if k < 1:
        raise InvalidCountError(k)


class FrequencyCounter(Generic[T]):
    """
    Occurrence counts per item, with a deterministic traversal order.

    Only positive counts are stored: an item whose count drops to zero is
    removed entirely. Iterating yields items by count descending, ties broken
    by item value descending. The order is recomputed from the current counts
    on every request, so a traversal started after a mutation always sees the
    new state.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._counts: Dict[T, int] = {}
        if items is not None:
            self.add_all(items)

    # -------- Mutation --------
    def add_item(self, item: T) -> None:
        self._counts[item] = self._counts.get(item, 0) + 1

    def remove_item(self, item: T) -> None:
        self.remove_occurrences(item, 1)

    def add_occurrences(self, item: T, k: int) -> None:
        _check_k(k)
        self._counts[item] = self._counts.get(item, 0) + k

    def remove_occurrences(self, item: T, k: int) -> None:
        _check_k(k)
        current = self._counts.get(item)
        if current is None:
            raise UnknownItemError(item)
        if k > current:
            raise InvalidCountError(k, f"cannot remove {k} of {item!r}: only {current} recorded")
        if k == current:
            del self._counts[item]
        else:
            self._counts[item] = current - k

    def add_all(self, items: Iterable[T]) -> None:
        for item in items:
            self.add_item(item)

    def merge(self, other: "FrequencyCounter[T]") -> None:
        """Add every count of `other` to this counter."""
        for item in other.item_set():
            k = other.count_of(item)
            try:
                self.add_occurrences(item, k)
            except InvalidCountError:
                log.warning("Item %r has invalid count %r; merge skipped", item, k)

    def clear(self) -> None:
        self._counts.clear()

    # -------- Queries --------
    def count_of(self, item: T) -> int:
        return self._counts.get(item, 0)

    def item_set(self) -> Set[T]:
        return set(self._counts)

    def size(self) -> int:
        return len(self._counts)

    def as_dict(self) -> Dict[T, int]:
        return dict(self._counts)

    # -------- Ordered traversal --------
    def items(self) -> List[Tuple[T, int]]:
        """(item, count) pairs, count descending then item descending."""
        return sorted(self._counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)

    def ordered(self) -> List[T]:
        return [item for item, _ in self.items()]

    def __iter__(self) -> Iterator[T]:
        # sort happens on the first next(), against the counts at that moment
        for item, _ in self.items():
            yield item

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyCounter):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyCounter({dict(self.items())!r})"
