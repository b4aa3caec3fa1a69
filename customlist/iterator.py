"""
Fail-fast iterator over a CustomList.

The iterator snapshots the list's modification counter when it is created.
Every next() compares the snapshot with the live counter and raises
ConcurrentModificationError when they differ, so a traversal never silently
skips or repeats elements after the list shifted underneath it.

The only sanctioned way to mutate the list mid-traversal is the iterator's
own remove(), which refreshes that iterator's snapshot. Any other iterator
on the same list goes stale.
"""

import logging
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .errors import ConcurrentModificationError, IllegalStateError, NoSuchElementError

if TYPE_CHECKING:
    from .custom_list import CustomList

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListIterator(Generic[T]):
    """Single-pass cursor over a CustomList.

    Example:
        it = items.iterator()
        while it.has_next():
            if it.next() is None:
                it.remove()
    """

    def __init__(self, owner: "CustomList[T]"):
        self._list = owner
        self._cursor = 0
        self._last_returned = -1
        self._expected_mod_count = owner.mod_count

    def has_next(self) -> bool:
        """True if another element is available. Never checks for staleness."""
        return self._cursor < self._list.size()

    def next(self) -> T:
        """Return the next element and advance the cursor.

        Raises:
            ConcurrentModificationError: The list changed since this iterator
                last synchronised with it.
            NoSuchElementError: No elements remain.
        """
        self._check_for_comodification()
        index = self._cursor
        if index >= self._list.size():
            raise NoSuchElementError()
        value = self._list.get(index)
        self._last_returned = index
        self._cursor = index + 1
        return value

    def remove(self) -> None:
        """Remove the element returned by the last next() call.

        Allowed once per next(). The cursor steps back so the element that
        shifts into the freed slot is returned by the following next().

        Raises:
            IllegalStateError: next() has not been called, or remove()
                already ran since the last next().
            ConcurrentModificationError: The list changed behind this iterator.
        """
        if self._last_returned < 0:
            raise IllegalStateError("remove() requires a preceding call to next()")
        self._check_for_comodification()

        self._list._remove_at(self._last_returned)
        self._cursor = self._last_returned
        self._last_returned = -1
        self._expected_mod_count = self._list.mod_count

    def for_each_remaining(self, consumer: Callable[[T], object]) -> None:
        """Apply `consumer` to every element from the cursor to the end."""
        while self.has_next():
            consumer(self.next())
        # The consumer may have shrunk the list below the cursor
        self._check_for_comodification()

    def __iter__(self) -> "ListIterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()

    def _check_for_comodification(self) -> None:
        actual = self._list.mod_count
        if actual != self._expected_mod_count:
            logger.debug(
                f"Stale iterator: expected mod count {self._expected_mod_count}, list is at {actual}"
            )
            raise ConcurrentModificationError(self._expected_mod_count, actual)
