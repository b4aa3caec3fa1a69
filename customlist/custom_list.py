"""
CustomList: a dynamically-resizable ordered sequence with fail-fast iteration.

Elements live in a contiguous ArrayBuffer, so get() is O(1) and insertion or
removal shifts the tail (O(n) worst case). Appends are amortized O(1) thanks
to geometric growth.

Every structural change (add, insert_all, remove, iterator remove, clear)
bumps a modification counter. Iterators snapshot that counter and fail fast
with ConcurrentModificationError once it moves behind their back. This is a
guard against sequential misuse, not a thread-safety mechanism.
"""

import logging
from collections.abc import Sequence
from typing import Callable, Generic, Iterable, Optional, TypeVar

from .buffer import ArrayBuffer
from .config import DEFAULT_CONFIG, ListConfig
from .errors import ConcurrentModificationError, IndexOutOfBoundsError, NullArgumentError
from .iterator import ListIterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CustomList(Sequence, Generic[T]):
    """Ordered, growable list of arbitrary elements (None included).

    Example:
        items = CustomList()
        items.add("a")
        items.add_all(["b", "c"])
        items.remove("b")        # True
        list(items)              # ["a", "c"]
    """

    def __init__(self, config: Optional[ListConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._buffer = ArrayBuffer(self._config)
        self._size = 0
        self._mod_count = 0

    # =========================================================================
    # Size and state
    # =========================================================================

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def mod_count(self) -> int:
        """Number of structural modifications since creation."""
        return self._mod_count

    @property
    def capacity(self) -> int:
        """Slots currently allocated in the backing buffer."""
        return self._buffer.capacity

    # =========================================================================
    # Access
    # =========================================================================

    def get(self, index: int) -> T:
        """Return the element at `index`.

        Raises:
            IndexOutOfBoundsError: index < 0 or index >= size().
        """
        if index < 0 or index >= self._size:
            raise IndexOutOfBoundsError(index, self._size)
        return self._buffer[index]

    # =========================================================================
    # Insertion
    # =========================================================================

    def add(self, value: T) -> bool:
        """Append `value` at the end. Always returns True."""
        self._buffer.ensure_capacity(self._size + 1, self._size)
        self._buffer[self._size] = value
        self._size += 1
        self._mod_count += 1
        return True

    def add_all(self, collection: Iterable[T]) -> bool:
        """Append every element of `collection` in its iteration order.

        Returns:
            True if at least one element was added.

        Raises:
            NullArgumentError: collection is None.
        """
        return self.insert_all(self._size, collection)

    def insert_all(self, index: int, collection: Iterable[T]) -> bool:
        """Insert every element of `collection` starting at `index`.

        Existing elements at and after `index` move up to make room. The
        index is validated before the collection, so an out-of-range index
        is reported even when the collection is also None.

        Args:
            index: Insertion position, 0 <= index <= size()
            collection: Elements to insert, in order

        Returns:
            True if at least one element was inserted.

        Raises:
            IndexOutOfBoundsError: index is outside [0, size()].
            NullArgumentError: collection is None.
        """
        if index < 0 or index > self._size:
            raise IndexOutOfBoundsError(index, self._size)
        if collection is None:
            raise NullArgumentError("collection")

        # Materialise first: the source may be this list or a one-shot iterable
        items = list(collection)
        count = len(items)
        if count == 0:
            return False

        self._buffer.ensure_capacity(self._size + count, self._size)
        self._buffer.shift_right(index, count, self._size)
        for offset, item in enumerate(items):
            self._buffer[index + offset] = item
        self._size += count
        self._mod_count += 1
        return True

    # =========================================================================
    # Removal
    # =========================================================================

    def remove(self, value: T) -> bool:
        """Remove the first element equal to `value`.

        Equality is the element's own __eq__, so distinct but equal objects
        match, and None matches a stored None.

        Returns:
            True if an element was removed, False if none matched.
        """
        for i in range(self._size):
            element = self._buffer[i]
            if value is element or value == element:
                self._remove_at(i)
                return True
        return False

    def clear(self) -> None:
        """Remove all elements, keeping the allocated capacity."""
        if self._size == 0:
            return
        self._buffer.clear(self._size)
        self._size = 0
        self._mod_count += 1

    def _remove_at(self, index: int) -> T:
        # Shared by remove() and ListIterator.remove(); index is already valid
        value = self._buffer[index]
        self._buffer.shift_left(index, self._size)
        self._size -= 1
        self._mod_count += 1
        return value

    # =========================================================================
    # Traversal
    # =========================================================================

    def iterator(self) -> ListIterator[T]:
        """Return a fail-fast iterator positioned before the first element."""
        return ListIterator(self)

    def for_each(self, consumer: Callable[[T], object]) -> None:
        """Apply `consumer` to each element in order.

        Raises:
            ConcurrentModificationError: The list was structurally modified
                while the traversal was running, including by `consumer`.
        """
        expected = self._mod_count
        for i in range(self._size):
            if self._mod_count != expected:
                break
            consumer(self._buffer[i])
        if self._mod_count != expected:
            logger.debug(f"List modified during for_each: expected mod count {expected}, found {self._mod_count}")
            raise ConcurrentModificationError(expected, self._mod_count)

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index):
        """Element at an int index (bounds-checked like get()), or a new
        CustomList for a slice (slice bounds follow Python list rules)."""
        if isinstance(index, slice):
            sliced = CustomList(self._config)
            sliced.add_all(self._buffer.snapshot(self._size)[index])
            return sliced
        if not isinstance(index, int):
            raise TypeError(f"CustomList indices must be integers or slices, not {type(index).__name__}")
        return self.get(index)

    def __iter__(self) -> ListIterator[T]:
        return self.iterator()

    def __contains__(self, value: object) -> bool:
        for i in range(self._size):
            element = self._buffer[i]
            if value is element or value == element:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CustomList):
            return self._buffer.snapshot(self._size) == other._buffer.snapshot(other._size)
        if isinstance(other, (list, tuple)):
            return self._buffer.snapshot(self._size) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CustomList({self._buffer.snapshot(self._size)!r})"
