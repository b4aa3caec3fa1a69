"""
Errors raised by CustomList and its iterators.

Every error derives from CustomListError and from the closest builtin,
so callers can catch either the package type or the usual Python one:

    IndexOutOfBoundsError       -> IndexError     (get, insert_all)
    NullArgumentError           -> TypeError      (insert_all, add_all)
    NoSuchElementError          -> StopIteration  (iterator exhausted)
    IllegalStateError           -> RuntimeError   (iterator remove without next)
    ConcurrentModificationError -> RuntimeError   (stale iterator)
"""


class CustomListError(Exception):
    """Base class for all customlist errors."""


class IndexOutOfBoundsError(CustomListError, IndexError):
    """An index argument is outside the range valid for the operation."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")


class NullArgumentError(CustomListError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} must not be None")


class NoSuchElementError(CustomListError, StopIteration):
    """The iterator has no further elements."""


class IllegalStateError(CustomListError, RuntimeError):
    """The iterator is not in a state that allows the operation."""


class ConcurrentModificationError(CustomListError, RuntimeError):
    """The list was structurally modified behind a live iterator."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"list was modified during iteration (expected mod count {expected}, found {actual})"
        )
