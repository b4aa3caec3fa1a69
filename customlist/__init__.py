"""
customlist: a growable ordered list with fail-fast iterators.

Usage:
    from customlist import CustomList, ConcurrentModificationError

    items = CustomList()
    items.add(1)
    items.add_all([2, 3])

    it = items.iterator()
    it.next()
    it.remove()              # items is now [2, 3]

    for value in items:      # fail-fast: mutating items here raises
        print(value)
"""

from .config import DEFAULT_CONFIG, ListConfig
from .custom_list import CustomList
from .errors import (
    ConcurrentModificationError,
    CustomListError,
    IllegalStateError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    NullArgumentError,
)
from .iterator import ListIterator

__all__ = [
    # Container
    "CustomList",
    "ListIterator",
    # Configuration
    "ListConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CustomListError",
    "IndexOutOfBoundsError",
    "NullArgumentError",
    "NoSuchElementError",
    "IllegalStateError",
    "ConcurrentModificationError",
]
