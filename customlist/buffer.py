"""
Contiguous slot storage backing CustomList.

ArrayBuffer owns a fixed-length slot array and knows how to grow it and
shift ranges of slots. It does not track the logical size; callers pass
the number of used slots to every operation that needs it.
"""

import logging

from .config import DEFAULT_CONFIG, ListConfig

logger = logging.getLogger(__name__)


class ArrayBuffer:
    """Fixed-length slot array with geometric growth.

    Slots past the logical size always hold None so removed elements are
    not kept alive by the buffer.
    """

    __slots__ = ("_config", "_slots")

    def __init__(self, config: ListConfig = DEFAULT_CONFIG):
        self._config = config
        # Allocated lazily on first growth
        self._slots: list = []

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int):
        return self._slots[index]

    def __setitem__(self, index: int, value):
        self._slots[index] = value

    def snapshot(self, used: int) -> list:
        """Return a plain list copy of the first `used` slots."""
        return self._slots[:used]

    def ensure_capacity(self, required: int, used: int) -> None:
        """Grow the buffer so at least `required` slots are available.

        Args:
            required: Minimum capacity needed
            used: Number of leading slots holding live elements
        """
        current = len(self._slots)
        if required <= current:
            return

        new_capacity = self._config.next_capacity(current, required)
        new_slots = [None] * new_capacity
        new_slots[:used] = self._slots[:used]
        self._slots = new_slots
        logger.debug(f"Grew list storage from {current} to {new_capacity} slots")

    def shift_right(self, index: int, count: int, used: int) -> None:
        """Move slots [index, used) up by `count` to open a gap at `index`.

        Capacity for `used + count` slots must already be ensured.
        """
        if count <= 0 or index >= used:
            return
        self._slots[index + count:used + count] = self._slots[index:used]

    def shift_left(self, index: int, used: int) -> None:
        """Close the gap at `index` by moving [index + 1, used) down one slot."""
        self._slots[index:used - 1] = self._slots[index + 1:used]
        self._slots[used - 1] = None

    def clear(self, used: int) -> None:
        """Reset the first `used` slots to None, keeping capacity."""
        for i in range(used):
            self._slots[i] = None
