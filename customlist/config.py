"""
Storage configuration for CustomList.

This module provides:
- ListConfig: initial capacity and growth factor for the backing buffer
- Construction from a config dict ("list" section) or from environment variables

Settings:
- initial_capacity: slots allocated the first time an empty list grows
- growth_factor: capacity multiplier applied when the buffer is full
"""

import os
from dataclasses import dataclass

DEFAULT_INITIAL_CAPACITY = 10
DEFAULT_GROWTH_FACTOR = 2

# Environment overrides
ENV_INITIAL_CAPACITY = "CUSTOMLIST_INITIAL_CAPACITY"
ENV_GROWTH_FACTOR = "CUSTOMLIST_GROWTH_FACTOR"


@dataclass(frozen=True)
class ListConfig:
    """Capacity settings for a CustomList backing buffer."""

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    growth_factor: int = DEFAULT_GROWTH_FACTOR

    def __post_init__(self):
        if not _is_int(self.initial_capacity) or self.initial_capacity < 1:
            raise ValueError(f"initial_capacity must be an int >= 1, got {self.initial_capacity!r}")
        if not _is_int(self.growth_factor) or self.growth_factor < 2:
            raise ValueError(f"growth_factor must be an int >= 2, got {self.growth_factor!r}")

    def next_capacity(self, current: int, required: int) -> int:
        """Return the capacity to grow to so at least `required` slots fit.

        Args:
            current: Current capacity (0 for a list that never allocated)
            required: Minimum number of slots needed

        Returns:
            New capacity, always >= required
        """
        if current == 0:
            grown = self.initial_capacity
        else:
            grown = current * self.growth_factor
        return max(grown, required)

    @classmethod
    def from_config(cls, config: dict) -> "ListConfig":
        """Create ListConfig from a configuration dictionary."""
        list_config = config.get("list", {})
        return cls(
            initial_capacity=list_config.get("initial_capacity", DEFAULT_INITIAL_CAPACITY),
            growth_factor=list_config.get("growth_factor", DEFAULT_GROWTH_FACTOR),
        )

    @classmethod
    def from_env(cls) -> "ListConfig":
        """Create ListConfig from CUSTOMLIST_* environment variables."""
        return cls(
            initial_capacity=_int_from_env(ENV_INITIAL_CAPACITY, DEFAULT_INITIAL_CAPACITY),
            growth_factor=_int_from_env(ENV_GROWTH_FACTOR, DEFAULT_GROWTH_FACTOR),
        )


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid capacity setting
    return isinstance(value, int) and not isinstance(value, bool)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


DEFAULT_CONFIG = ListConfig()
