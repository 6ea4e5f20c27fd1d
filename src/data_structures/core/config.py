"""Configuration for the array-backed structures.

Defines the storage growth parameters of DynamicArray (and Queue).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import ConfigError


@dataclass(frozen=True)
class StructuresConfig:
    """Tunable parameters for array-backed storage.

    Attributes:
        initial_capacity: Backing slots allocated for a new, empty array
        growth_factor: Multiplier applied to capacity when storage is full
    """

    initial_capacity: int = 4
    growth_factor: float = 2.0

    def __post_init__(self) -> None:
        capacity = self.initial_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigError(
                f"initial_capacity must be a positive int, got {capacity!r}"
            )
        # Anything <= 1 would make append O(n); NaN and inf never yield a capacity
        factor = self.growth_factor
        if (
            isinstance(factor, bool)
            or not isinstance(factor, (int, float))
            or not 1 < factor < math.inf
        ):
            raise ConfigError(
                f"growth_factor must be a finite number greater than 1, got {factor!r}"
            )

    def next_capacity(self, capacity: int) -> int:
        """Return the capacity to grow to from ``capacity``."""
        return max(capacity + 1, int(capacity * self.growth_factor))
