from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DescriptiveSnapshot:
    """Read-only view of an accumulator's statistics.

    `min` and `max` are None when no samples were added; the float fields are
    NaN in that case.
    """
    count: int
    sum: Any
    min: Any | None
    mean: float
    max: Any | None
    median: float
    standard_deviation: float
