import math
from typing import Any, Generic, Iterable, TypeVar
import numpy as np
import numpy.typing as npt

from .errors import EmptyAccumulatorError
from .formatter import DelimitedFormatter
from .snapshot import DescriptiveSnapshot

T = TypeVar('T')


def lowest_value(dtype: npt.DTypeLike) -> Any:
    """Return the sentinel a running maximum of the given dtype starts from."""

    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        return dtype.type(np.iinfo(dtype).min)
    if np.issubdtype(dtype, np.floating):
        return dtype.type(-np.inf)

    raise TypeError(f'unsupported sample dtype "{dtype}"')


# https://en.wikipedia.org/wiki/Algorithms_for_calculating_variance#Welford%27s_online_algorithm
class Descriptive(Generic[T]):
    """Maintain simple descriptive statistics of a stream of samples.

    Sum, maximum, mean and variance are updated on every `add`. The samples
    themselves are retained for the minimum and the median, which are read
    after partially sorting the first half of the samples. The partial sort
    is cached until the next `add`.

    The accumulator is not thread safe, callers must serialize access.
    """

    _dtype: np.dtype
    _sum: T
    _max: T
    _samples: list[T]
    _mean: float
    _sum_of_squares_of_diffs: float
    _dirty: bool

    def __init__(self, dtype: npt.DTypeLike = np.float64):
        self._dtype = np.dtype(dtype)
        self._sum = self._dtype.type(0)
        self._max = lowest_value(self._dtype)
        self._samples = []
        self._mean = 0.0
        self._sum_of_squares_of_diffs = 0.0
        self._dirty = False

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def add(self, value: T):
        value = self._dtype.type(value)

        self._samples.append(value)
        self._dirty = True
        self._sum += value
        if value > self._max:
            self._max = value

        # running variance, kept in float64 regardless of the sample type
        x = float(value)
        prev_mean = self._mean
        self._mean = prev_mean + (x - prev_mean) / len(self._samples)
        self._sum_of_squares_of_diffs += (x - prev_mean) * (x - self._mean)

    def update(self, values: Iterable[T]):
        for value in values:
            self.add(value)

    def count(self) -> int:
        return len(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def sum_value(self) -> T:
        return self._sum

    def max_value(self) -> T:
        """Return the maximum, or the dtype's lowest value if there are no samples."""
        return self._max

    def min_value(self) -> T:
        if not self._samples:
            raise EmptyAccumulatorError('min_value')

        self._sort()
        return self._samples[0]

    def mean(self) -> float:
        """Return the arithmetic mean computed from the running sum."""
        if not self._samples:
            return math.nan

        return float(self._sum) / len(self._samples)

    def median(self) -> float:
        n = len(self._samples)
        if n == 0:
            return math.nan

        self._sort()
        mid = n // 2
        if n % 2 == 0:
            return (float(self._samples[mid - 1]) +
                    float(self._samples[mid])) / 2.0

        return float(self._samples[mid])

    def variance(self) -> float:
        """Return the population variance (divided by N)."""
        if not self._samples:
            return math.nan

        return self._sum_of_squares_of_diffs / len(self._samples)

    def standard_deviation(self) -> float:
        """Return the population standard deviation.

        The samples are treated as the whole population, so no Bessel
        correction is applied. NaN for an empty accumulator.
        """
        return math.sqrt(self.variance())

    def snapshot(self) -> DescriptiveSnapshot:
        empty = not self._samples
        return DescriptiveSnapshot(
            count=self.count(),
            sum=self._sum,
            min=None if empty else self.min_value(),
            mean=self.mean(),
            max=None if empty else self._max,
            median=self.median(),
            standard_deviation=self.standard_deviation())

    def __repr__(self):
        return f'Descriptive(dtype={self._dtype}, count={len(self._samples)})'

    def __str__(self):
        return DelimitedFormatter().format(self.snapshot())

    def _sort(self):
        """Sort the first half of the samples to obtain the median and the minimum."""

        if not self._dirty:
            return

        values = np.asarray(self._samples, dtype=self._dtype)
        head_size = values.size // 2 + 1

        head = np.argpartition(values, head_size - 1)[:head_size]
        head = head[np.argsort(values[head], kind='stable')]

        # the rest keeps its insertion order
        rest = np.setdiff1d(np.arange(values.size), head, assume_unique=True)

        self._samples = [
            self._samples[i] for i in np.concatenate((head, rest))
        ]
        self._dirty = False
