"""
itemstats.stats.common.moments
==============================

Streaming first and second moments.

`Mean` keeps a running sum and `StandardDeviation` uses Welford's update,
so a single pass over the data is enough and results do not depend on the
order values arrive in (up to floating point rounding).

Examples
--------
>>> m = Mean(); s = StandardDeviation()
>>> for v in [0.0, 1.0, 1.0, 1.0]:
...     m.increment(v); s.increment(v)
>>> m.result()
0.75
>>> round(s.result(), 4)
0.5
>>> round(StandardDeviation(bias_corrected=False, values=[0.0, 1.0, 1.0, 1.0]).result(), 4)
0.433
"""

from __future__ import annotations
import math
from typing import Iterable, Optional

from itemstats.core.components import UnivariateStatistic


class Mean(UnivariateStatistic):
    """Running arithmetic mean. NaN before the first value.

    Keeps the plain running sum, so the proportion endorsing a 0/1 scored
    option is exact.
    """

    __slots__ = ("_n", "_sum")

    def __init__(self, values: Optional[Iterable[float]] = None) -> None:
        self._n: int = 0
        self._sum: float = 0.0
        if values is not None:
            self.increment_all(values)

    @property
    def n(self) -> int:
        return self._n

    def increment(self, value: float) -> None:
        self._n += 1
        self._sum += value

    def result(self) -> float:
        if self._n == 0:
            return float("nan")
        return self._sum / self._n


class StandardDeviation(UnivariateStatistic):
    """
    Running standard deviation.

    Args:
        bias_corrected: Use the n - 1 denominator if True (default),
            otherwise the population (n) denominator.
        values: Optional initial values.

    Returns NaN before the first value and 0.0 after exactly one.
    """

    __slots__ = ("_n", "_mean", "_m2", "bias_corrected")

    def __init__(
        self, bias_corrected: bool = True, values: Optional[Iterable[float]] = None
    ) -> None:
        self.bias_corrected = bias_corrected
        self._n: int = 0
        self._mean: float = 0.0
        self._m2: float = 0.0
        if values is not None:
            self.increment_all(values)

    @property
    def n(self) -> int:
        return self._n

    def increment(self, value: float) -> None:
        self._n += 1
        delta = value - self._mean
        self._mean += delta / self._n
        self._m2 += delta * (value - self._mean)

    def variance(self) -> float:
        if self._n == 0:
            return float("nan")
        if self._n == 1:
            return 0.0
        denominator = self._n - 1 if self.bias_corrected else self._n
        return self._m2 / denominator

    def result(self) -> float:
        return math.sqrt(self.variance())
