"""
itemstats.core.components
=========================

Base classes for streaming estimators.

Every estimator in the package is fed one observation at a time and can be
read at any point without re-accessing earlier observations.

Component Types:
- `UnivariateStatistic`: consumes single values (mean, standard deviation)
- `BivariateStatistic`: consumes (x, y) pairs (item-total correlations)

Examples
--------
>>> class Count(UnivariateStatistic):
...     def __init__(self):
...         self._n = 0
...     def increment(self, value):
...         self._n += 1
...     def result(self):
...         return float(self._n)
...     @property
...     def n(self):
...         return self._n
...
>>> c = Count()
>>> c.increment_all([1.0, 2.0, 3.0])
>>> c.result()
3.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Tuple


class UnivariateStatistic(ABC):
    """
    Base class for single-pass statistics over a stream of values.

    Subclasses hold sufficient statistics only; `result()` recomputes the
    statistic from them on every call.
    """

    @abstractmethod
    def increment(self, value: float) -> None:
        """Add one value to the running statistic."""

    @abstractmethod
    def result(self) -> float:
        """Current value of the statistic (NaN when undefined)."""

    @property
    @abstractmethod
    def n(self) -> int:
        """Number of values seen so far."""

    def increment_all(self, values: Iterable[float]) -> None:
        for value in values:
            self.increment(value)


class BivariateStatistic(ABC):
    """
    Base class for single-pass statistics over a stream of (x, y) pairs.

    In item analysis `x` is the total test score and `y` the item or
    option score.
    """

    @abstractmethod
    def increment(self, x: float, y: float) -> None:
        """Add one pair to the running statistic."""

    @abstractmethod
    def value(self) -> float:
        """Current uncorrected value (NaN when undefined)."""

    @property
    @abstractmethod
    def n(self) -> int:
        """Number of pairs seen so far."""

    def increment_all(self, pairs: Iterable[Tuple[float, float]]) -> None:
        for x, y in pairs:
            self.increment(x, y)
