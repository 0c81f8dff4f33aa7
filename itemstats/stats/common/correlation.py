"""
itemstats.stats.common.correlation
==================================

Streaming item-total correlations.

This module provides the two correlation estimators used for item and
option discrimination in a classical item analysis:

- `PearsonCorrelation`: product-moment correlation, which is the
  point-biserial correlation when the item score is 0/1.
- `PolyserialPlugin`: the ad hoc ("plug-in") polyserial estimator, which
  treats the item score as an ordered category of an underlying normal
  variable.

Both keep only sufficient statistics, so values may be read at any time
during a single pass over respondents.

Mathematical Background
-----------------------

**Spuriousness correction:**
When the item is itself part of the total score the raw item-total
correlation is inflated. The corrected value is the correlation of the
item with the total score *excluding* the item:
    r_c = (r s_x - s_y) / sqrt(s_x^2 + s_y^2 - 2 r s_x s_y)

**Plug-in polyserial:**
With ordered categories c_1 < ... < c_K, cumulative proportions p_j and
thresholds tau_j = Phi^{-1}(p_j):
    r_ps = r s_y / sum_{j<K} phi(tau_j) (c_{j+1} - c_j)

Examples
--------
>>> r = PearsonCorrelation()
>>> r.increment_all([(1, 0), (2, 0), (3, 1), (4, 1)])
>>> round(r.value(), 4), round(r.corrected_value(), 4)
(0.8944, 0.7071)
>>> ps = PolyserialPlugin()
>>> ps.increment_all([(1, 0), (2, 0), (3, 1), (4, 1)])
>>> round(ps.value(), 4)
1.121
"""

from __future__ import annotations
import math
from collections import Counter
from typing import Dict

from scipy.stats import norm

from itemstats.core.components import BivariateStatistic
from itemstats.stats.common.moments import StandardDeviation


def pearson_from_moments(ss_x: float, ss_y: float, sp_xy: float) -> float:
    """Return the Pearson correlation from centered sums of squares and products.

    Args:
        ss_x: Sum of squared deviations of x
        ss_y: Sum of squared deviations of y
        sp_xy: Sum of cross products of deviations

    Returns:
        Correlation, or NaN if either margin has no variance
    """
    if not (ss_x > 0 and ss_y > 0):
        return float("nan")
    return sp_xy / math.sqrt(ss_x * ss_y)


def spurious_correction(r: float, sd_total: float, sd_item: float) -> float:
    """Correct an item-total correlation for the item's part in the total.

    Any common scale works for the two standard deviations since only their
    ratio matters.

    Args:
        r: Uncorrected item-total correlation
        sd_total: Standard deviation of the total score
        sd_item: Standard deviation of the item score

    Returns:
        Correlation of the item with the rest score (total minus item),
        or NaN when that is undefined

    Examples:
        >>> round(spurious_correction(0.5, 4.0, 1.0), 4)
        0.2774
    """
    denominator = sd_total**2 + sd_item**2 - 2.0 * r * sd_total * sd_item
    if not denominator > 0:
        return float("nan")
    return (r * sd_total - sd_item) / math.sqrt(denominator)


def polyserial_from_pearson(r: float, sd_item: float, threshold_density: float) -> float:
    """Convert a Pearson item-total correlation to the plug-in polyserial.

    Args:
        r: Pearson (or spuriousness corrected) item-total correlation
        sd_item: Population standard deviation of the item categories
        threshold_density: Sum of normal densities at the category thresholds,
            weighted by the gap between adjacent category scores

    Returns:
        Polyserial correlation, or NaN if the thresholds carry no density
    """
    if not threshold_density > 0:
        return float("nan")
    return r * sd_item / threshold_density


class PearsonCorrelation(BivariateStatistic):
    """
    Streaming Pearson correlation between total score `x` and item score `y`.

    Co-moments are updated with Welford's method. `value()` is NaN until both
    margins have non-zero variance.
    """

    def __init__(self) -> None:
        self._n: int = 0
        self._mean_x: float = 0.0
        self._mean_y: float = 0.0
        self._ss_x: float = 0.0
        self._ss_y: float = 0.0
        self._sp_xy: float = 0.0

    @property
    def n(self) -> int:
        return self._n

    def increment(self, x: float, y: float) -> None:
        self._n += 1
        dx = x - self._mean_x
        self._mean_x += dx / self._n
        dy = y - self._mean_y
        self._mean_y += dy / self._n
        self._ss_x += dx * (x - self._mean_x)
        self._ss_y += dy * (y - self._mean_y)
        self._sp_xy += dx * (y - self._mean_y)

    def value(self) -> float:
        if self._n < 2:
            return float("nan")
        return pearson_from_moments(self._ss_x, self._ss_y, self._sp_xy)

    def corrected_value(self) -> float:
        """Correlation of `y` with `x - y` (spuriousness corrected)."""
        if self._n < 2:
            return float("nan")
        return spurious_correction(
            self.value(), math.sqrt(self._ss_x), math.sqrt(self._ss_y)
        )


class PolyserialPlugin(BivariateStatistic):
    """
    Streaming plug-in polyserial correlation.

    `y` must be an integer category code. The estimator keeps a Pearson
    correlation, the population standard deviation of `y` and a frequency
    table of categories; thresholds are derived from the table on demand.
    """

    def __init__(self) -> None:
        self._pearson = PearsonCorrelation()
        self._sd_item = StandardDeviation(bias_corrected=False)
        self._frequency: Counter = Counter()

    @property
    def n(self) -> int:
        return self._pearson.n

    @property
    def frequencies(self) -> Dict[int, int]:
        """Category counts in ascending category order."""
        return {category: self._frequency[category] for category in sorted(self._frequency)}

    def increment(self, x: float, y: int) -> None:  # type: ignore[override]
        self._pearson.increment(x, y)
        self._sd_item.increment(y)
        self._frequency[y] += 1

    def threshold_density(self) -> float:
        """Gap-weighted sum of normal densities at the category thresholds."""
        categories = sorted(self._frequency)
        if len(categories) < 2:
            return float("nan")

        cumulative = 0
        density = 0.0
        for lower, upper in zip(categories[:-1], categories[1:]):
            cumulative += self._frequency[lower]
            tau = norm.ppf(cumulative / self.n)
            density += float(norm.pdf(tau)) * (upper - lower)
        return density

    def value(self) -> float:
        return polyserial_from_pearson(
            self._pearson.value(), self._sd_item.result(), self.threshold_density()
        )

    def spurious_corrected_value(self) -> float:
        """Polyserial computed from the spuriousness corrected Pearson value."""
        return polyserial_from_pearson(
            self._pearson.corrected_value(),
            self._sd_item.result(),
            self.threshold_density(),
        )
