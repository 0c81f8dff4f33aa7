"""
itemstats.stats.common.__init__.py
==================================

Common streaming estimators.

This module contains generic, single-pass implementations of the
statistics used in a classical item analysis. They hold sufficient
statistics only and never revisit earlier observations.
"""

from itemstats.stats.common.correlation import (
    PearsonCorrelation,
    PolyserialPlugin,
    pearson_from_moments,
    polyserial_from_pearson,
    spurious_correction,
)
from itemstats.stats.common.moments import Mean, StandardDeviation

__all__ = [
    "Mean",
    "StandardDeviation",
    "PearsonCorrelation",
    "PolyserialPlugin",
    "pearson_from_moments",
    "polyserial_from_pearson",
    "spurious_correction",
]
