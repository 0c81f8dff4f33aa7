"""
itemstats.measurement
=====================

Per-option accumulators used by a classical item analysis.

- `OptionStatAccumulator`: difficulty, standard deviation and discrimination
- `OptionStatConfig`: correlation strategy and correction policy
"""

from itemstats.measurement.option_stats import (
    LinearCorrelation,
    OptionStatAccumulator,
    OptionStatConfig,
    OptionStatSummary,
    OrdinalCorrelation,
)

__all__ = [
    "LinearCorrelation",
    "OrdinalCorrelation",
    "OptionStatAccumulator",
    "OptionStatConfig",
    "OptionStatSummary",
]
