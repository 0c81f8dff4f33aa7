"""
Statistical estimators for item analysis.

1. **Common** (itemstats.stats.common):
   Generic streaming estimators that know nothing about items or options:
   running moments and item-total correlations.

The measurement layer (itemstats.measurement) composes them into per-option
accumulators.

Example:
--------
>>> from itemstats.stats.common.moments import Mean
>>> Mean([1.0, 2.0, 3.0]).result()
2.0
"""
