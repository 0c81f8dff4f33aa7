"""
itemstats — single-pass classical item analysis statistics.

A classical item analysis reports, for every item and every response
option, how often it is endorsed (difficulty), how much scores vary
(standard deviation) and how well it separates high from low scorers
(discrimination, the correlation with the total test score).

itemstats computes these in one streaming pass: an accumulator is fed one
(total score, option score) pair per respondent and can be read at any time.
Which correlation is used (Pearson/point-biserial or polyserial) and whether
it is corrected for the option's own part in the total score is fixed when
the accumulator is built.

Example
-------
>>> import itemstats
>>> acc = itemstats.OptionStatAccumulator("B")
>>> acc.observe(10, 1)
>>> acc.difficulty
1.0
"""

from itemstats.core.names import CorrelationKind, OptionCode, OptionId, OptionLabel
from itemstats.measurement.option_stats import (
    OptionStatAccumulator,
    OptionStatConfig,
    OptionStatSummary,
)

__all__ = [
    "CorrelationKind",
    "OptionCode",
    "OptionId",
    "OptionLabel",
    "OptionStatAccumulator",
    "OptionStatConfig",
    "OptionStatSummary",
]
