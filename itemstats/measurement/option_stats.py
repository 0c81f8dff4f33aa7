"""
itemstats.measurement.option_stats
==================================

Classical test theory statistics for a single response option.

One `OptionStatAccumulator` is created per scorable option of an item (or
one per item when the item is scored as a whole). It is fed one
(total score, option score) pair per respondent and reports:

- difficulty: mean option score (proportion endorsing for 0/1 scores)
- standard deviation of the option score
- discrimination: option-total correlation

The correlation strategy and whether the discrimination is corrected for
spuriousness are fixed at construction by `OptionStatConfig`.

Examples
--------
>>> acc = OptionStatAccumulator("A", bias_correction=False)
>>> for total, score in [(1, 0), (2, 0), (3, 1), (4, 1)]:
...     acc.observe(total, score)
>>> acc.identifier, acc.difficulty
('A', 0.5)
>>> round(acc.discrimination, 4)
0.8944
>>> acc.format()
'    0.5000      0.5774      0.8944  '

Continuous items always use the linear strategy:

>>> OptionStatAccumulator(1, linear_correlation=False, continuous_item=True).correlation_kind
<CorrelationKind.LINEAR: 'linear'>
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union

from itemstats.core.names import CorrelationKind, OptionId, is_option_id
from itemstats.stats.common.correlation import PearsonCorrelation, PolyserialPlugin
from itemstats.stats.common.moments import Mean, StandardDeviation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class OptionStatConfig:
    """
    Policy for an option accumulator.

    Parameters
    ----------
    bias_correction : bool, default=True
        Report the discrimination corrected for the option's own contribution
        to the total score. Does not affect the standard deviation, which
        always uses the n - 1 denominator.
    linear_correlation : bool, default=True
        Use the Pearson (point-biserial) correlation if True, otherwise the
        polyserial correlation.
    continuous_item : bool, default=False
        The item is scored on a continuous scale; forces the linear
        correlation.

    Examples
    --------
    >>> OptionStatConfig(linear_correlation=False).correlation_kind.value
    'ordinal'
    """

    bias_correction: bool = True
    linear_correlation: bool = True
    continuous_item: bool = False

    def validate(self) -> None:
        """Validate accumulator configuration."""
        for name in ("bias_correction", "linear_correlation", "continuous_item"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool, got {type(value).__name__}")

    @property
    def correlation_kind(self) -> CorrelationKind:
        if self.continuous_item or self.linear_correlation:
            return CorrelationKind.LINEAR
        return CorrelationKind.ORDINAL


@dataclass(frozen=True)
class LinearCorrelation:
    """Point-biserial / Pearson option-total correlation."""

    kind: ClassVar[CorrelationKind] = CorrelationKind.LINEAR
    estimator: PearsonCorrelation = field(default_factory=PearsonCorrelation)

    def increment(self, total_score: float, option_score: float) -> None:
        self.estimator.increment(total_score, option_score)

    def value(self, corrected: bool) -> float:
        if corrected:
            return self.estimator.corrected_value()
        return self.estimator.value()


@dataclass(frozen=True)
class OrdinalCorrelation:
    """Polyserial option-total correlation over integer category codes."""

    kind: ClassVar[CorrelationKind] = CorrelationKind.ORDINAL
    estimator: PolyserialPlugin = field(default_factory=PolyserialPlugin)

    def increment(self, total_score: float, option_score: int) -> None:
        self.estimator.increment(total_score, option_score)

    def value(self, corrected: bool) -> float:
        if corrected:
            return self.estimator.spurious_corrected_value()
        return self.estimator.value()


CorrelationStrategy = Union[LinearCorrelation, OrdinalCorrelation]


def make_correlation(kind: CorrelationKind) -> CorrelationStrategy:
    if kind is CorrelationKind.LINEAR:
        return LinearCorrelation()
    return OrdinalCorrelation()


@dataclass(frozen=True)
class OptionStatSummary:
    """Snapshot of the statistics for one option."""

    identifier: OptionId
    difficulty: float
    std_dev: float
    discrimination: float

    def as_tuple(self) -> Tuple[float, float, float]:
        """Return (difficulty, std_dev, discrimination)."""
        return (self.difficulty, self.std_dev, self.discrimination)


class OptionStatAccumulator:
    """
    Single-pass difficulty, standard deviation and discrimination for one option.

    Args:
        identifier: Option label (str) or numeric option code
        bias_correction: Report the spuriousness corrected discrimination
        linear_correlation: Pearson if True, polyserial otherwise
        continuous_item: Force the Pearson correlation

    Not thread-safe; feed each instance from a single scoring pass.
    """

    def __init__(
        self,
        identifier: OptionId,
        bias_correction: bool = True,
        linear_correlation: bool = True,
        continuous_item: bool = False,
    ) -> None:
        if not is_option_id(identifier):
            raise TypeError(
                f"Option identifier must be a str or real number, got {type(identifier).__name__}"
            )
        config = OptionStatConfig(
            bias_correction=bias_correction,
            linear_correlation=linear_correlation,
            continuous_item=continuous_item,
        )
        config.validate()

        self._identifier = identifier
        self._config = config
        self._mean = Mean()
        # The bias_correction flag only governs the discrimination; the
        # standard deviation keeps its own n - 1 convention.
        self._sd = StandardDeviation()
        self._correlation: CorrelationStrategy = make_correlation(config.correlation_kind)
        self._truncation_reported = False

        logger.debug(
            "Created accumulator for option %r (%s, bias_correction=%s)",
            identifier,
            config.correlation_kind.value,
            config.bias_correction,
        )

    @classmethod
    def from_config(
        cls, identifier: OptionId, config: Optional[OptionStatConfig] = None
    ) -> "OptionStatAccumulator":
        cfg = config or OptionStatConfig()
        return cls(
            identifier,
            bias_correction=cfg.bias_correction,
            linear_correlation=cfg.linear_correlation,
            continuous_item=cfg.continuous_item,
        )

    # ---- feeding ----

    def observe(self, total_score: float, option_score: float) -> None:
        """
        Add one respondent.

        Args:
            total_score: Respondent's total test score
            option_score: Respondent's score on this option or item

        With the polyserial strategy the option score is a category code and
        is truncated toward zero (2.9 -> 2, -1.5 -> -1). It is never rounded
        and never rejected.
        """
        self._mean.increment(option_score)
        self._sd.increment(option_score)
        if isinstance(self._correlation, LinearCorrelation):
            self._correlation.increment(total_score, option_score)
        else:
            self._correlation.increment(total_score, self._category_code(option_score))

    def _category_code(self, option_score: float) -> int:
        if not math.isfinite(option_score):
            return option_score  # type: ignore[return-value]
        code = math.trunc(option_score)
        if code != option_score and not self._truncation_reported:
            self._truncation_reported = True
            logger.warning(
                "Option %r: non-integral score %s truncated to category %d",
                self._identifier,
                option_score,
                code,
            )
        return code

    # ---- readers ----

    @property
    def identifier(self) -> OptionId:
        return self._identifier

    @property
    def config(self) -> OptionStatConfig:
        return self._config

    @property
    def correlation_kind(self) -> CorrelationKind:
        return self._correlation.kind

    @property
    def n(self) -> int:
        """Number of respondents observed."""
        return self._mean.n

    @property
    def difficulty(self) -> float:
        """Mean option score. NaN before the first observation."""
        return self._mean.result()

    @property
    def std_dev(self) -> float:
        """Standard deviation of option scores (n - 1 denominator)."""
        return self._sd.result()

    @property
    def discrimination(self) -> float:
        """Option-total correlation under the configured strategy."""
        return self._correlation.value(self._config.bias_correction)

    def summary(self) -> OptionStatSummary:
        return OptionStatSummary(
            identifier=self._identifier,
            difficulty=self.difficulty,
            std_dev=self.std_dev,
            discrimination=self.discrimination,
        )

    def format(self) -> str:
        """Fixed-width difficulty, standard deviation and discrimination."""
        return "".join(f"{value: 10.4f}  " for value in self.summary().as_tuple())

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"OptionStatAccumulator({self._identifier!r}, "
            f"kind={self.correlation_kind.value}, n={self.n})"
        )
