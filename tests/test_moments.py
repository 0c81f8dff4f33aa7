"""Unit tests for the streaming mean and standard deviation."""

from __future__ import annotations

import math
import random
import statistics

import pytest

from itemstats.stats.common.moments import Mean, StandardDeviation


SCORES = [0.0, 1.0, 1.0, 3.0, 2.0, 0.0, 1.0, 4.0]


# ---------------------------------------------------------------------------
# Mean


def test_mean_is_nan_before_first_value() -> None:
    mean = Mean()
    assert mean.n == 0
    assert math.isnan(mean.result())


def test_mean_matches_reference() -> None:
    mean = Mean(SCORES)
    assert mean.n == len(SCORES)
    assert mean.result() == pytest.approx(statistics.fmean(SCORES))


def test_single_value_mean() -> None:
    mean = Mean()
    mean.increment(1.0)
    assert mean.result() == 1.0


# ---------------------------------------------------------------------------
# Standard deviation


def test_standard_deviation_empty_and_single_value() -> None:
    sd = StandardDeviation()
    assert math.isnan(sd.result())
    sd.increment(5.0)
    assert sd.result() == 0.0
    assert sd.variance() == 0.0


def test_standard_deviation_defaults_to_sample_convention() -> None:
    sd = StandardDeviation(values=SCORES)
    assert sd.bias_corrected is True
    assert sd.result() == pytest.approx(statistics.stdev(SCORES))
    assert sd.variance() == pytest.approx(statistics.variance(SCORES))


def test_standard_deviation_population_convention() -> None:
    sd = StandardDeviation(bias_corrected=False, values=SCORES)
    assert sd.result() == pytest.approx(statistics.pstdev(SCORES))


def test_moments_do_not_depend_on_order() -> None:
    shuffled = list(SCORES)
    random.Random(7).shuffle(shuffled)

    assert Mean(shuffled).result() == pytest.approx(Mean(SCORES).result())
    assert StandardDeviation(values=shuffled).result() == pytest.approx(
        StandardDeviation(values=SCORES).result()
    )


def test_non_finite_values_propagate() -> None:
    sd = StandardDeviation(values=[1.0, float("nan"), 2.0])
    assert math.isnan(sd.result())
    assert math.isnan(Mean([1.0, float("nan")]).result())
