"""Unit tests for the streaming Pearson and plug-in polyserial correlations."""

from __future__ import annotations

import math
import statistics

import pytest
from scipy.stats import norm, pearsonr

from itemstats.stats.common.correlation import (
    PearsonCorrelation,
    PolyserialPlugin,
    polyserial_from_pearson,
    spurious_correction,
)


TOTALS = [3.0, 7.0, 5.0, 9.0, 4.0, 8.0, 6.0, 2.0, 10.0, 6.0]
BINARY = [0, 1, 0, 1, 0, 1, 1, 0, 1, 0]
ORDINAL = [0, 2, 1, 2, 0, 2, 1, 0, 2, 1]


def _pearson(pairs) -> PearsonCorrelation:
    r = PearsonCorrelation()
    r.increment_all(pairs)
    return r


def _polyserial(pairs) -> PolyserialPlugin:
    ps = PolyserialPlugin()
    ps.increment_all(pairs)
    return ps


# ---------------------------------------------------------------------------
# Pearson


def test_pearson_undefined_with_fewer_than_two_pairs() -> None:
    r = PearsonCorrelation()
    assert math.isnan(r.value())
    assert math.isnan(r.corrected_value())
    r.increment(10.0, 1.0)
    assert r.n == 1
    assert math.isnan(r.value())


def test_pearson_undefined_for_constant_item() -> None:
    r = _pearson([(1.0, 1.0), (2.0, 1.0), (3.0, 1.0)])
    assert math.isnan(r.value())
    assert math.isnan(r.corrected_value())


def test_pearson_matches_reference() -> None:
    r = _pearson(zip(TOTALS, BINARY))
    expected = pearsonr(TOTALS, BINARY)[0]
    assert r.value() == pytest.approx(expected)


def test_pearson_corrected_is_correlation_with_rest_score() -> None:
    r = _pearson(zip(TOTALS, BINARY))
    rest = [t - s for t, s in zip(TOTALS, BINARY)]
    expected = pearsonr(BINARY, rest)[0]
    assert r.corrected_value() == pytest.approx(expected)
    assert r.corrected_value() < r.value()


def test_spurious_correction_is_scale_free() -> None:
    assert spurious_correction(0.6, 5.0, 0.5) == pytest.approx(
        spurious_correction(0.6, 10.0, 1.0)
    )


def test_spurious_correction_undefined_without_variance() -> None:
    assert math.isnan(spurious_correction(1.0, 1.0, 1.0))


# ---------------------------------------------------------------------------
# Polyserial


def test_polyserial_binary_reference() -> None:
    ps = _polyserial(zip(TOTALS, BINARY))
    r = pearsonr(TOTALS, BINARY)[0]
    p0 = BINARY.count(0) / len(BINARY)
    expected = r * statistics.pstdev(BINARY) / norm.pdf(norm.ppf(p0))
    assert ps.value() == pytest.approx(expected)


def test_polyserial_three_category_reference() -> None:
    ps = _polyserial(zip(TOTALS, ORDINAL))
    n = len(ORDINAL)
    tau_1 = norm.ppf(ORDINAL.count(0) / n)
    tau_2 = norm.ppf((ORDINAL.count(0) + ORDINAL.count(1)) / n)
    density = norm.pdf(tau_1) + norm.pdf(tau_2)
    r = pearsonr(TOTALS, ORDINAL)[0]
    assert ps.value() == pytest.approx(r * statistics.pstdev(ORDINAL) / density)
    assert ps.frequencies == {0: 3, 1: 3, 2: 4}


def test_polyserial_spurious_corrected_uses_rest_score() -> None:
    ps = _polyserial(zip(TOTALS, ORDINAL))
    rest = [t - s for t, s in zip(TOTALS, ORDINAL)]
    r_rest = pearsonr(ORDINAL, rest)[0]
    expected = polyserial_from_pearson(
        r_rest, statistics.pstdev(ORDINAL), ps.threshold_density()
    )
    assert ps.spurious_corrected_value() == pytest.approx(expected)


def test_polyserial_invariant_to_category_spacing() -> None:
    spaced = [2 * s for s in BINARY]
    assert _polyserial(zip(TOTALS, spaced)).value() == pytest.approx(
        _polyserial(zip(TOTALS, BINARY)).value()
    )


def test_polyserial_undefined_with_single_category() -> None:
    ps = _polyserial([(1.0, 1), (2.0, 1), (4.0, 1)])
    assert math.isnan(ps.threshold_density())
    assert math.isnan(ps.value())
    assert math.isnan(ps.spurious_corrected_value())


def test_polyserial_empty_is_nan() -> None:
    ps = PolyserialPlugin()
    assert ps.n == 0
    assert math.isnan(ps.value())
    assert math.isnan(ps.spurious_corrected_value())
