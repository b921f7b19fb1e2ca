from __future__ import annotations

import math

from parkes_grid.filtering import filter_points, is_retained
from parkes_grid.model import MeasurementPair


def test_filter_keeps_in_range_pairs_in_order() -> None:
    out = filter_points([120.0, 80.0, 300.0], [110.0, 90.0, 280.0])
    assert out.eliminated_points == 0
    assert out.pairs == (
        MeasurementPair(120.0, 110.0),
        MeasurementPair(80.0, 90.0),
        MeasurementPair(300.0, 280.0),
    )


def test_filter_eliminates_reference_at_or_above_550() -> None:
    out = filter_points([600.0, 550.0, 549.9], [100.0, 100.0, 100.0])
    assert out.eliminated_points == 2
    assert [p.reference for p in out.pairs] == [549.9]


def test_filter_eliminates_non_positive_predictions() -> None:
    out = filter_points([100.0, 100.0, 100.0], [0.0, -5.0, 0.1])
    assert out.eliminated_points == 2
    assert [p.predicted for p in out.pairs] == [0.1]


def test_filter_only_bounds_reference_above_and_prediction_below() -> None:
    # Negative references and predictions above 550 pass the range check.
    assert is_retained(-10.0, 50.0)
    assert is_retained(100.0, 900.0)
    out = filter_points([-10.0, 100.0], [50.0, 900.0])
    assert out.eliminated_points == 0
    assert len(out.pairs) == 2


def test_filter_eliminates_nan_values() -> None:
    out = filter_points([math.nan, 100.0], [100.0, math.nan])
    assert out.pairs == ()
    assert out.eliminated_points == 2


def test_filter_all_eliminated_is_valid() -> None:
    out = filter_points([600.0, 700.0], [100.0, 0.0])
    assert out.pairs == ()
    assert out.eliminated_points == 2


def test_filter_is_deterministic() -> None:
    reference = [50.0, 600.0, 200.0, 120.0]
    predicted = [40.0, 100.0, 0.0, 130.0]
    first = filter_points(reference, predicted)
    second = filter_points(reference, predicted)
    assert first == second
    assert len(first.pairs) + first.eliminated_points == len(reference)
