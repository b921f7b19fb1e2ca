from __future__ import annotations

import pytest

from parkes_grid.model import MeasurementPair, Zone
from parkes_grid.zones import RULES, classify_pair, classify_pairs, zone_for


@pytest.mark.parametrize(
    ("reference", "predicted", "expected"),
    [
        (100.0, 100.0, Zone.A),
        (0.0, 0.0, Zone.A),
        (60.0, 30.0, Zone.A),
        (100.0, 80.0, Zone.A),
        (100.0, 120.0, Zone.A),
        (70.0, 180.0, Zone.E),
        (200.0, 60.0, Zone.E),
        (150.0, 260.0, Zone.C),
        (170.0, 50.0, Zone.C),
        (300.0, 100.0, Zone.D),
        (50.0, 100.0, Zone.D),
        (65.0, 100.0, Zone.D),
        (100.0, 130.0, Zone.B),
        (400.0, 250.0, Zone.B),
    ],
)
def test_zone_for_known_points(
    reference: float, predicted: float, expected: Zone
) -> None:
    assert zone_for(reference, predicted) is expected


def test_zone_a_takes_priority_over_d() -> None:
    # (50, 70) also satisfies the low-reference D band.
    assert zone_for(50.0, 70.0) is Zone.A


def test_zone_e_takes_priority_over_c_and_d() -> None:
    # (70, 180) also satisfies the upper C band and the D knee.
    assert zone_for(70.0, 180.0) is Zone.E


def test_zone_d_at_high_reference_band_edge() -> None:
    assert zone_for(240.0, 180.0) is Zone.D


def test_rules_are_ordered_a_e_c_d() -> None:
    assert [zone for _, zone in RULES] == [Zone.A, Zone.E, Zone.C, Zone.D]


def test_classify_pairs_keeps_order() -> None:
    pairs = [MeasurementPair(100.0, 100.0), MeasurementPair(70.0, 180.0)]
    out = classify_pairs(pairs)
    assert [a.zone for a in out] == [Zone.A, Zone.E]
    assert [a.pair for a in out] == pairs
    assert classify_pair(pairs[1]) is Zone.E


def _parkes_zone(y: float, yp: float) -> Zone:
    """Written-out Parkes inequalities, checked in the A, E, C, D order."""
    if (yp <= 70 and y <= 70) or (0.8 * y <= yp <= 1.2 * y):
        return Zone.A
    if (y >= 180 and yp <= 70) or (y <= 70 and yp >= 180):
        return Zone.E
    if (70 <= y <= 290 and yp >= y + 110) or (
        130 <= y <= 180 and yp <= 1.4 * y - 182
    ):
        return Zone.C
    if (
        (y >= 240 and 70 <= yp <= 180)
        or (y <= 175 / 3 and 70 <= yp <= 180)
        or (175 / 3 <= y <= 70 and yp >= 1.2 * y)
    ):
        return Zone.D
    return Zone.B


def _first_matching_rule(y: float, yp: float) -> Zone:
    return next((zone for matches, zone in RULES if matches(y, yp)), Zone.B)


def _matching_rules(y: float, yp: float) -> list[Zone]:
    return [zone for matches, zone in RULES if matches(y, yp)]


def test_grid_points_match_written_out_inequalities() -> None:
    for ref in range(0, 550, 5):
        for pred in range(1, 600, 5):
            y, yp = float(ref), float(pred)
            zone = zone_for(y, yp)
            assert zone is _parkes_zone(y, yp), (y, yp)
            assert zone is _first_matching_rule(y, yp), (y, yp)


@pytest.mark.parametrize(
    ("reference", "predicted", "winner", "also_matching"),
    [
        (70.0, 180.0, Zone.E, {Zone.C, Zone.D}),
        (50.0, 70.0, Zone.A, {Zone.D}),
        (170.0, 55.0, Zone.C, set()),
        (200.0, 60.0, Zone.E, set()),
    ],
)
def test_overlapping_regions_resolved_by_order(
    reference: float, predicted: float, winner: Zone, also_matching: set[Zone]
) -> None:
    matching = _matching_rules(reference, predicted)
    assert matching[0] is winner
    assert also_matching <= set(matching[1:])
    assert zone_for(reference, predicted) is winner


def test_overlap_points_match_several_rules() -> None:
    assert len(_matching_rules(70.0, 180.0)) == 3
    assert len(_matching_rules(50.0, 70.0)) == 2


def test_c_lower_band_starts_at_130() -> None:
    y = 130.0
    assert zone_for(y, 1.4 * y - 182) is Zone.C
    assert zone_for(129.9, 1.4 * y - 182) is not Zone.C


def test_c_lower_band_end_at_180_is_shadowed_by_e() -> None:
    y = 180.0
    yp = 1.4 * y - 182
    assert Zone.C in _matching_rules(y, yp)
    assert zone_for(y, yp) is Zone.E


def test_c_lower_band_inner_edge() -> None:
    y = 150.0
    assert zone_for(y, 1.4 * y - 182) is Zone.C
    assert zone_for(y, 1.4 * y - 182 + 0.5) is Zone.B


def test_d_knee_belongs_to_both_low_reference_clauses() -> None:
    y = 175 / 3
    assert zone_for(y, 75.0) is Zone.D
    assert zone_for(y, 180.0) is Zone.E
    assert zone_for(y, 70.0) is Zone.A
    # Past the knee only the sloped clause applies, above the A band.
    assert zone_for(60.0, 72.0) is Zone.A
    assert zone_for(60.0, 73.0) is Zone.D


def test_c_upper_band_end() -> None:
    assert zone_for(290.0, 400.0) is Zone.C
    assert zone_for(290.0, 399.9) is Zone.B
    assert zone_for(290.1, 500.0) is Zone.B


def test_e_corner() -> None:
    assert zone_for(180.0, 70.0) is Zone.E
    assert zone_for(179.9, 70.0) is not Zone.E
    assert zone_for(180.0, 70.1) is not Zone.E
