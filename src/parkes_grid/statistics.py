"""Conteos y porcentajes por zona."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import cast

from parkes_grid.model import ZONE_ORDER, GridResult, ZoneAssignment


def aggregate(
    assignments: Sequence[ZoneAssignment],
    eliminated_points: int = 0,
) -> GridResult:
    """Tally zone assignments into a GridResult.

    Args:
        assignments: One assignment per retained pair.
        eliminated_points: Count reported by the range filter.

    Returns:
        Counts and percentages ordered A..E. Percentages are all 0.0 when
        there are no assignments.
    """
    tally = Counter(a.zone for a in assignments)
    final_points = len(assignments)
    counts = cast(
        tuple[int, int, int, int, int],
        tuple(tally.get(zone, 0) for zone in ZONE_ORDER),
    )
    if final_points > 0:
        percentages = tuple(c / final_points * 100 for c in counts)
    else:
        percentages = tuple(0.0 for _ in ZONE_ORDER)
    percentages = cast(tuple[float, float, float, float, float], percentages)
    return GridResult(
        counts=counts,
        percentages=percentages,
        eliminated_points=eliminated_points,
        final_points=final_points,
    )
