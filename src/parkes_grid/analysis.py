"""Pipeline completo: validar, filtrar, clasificar y agregar."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from parkes_grid.filtering import filter_points
from parkes_grid.model import GridAnalysis, GridResult
from parkes_grid.statistics import aggregate
from parkes_grid.validation import validate_inputs
from parkes_grid.zones import classify_pairs

logger = logging.getLogger(__name__)


def analyze(
    reference: Sequence[float] | None,
    predicted: Sequence[float] | None,
) -> GridAnalysis:
    """Run Parkes Error Grid Analysis and keep the per-point zones.

    Args:
        reference: Reference values (mg/dL).
        predicted: Predicted/estimated values (mg/dL).

    Returns:
        Aggregated result plus one assignment per retained pair.

    Raises:
        InvalidInput: If inputs are missing or lengths differ.
    """
    checked_reference, checked_predicted = validate_inputs(reference, predicted)
    filtered = filter_points(checked_reference, checked_predicted)
    assignments = classify_pairs(filtered.pairs)
    result = aggregate(assignments, eliminated_points=filtered.eliminated_points)
    logger.info(
        "Parkes analysis: %d final points, %d eliminated, counts A-E=%s",
        result.final_points,
        result.eliminated_points,
        list(result.counts),
    )
    return GridAnalysis(result=result, assignments=assignments)


def classify(
    reference: Sequence[float] | None,
    predicted: Sequence[float] | None,
) -> GridResult:
    """Return per-zone counts and percentages for the given pairs."""
    return analyze(reference, predicted).result
