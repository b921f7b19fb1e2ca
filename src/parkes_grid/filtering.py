"""Eliminación de puntos fuera del rango de operación."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from parkes_grid.model import FilterResult, MeasurementPair

logger = logging.getLogger(__name__)

REFERENCE_UPPER_LIMIT = 550.0
PREDICTED_LOWER_LIMIT = 0.0


def is_retained(reference: float, predicted: float) -> bool:
    """Return True when the pair lies inside the accepted range.

    Only the reference is bounded from above and only the prediction from
    below. Pairs with a negative reference or a prediction above 550 mg/dL
    are kept.
    """
    return reference < REFERENCE_UPPER_LIMIT and predicted > PREDICTED_LOWER_LIMIT


def filter_points(
    reference: Sequence[float],
    predicted: Sequence[float],
) -> FilterResult:
    """Drop out-of-range pairs, keeping input order.

    Args:
        reference: Validated reference values (mg/dL).
        predicted: Validated predicted values, same length as ``reference``.

    Returns:
        Retained pairs and the number of eliminated ones. NaN values fail
        both comparisons and are eliminated.
    """
    kept: list[MeasurementPair] = []
    eliminated = 0
    for y, yp in zip(reference, predicted):
        y, yp = float(y), float(yp)
        if is_retained(y, yp):
            kept.append(MeasurementPair(reference=y, predicted=yp))
        else:
            eliminated += 1
    if eliminated:
        logger.debug("Eliminated %d of %d points", eliminated, len(reference))
    return FilterResult(pairs=tuple(kept), eliminated_points=eliminated)
