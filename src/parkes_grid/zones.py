"""Clasificación de pares en zonas de la grilla de Parkes.

Las regiones se solapan como condiciones sueltas; solo el orden de
evaluación (A, E, C, D y B por descarte) las vuelve disjuntas.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from parkes_grid.model import MeasurementPair, Zone, ZoneAssignment

Rule = tuple[Callable[[float, float], bool], Zone]

HYPO_LIMIT = 70.0
HYPER_LIMIT = 180.0
_D_LOW_KNEE = 175 / 3


def _in_zone_a(y: float, yp: float) -> bool:
    """Ambos en hipoglucemia, o predicción dentro de +/-20%."""
    return (yp <= HYPO_LIMIT and y <= HYPO_LIMIT) or (0.8 * y <= yp <= 1.2 * y)


def _in_zone_e(y: float, yp: float) -> bool:
    return (y >= HYPER_LIMIT and yp <= HYPO_LIMIT) or (
        y <= HYPO_LIMIT and yp >= HYPER_LIMIT
    )


def _in_zone_c(y: float, yp: float) -> bool:
    upper = 70 <= y <= 290 and yp >= y + 110
    lower = 130 <= y <= 180 and yp <= (7 / 5) * y - 182
    return upper or lower


def _in_zone_d(y: float, yp: float) -> bool:
    high_ref = y >= 240 and HYPO_LIMIT <= yp <= HYPER_LIMIT
    low_ref = y <= _D_LOW_KNEE and HYPO_LIMIT <= yp <= HYPER_LIMIT
    knee = _D_LOW_KNEE <= y <= HYPO_LIMIT and yp >= (6 / 5) * y
    return high_ref or low_ref or knee


# First match wins; anything left over is zone B.
RULES: tuple[Rule, ...] = (
    (_in_zone_a, Zone.A),
    (_in_zone_e, Zone.E),
    (_in_zone_c, Zone.C),
    (_in_zone_d, Zone.D),
)


def zone_for(reference: float, predicted: float) -> Zone:
    """Return the zone of a (reference, predicted) pair in mg/dL."""
    y, yp = float(reference), float(predicted)
    for matches, zone in RULES:
        if matches(y, yp):
            return zone
    return Zone.B


def classify_pair(pair: MeasurementPair) -> Zone:
    """Return the zone of a retained pair."""
    return zone_for(pair.reference, pair.predicted)


def classify_pairs(pairs: Iterable[MeasurementPair]) -> tuple[ZoneAssignment, ...]:
    """Assign a zone to every pair, keeping order."""
    return tuple(ZoneAssignment(pair=p, zone=classify_pair(p)) for p in pairs)
