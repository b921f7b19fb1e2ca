"""Modelos tipados para pares de medición, zonas y resultados de la grilla."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidInput(ValueError):
    """Input sequences are missing or not aligned."""


class Zone(str, Enum):
    """Parkes Error Grid zone, A (safest) to E (most dangerous)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def description(self) -> str:
        """Short clinical meaning of the zone."""
        return _ZONE_DESCRIPTIONS[self]


ZONE_ORDER: tuple[Zone, ...] = (Zone.A, Zone.B, Zone.C, Zone.D, Zone.E)

_ZONE_DESCRIPTIONS: dict[Zone, str] = {
    Zone.A: "Clinically accurate",
    Zone.B: "Benign errors",
    Zone.C: "Overcorrection",
    Zone.D: "Dangerous failure to detect",
    Zone.E: "Erroneous treatment",
}


@dataclass(frozen=True)
class MeasurementPair:
    """One reference/predicted glucose pair (mg/dL)."""

    reference: float
    predicted: float


@dataclass(frozen=True)
class ZoneAssignment:
    """Zone assigned to a retained pair."""

    pair: MeasurementPair
    zone: Zone


@dataclass(frozen=True)
class FilterResult:
    """Pairs kept by the range filter plus the eliminated count."""

    pairs: tuple[MeasurementPair, ...]
    eliminated_points: int


@dataclass(frozen=True)
class GridResult:
    """Per-zone tallies of one analysis run, ordered A..E."""

    counts: tuple[int, int, int, int, int]
    percentages: tuple[float, float, float, float, float]
    eliminated_points: int
    final_points: int

    def count(self, zone: Zone) -> int:
        """Return the number of pairs assigned to ``zone``."""
        return self.counts[ZONE_ORDER.index(zone)]

    def percentage(self, zone: Zone) -> float:
        """Return the share of final points assigned to ``zone``."""
        return self.percentages[ZONE_ORDER.index(zone)]

    def as_dict(self) -> dict[str, object]:
        """Plain dict view (zone letters as keys)."""
        return {
            "counts": {z.value: c for z, c in zip(ZONE_ORDER, self.counts)},
            "percentages": {
                z.value: p for z, p in zip(ZONE_ORDER, self.percentages)
            },
            "eliminated_points": self.eliminated_points,
            "final_points": self.final_points,
        }


@dataclass(frozen=True)
class GridAnalysis:
    """Result of a run plus the assignments the chart and reports consume."""

    result: GridResult
    assignments: tuple[ZoneAssignment, ...]

    @property
    def pairs(self) -> tuple[MeasurementPair, ...]:
        """Retained pairs in input order."""
        return tuple(a.pair for a in self.assignments)
