"""Vistas tabulares (pandas) de las asignaciones y del resumen por zona."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from parkes_grid.model import ZONE_ORDER, GridResult, ZoneAssignment

ASSIGNMENT_COLUMNS = ["reference_mg_dl", "predicted_mg_dl", "zone"]
SUMMARY_COLUMNS = ["zone", "description", "count", "percentage"]


def assignments_to_frame(assignments: Sequence[ZoneAssignment]) -> pd.DataFrame:
    """One row per retained pair, in input order."""
    rows = [
        {
            "reference_mg_dl": a.pair.reference,
            "predicted_mg_dl": a.pair.predicted,
            "zone": a.zone.value,
        }
        for a in assignments
    ]
    if not rows:
        return pd.DataFrame(columns=ASSIGNMENT_COLUMNS)
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)


def summary_to_frame(result: GridResult) -> pd.DataFrame:
    """Zone table (A..E) with counts and rounded percentages."""
    df = pd.DataFrame(
        {
            "zone": [z.value for z in ZONE_ORDER],
            "description": [z.description for z in ZONE_ORDER],
            "count": list(result.counts),
            "percentage": list(result.percentages),
        },
        columns=SUMMARY_COLUMNS,
    )
    df["percentage"] = df["percentage"].round(2)
    return df
