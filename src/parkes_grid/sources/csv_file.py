"""Lectura de pares desde CSV."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from parkes_grid.sources.base import PairSource, PairSourcePaths, frame_to_pairs


@dataclass(frozen=True)
class CsvPairPaths(PairSourcePaths):
    """Paths for a CSV export with one row per pair."""


class CsvPairSource(PairSource):
    """CSV reader: one column of reference values, one of predictions."""

    def load_pairs(self) -> tuple[list[float], list[float]]:
        """Load both columns as floats.

        Non-numeric or empty cells become NaN, which the range filter
        later eliminates.

        Raises:
            ValueError: If a configured column is missing.
        """
        df = pd.read_csv(self._paths.path)
        cols = [self._paths.reference_column, self._paths.predicted_column]
        missing = [c for c in cols if c not in df.columns]
        if missing:
            raise ValueError(
                f"Missing column(s) {missing} in {self._paths.path}; "
                f"found {list(df.columns)}"
            )
        return frame_to_pairs(df, *cols)
