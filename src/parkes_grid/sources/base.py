"""Clases base para fuentes de pares."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import pandas as pd


@dataclass(frozen=True)
class PairSourcePaths:
    """Location of a paired export and the names of its value columns."""

    path: Path
    reference_column: str = "reference"
    predicted_column: str = "predicted"


class PairSource(ABC):
    """Abstract source of reference/predicted value sequences."""

    def __init__(self, paths: PairSourcePaths) -> None:
        """Create a pair source.

        Args:
            paths: Source file and column configuration.
        """
        self._paths = paths

    def validate(self) -> None:
        """Validate that the export file exists.

        Raises:
            FileNotFoundError: If the file is missing.
        """
        if not self._paths.path.is_file():
            raise FileNotFoundError(str(self._paths.path))

    @abstractmethod
    def load_pairs(self) -> tuple[list[float], list[float]]:
        """Return (reference, predicted) value lists in file order.

        Raises:
            ValueError: If the file shape or columns are invalid.
        """


def frame_to_pairs(
    df: pd.DataFrame,
    reference_column: str,
    predicted_column: str,
) -> tuple[list[float], list[float]]:
    """Coerce both value columns to float lists.

    Missing, null or non-numeric cells become NaN so the range filter counts
    them as eliminated points instead of dropping them before the analysis.
    """
    reference = pd.to_numeric(df[reference_column], errors="coerce").astype(float)
    predicted = pd.to_numeric(df[predicted_column], errors="coerce").astype(float)
    return reference.tolist(), predicted.tolist()
