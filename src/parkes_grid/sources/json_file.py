"""Lectura de pares desde exportaciones JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pandas as pd

from parkes_grid.sources.base import PairSource, PairSourcePaths, frame_to_pairs


@dataclass(frozen=True)
class JsonPairPaths(PairSourcePaths):
    """Paths for a JSON export (list of objects)."""


class JsonPairSource(PairSource):
    """JSON reader: ``[{"reference": 100, "predicted": 98}, ...]``."""

    def load_pairs(self) -> tuple[list[float], list[float]]:
        """Parse the JSON list into reference/predicted lists.

        Every list item yields one pair. Items that are not objects, lack a
        key, or hold null/non-numeric values give NaN, which the range
        filter later eliminates (same as empty CSV cells).

        Raises:
            ValueError: If the JSON root is not a list.
        """
        text = self._paths.path.read_text(encoding="utf-8")
        raw = _extract_json_list(text)
        if not isinstance(raw, list):
            raise ValueError("Pair JSON must be a list")

        cols = [self._paths.reference_column, self._paths.predicted_column]
        df = pd.DataFrame([_item_to_row(item, cols) for item in raw], columns=cols)
        return frame_to_pairs(df, *cols)


def _item_to_row(item: Any, keys: list[str]) -> dict[str, Any]:
    """Toma solo las claves de valores; ítems que no son dict -> fila vacía."""
    if not isinstance(item, dict):
        return {}
    row: dict[str, Any] = {}
    for key in keys:
        value = item.get(key)
        # Objetos o listas anidadas no son valores: quedan como NaN.
        row[key] = value if isinstance(value, int | float | str) else None
    return row


def _extract_json_list(text: str) -> Any:
    """Extract JSON array from text, tolerating leading non-JSON (e.g. log lines)."""
    start = text.find("[")
    if start >= 0:
        return json.loads(text[start:])
    return json.loads(text)
