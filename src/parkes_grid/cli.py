"""CLI para el análisis de la grilla de error de Parkes sobre CSV/JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dateutil import tz

from parkes_grid.analysis import analyze
from parkes_grid.excel_writer import ReportLayout, write_grid_xlsx
from parkes_grid.model import ZONE_ORDER, GridResult, InvalidInput
from parkes_grid.plot import PlotConfig, save_grid
from parkes_grid.sources.base import PairSource
from parkes_grid.sources.csv_file import CsvPairPaths, CsvPairSource
from parkes_grid.sources.json_file import JsonPairPaths, JsonPairSource

_LOCAL_TZ = tz.tzlocal()

EXIT_INVALID_INPUT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Parkes Error Grid Analysis de pares referencia/predicción."
    )
    parser.add_argument("input", help="CSV o JSON con los pares (mg/dL).")
    parser.add_argument(
        "--reference-column",
        default="reference",
        help="Columna/clave con valores de referencia (default: reference).",
    )
    parser.add_argument(
        "--predicted-column",
        default="predicted",
        help="Columna/clave con valores predichos (default: predicted).",
    )
    parser.add_argument(
        "--out-dir",
        default="salidas",
        help="Directorio de salida (default: ./salidas).",
    )
    parser.add_argument(
        "--no-figure",
        action="store_true",
        help="No guardar el gráfico PNG.",
    )
    parser.add_argument(
        "--no-xlsx",
        action="store_true",
        help="No generar el Excel de resultados.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log en DEBUG.")
    return parser.parse_args(argv)


def build_source(ns: argparse.Namespace) -> PairSource:
    """Pick the reader from the input file extension.

    Raises:
        ValueError: If the extension is not .csv or .json.
    """
    path = Path(ns.input).expanduser()
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return CsvPairSource(
            CsvPairPaths(
                path=path,
                reference_column=ns.reference_column,
                predicted_column=ns.predicted_column,
            )
        )
    if suffix == ".json":
        return JsonPairSource(
            JsonPairPaths(
                path=path,
                reference_column=ns.reference_column,
                predicted_column=ns.predicted_column,
            )
        )
    raise ValueError(f"Unsupported input format: {path.name} (use .csv or .json)")


def format_result(result: GridResult) -> list[str]:
    """Human-readable zone table lines."""
    total = result.final_points
    lines = ["Parkes Error Grid Analysis:"]
    for zone, count, pct in zip(ZONE_ORDER, result.counts, result.percentages):
        lines.append(f"Zone {zone.value}: {pct:.2f}% ({count}/{total} points)")
    lines.append(f"Eliminated points: {result.eliminated_points}")
    lines.append(f"Final points: {total}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run the Parkes analysis CLI.

    Returns:
        Exit code (0 on success, 2 on invalid input).
    """
    ns = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = build_source(ns)
    source.validate()
    reference, predicted = source.load_pairs()

    try:
        analysis = analyze(reference, predicted)
    except InvalidInput as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    for line in format_result(analysis.result):
        print(line)

    out_dir = Path(ns.out_dir).expanduser().resolve()
    ts = datetime.now(tz=_LOCAL_TZ).strftime("%Y-%m-%d_%H-%M-%S")

    png_path = save_grid(
        analysis,
        out_dir / f"parkes_ega_{ts}.png",
        PlotConfig(save_figure=not ns.no_figure),
    )
    if png_path is not None:
        print(f"OK: Figure: {png_path}")

    if not ns.no_xlsx:
        xlsx_path = out_dir / f"parkes_ega_{ts}.xlsx"
        write_grid_xlsx(analysis, xlsx_path, ReportLayout())
        print(f"OK: Output: {xlsx_path}")
    return 0
