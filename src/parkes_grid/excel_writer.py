"""Generación de Excel formateado con el resultado de la grilla."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.utils import get_column_letter

from parkes_grid.frames import assignments_to_frame, summary_to_frame
from parkes_grid.model import GridAnalysis

_SUMMARY_HEADERS: dict[str, str] = {
    "zone": "Zona",
    "description": "Descripción",
    "count": "Puntos",
    "percentage": "Porcentaje (%)",
}

_POINTS_HEADERS: dict[str, str] = {
    "reference_mg_dl": "Referencia (mg/dL)",
    "predicted_mg_dl": "Predicción (mg/dL)",
    "zone": "Zona",
}

_COLUMN_WIDTHS: dict[str, int] = {
    "Zona": 8,
    "Descripción": 30,
    "Puntos": 10,
    "Porcentaje (%)": 14,
    "Referencia (mg/dL)": 18,
    "Predicción (mg/dL)": 18,
}

_NUMBER_FORMATS: dict[str, str] = {
    "Puntos": "0",
    "Porcentaje (%)": "0.00",
    "Referencia (mg/dL)": "0.00",
    "Predicción (mg/dL)": "0.00",
}


@dataclass(frozen=True)
class ReportLayout:
    """Sheet names for the grid report."""

    summary_sheet: str = "Resumen"
    points_sheet: str = "Puntos"


def _summary_export_frame(analysis: GridAnalysis) -> pd.DataFrame:
    """Tabla de zonas más filas de puntos eliminados y finales."""
    result = analysis.result
    summary = summary_to_frame(result)
    totals = pd.DataFrame(
        {
            "zone": ["", ""],
            "description": ["Puntos eliminados", "Puntos finales"],
            "count": [result.eliminated_points, result.final_points],
            "percentage": [float("nan"), float("nan")],
        }
    )
    out = pd.concat([summary, totals], ignore_index=True)
    return out.rename(columns=_SUMMARY_HEADERS)


def write_grid_xlsx(
    analysis: GridAnalysis,
    out_path: Path,
    layout: ReportLayout,
) -> None:
    """Write a two-sheet report: zone summary and per-point zones.

    Args:
        analysis: Output of ``parkes_grid.analysis.analyze``.
        out_path: Output path for the XLSX file.
        layout: Sheet names.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    summary_df = _summary_export_frame(analysis)
    points_df = assignments_to_frame(analysis.assignments).rename(
        columns=_POINTS_HEADERS
    )

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        summary_df.to_excel(writer, index=False, sheet_name=layout.summary_sheet)
        points_df.to_excel(writer, index=False, sheet_name=layout.points_sheet)
        _format_sheet(writer.book[layout.summary_sheet])
        _format_sheet(writer.book[layout.points_sheet])


def _thin_border() -> Border:
    thin = Side(style="thin")
    return Border(left=thin, right=thin, top=thin, bottom=thin)


def _style_header_row(ws: Any, border: Border) -> None:
    """Cabecera en negrita, centrada y con ajuste de texto."""
    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = center
        cell.border = border


def _style_body_rows(ws: Any, border: Border) -> None:
    """Filas de datos centradas, mismo borde que la cabecera."""
    center = Alignment(horizontal="center", vertical="center")
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            cell.alignment = center
            cell.border = border


def _header_positions(ws: Any) -> dict[str, int]:
    """Cabecera -> columna (1-based); celdas de cabecera vacías se ignoran."""
    return {
        str(cell.value): cell.column for cell in ws[1] if cell.value is not None
    }


def _apply_column_widths(ws: Any, positions: dict[str, int]) -> None:
    for header, width in _COLUMN_WIDTHS.items():
        idx = positions.get(header)
        if idx is not None:
            ws.column_dimensions[get_column_letter(idx)].width = width


def _apply_number_formats(ws: Any, positions: dict[str, int]) -> None:
    for row in ws.iter_rows(min_row=2):
        for header, fmt in _NUMBER_FORMATS.items():
            idx = positions.get(header)
            if idx is not None:
                row[idx - 1].number_format = fmt


def _format_sheet(ws: Any, border: Border | None = None) -> None:
    """Style a report sheet: header, body borders, widths and number formats.

    Args:
        ws: openpyxl worksheet with headers in row 1.
        border: Cell border for header and body; thin on every side if None.
    """
    if border is None:
        border = _thin_border()
    _style_header_row(ws, border)
    _style_body_rows(ws, border)
    positions = _header_positions(ws)
    _apply_column_widths(ws, positions)
    _apply_number_formats(ws, positions)
