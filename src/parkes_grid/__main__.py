"""Punto de entrada: ``python -m parkes_grid``."""

from __future__ import annotations

from parkes_grid.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
