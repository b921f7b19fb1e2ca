"""Validación de las secuencias de entrada."""

from __future__ import annotations

from collections.abc import Sequence

from parkes_grid.model import InvalidInput


def validate_inputs(
    reference: Sequence[float] | None,
    predicted: Sequence[float] | None,
) -> tuple[Sequence[float], Sequence[float]]:
    """Check that both sequences exist and have the same length.

    Args:
        reference: Reference values (mg/dL).
        predicted: Predicted/estimated values (mg/dL).

    Returns:
        The same two sequences, unchanged.

    Raises:
        InvalidInput: If a sequence is missing or the lengths differ.
    """
    if reference is None or predicted is None:
        raise InvalidInput("There are no inputs.")
    if len(reference) != len(predicted):
        raise InvalidInput(
            "Reference and predicted sequences must be the same length "
            f"({len(reference)} != {len(predicted)})."
        )
    return reference, predicted
