from __future__ import annotations

import logging
from typing import List, Sequence, Union

from ..errors import ColumnArityMismatch, InvalidWidth
from ..protocol.types import Justification

logger = logging.getLogger(__name__)

JustificationLike = Union[Justification, str]


def validate_table(
    widths: Sequence[int],
    justifications: Sequence[JustificationLike],
    rows: Sequence[Sequence[str]],
) -> List[Justification]:
    """Check the table shape up front and return coerced justifications."""
    for index, width in enumerate(widths):
        if width <= 0:
            raise InvalidWidth(f"Column {index} width must be greater than zero, got {width}")
    if len(justifications) != len(widths):
        raise ColumnArityMismatch(
            f"Expected {len(widths)} justifications, got {len(justifications)}"
        )
    for index, row in enumerate(rows):
        if len(row) != len(widths):
            raise ColumnArityMismatch(f"Row {index} has {len(row)} cells, expected {len(widths)}")
    return [Justification.coerce(value) for value in justifications]


def wrap_rows(widths: Sequence[int], rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """Split overflowing cells into continuation rows.

    Each row that overflows gets exactly one continuation row right after
    it, carrying the remainder of every overflowing cell and "" elsewhere.
    Continuation rows are examined in turn, so long cells keep wrapping.
    """
    result = [list(row) for row in rows]
    cursor = 0
    while cursor < len(result):
        row = result[cursor]
        continuation = None
        for i, cell in enumerate(row):
            if len(cell) > widths[i]:
                if continuation is None:
                    continuation = [""] * len(row)
                    result.insert(cursor + 1, continuation)
                row[i] = cell[: widths[i]]
                continuation[i] = cell[widths[i] :]
        cursor += 1
    return result


def justify_cell(cell: str, width: int, justification: Justification) -> str:
    if justification is Justification.LEFT:
        return cell.ljust(width)
    if justification is Justification.RIGHT:
        return cell.rjust(width)
    # half-up, so odd slack puts the extra space on the left
    left_pad = (width - len(cell) + 1) // 2
    return (" " * left_pad + cell).ljust(width)


def layout(
    widths: Sequence[int],
    justifications: Sequence[JustificationLike],
    rows: Sequence[Sequence[str]],
) -> List[str]:
    """Wrap and justify rows into fixed-width lines of sum(widths) characters."""
    modes = validate_table(widths, justifications, rows)
    physical = wrap_rows(widths, rows)
    lines = [
        "".join(justify_cell(cell, widths[i], modes[i]) for i, cell in enumerate(row))
        for row in physical
    ]
    logger.debug("Laid out %d rows into %d lines of width %d", len(rows), len(lines), sum(widths))
    return lines


class TableLayout:
    """Column widths and justifications bound once, reused across row sets."""

    def __init__(self, widths: Sequence[int], justifications: Sequence[JustificationLike]) -> None:
        self.justifications = validate_table(widths, justifications, [])
        self.widths = list(widths)

    @property
    def line_width(self) -> int:
        return sum(self.widths)

    def layout(self, rows: Sequence[Sequence[str]]) -> List[str]:
        return layout(self.widths, self.justifications, rows)
