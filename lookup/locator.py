"""
Finds the first cell holding a given value in a grid.
"""

from __future__ import annotations

import logging
from typing import Optional

from dto.cell_position import CellPosition
from dto.leaderboard import CellValue, Grid
from lookup.columns import column_to_name
from lookup.matching import Matcher, loose_equals

logger = logging.getLogger(__name__)


def locate(
    target: CellValue,
    grid: Grid,
    matcher: Matcher = loose_equals,
) -> Optional[CellPosition]:
    """
    Scan *grid* row by row, left to right, and return the position of the
    first cell that *matcher* considers equal to *target*.

    Returns ``None`` if no cell matches.
    """
    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            if matcher(value, target):
                position = CellPosition(
                    row=row_index,
                    column=col_index,
                    column_label=column_to_name(col_index + 1),
                )
                logger.debug(
                    "Found %r at %s%d", target, position.column_label, row_index + 1
                )
                return position

    logger.debug("%r not found in %d row(s)", target, len(grid))
    return None
