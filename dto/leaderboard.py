"""
Grid and table types shared by the locator, the extractor and the
lookup pipeline.

    Grid             — rows of cell values as fetched from the sheet
    HeaderRun        — header labels to the right of the located cell
    ResultTable      — contestant records aligned with the HeaderRun
    LeaderboardTable — one extraction bundled with where it came from
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from pydantic import BaseModel

from dto.cell_position import CellPosition

CellValue = Optional[Union[bool, int, float, str]]

Grid = Sequence[Sequence[CellValue]]
HeaderRun = List[CellValue]
ResultTable = List[List[CellValue]]


class LeaderboardTable(BaseModel):
    """Headers and contestant rows read below a located subcategory."""

    position: CellPosition
    headers: HeaderRun = []
    rows: ResultTable = []

    @property
    def is_empty(self) -> bool:
        """True when no header was found next to the located cell."""
        return not self.headers
