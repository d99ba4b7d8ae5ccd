"""
Base class for everything that can hand the lookup a grid of cell values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dto.leaderboard import Grid


class GridSource(ABC):
    """Interface that every grid source must implement."""

    @abstractmethod
    def fetch_grid(self, range_name: str) -> Grid:
        """
        Return the cell values of *range_name* as rows of values.

        *range_name* is a sheet name, optionally followed by an A1 range
        (``"GL 4* Overall rankings!A1:H40"``).

        Raises ``InvalidRangeError`` if the range does not exist and
        ``DataSourceError`` for any other failure.
        """
        ...
