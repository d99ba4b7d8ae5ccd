"""In-memory stand-ins for the grid source and the message sink."""

from typing import List, Optional

from dto.leaderboard import Grid
from sinks.base import MessageSink
from sources.base import GridSource


class RecordingSink(MessageSink):
    def __init__(self) -> None:
        self.messages: List[str] = []

    def send(self, text: str) -> None:
        self.messages.append(text)


class FakeSource(GridSource):
    def __init__(self, grid: Optional[Grid] = None, error: Optional[Exception] = None) -> None:
        self.grid = grid or []
        self.error = error
        self.requested: List[str] = []

    def fetch_grid(self, range_name: str) -> Grid:
        self.requested.append(range_name)
        if self.error is not None:
            raise self.error
        return self.grid
