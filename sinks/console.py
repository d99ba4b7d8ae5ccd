from __future__ import annotations

import sys
from typing import Optional, TextIO

from sinks.base import MessageSink


class ConsoleSink(MessageSink):
    """Writes each message to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def send(self, text: str) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()
