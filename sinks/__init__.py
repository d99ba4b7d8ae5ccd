from sinks.base import MessageSink
from sinks.console import ConsoleSink

__all__ = [
    "MessageSink",
    "ConsoleSink",
]
