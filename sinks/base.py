from abc import ABC, abstractmethod


class MessageSink(ABC):
    """
    Where lookup results and user-facing errors are delivered (a chat
    channel, the terminal, ...).
    """

    @abstractmethod
    def send(self, text: str) -> None:
        """Deliver one message."""
        ...
