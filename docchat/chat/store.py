"""Append-only message log with observer notifications."""

import itertools
from collections.abc import Callable

from docchat.models.schemas import Message, Sender


MessageObserver = Callable[[tuple[Message, ...]], None]


class MessageStore:
    """Ordered log of chat messages.

    Ids come from a monotonic counter that keeps running across resets, so
    two messages appended in the same instant still have a total order and
    an id is never handed out twice by the same store.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._ids = itertools.count(1)
        self._observers: list[MessageObserver] = []

    def subscribe(self, observer: MessageObserver) -> None:
        self._observers.append(observer)

    def append(self, sender: Sender, text: str) -> Message:
        """Store a new message and notify observers.

        Args:
            sender: Origin of the message.
            text: Message text, stored verbatim.

        Returns:
            The stored Message.
        """
        message = Message(id=next(self._ids), sender=sender, text=text)
        self._messages.append(message)
        self._notify()
        return message

    def all(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def reset(self) -> None:
        self._messages.clear()
        self._notify()

    def __len__(self) -> int:
        return len(self._messages)

    def _notify(self) -> None:
        snapshot = self.all()
        for observer in self._observers:
            observer(snapshot)
