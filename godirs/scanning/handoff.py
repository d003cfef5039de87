"""Single-slot rendezvous channel between the walker thread and its consumer.

A send completes only once a receiver has taken the value, so the producer
never runs more than one directory ahead of the consumer. After close(),
every receive reports end-of-stream.

Example:
    >>> channel = Handoff()
    >>> # producer thread: channel.send("/go/src/fmt"); channel.close()
    >>> value, ok = channel.receive()
"""

import threading
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class Handoff(Generic[T]):
    """Unbuffered channel with rendezvous semantics.

    Supports one sender and one receiver. All state is guarded by a single
    condition variable, which also provides the memory ordering between
    the two threads.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._value: Optional[T] = None
        self._full = False
        self._closed = False
        self._sent = 0
        self._taken = 0

    def send(self, value: T) -> None:
        """Offer a value and block until a receiver has taken it.

        Raises:
            ValueError: If the channel has been closed.
        """
        with self._cond:
            if self._closed:
                raise ValueError("send on closed handoff")
            while self._full:
                self._cond.wait()
            self._value = value
            self._full = True
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            while self._taken < ticket:
                self._cond.wait()

    def receive(self) -> Tuple[Optional[T], bool]:
        """Block until a value is offered or the channel is closed.

        Returns:
            (value, True) for a received value, (None, False) once closed.
        """
        with self._cond:
            while not self._full and not self._closed:
                self._cond.wait()
            if not self._full:
                return None, False
            value = self._value
            self._value = None
            self._full = False
            self._taken += 1
            self._cond.notify_all()
            return value, True

    def close(self) -> None:
        """Mark end-of-stream. Closing twice is a no-op."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        with self._cond:
            return self._closed
