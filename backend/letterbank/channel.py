"""Command channel between the viewer listener and the game loop.

Many request threads hold the sender; the game loop alone holds the
receiver and polls it without blocking once per tick. The queue is
unbounded, so bursts are never dropped, only applied later.
"""

import queue
import threading
from typing import NamedTuple, Optional, Tuple


def _drain(q: queue.SimpleQueue) -> None:
    while True:
        try:
            q.get_nowait()
        except queue.Empty:
            return


class Command(NamedTuple):
    replace: str
    replacement: str


class CommandSender:
    def __init__(self, q: queue.SimpleQueue, closed: threading.Event):
        self._queue = q
        self._closed = closed

    def send(self, command: Command) -> None:
        # No consumer left: drop silently rather than fail the caller
        if self._closed.is_set():
            return
        self._queue.put_nowait(command)
        # close() may have drained between the check and the put
        if self._closed.is_set():
            _drain(self._queue)


class CommandReceiver:
    def __init__(self, q: queue.SimpleQueue, closed: threading.Event):
        self._queue = q
        self._closed = closed

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def try_receive(self) -> Optional[Command]:
        """Return the next pending command, or None. Never blocks."""
        if self._closed.is_set():
            return None
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def close(self) -> None:
        """Tear down the consumer side and discard anything still queued."""
        self._closed.set()
        _drain(self._queue)


def open_command_channel() -> Tuple[CommandSender, CommandReceiver]:
    q: queue.SimpleQueue = queue.SimpleQueue()
    closed = threading.Event()
    return CommandSender(q, closed), CommandReceiver(q, closed)
