"""Signal handling for foreground service runs."""

import queue
import signal
from types import FrameType
from typing import Any, Iterable

from loguru import logger

TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGINT)


class SignalSubscription:
    """
    Scoped registration of interest in OS signals.

    Handlers are installed on ``__enter__`` and the previous handlers are put
    back on ``__exit__``, so repeated or nested runs do not leak handlers.
    Received signals are buffered; up to ``capacity`` may be pending at once.

    Must be entered from the main thread.
    """

    def __init__(self, signals: Iterable[int] = TERMINATION_SIGNALS, capacity: int = 3):
        """
        Initialize the subscription.

        Args:
            signals: Signal numbers to listen for.
            capacity: Maximum number of undelivered signals kept.
        """
        self.signals = tuple(signals)
        self.capacity = capacity
        # SimpleQueue.put is reentrant, so it is safe to call from a handler.
        self._pending: queue.SimpleQueue[int] = queue.SimpleQueue()
        self._previous: dict[int, Any] = {}

    def _signal_handler(self, signum: int, frame: FrameType | None) -> None:
        """Buffer a received signal."""
        if self._pending.qsize() < self.capacity:
            self._pending.put(signum)

    def __enter__(self) -> "SignalSubscription":
        for sig in self.signals:
            self._previous[sig] = signal.signal(sig, self._signal_handler)
        logger.debug(
            "Signal handlers registered ({})",
            ", ".join(signal.Signals(s).name for s in self.signals),
        )
        return self

    def __exit__(self, *exc_info: Any) -> None:
        for sig, previous in self._previous.items():
            # None means the old handler was not installed from Python.
            signal.signal(sig, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()

    def pending(self) -> int:
        """Number of received signals not yet consumed by wait()."""
        return self._pending.qsize()

    def wait(self) -> int:
        """
        Block until a signal arrives.

        Returns:
            The number of the received signal.
        """
        signum = self._pending.get()
        logger.info(f"Received {signal.Signals(signum).name}, stopping")
        return signum
