"""Cancellation signal shared by the remote calls and the readiness poll."""

from __future__ import annotations

import threading
import time

from video_agent_skills.errors import CancelledError


class Cancellation:
    """A cancel flag with an optional deadline.

    ``wait()`` sleeps like ``time.sleep`` but returns early as soon as the
    signal is cancelled or the deadline passes.
    """

    def __init__(self, timeout: float | None = None):
        self._event = threading.Event()
        self._reason: str | None = None
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    @classmethod
    def with_timeout(cls, timeout: float | None) -> Cancellation:
        if timeout is not None and timeout <= 0:
            timeout = None
        return cls(timeout)

    def cancel(self, reason: str = "cancelled") -> None:
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self.cancel("deadline exceeded")
            return True
        return False

    @property
    def reason(self) -> str | None:
        return self._reason

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``. Returns True if cancelled in the meantime."""
        if self.cancelled:
            return True
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            self._event.wait(remaining)
        else:
            self._event.wait(seconds)
        return self.cancelled

    def check(self) -> None:
        """Raise CancelledError if the signal has fired."""
        if self.cancelled:
            raise CancelledError(self._reason or "cancelled")
