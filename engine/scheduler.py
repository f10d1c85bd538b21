"""
scheduler.py — Cooperative Wait / Pause / Cancel
=================================================
The only suspension primitive a run ever uses.

    ok = await scheduler.wait_with_control(380)
    if not ok:
        return            # cancelled: stop, do not roll back

A wait sleeps in POLL_SLICE_MS slices and checks for cancellation after
every slice.  While paused it parks in PAUSE_TICK_MS ticks; pause time is
not counted against the duration.

Run tokens:
    Every run calls arm() and gets a fresh RunToken.  A wait watches the
    token that was current when it *started*, and hard_stop() cancels the
    current token.  Arming a new run therefore can never un-cancel a wait
    belonging to an older run that has not yet observed its cancellation.
"""

import asyncio
import logging
from typing import Optional

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Timing (milliseconds)
# ---------------------------------------------------------------------------
POLL_SLICE_MS = 40
PAUSE_TICK_MS = 80
MIN_SCALED_MS = 120


def scale_delay(speed_ms: int, pace: float = 1.0) -> int:
    """Wait length for a step: the speed itself, or a paced fraction of it."""
    if pace == 1.0:
        return speed_ms
    return max(MIN_SCALED_MS, int(speed_ms * pace))


class RunToken:
    """Cancellation flag for a single run."""

    __slots__ = ("cancelled",)

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        return f"RunToken(cancelled={self.cancelled})"


class Scheduler:
    """
    Attributes:
        paused : Pause flag.  Checked between slices while waiting.
        token  : Token of the current run.  Starts out cancelled, so a
                 wait before the first arm() returns False immediately.
    """

    def __init__(self):
        self.paused: bool     = False
        self.token:  RunToken = RunToken()
        self.token.cancel()

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------
    def arm(self) -> RunToken:
        """Begin a new run: fresh token, not paused."""
        self.token  = RunToken()
        self.paused = False
        return self.token

    def hard_stop(self) -> None:
        """Cancel the current run and clear pause.  Safe to call repeatedly."""
        self.token.cancel()
        self.paused = False

    @property
    def cancelled(self) -> bool:
        return self.token.cancelled

    # ------------------------------------------------------------------
    # Pause / resume
    # ------------------------------------------------------------------
    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    # ------------------------------------------------------------------
    # The wait
    # ------------------------------------------------------------------
    async def wait_with_control(self, duration_ms: int, token: Optional[RunToken] = None) -> bool:
        """
        Returns:
            True after `duration_ms` of un-paused time, False as soon as
            cancellation is observed (including before the wait begins).
        """
        token = token or self.token
        if token.cancelled:
            return False

        elapsed = 0
        while True:
            # a pause that lands in the last slice still holds the next step
            while self.paused:
                if token.cancelled:
                    return False
                await asyncio.sleep(PAUSE_TICK_MS / 1000)
            if token.cancelled:
                return False
            if elapsed >= duration_ms:
                return True
            chunk = min(POLL_SLICE_MS, duration_ms - elapsed)
            await asyncio.sleep(chunk / 1000)
            elapsed += chunk
