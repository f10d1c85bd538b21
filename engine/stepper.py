"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper owns one operation generator at a time, buffers every Step it
has seen (the run trace) and drives the generator forward.

Two ways to drive it:

    await stepper.run(scheduler, delay_for)   # live, one wait per step
    stepper.jump_to_end()                     # synchronous, no waits

State machine:
    IDLE     →  start()              →  READY
    READY    →  run() / jump_to_end  →  RUNNING  →  FINISHED
    RUNNING  →  (wait returned False) → CANCELLED
    any      →  reset()              →  IDLE

After a non-final Step the Stepper awaits the scheduler; a final Step is
never followed by a wait.  When a wait reports cancellation the generator
is closed on the spot and the structure is left as it is.

Thread safety:
  Not thread-safe.  All calls must come from the engine's event loop
  thread (see engine/loop.py).
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Generator, List, Optional

from algorithms.step import Step
from engine.scheduler import RunToken, Scheduler

log = logging.getLogger(__name__)

StepGenerator = Generator[Step, None, bool]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE      = "idle"
    READY     = "ready"
    RUNNING   = "running"
    FINISHED  = "finished"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state   : Current StepperState.
        steps   : Every Step yielded so far in this run.
        result  : Generator's return value once FINISHED (None otherwise).
        on_step : Optional callback(Step) fired for every Step pulled.
                  The controller hooks its step counter and narration here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._generator: Optional[StepGenerator] = None
        self.steps:      List[Step]              = []
        self.state:      StepperState            = StepperState.IDLE
        self.result:     Optional[bool]          = None
        self.on_step:    Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: StepGenerator) -> None:
        """Attach a fresh operation generator.  Nothing runs yet."""
        self.close()
        self._generator = generator
        self.steps      = []
        self.result     = None
        self.state      = StepperState.READY

    def reset(self) -> None:
        """Back to IDLE, dropping the generator and the trace."""
        self.close()
        self.steps  = []
        self.result = None
        self.state  = StepperState.IDLE

    def close(self) -> None:
        if self._generator is not None:
            self._generator.close()
            self._generator = None

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    async def run(
        self,
        scheduler: Scheduler,
        delay_for: Callable[[Step], int],
        token: Optional[RunToken] = None,
    ) -> Optional[bool]:
        """
        Pull steps until the generator finishes or a wait is cancelled.

        Args:
            scheduler : Supplies wait_with_control().
            delay_for : Maps a Step to its wait in ms.  Called at every
                        suspension, so speed changes apply mid-run.
            token     : The run's token; defaults to the scheduler's current one.

        Returns:
            The generator's completion flag, or None when cancelled.
        """
        token     = token or scheduler.token
        generator = self._generator
        self.state = StepperState.RUNNING
        while True:
            step = self._fetch_next()
            if step is None:
                return self.result
            if step.is_final:
                continue
            ok = await scheduler.wait_with_control(delay_for(step), token)
            if self._generator is not generator:
                # reset() or start() replaced this run while it was waiting
                return None
            if not ok:
                self.close()
                self.state = StepperState.CANCELLED
                log.debug("Run cancelled after step %d", step.step_number)
                return None

    def jump_to_end(self) -> Optional[bool]:
        """Exhaust the generator without any waits."""
        self.state = StepperState.RUNNING
        while self._fetch_next() is not None:
            pass
        return self.result

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> Optional[Step]:
        """Pull one Step into the buffer; None once the generator is done."""
        if self._generator is None:
            return None
        try:
            step = next(self._generator)
        except StopIteration as stop:
            self.result     = stop.value
            self._generator = None
            self.state      = StepperState.FINISHED
            return None
        self.steps.append(step)
        self._notify(step)
        return step

    def _notify(self, step: Step) -> None:
        if self.on_step:
            self.on_step(step)
