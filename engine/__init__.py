"""
engine/
-------
Scheduling, playback & session layer.

    from engine import RunController, EngineThread, Scheduler
"""

from engine.scheduler  import Scheduler, RunToken, scale_delay, POLL_SLICE_MS, PAUSE_TICK_MS
from engine.stepper    import Stepper, StepperState
from engine.recorder   import History
from engine.controller import (
    RunController,
    RunState,
    RunStatus,
    DEFAULT_SPEED_MS,
    DEFAULT_LIST_SIZE,
)
from engine.loop       import EngineThread

__all__ = [
    "Scheduler",
    "RunToken",
    "scale_delay",
    "POLL_SLICE_MS",
    "PAUSE_TICK_MS",
    "Stepper",
    "StepperState",
    "History",
    "RunController",
    "RunState",
    "RunStatus",
    "DEFAULT_SPEED_MS",
    "DEFAULT_LIST_SIZE",
    "EngineThread",
]
