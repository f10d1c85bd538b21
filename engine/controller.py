"""
controller.py — Run Controller
===============================
Owns everything a visualizer session has: the ListStore, the MarkerSet,
the run state, the operation history, the current narration and the
user's settings (operation, speed, list size).

    ctrl = RunController()
    ctrl.select_operation("insert_tail")
    await ctrl.start(OperationParams(value=42))
    ctrl.snapshot()              # what the renderer draws

Run lifecycle:
    Idle → start() → Running ⇄ Paused → Completed
                                      → Idle   (refused, or cancelled by
                                                reset / regenerate /
                                                select_operation)

Only one run at a time.  start() during a run is refused and changes
nothing.  Cancelling never rolls back: the structure stays exactly as
the last step left it until reset() or regenerate().

All methods must be called on the event loop thread that awaits start().
"""

import asyncio
import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from algorithms import DEFAULT_OPERATION, REGISTRY, OperationInfo, OperationParams
from algorithms.step import Step
from dll import ListStore, MarkerSet
from dll.store import ValueGenerator
from engine.recorder import History
from engine.scheduler import RunToken, Scheduler, scale_delay
from engine.stepper import Stepper

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
SPEED_MIN_MS     = 80
SPEED_MAX_MS     = 900
DEFAULT_SPEED_MS = 380

LIST_SIZE_MIN     = 3
LIST_SIZE_MAX     = 10
DEFAULT_LIST_SIZE = 5

IDLE_MESSAGE = "Pick an operation and press Start."


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------
class RunStatus(Enum):
    IDLE      = "Idle"
    RUNNING   = "Running"
    PAUSED    = "Paused"
    COMPLETED = "Completed"


@dataclass
class RunState:
    status:     RunStatus = RunStatus.IDLE
    step_count: int       = 0
    is_running: bool      = False
    is_paused:  bool      = False

    def to_dict(self) -> dict:
        return {
            "run_status": self.status.value,
            "step_count": self.step_count,
            "is_running": self.is_running,
            "is_paused":  self.is_paused,
        }


def validate_list_size(size: Any) -> int:
    """0 (empty list) or LIST_SIZE_MIN..LIST_SIZE_MAX; anything else raises ValueError."""
    size = int(size)
    if size != 0 and not LIST_SIZE_MIN <= size <= LIST_SIZE_MAX:
        raise ValueError(
            f"List size must be 0 or between {LIST_SIZE_MIN} and {LIST_SIZE_MAX}, got {size}"
        )
    return size


def clamp_speed(speed_ms: Any) -> int:
    return max(SPEED_MIN_MS, min(SPEED_MAX_MS, int(speed_ms)))


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        store           : The list being operated on.
        markers         : Role labels drawn under the nodes.
        state           : RunState of the current / last run.
        history         : Completed operations.
        message         : Narration shown in the status bar.
        operation       : Registry key of the selected operation.
        speed_ms        : Base delay between steps.
        list_size       : Size used by regenerate() when none is given.
        pseudocode_line : Line of the selected operation's pseudocode the
                          last step illustrated, None when idle.
        scheduler       : Cooperative wait primitive shared by every run.
        stepper         : Drives the current operation generator.
    """

    def __init__(
        self,
        size: int = DEFAULT_LIST_SIZE,
        speed_ms: int = DEFAULT_SPEED_MS,
        operation: str = DEFAULT_OPERATION,
        value_generator: Optional[ValueGenerator] = None,
    ):
        if operation not in REGISTRY:
            raise ValueError(f"Unknown operation: {operation}")

        self.store:     ListStore = ListStore(value_generator=value_generator)
        self.markers:   MarkerSet = MarkerSet()
        self.state:     RunState  = RunState()
        self.history:   History   = History()
        self.message:   str       = IDLE_MESSAGE
        self.operation: str       = operation
        self.speed_ms:  int       = clamp_speed(speed_ms)
        self.list_size: int       = validate_list_size(size)
        self.pseudocode_line: Optional[int] = None

        self.scheduler = Scheduler()
        self.stepper   = Stepper(on_step=self._on_step)
        self._task: Optional[asyncio.Task] = None

        self.store.initialize(self.list_size)
        self._settle_markers()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    async def start(self, params: Optional[OperationParams] = None) -> bool:
        """
        Run the selected operation to completion.

        Returns:
            True if the operation completed; False if it was refused,
            cancelled, or another run was already active.
        """
        if self.state.is_running:
            log.warning("Start ignored: %s is already running", self.operation)
            return False
        return await self._run(*self._begin(params))

    def launch(self, params: Optional[OperationParams] = None) -> Optional[asyncio.Task]:
        """
        Like start(), but returns at once with the run's task (None if a run
        is already active).  The state is Running before this returns, so a
        second launch() is refused even if the task has not started yet.
        Must be called on the loop thread.
        """
        if self.state.is_running:
            log.warning("Launch ignored: %s is already running", self.operation)
            return None
        self._task = asyncio.get_running_loop().create_task(self._run(*self._begin(params)))
        return self._task

    def _begin(self, params: Optional[OperationParams]) -> Tuple[OperationInfo, RunToken]:
        info   = self.info
        params = params or OperationParams()
        token  = self.scheduler.arm()

        self.state   = RunState(status=RunStatus.RUNNING, is_running=True)
        self.message = f"Running {info.label}..."
        self.pseudocode_line = None
        self.store.reset_statuses()
        log.info("Run started: %s %s", info.key, params)

        self.stepper.start(info.fn(self.store, self.markers, params))
        return info, token

    async def _run(self, info: OperationInfo, token: RunToken) -> bool:
        result = await self.stepper.run(self.scheduler, self._delay_for, token)

        if token.cancelled:
            # whoever cancelled has already put the state back to Idle
            log.info("Run cancelled: %s", info.key)
            return False

        final = self.stepper.current_step
        self.state.is_running = False
        self.state.is_paused  = False
        if result:
            self.state.status = RunStatus.COMPLETED
            if final is not None and final.entry is not None:
                self.history.record(final.entry)
        else:
            self.state.status = RunStatus.IDLE
        log.info("Run finished: %s completed=%s steps=%d", info.key, bool(result), self.state.step_count)
        return bool(result)

    def pause(self) -> bool:
        if not self.state.is_running or self.state.is_paused:
            return False
        self.scheduler.pause()
        self.state.status    = RunStatus.PAUSED
        self.state.is_paused = True
        self.message = "Paused. Press Resume to continue."
        return True

    def resume(self) -> bool:
        if not self.state.is_running or not self.state.is_paused:
            return False
        self.scheduler.resume()
        self.state.status    = RunStatus.RUNNING
        self.state.is_paused = False
        self.message = "Resumed."
        return True

    # ------------------------------------------------------------------
    # Cancelling actions
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Stop any run, restore default statuses and head/tail labels.  Links stay as they are."""
        self._cancel()
        self.message = "Reset complete. " + IDLE_MESSAGE

    def regenerate(self, size: Optional[int] = None) -> None:
        """Stop any run and build a fresh list.  Clears the history."""
        if size is not None:
            self.list_size = validate_list_size(size)
        self._cancel()
        self.store.initialize(self.list_size)
        self._settle_markers()
        self.history.clear()
        self.message = f"Generated a new list of {self.list_size} nodes."
        log.info("Regenerated list: %s", self.store.values())

    def select_operation(self, key: str) -> OperationInfo:
        info = REGISTRY.get(key)
        if info is None:
            raise ValueError(f"Unknown operation: {key}")
        self._cancel()
        self.operation = key
        self.message   = f"Selected {info.label}. Press Start."
        return info

    def set_speed(self, speed_ms: Any) -> int:
        """Takes effect at the next suspension point of a running operation."""
        self.speed_ms = clamp_speed(speed_ms)
        return self.speed_ms

    # ------------------------------------------------------------------
    # Read-only
    # ------------------------------------------------------------------
    @property
    def info(self) -> OperationInfo:
        return REGISTRY[self.operation]

    @property
    def progress(self) -> int:
        if self.state.status == RunStatus.COMPLETED:
            return 100
        if not self.store.nodes:
            return 0
        return min(round(self.state.step_count / len(self.store.nodes) * 100), 100)

    def snapshot(self) -> Dict[str, Any]:
        """Deep copy of everything a renderer needs.  Safe to hand to another thread."""
        data = copy.deepcopy(self.store.to_dict())
        data.update(self.state.to_dict())
        data.update({
            "markers":         self.markers.as_dict(),
            "history":         self.history.export(),
            "message":         self.message,
            "order":           self.store.order(),
            "progress":        self.progress,
            "speed_ms":        self.speed_ms,
            "list_size":       self.list_size,
            "operation":       self.operation,
            "pseudocode_line": self.pseudocode_line,
        })
        return data

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _cancel(self) -> None:
        if self.state.is_running:
            log.info("Cancelling run: %s", self.operation)
        self.scheduler.hard_stop()
        self.stepper.reset()
        self.store.reset_statuses()
        self._settle_markers()
        self.state = RunState()
        self.pseudocode_line = None

    def _settle_markers(self) -> None:
        self.markers.assign(head=self.store.head_index, tail=self.store.tail_index())

    def _on_step(self, step: Step) -> None:
        self.state.step_count = step.step_number
        self.message          = step.explanation
        self.pseudocode_line  = step.pseudocode_line
        log.debug("[%s] step %d: %s", self.operation, step.step_number, step.explanation)

    def _delay_for(self, step: Step) -> int:
        return scale_delay(self.speed_ms, step.pace)
