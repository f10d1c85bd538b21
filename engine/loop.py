"""
loop.py — Engine Thread
========================
Flask handlers are synchronous; runs are coroutines.  EngineThread owns
one asyncio event loop on a daemon thread and is the only place the
RunController is ever touched from.

    engine = EngineThread(RunController())
    engine.start()
    engine.submit(engine.controller.start(params))   # fire and forget
    snap = engine.call(engine.controller.snapshot)   # blocks for the result
"""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional

from engine.controller import RunController

log = logging.getLogger(__name__)

CALL_TIMEOUT_S = 5.0


class EngineThread:
    """
    Attributes:
        controller : The single RunController of this process.
        loop       : Event loop the controller lives on.
    """

    def __init__(self, controller: RunController):
        self.controller: RunController = controller
        self.loop:       asyncio.AbstractEventLoop = asyncio.new_event_loop()
        self._thread:    Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> "EngineThread":
        if self._thread is not None:
            return self
        self._thread = threading.Thread(target=self._serve, name="dll-engine", daemon=True)
        self._thread.start()
        log.info("Engine loop started")
        return self

    def stop(self) -> None:
        if self._thread is None:
            return
        asyncio.run_coroutine_threadsafe(self._wind_down(), self.loop).result(CALL_TIMEOUT_S)
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=CALL_TIMEOUT_S)
        if not self._thread.is_alive():
            self.loop.close()
        self._thread = None
        log.info("Engine loop stopped")

    # ------------------------------------------------------------------
    # Cross-thread entry points
    # ------------------------------------------------------------------
    def submit(self, coro: Coroutine) -> Future:
        """Schedule a coroutine on the engine loop; does not wait for it."""
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        future.add_done_callback(self._log_failure)
        return future

    def call(self, fn: Callable[..., Any], *args: Any) -> Any:
        """Run a plain function on the engine loop and return its result (or raise its exception)."""

        async def invoke():
            return fn(*args)

        return asyncio.run_coroutine_threadsafe(invoke(), self.loop).result(CALL_TIMEOUT_S)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _serve(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    async def _wind_down(self) -> None:
        """Cancel the active run and let every pending task on the loop finish."""
        self.controller.reset()
        current = asyncio.current_task()
        pending = [t for t in asyncio.all_tasks() if t is not current]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.error("Engine task failed", exc_info=exc)
