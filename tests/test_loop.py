from algorithms import OperationParams
from engine import EngineThread, RunController, RunStatus
from engine.controller import SPEED_MAX_MS


def test_call_runs_on_the_engine_loop():
    engine = EngineThread(RunController(size=3)).start()
    try:
        snap = engine.call(engine.controller.snapshot)
        assert len(snap["nodes"]) == 3
    finally:
        engine.stop()


def test_stop_winds_down_an_active_run():
    engine = EngineThread(RunController(size=3, speed_ms=SPEED_MAX_MS, operation="insert_tail")).start()
    task = engine.call(engine.controller.launch, OperationParams(value=1))
    assert task is not None
    assert engine.call(lambda: engine.controller.state.is_running)

    engine.stop()

    assert task.done()
    assert task.result() is False
    assert engine.controller.state.status is RunStatus.IDLE
    assert engine.loop.is_closed()


def test_stop_is_idempotent():
    engine = EngineThread(RunController(size=0)).start()
    engine.stop()
    engine.stop()
    assert engine.loop.is_closed()
