import asyncio

import pytest

from algorithms import OperationParams, parse_params
from algorithms.step import OperationKind
from dll import ListStore, NodeStatus
from engine import RunController, RunStatus
from engine.controller import DEFAULT_SPEED_MS, SPEED_MAX_MS, SPEED_MIN_MS


def controller(values, operation="insert_head"):
    """Fast controller whose list is exactly `values`."""
    ctrl = RunController(size=0, speed_ms=SPEED_MIN_MS, operation=operation)
    ctrl.store = ListStore.from_values(values, value_generator=lambda: 55)
    ctrl.reset()
    return ctrl


async def wait_for(predicate, timeout=3.0):
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        assert loop.time() < deadline, "timed out"
        await asyncio.sleep(0.005)


def test_defaults():
    ctrl = RunController()
    assert len(ctrl.store.nodes) == 5
    assert ctrl.speed_ms == DEFAULT_SPEED_MS
    assert ctrl.state.status is RunStatus.IDLE
    assert ctrl.markers["head"] == 0
    assert ctrl.markers["tail"] == 4
    assert ctrl.message == "Pick an operation and press Start."


def test_completed_run_records_history():
    ctrl = controller([10, 20], operation="insert_tail")
    assert asyncio.run(ctrl.start(OperationParams(value=30))) is True
    assert ctrl.store.values() == [10, 20, 30]
    assert ctrl.state.status is RunStatus.COMPLETED
    assert not ctrl.state.is_running
    assert ctrl.progress == 100
    assert ctrl.history.export() == [{"type": "insert_tail", "value": 30}]
    assert ctrl.message.endswith("Done!")


def test_history_is_newest_first():
    ctrl = controller([10, 20])

    async def scenario():
        await ctrl.start(OperationParams(value=1))
        ctrl.select_operation("delete_tail")
        await ctrl.start()

    asyncio.run(scenario())
    kinds = [e.type for e in ctrl.history.entries()]
    assert kinds == [OperationKind.DELETE_TAIL, OperationKind.INSERT_HEAD]


def test_refused_run_goes_back_to_idle():
    ctrl = controller([10, 20], operation="insert_position")
    assert asyncio.run(ctrl.start(OperationParams(value=5, position=5))) is False
    assert ctrl.state.status is RunStatus.IDLE
    assert "out of bounds" in ctrl.message
    assert len(ctrl.history) == 0
    assert ctrl.store.values() == [10, 20]


def test_search_miss_completes_without_history():
    ctrl = controller([10, 20], operation="delete_by_value")
    assert asyncio.run(ctrl.start(OperationParams(value=99))) is True
    assert ctrl.state.status is RunStatus.COMPLETED
    assert len(ctrl.history) == 0


def test_start_while_running_is_rejected():
    ctrl = controller([10, 20, 30], operation="insert_tail")

    async def scenario():
        first = asyncio.ensure_future(ctrl.start(OperationParams(value=40)))
        await wait_for(lambda: ctrl.state.step_count >= 2)
        before = ctrl.store.to_dict()
        second = await ctrl.start(OperationParams(value=50))
        assert ctrl.store.to_dict() == before
        return second, await first

    second, first = asyncio.run(scenario())
    assert second is False
    assert first is True
    assert ctrl.store.values() == [10, 20, 30, 40]


def test_launch_marks_running_immediately():
    ctrl = controller([10, 20], operation="insert_head")

    async def scenario():
        task = ctrl.launch(OperationParams(value=1))
        assert ctrl.state.is_running
        assert ctrl.launch(OperationParams(value=2)) is None
        return await task

    assert asyncio.run(scenario()) is True
    assert ctrl.store.values() == [1, 10, 20]


def test_cancellation_mid_insert_tail_leaves_structure_as_is():
    ctrl = controller([10, 20, 30, 40], operation="insert_tail")

    async def scenario():
        run = asyncio.ensure_future(ctrl.start(OperationParams(value=50)))
        # first traversal hop
        await wait_for(lambda: ctrl.state.step_count >= 2)
        ctrl.reset()
        return await run

    assert asyncio.run(scenario()) is False

    # new node appended but not linked in
    assert len(ctrl.store.nodes) == 5
    assert ctrl.store.values() == [10, 20, 30, 40]
    assert ctrl.state.status is RunStatus.IDLE
    assert not ctrl.state.is_running
    assert all(n.status is NodeStatus.DEFAULT for n in ctrl.store.nodes)
    assert len(ctrl.history) == 0

    once = ctrl.store.to_dict()
    ctrl.reset()
    assert ctrl.store.to_dict() == once


def test_reset_is_idempotent():
    ctrl = controller([10, 20, 30])
    ctrl.store.set_statuses({1: NodeStatus.TARGET})
    ctrl.reset()
    once = ctrl.store.to_dict()
    ctrl.reset()
    assert ctrl.store.to_dict() == once
    assert ctrl.store.values() == [10, 20, 30]


def test_pause_and_resume():
    ctrl = controller([10, 20, 30, 40], operation="insert_tail")

    async def scenario():
        run = asyncio.ensure_future(ctrl.start(OperationParams(value=50)))
        await wait_for(lambda: ctrl.state.step_count >= 2)
        assert ctrl.pause() is True
        assert ctrl.state.status is RunStatus.PAUSED
        assert ctrl.pause() is False
        frozen = ctrl.state.step_count
        await asyncio.sleep(0.4)
        assert ctrl.state.step_count == frozen
        assert ctrl.resume() is True
        assert ctrl.state.status is RunStatus.RUNNING
        return await run

    assert asyncio.run(scenario()) is True
    assert ctrl.store.values() == [10, 20, 30, 40, 50]


def test_pause_when_idle_does_nothing():
    ctrl = controller([10])
    assert ctrl.pause() is False
    assert ctrl.resume() is False


def test_select_operation_cancels_run():
    ctrl = controller([10, 20, 30, 40], operation="insert_tail")

    async def scenario():
        run = asyncio.ensure_future(ctrl.start(OperationParams(value=50)))
        await wait_for(lambda: ctrl.state.step_count >= 2)
        ctrl.select_operation("delete_head")
        return await run

    assert asyncio.run(scenario()) is False
    assert ctrl.operation == "delete_head"
    assert ctrl.state.status is RunStatus.IDLE


def test_new_run_after_cancel_is_not_disturbed_by_old_one():
    ctrl = controller([10, 20, 30, 40], operation="insert_tail")

    async def scenario():
        old = asyncio.ensure_future(ctrl.start(OperationParams(value=50)))
        await wait_for(lambda: ctrl.state.step_count >= 2)
        ctrl.regenerate(3)
        ctrl.select_operation("insert_head")
        new = asyncio.ensure_future(ctrl.start(OperationParams(value=7)))
        return await old, await new

    old, new = asyncio.run(scenario())
    assert old is False
    assert new is True
    assert ctrl.store.values()[0] == 7
    assert len(ctrl.store.nodes) == 4


def test_select_unknown_operation_raises():
    ctrl = controller([10])
    with pytest.raises(ValueError):
        ctrl.select_operation("rotate")


def test_regenerate_clears_history_and_validates_size():
    ctrl = controller([10, 20])
    asyncio.run(ctrl.start(OperationParams(value=1)))
    assert len(ctrl.history) == 1

    ctrl.regenerate(7)
    assert len(ctrl.store.nodes) == 7
    assert ctrl.list_size == 7
    assert len(ctrl.history) == 0
    assert ctrl.state.status is RunStatus.IDLE
    assert ctrl.store.is_consistent()

    with pytest.raises(ValueError):
        ctrl.regenerate(2)
    with pytest.raises(ValueError):
        ctrl.regenerate(11)
    assert len(ctrl.store.nodes) == 7


def test_speed_is_clamped():
    ctrl = controller([10])
    assert ctrl.set_speed(10) == SPEED_MIN_MS
    assert ctrl.set_speed(5000) == SPEED_MAX_MS
    assert ctrl.set_speed("400") == 400


def test_progress():
    ctrl = controller([10, 20, 30, 40])
    assert ctrl.progress == 0
    ctrl.state.step_count = 2
    assert ctrl.progress == 50
    ctrl.state.step_count = 9
    assert ctrl.progress == 100

    empty = controller([])
    assert empty.progress == 0


def test_snapshot_is_a_copy():
    ctrl = controller([10, 20])
    snap = ctrl.snapshot()
    snap["nodes"][0]["value"] = 999
    snap["next_links"][0] = None
    assert ctrl.store.values() == [10, 20]
    for key in (
        "nodes", "next_links", "prev_links", "head_index", "markers",
        "run_status", "step_count", "is_running", "is_paused", "history",
        "message", "order", "progress", "speed_ms", "list_size", "operation",
    ):
        assert key in snap
    assert snap["order"] == [0, 1]
    assert snap["run_status"] == "Idle"


def record_delays(ctrl):
    """Wrap the controller's delay function; returns the list it appends (pace, ms) to."""
    delays = []
    scaled = ctrl._delay_for

    def delay_for(step):
        ms = scaled(step)
        delays.append((step.pace, ms))
        return ms

    ctrl._delay_for = delay_for
    return delays


def test_delete_tail_fade_wait_is_shortened():
    ctrl = controller([10, 20, 30], operation="delete_tail")
    ctrl.set_speed(300)
    delays = record_delays(ctrl)
    assert asyncio.run(ctrl.start()) is True
    # hop, target, fade
    assert delays == [(1.0, 300), (1.0, 300), (0.6, 180)]
    assert ctrl.store.values() == [10, 20]


def test_delete_tail_fade_wait_has_a_floor():
    ctrl = controller([10, 20], operation="delete_tail")
    ctrl.set_speed(SPEED_MIN_MS)
    delays = record_delays(ctrl)
    asyncio.run(ctrl.start())
    assert delays[-1] == (0.6, 120)


def test_speed_change_applies_from_the_next_wait():
    ctrl = controller([1, 2, 3, 4, 5, 6], operation="insert_tail")
    ctrl.set_speed(900)
    delays = record_delays(ctrl)

    async def scenario():
        loop = asyncio.get_running_loop()
        run = asyncio.ensure_future(ctrl.start(OperationParams(value=7)))
        await wait_for(lambda: ctrl.state.step_count >= 2)
        changed = loop.time()
        ctrl.set_speed(SPEED_MIN_MS)
        await wait_for(lambda: ctrl.state.step_count >= 3)
        held = loop.time() - changed
        result = await run
        return result, held, loop.time() - changed

    result, held, total = asyncio.run(scenario())
    assert result is True
    # the wait already sleeping keeps its 900 ms
    assert held >= 0.8
    assert [ms for _, ms in delays] == [900] + [SPEED_MIN_MS] * 5
    assert total < 2.5
    assert ctrl.store.values() == [1, 2, 3, 4, 5, 6, 7]


def test_non_integer_value_is_refused():
    ctrl = controller([10, 20])
    assert asyncio.run(ctrl.start(parse_params("2.5", ""))) is False
    assert ctrl.state.status is RunStatus.IDLE
    assert ctrl.store.values() == [10, 20]
    assert len(ctrl.store.nodes) == 2
    assert len(ctrl.history) == 0
