import asyncio
import logging

import pytest

from timers import TaskScope


def test_callback_runs_after_delay():
    calls = []

    async def scenario():
        scope = TaskScope()
        await scope.defer(0.01, calls.append, 'done')
        await asyncio.sleep(0)
        return scope

    scope = asyncio.run(scenario())
    assert calls == ['done']
    assert scope.pending == 0


def test_close_cancels_pending():
    calls = []

    async def scenario():
        scope = TaskScope()
        task = scope.defer(0.01, calls.append, 'late')
        assert scope.pending == 1
        scope.close()
        await asyncio.sleep(0.05)
        return task

    task = asyncio.run(scenario())
    assert calls == []
    assert task.cancelled()


def test_defer_on_closed_scope_raises():
    scope = TaskScope()
    scope.close()
    with pytest.raises(RuntimeError):
        scope.defer(0, print)


def test_failing_callback_is_logged(caplog):
    def boom():
        raise ValueError('broken reply')

    async def scenario():
        scope = TaskScope()
        task = scope.defer(0, boom)
        await asyncio.sleep(0.01)
        return scope, task

    with caplog.at_level(logging.ERROR, logger='timers'):
        scope, task = asyncio.run(scenario())
    assert not task.cancelled()
    assert scope.pending == 0
    record, = [r for r in caplog.records if r.name == 'timers']
    assert record.getMessage() == 'Deferred callback failed'
    assert isinstance(record.exc_info[1], ValueError)
