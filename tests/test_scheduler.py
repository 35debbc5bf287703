import pytest

from game.scheduler import Scheduler


@pytest.fixture
def scheduler():
    return Scheduler()


def test_call_later_fires_once(scheduler):
    calls = []
    scheduler.call_later(100, lambda: calls.append(scheduler.now))

    assert scheduler.advance(99) == 0
    assert scheduler.advance(1) == 1
    assert scheduler.advance(1000) == 0
    assert calls == [100]


def test_call_every_repeats_at_due_times(scheduler):
    calls = []
    scheduler.call_every(110, lambda: calls.append(scheduler.now))

    scheduler.advance(350)
    assert calls == [110, 220, 330]
    assert scheduler.now == 350


def test_call_every_rejects_non_positive(scheduler):
    with pytest.raises(ValueError):
        scheduler.call_every(0, lambda: None)


def test_equal_due_times_fire_in_order(scheduler):
    order = []
    scheduler.call_later(50, lambda: order.append('a'))
    scheduler.call_later(50, lambda: order.append('b'))
    scheduler.call_later(10, lambda: order.append('c'))

    scheduler.advance(50)
    assert order == ['c', 'a', 'b']


def test_cancel(scheduler):
    calls = []
    timer = scheduler.call_every(10, lambda: calls.append(1))
    scheduler.advance(25)
    scheduler.cancel(timer)
    scheduler.advance(100)

    assert len(calls) == 2
    scheduler.cancel(None)


def test_callback_can_cancel_itself(scheduler):
    calls = []

    def tick():
        calls.append(scheduler.now)
        if len(calls) == 2:
            scheduler.cancel(timer)

    timer = scheduler.call_every(10, tick)
    scheduler.advance(100)
    assert calls == [10, 20]


def test_callback_can_cancel_all(scheduler):
    calls = []

    def reset():
        calls.append('reset')
        scheduler.cancel_all()

    scheduler.call_later(10, reset)
    scheduler.call_later(20, lambda: calls.append('stale'))
    scheduler.advance(100)

    assert calls == ['reset']
    assert scheduler.pending() == []


def test_pending_lists_live_timers(scheduler):
    a = scheduler.call_later(30, lambda: None, name='a')
    scheduler.call_later(10, lambda: None, name='b')
    a.cancel()

    assert [t.name for t in scheduler.pending()] == ['b']
