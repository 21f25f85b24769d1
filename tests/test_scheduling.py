from backing_layout.history import ManualScheduler


def test_manual_scheduler_fires_due_callbacks_in_order():
    now = [0.0]
    scheduler = ManualScheduler(lambda: now[0])
    fired = []

    scheduler.schedule(0.3, lambda: fired.append("late"))
    scheduler.schedule(0.1, lambda: fired.append("early"))
    scheduler.schedule(0.1, lambda: fired.append("early-second"))

    now[0] = 0.2
    assert scheduler.run_due() == 2
    assert fired == ["early", "early-second"]
    assert scheduler.pending == 1

    assert scheduler.run_due(now=1.0) == 1
    assert fired == ["early", "early-second", "late"]
    assert scheduler.pending == 0


def test_cancelled_callbacks_never_run():
    now = [0.0]
    scheduler = ManualScheduler(lambda: now[0])
    fired = []

    handle = scheduler.schedule(0.1, lambda: fired.append("cancelled"))
    handle.cancel()

    now[0] = 5.0
    assert scheduler.run_due() == 0
    assert fired == []


def test_cancelled_handles_do_not_accumulate():
    scheduler = ManualScheduler(lambda: 0.0)

    for _ in range(100):
        scheduler.schedule(0.5, lambda: None).cancel()
        assert len(scheduler._queue) <= 1

    assert scheduler.pending == 0
    assert scheduler._queue == []
