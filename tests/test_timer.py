import pytest

from backend.timer import ElapsedTimer, TimerState, format_elapsed, round_minutes


@pytest.fixture
def timer(fake_clock, scheduler):
    return ElapsedTimer(clock=fake_clock, scheduler=scheduler)


def test_initial_state_is_paused(timer):
    assert timer.state() == TimerState(False, None, 0.0)
    assert timer.read_minutes() == 0


def test_read_minutes_right_after_start_is_zero(timer):
    timer.start()
    assert timer.is_running
    assert timer.read_minutes() == 0


@pytest.mark.parametrize("seconds, minutes", [(65, 1), (89.999, 1), (90, 2), (29.9, 0), (30, 1)])
def test_pause_rounds_half_up(timer, fake_clock, seconds, minutes):
    timer.start()
    fake_clock.advance(seconds)
    timer.pause()
    assert timer.read_minutes() == minutes


def test_running_reading_does_not_change_state(timer, fake_clock):
    timer.start()
    fake_clock.advance(150)
    before = timer.state()
    assert timer.read_minutes() == 3
    assert timer.state() == before


def test_resume_continues_from_accumulated(timer, fake_clock):
    timer.start()
    fake_clock.advance(60)
    timer.pause()
    fake_clock.advance(600)
    timer.start()
    fake_clock.advance(60)
    assert timer.elapsed_ms() == 120_000
    assert timer.read_minutes() == 2


def test_start_twice_is_noop(timer, fake_clock, scheduler):
    timer.start()
    fake_clock.advance(10)
    state = timer.state()
    timer.start()
    assert timer.state() == state
    assert len(scheduler.events) == 1


def test_pause_twice_equals_once(timer, fake_clock):
    timer.start()
    fake_clock.advance(42)
    timer.pause()
    once = timer.state()
    fake_clock.advance(100)
    timer.pause()
    assert timer.state() == once


def test_reset_twice_equals_once(timer, fake_clock):
    timer.start()
    fake_clock.advance(42)
    timer.reset()
    once = timer.state()
    timer.reset()
    assert timer.state() == once == TimerState(False, None, 0.0)


def test_pause_when_never_started_is_noop(timer, scheduler):
    timer.pause()
    assert timer.state() == TimerState(False, None, 0.0)
    assert scheduler.events == []


@pytest.mark.parametrize("stop", ["pause", "reset", "dispose"])
def test_no_refresh_survives_stop(timer, scheduler, stop):
    timer.start()
    assert len(scheduler.active) == 1
    getattr(timer, stop)()
    assert scheduler.active == []


def test_restart_never_leaves_two_refreshes(timer, fake_clock, scheduler):
    for _ in range(3):
        timer.start()
        fake_clock.advance(1)
        timer.pause()
    timer.start()
    assert len(scheduler.active) == 1


def test_tick_reports_elapsed(fake_clock, scheduler):
    seen = []
    timer = ElapsedTimer(seen.append, clock=fake_clock, scheduler=scheduler)
    timer.start()
    fake_clock.advance(3)
    scheduler.tick()
    assert seen == [3000]
    assert scheduler.events[0].interval == 1.0


def test_dispose_keeps_elapsed_and_ensure_refresh_resumes(timer, fake_clock, scheduler):
    timer.start()
    fake_clock.advance(30)
    timer.dispose()
    assert timer.is_running
    assert timer.elapsed_ms() == 30_000
    timer.ensure_refresh()
    timer.ensure_refresh()
    assert len(scheduler.active) == 1


def test_ensure_refresh_ignored_while_paused(timer, scheduler):
    timer.ensure_refresh()
    assert scheduler.events == []


def test_round_minutes():
    assert round_minutes(0) == 0
    assert round_minutes(65_000) == 1
    assert round_minutes(90_000) == 2
    assert round_minutes(-1) == 0


@pytest.mark.parametrize(
    "ms, text",
    [(0, "00:00"), (999, "00:00"), (65_000, "01:05"), (3_599_000, "59:59"), (3_723_000, "1:02:03")],
)
def test_format_elapsed(ms, text):
    assert format_elapsed(ms) == text
