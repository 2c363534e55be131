import pytest

from blockmaze.clock import FrameClock, Timer


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now


def test_frame_clock_delta_is_zero_before_refresh():
    clock = FrameClock(FakeClock(5.0))
    assert clock.delta_time() == 0.0


def test_frame_clock_measures_time_between_refreshes():
    fake = FakeClock(1.0)
    clock = FrameClock(fake)
    fake.advance(0.25)
    clock.refresh()
    assert clock.delta_time() == pytest.approx(0.25)
    fake.advance(0.5)
    clock.refresh()
    assert clock.delta_time() == pytest.approx(0.5)


def test_frame_clock_reset_discards_earlier_time():
    fake = FakeClock()
    clock = FrameClock(fake)
    fake.advance(10.0)
    clock.reset()
    fake.advance(0.125)
    clock.refresh()
    assert clock.delta_time() == pytest.approx(0.125)


def test_frame_clock_delta_is_stable_between_refreshes():
    fake = FakeClock()
    clock = FrameClock(fake)
    fake.advance(2.0)
    clock.refresh()
    fake.advance(3.0)
    assert clock.delta_time() == pytest.approx(2.0)


def test_frame_clock_with_real_clock_is_non_negative():
    clock = FrameClock()
    clock.refresh()
    assert clock.delta_time() >= 0.0


def test_timer_elapsed_follows_clock():
    fake = FakeClock(100.0)
    timer = Timer(fake)
    fake.advance(1.5)
    assert timer.elapsed() == pytest.approx(1.5)


def test_timer_restart_starts_over():
    fake = FakeClock()
    timer = Timer(fake)
    fake.advance(7.0)
    timer.restart()
    assert timer.elapsed() == 0.0
    fake.advance(0.75)
    assert timer.elapsed() == pytest.approx(0.75)


def test_timer_with_real_clock_grows_monotonically():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0.0 <= first <= second