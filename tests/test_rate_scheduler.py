# ==============================================
# Tests for RateScheduler
# ==============================================

import pytest

from rule_inference.recognition import DEFAULT_REQUESTS_PER_MINUTE, RateScheduler

from .conftest import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


class TestDelay:

    def test_default_budget(self):
        scheduler = RateScheduler()
        assert scheduler.requests_per_minute == DEFAULT_REQUESTS_PER_MINUTE == 10
        assert scheduler.delay_seconds == 6.0

    def test_configured_budget(self):
        assert RateScheduler(120).delay_seconds == 0.5

    def test_rejects_negative_budget(self):
        with pytest.raises(ValueError):
            RateScheduler(-5)

    def test_zero_budget_is_not_the_default(self):
        with pytest.raises(ValueError):
            RateScheduler(0)


class TestSpacing:

    def test_first_call_is_immediate(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)
        assert scheduler.call(lambda: "ok") == "ok"
        assert clock.sleeps == []

    def test_consecutive_calls_wait_full_delay(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)
        start = clock.now
        for _ in range(4):
            scheduler.call(lambda: None)
        assert clock.sleeps == [6.0, 6.0, 6.0]
        assert clock.now - start >= (4 - 1) * 6.0

    def test_delay_measured_from_call_completion(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)

        def slow_call():
            clock.now += 4.0

        scheduler.call(slow_call)
        scheduler.call(lambda: None)
        # the full delay is still applied after a slow call finishes
        assert clock.sleeps == [6.0]

    def test_time_already_elapsed_counts(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)
        scheduler.call(lambda: None)
        clock.now += 2.5
        scheduler.call(lambda: None)
        assert clock.sleeps == [3.5]

    def test_failed_call_still_marks_slot(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)

        def boom():
            raise RuntimeError("quota")

        with pytest.raises(RuntimeError):
            scheduler.call(boom)
        scheduler.call(lambda: None)
        assert clock.sleeps == [6.0]
        assert scheduler.calls_made == 2

    def test_arguments_forwarded(self, clock):
        scheduler = RateScheduler(10, clock=clock, sleep=clock.sleep)
        assert scheduler.call(lambda a, b=0: a + b, 2, b=3) == 5
