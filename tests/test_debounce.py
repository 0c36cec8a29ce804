"""
Unit tests for Debouncer.
"""

import pytest

from regionwm.debounce import Debouncer


@pytest.mark.unit
class TestDebouncer:
    """Test coalescing bursts of calls."""

    @pytest.fixture
    def calls(self):
        return {"callback": [], "start": []}

    @pytest.fixture
    def debouncer(self, host, calls):
        return Debouncer(
            lambda value: calls["callback"].append(value),
            0.25,
            host.set_timeout,
            on_burst_start=lambda value: calls["start"].append(value),
        )

    def test_callback_waits_for_timer(self, host, debouncer, calls):
        debouncer("a")

        assert calls["callback"] == []
        assert debouncer.pending

        host.run_timers()

        assert calls["callback"] == ["a"]
        assert not debouncer.pending

    def test_burst_runs_once_with_last_arguments(self, host, debouncer, calls):
        debouncer("a")
        debouncer("b")
        debouncer("c")
        host.run_timers()

        assert calls["start"] == ["a"]
        assert calls["callback"] == ["c"]

    def test_each_call_restarts_timer(self, host, debouncer):
        debouncer("a")
        debouncer("b")

        assert [t.cancelled for t in host.timers] == [True, False]
        assert all(t.delay == 0.25 for t in host.timers)

    def test_superseded_timer_is_ignored(self, host, debouncer, calls):
        debouncer("a")
        stale = host.timers[0]
        debouncer("b")

        # Host fires the cancelled timer anyway
        stale.callback()

        assert calls["callback"] == []
        assert debouncer.pending

    def test_cancel(self, host, debouncer, calls):
        debouncer("a")
        debouncer.cancel()
        host.run_timers()

        assert calls["callback"] == []
        assert not debouncer.pending

    def test_new_burst_after_quiet_period(self, host, debouncer, calls):
        debouncer("a")
        host.run_timers()
        debouncer("b")
        host.run_timers()

        assert calls["start"] == ["a", "b"]
        assert calls["callback"] == ["a", "b"]

    def test_without_burst_start_callback(self, host):
        fired = []
        debouncer = Debouncer(fired.append, 1.0, host.set_timeout)

        debouncer(1)
        debouncer(2)
        host.run_timers()

        assert fired == [2]
