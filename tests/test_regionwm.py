"""
Unit tests for the RegionWM entry point.
"""

import pytest
from pubsub import pub

from regionwm import topics
from regionwm.protocol import Action, Direction, HostEvent, RegionKey


@pytest.mark.unit
class TestRegionWM:
    """Test wiring of host events and components."""

    def test_host_events_are_bridged(self, make_wm, host):
        make_wm(start=False)

        assert set(host.handlers) == set(HostEvent)

    def test_window_opened_reaches_bus(self, make_wm, host):
        make_wm(windows=1)
        received = []

        def on_window_opened(window):
            received.append(window)

        pub.subscribe(on_window_opened, topics.WINDOW_OPENED)
        window = host.open_window()

        assert received == [window]

    def test_start_banner(self, make_wm, capsys):
        make_wm(windows=2)

        out = capsys.readouterr().out
        assert "Region Window Manager started" in out
        assert "Windows: 2" in out

    def test_start_registers_custom_bindings(self, make_wm, host):
        from regionwm.protocol import Modifiers

        wm = make_wm(
            windows=1,
            custom_keybindings=[
                ("s", Modifiers.CMD, topics.CMD_SAVE_SLOT, {"slot": "8"}),
            ],
        )

        host.press("s", Modifiers.CMD)

        assert "8" in host.storage
        assert wm.state.current_store_slot == "8"

    def test_do_accepts_names(self, make_wm, host):
        wm = make_wm(windows=3)
        host.focused = host.window(1)

        wm.do("move", "east")
        wm.do(Action.MOVE, Direction.EAST)

        left = wm.state.get_region(RegionKey("main", "left"))
        assert [w.id for w in left.wrapped_windows] == [2]

    def test_debug_logger(self, make_wm, host, monkeypatch, capsys):
        monkeypatch.setenv("REGIONWM_DEBUG", "1")
        wm = make_wm(windows=1)

        host.open_window()
        pub.unsubscribe(wm.debug_event_logger, pub.ALL_TOPICS)

        assert "EVENT: window.opened" in capsys.readouterr().out

    def test_stop_releases_bindings(self, make_wm, host):
        wm = make_wm(windows=1)

        wm.stop()

        assert not any(handle.is_enabled() for handle in host.key_handles)
