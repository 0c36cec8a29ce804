"""
Shared pytest fixtures for regionwm tests.
"""

import pytest
from pubsub import pub

from regionwm.config import RegionWMConfig
from regionwm.host import (
    Host,
    HostScreen,
    HostWindow,
    HostWindowError,
    KeyHandle,
    TimerHandle,
)
from regionwm.protocol import Point, Rect
from regionwm.regionwm import RegionWM


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a real host")


@pytest.fixture(autouse=True)
def reset_bus():
    """Drop listeners left behind by earlier tests."""
    pub.unsubAll()
    yield
    pub.unsubAll()


class FakeTimer(TimerHandle):
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.callback()


class FakeKeyHandle(KeyHandle):
    def __init__(self, key, modifiers, callback):
        self.key = key
        self.modifiers = modifiers
        self.callback = callback
        self.enabled = True

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False

    def is_enabled(self):
        return self.enabled


class FakeScreen(HostScreen):
    def __init__(self, screen_id, frame):
        self._id = screen_id
        self.frame = frame

    @property
    def id(self):
        return self._id

    def visible_frame(self):
        return self.frame


class FakeWindow(HostWindow):
    """Window that records every frame pushed to it."""

    def __init__(self, host, window_id, frame, title=None, app="app", normal=True):
        self.host = host
        self._id = window_id
        self._frame = frame
        self._title = title or f"window {window_id}"
        self._app = app
        self.normal = normal
        self.valid = True
        self.frames = []
        self.focus_requests = 0

    def __repr__(self):
        return f"FakeWindow({self._id})"

    @property
    def id(self):
        return self._id

    def title(self):
        return self._title

    def app_name(self):
        return self._app

    def frame(self):
        return self._frame

    def top_left(self):
        return Point(self._frame.x, self._frame.y)

    def set_frame(self, frame):
        if not self.valid:
            raise HostWindowError(f"window {self._id} is closed")
        self._frame = frame
        self.frames.append(frame)

    def focus(self):
        if not self.valid:
            raise HostWindowError(f"window {self._id} is closed")
        self.focus_requests += 1
        # Simulates the host handing focus elsewhere
        if self.host.focus_denials > 0:
            self.host.focus_denials -= 1
            return
        self.host.focused = self

    def is_normal(self):
        return self.normal

    def is_valid(self):
        return self.valid


class FakeHost(Host):
    """In-memory host with manual timers and key presses."""

    def __init__(self, screens=None):
        self._screens = list(screens or [])
        self._windows = []
        self._next_id = 1
        self.focused = None
        self.focus_denials = 0
        self.mouse = None
        self.key_handles = []
        self.timers = []
        self.handlers = {}
        self.storage = {}

    # Test helpers

    def add_screen(self, screen_id, frame):
        screen = FakeScreen(screen_id, frame)
        self._screens.append(screen)
        return screen

    def add_window(self, frame=Rect(0, 0, 100, 100), **kwargs):
        window = FakeWindow(self, self._next_id, frame, **kwargs)
        self._next_id += 1
        self._windows.append(window)
        return window

    def window(self, window_id):
        for window in self._windows:
            if window.id == window_id:
                return window
        raise KeyError(window_id)

    def open_window(self, **kwargs):
        window = self.add_window(**kwargs)
        self.emit_event("WINDOW_OPENED", window)
        return window

    def close_window(self, window):
        window.valid = False
        self._windows.remove(window)
        if self.focused is window:
            self.focused = None
        self.emit_event("WINDOW_CLOSED", window)

    def emit_event(self, name, arg):
        from regionwm.protocol import HostEvent

        for callback in self.handlers.get(HostEvent[name], []):
            callback(arg)

    def press(self, key, modifiers):
        for handle in self.key_handles:
            if handle.key == key and handle.modifiers == modifiers and handle.enabled:
                handle.callback()

    def run_timers(self):
        timers, self.timers = self.timers, []
        for timer in timers:
            timer.fire()

    def pending_timers(self):
        return [t for t in self.timers if not t.cancelled and not t.fired]

    # Host interface

    def screens(self):
        return list(self._screens)

    def windows(self):
        return list(self._windows)

    def focused_window(self):
        return self.focused

    def move_mouse(self, point):
        self.mouse = point

    def bind_key(self, key, modifiers, callback):
        handle = FakeKeyHandle(key, modifiers, callback)
        self.key_handles.append(handle)
        return handle

    def set_timeout(self, delay, callback):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    def on(self, event, callback):
        self.handlers.setdefault(event, []).append(callback)

    def storage_get(self, key):
        return self.storage.get(key)

    def storage_set(self, key, value):
        self.storage[key] = value

    def storage_remove(self, key):
        self.storage.pop(key, None)


@pytest.fixture
def host():
    """Host with a single 1000x500 display called "main"."""
    return FakeHost([FakeScreen("main", Rect(0, 0, 1000, 500))])


@pytest.fixture
def pair_regions():
    """Two side-by-side regions linked east/west."""
    return {
        "main": {
            "left": {"width": 0.5, "adjacent": {"east": ["main", "right"]}},
            "right": {
                "start_pt": [0.5, 0],
                "width": 0.5,
                "adjacent": {"west": ["main", "left"]},
            },
        }
    }


@pytest.fixture
def solo_regions():
    """A single full-screen region without neighbours."""
    return {"main": {"solo": {}}}


@pytest.fixture
def row_regions():
    """Three regions in a row: a <-> b <-> c."""
    third = 1 / 3
    return {
        "main": {
            "a": {"width": third, "adjacent": {"east": ["main", "b"]}},
            "b": {
                "start_pt": [third, 0],
                "width": third,
                "adjacent": {"west": ["main", "a"], "east": ["main", "c"]},
            },
            "c": {
                "start_pt": [2 * third, 0],
                "width": third,
                "adjacent": {"west": ["main", "b"]},
            },
        }
    }


@pytest.fixture
def make_wm(host, pair_regions):
    """Factory fixture: RegionWM on the fake host with ``windows`` open windows.

    The bus only holds weak references to listeners, so every instance is
    kept alive until the test ends.
    """
    created = []

    def _make_wm(regions=None, windows=0, start=True, **options):
        for _ in range(windows):
            host.add_window()
        config = RegionWMConfig(
            regions=pair_regions if regions is None else regions, **options
        )
        wm = RegionWM(host, config)
        created.append(wm)
        if start:
            wm.start()
        return wm

    yield _make_wm
    created.clear()
