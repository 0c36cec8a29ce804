"""
Wrapped Window

Adapter around a host window that owns the box its region assigned to it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .host import HostWindowError
from .protocol import Point, Rect

if TYPE_CHECKING:
    from .host import HostWindow
    from .state import LayoutState


class WrappedWindow:
    """A host window tracked by the layout engine.

    The box is where the window lives inside its region. What is actually
    applied to the host is the box with margins taken off, or grown slightly
    over the margins while the window has focus.
    """

    def __init__(self, state: "LayoutState", window: "HostWindow", box: Rect = Rect()):
        self.state = state
        self.window = window
        self.id = window.id
        self.box = box

    def __repr__(self):
        return f"WrappedWindow(id={self.id!r}, box={self.box!r})"

    @property
    def margin(self) -> float:
        return self.state.config.margin

    def focus(self):
        """Focus the window, retrying until the host agrees.

        The host sometimes hands focus to another window right after a focus
        request, so a single request is not enough.
        """
        host = self.state.host
        attempts = 0
        while not self.is_focused():
            if attempts >= self.state.config.focus_retry_limit:
                print(f"Warning: could not focus window {self.id} after {attempts} attempts")
                return
            attempts += 1
            try:
                self.window.focus()
            except HostWindowError as e:
                print(f"Warning: failed to focus window {self.id}: {e}")
                return

        if self.state.config.grow_active_window:
            self.grow()

        self.state.set_focused(self.state.find_window(host.focused_window()))

    def unfocus(self):
        self.shrink()

    def is_focused(self) -> bool:
        focused = self.state.host.focused_window()
        return focused is not None and focused.id == self.id

    def grow(self):
        self.update(self.with_fat())

    def shrink(self):
        self.update(self.with_margin())

    def update(self, frame: Rect):
        """Push a frame to the host. Closed windows are ignored."""
        try:
            self.window.set_frame(frame)
        except HostWindowError as e:
            print(f"Warning: failed to place window {self.id}: {e}")

    def update_box(self, box: Rect):
        """Assign a new box and apply it according to the focus state."""
        self.box = box
        if self.is_focused() and self.state.config.grow_active_window:
            self.grow()
        else:
            self.shrink()

    def with_fat(self) -> Rect:
        """The box grown slightly beyond its region allocation."""
        m = self.margin
        return Rect(
            x=self.box.x - m / 16,
            y=self.box.y - m / 16,
            width=self.box.width + m / 8,
            height=self.box.height + m / 8,
        )

    def with_margin(self) -> Rect:
        m = self.margin
        return Rect(
            x=self.box.x + m / 2,
            y=self.box.y + m / 2,
            width=self.box.width - m,
            height=self.box.height - m,
        )

    def is_valid(self) -> bool:
        return self.window.is_valid()

    def top_left(self) -> Point:
        return self.window.top_left()

    def frame(self) -> Rect:
        return self.window.frame()

    def title(self) -> str:
        return self.window.title()

    def app_name(self) -> str:
        return self.window.app_name()

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title(), "app": self.app_name()}
