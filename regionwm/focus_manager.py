"""
Focus Manager

Keeps window growth in step with focus changes made with the mouse.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol import Point
    from .state import LayoutState


class FocusManager:
    """Reconciles focus after mouse clicks.

    The host does not report focus changes for every window, so after each
    click the focused window is compared with the one we last focused.

    Responsibilities:
    - MOUSE_LEFT_CLICK: Shrink the previously focused window, grow the new one
    """

    def __init__(self, state: "LayoutState"):
        """Initialize focus manager.

        Args:
            state: Shared layout state holding the focused window pointer
        """
        self.state = state
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events FocusManager cares about."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_mouse_left_click, topics.MOUSE_LEFT_CLICK)

    def sync_focus(self):
        """Apply a host-side focus change to the tracked windows."""
        previous = self.state.focused
        current = self.state.find_window(self.state.host.focused_window())

        if current is None:
            return
        if previous is None:
            # Nothing tracked as focused, e.g. after the focused window closed
            current.wrapped_window.focus()
            return
        if previous.wrapped_window.id == current.wrapped_window.id:
            return

        previous.wrapped_window.unfocus()
        current.wrapped_window.focus()

    def _on_mouse_left_click(self, point: "Point"):
        """Handle MOUSE_LEFT_CLICK event."""
        self.sync_focus()
