"""
Drag Manager

Moves windows between region slots when they are dragged with the mouse.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .debounce import Debouncer
from .geometry import before_or_after

if TYPE_CHECKING:
    from .layout_manager import LayoutManager
    from .protocol import Point
    from .state import LayoutState


class DragManager:
    """Handles drag-and-drop placement of windows.

    Drag samples arrive in rapid bursts. They are debounced: the first sample
    of a burst marks a drag in progress, and the placement runs once with the
    last sample after the pointer has been quiet for ``drag_debounce`` seconds.

    Responsibilities:
    - MOUSE_LEFT_DRAG: Feed the debouncer
    - MOUSE_LEFT_CLICK: End the drag
    """

    def __init__(self, state: "LayoutState", layout_manager: "LayoutManager"):
        """Initialize drag manager.

        Args:
            state: Shared layout state
            layout_manager: Used for window and region hit lookups
        """
        self.state = state
        self.layout_manager = layout_manager
        self.dragging = False
        self.debouncer = Debouncer(
            self.apply_drag,
            state.config.drag_debounce,
            state.host.set_timeout,
            on_burst_start=self.on_drag_start,
        )
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to pointer events."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_mouse_left_drag, topics.MOUSE_LEFT_DRAG)
        pub.subscribe(self._on_mouse_left_click, topics.MOUSE_LEFT_CLICK)

    def on_drag_sample(self, point: "Point"):
        """Record one drag sample."""
        self.debouncer(point)

    def on_drag_start(self, point: "Point"):
        """First sample of a burst."""
        from pubsub import pub
        from . import topics

        self.dragging = True
        pub.sendMessage(topics.DRAG_STARTED, point=point)

    def apply_drag(self, point: "Point"):
        """Place the focused window at the region slot under ``point``.

        Within the same region the window moves one slot towards the target.
        Across regions it is inserted before or after the target slot,
        depending on which half of the slot the pointer is in.
        """
        from pubsub import pub
        from . import topics

        found = self.layout_manager.find_window(self.state.host.focused_window())
        if not found:
            return
        position = self.layout_manager.find_region_position(point)
        if position is None:
            return

        wrapped_window, cur_region = found
        next_region = position.region
        current_index = cur_region.position_index[wrapped_window.id]

        if cur_region is next_region:
            if current_index == position.index:
                return
            index_direction = -1 if current_index > position.index else 1
            cur_region.swap_neighbor(current_index, index_direction)
        else:
            placement = before_or_after(point, position.box, next_region.is_vertical)
            cur_region.remove_window(wrapped_window)
            if placement == "After":
                next_region.add_window_after(wrapped_window, position.index)
            else:
                next_region.add_window_before(wrapped_window, position.index)
            cur_region.reconcile_windows()
            next_region.reconcile_windows()

        pub.sendMessage(topics.DRAG_DROPPED, window=wrapped_window, region=next_region)

    def end_drag(self):
        self.dragging = False

    def _on_mouse_left_drag(self, point: "Point"):
        """Handle MOUSE_LEFT_DRAG event."""
        self.on_drag_sample(point)

    def _on_mouse_left_click(self, point: "Point"):
        """Handle MOUSE_LEFT_CLICK event."""
        self.end_drag()
