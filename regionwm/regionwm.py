"""
Region Window Manager

Wires a host window manager to the region layout engine.
"""

from __future__ import annotations
import os
import time
from typing import Optional

from pubsub import pub

from .binding_manager import BindingManager
from .config import RegionWMConfig, parse_direction
from .drag_manager import DragManager
from .focus_manager import FocusManager
from .host import Host
from .layout_manager import LayoutManager
from .persistence import LayoutStore
from .protocol import Action, HostEvent
from .state import LayoutState


class RegionWM:
    """
    Region Window Manager

    Tiles the windows of a host window manager into configured regions.
    """

    def __init__(self, host: Host, config: Optional[RegionWMConfig] = None):
        """Initialize the window manager.

        Architecture:
        1. Create event bus (Pypubsub)
        2. Create components - they self-subscribe to events
        3. Set up host callbacks to bridge host events into bus
        4. Start
        """
        self.host = host
        self.config = config or RegionWMConfig()

        # Setup debug event logging if enabled
        if os.getenv("REGIONWM_DEBUG"):
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        # Shared world state
        self.state = LayoutState(host, self.config)

        # Slot storage (self-subscribes to slot commands)
        self.store = LayoutStore(self.state)

        # Display/region graph (self-subscribes to window and directional events)
        self.layout_manager = LayoutManager(self.state, self.store)

        # Click focus reconciliation (self-subscribes)
        self.focus_manager = FocusManager(self.state)

        # Drag and drop (self-subscribes)
        self.drag_manager = DragManager(self.state, self.layout_manager)

        # Key bindings (publishes command events)
        self.binding_manager = BindingManager(host, self.config)

        # Bridge host events into the event bus
        self._setup_callbacks()

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def _setup_callbacks(self):
        """Bridge host events into the event bus.

        Components subscribe to the bus topics; none of them register
        callbacks with the host directly.
        """
        from . import topics

        # Window lifecycle events
        self.host.on(
            HostEvent.WINDOW_OPENED,
            lambda w: pub.sendMessage(topics.WINDOW_OPENED, window=w),
        )
        self.host.on(
            HostEvent.WINDOW_CLOSED,
            lambda w: pub.sendMessage(topics.WINDOW_CLOSED, window=w),
        )

        # Pointer events
        self.host.on(
            HostEvent.MOUSE_LEFT_CLICK,
            lambda p: pub.sendMessage(topics.MOUSE_LEFT_CLICK, point=p),
        )
        self.host.on(
            HostEvent.MOUSE_LEFT_DRAG,
            lambda p: pub.sendMessage(topics.MOUSE_LEFT_DRAG, point=p),
        )

    def _setup_bindings(self):
        """Set up all bindings (delegates to BindingManager)."""
        self.binding_manager.setup_default_bindings()

        # Set up custom bindings if configured
        if self.config.custom_keybindings:
            self.binding_manager.setup_custom_bindings(self.config.custom_keybindings)

    def start(self):
        """Register bindings and lay out the existing windows."""
        self._setup_bindings()
        self.layout_manager.init()

        print("Region Window Manager started")
        print(f"  Displays: {', '.join(self.state.displays) or 'none'}")
        print(f"  Windows: {self.state.tracked_window_count()}")
        if self.state.current_store_slot:
            print(f"  Layout slot: {self.state.current_store_slot}")

    def stop(self):
        """Release bindings and pending timers."""
        self.drag_manager.debouncer.cancel()
        self.binding_manager.cleanup()

    def find_window(self, window):
        return self.layout_manager.find_window(window)

    def find_region_position(self, point):
        return self.layout_manager.find_region_position(point)

    def do(self, action, direction):
        """Run a directional action (by enum or name) on the focused window."""
        if not isinstance(action, Action):
            action = Action(str(action).lower())
        self.layout_manager.do_action(action, parse_direction(direction))
