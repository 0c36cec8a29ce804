"""
Event Topics for the regionwm Window Manager

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Host events are bridged onto these topics by RegionWM; components subscribe
to the topics they care about instead of talking to the host directly.
"""

# Window lifecycle events
WINDOW_OPENED = "window.opened"
"""Published when the host opens a window. Params: window (HostWindow)"""

WINDOW_CLOSED = "window.closed"
"""Published when the host closes a window. Params: window (HostWindow)"""

# Pointer (mouse) events
MOUSE_LEFT_CLICK = "mouse.left_click"
"""Published on left mouse button release. Params: point (Point)"""

MOUSE_LEFT_DRAG = "mouse.left_drag"
"""Published for every left-button drag sample. Params: point (Point)"""

# Drag events
DRAG_STARTED = "drag.started"
"""Published on the first drag sample of a burst. Params: point (Point)"""

DRAG_DROPPED = "drag.dropped"
"""Published after a drag settled and the window was placed. Params: window, region"""

# Focus state notifications
FOCUS_CHANGED = "focus.changed"
"""Published when the tracked focused window changes. Params: window (WrappedWindow or None)"""

# Layout lifecycle
LAYOUT_INITIALIZED = "layout.initialized"
"""Published after the display/region graph has been (re)built. Params: restored (bool)"""

# Binding mode
MODE_CHANGED = "mode.changed"
"""Published when the binding mode changes. Params: mode (BindingMode)"""

# Command events (imperative - tell components to do something)
# These are triggered by user input (keybinds)

# Directional commands
CMD_FOCUS = "cmd.focus"
"""Command: Focus the window in a direction. Requires direction parameter."""

CMD_MOVE = "cmd.move"
"""Command: Move the focused window in a direction. Requires direction parameter."""

CMD_SWAP = "cmd.swap"
"""Command: Swap the focused window in a direction. Requires direction parameter."""

# Layout storage commands
CMD_SAVE_SLOT = "cmd.save_slot"
"""Command: Save the layout into a storage slot. Requires slot parameter."""

CMD_RESTORE_SLOT = "cmd.restore_slot"
"""Command: Rebuild the layout from a storage slot. Requires slot parameter."""

CMD_CLEAR_SLOT = "cmd.clear_slot"
"""Command: Delete a storage slot. Requires slot parameter."""

CMD_CLEAR_ALL_SLOTS = "cmd.clear_all_slots"
"""Command: Delete every storage slot."""

# Mode commands
CMD_TOGGLE_RESIZE_MODE = "cmd.toggle_resize_mode"
"""Command: Toggle between normal and resize binding modes."""

CMD_NORMAL_MODE = "cmd.normal_mode"
"""Command: Return to the normal binding mode."""
