"""
Binding Manager

Handles global hotkeys for directional actions, layout slots and modes.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List

from .protocol import Direction, Modifiers

if TYPE_CHECKING:
    from .config import RegionWMConfig
    from .host import Host, KeyHandle


# Vim-style keys -> direction
HJKL = {
    "h": Direction.WEST,
    "j": Direction.SOUTH,
    "k": Direction.NORTH,
    "l": Direction.EAST,
}

# Binding groups suspended outside the normal mode
NAVIGATION_GROUPS = ("focus", "move", "swap")


class BindingMode(Enum):
    """Which set of bindings is active."""

    NORMAL = "normal"
    RESIZE = "resize"


@dataclass
class KeyBinding:
    """Represents a keyboard binding."""

    key: str
    modifiers: Modifiers
    event_topic: str  # Event topic to publish (e.g., 'cmd.move')
    event_data: dict  # Additional event parameters
    handle: "KeyHandle"


class BindingManager:
    """Manages keyboard bindings.

    Every binding publishes a command event; the components subscribed to
    that topic do the work.

    Responsibilities:
    - Register default and custom bindings with the host
    - CMD_TOGGLE_RESIZE_MODE / CMD_NORMAL_MODE: Switch binding modes
    """

    def __init__(self, host: "Host", config: "RegionWMConfig"):
        """Initialize binding manager.

        Args:
            host: Host used to register hotkeys
            config: Configuration with save slots and custom bindings
        """
        self.host = host
        self.config = config
        self.bindings: Dict[str, List[KeyBinding]] = {}  # group -> bindings
        self.mode = BindingMode.NORMAL
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to mode command events."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_toggle_resize_mode, topics.CMD_TOGGLE_RESIZE_MODE)
        pub.subscribe(self._on_normal_mode, topics.CMD_NORMAL_MODE)

    def bind_key(
        self,
        key: str,
        modifiers: Modifiers,
        event_topic: str,
        group: str = "custom",
        **event_data,
    ) -> KeyBinding:
        """Create and enable a key binding that publishes a command event.

        Args:
            key: Key name as understood by the host
            modifiers: Modifier keys
            event_topic: The command event topic to publish (e.g., 'cmd.move')
            group: Binding group, used to enable/disable bindings together
            **event_data: Optional data to pass with the event (e.g., slot="3")
        """
        from pubsub import pub

        def publish_command():
            pub.sendMessage(event_topic, **event_data)

        handle = self.host.bind_key(key, modifiers, publish_command)
        binding = KeyBinding(key, modifiers, event_topic, event_data, handle)
        self.bindings.setdefault(group, []).append(binding)
        return binding

    def setup_default_bindings(self):
        """Set up the default bindings."""
        from . import topics

        # Directional actions
        for key, direction in HJKL.items():
            self.bind_key(
                key, Modifiers.CTRL | Modifiers.CMD, topics.CMD_MOVE, "move",
                direction=direction,
            )
            self.bind_key(
                key, Modifiers.CTRL | Modifiers.ALT, topics.CMD_FOCUS, "focus",
                direction=direction,
            )
            self.bind_key(
                key, Modifiers.SHIFT | Modifiers.CMD, topics.CMD_SWAP, "swap",
                direction=direction,
            )

        # Layout slots
        for slot in self.config.save_slots:
            self.bind_key(
                slot, Modifiers.ALT | Modifiers.CTRL | Modifiers.CMD,
                topics.CMD_CLEAR_SLOT, "slots", slot=slot,
            )
            self.bind_key(
                slot, Modifiers.ALT | Modifiers.CTRL, topics.CMD_SAVE_SLOT, "slots",
                slot=slot,
            )
            self.bind_key(
                slot, Modifiers.CMD | Modifiers.CTRL, topics.CMD_RESTORE_SLOT, "slots",
                slot=slot,
            )

        # No confirmation, no undo
        self.bind_key("c", Modifiers.CMD | Modifiers.CTRL, topics.CMD_CLEAR_ALL_SLOTS, "slots")

        # Modes
        self.bind_key("escape", Modifiers.CMD, topics.CMD_NORMAL_MODE, "modes")
        self.bind_key("r", Modifiers.CMD | Modifiers.CTRL, topics.CMD_TOGGLE_RESIZE_MODE, "modes")

    def setup_custom_bindings(self, custom_bindings: list):
        """Set up user-defined custom keybindings.

        Args:
            custom_bindings: List of (key, modifiers, event_topic, event_data) tuples
        """
        if not custom_bindings:
            return

        for binding in custom_bindings:
            key, modifiers, event_topic, event_data = binding
            self.bind_key(key, modifiers, event_topic, **event_data)

    def enable_group(self, group: str):
        for binding in self.bindings.get(group, []):
            binding.handle.enable()

    def disable_group(self, group: str):
        for binding in self.bindings.get(group, []):
            binding.handle.disable()

    def set_mode(self, mode: BindingMode):
        """Switch binding mode and publish the change."""
        from pubsub import pub
        from . import topics

        for group in NAVIGATION_GROUPS:
            if mode == BindingMode.NORMAL:
                self.enable_group(group)
            else:
                self.disable_group(group)

        self.mode = mode
        pub.sendMessage(topics.MODE_CHANGED, mode=mode)

    def cleanup(self):
        """Disable every binding."""
        for group in self.bindings:
            self.disable_group(group)
        self.bindings = {}

    def _on_toggle_resize_mode(self):
        """Handle CMD_TOGGLE_RESIZE_MODE command."""
        if self.mode == BindingMode.NORMAL:
            self.set_mode(BindingMode.RESIZE)
        else:
            self.set_mode(BindingMode.NORMAL)

    def _on_normal_mode(self):
        """Handle CMD_NORMAL_MODE command."""
        self.set_mode(BindingMode.NORMAL)
