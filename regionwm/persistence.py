"""
Layout Persistence

Saves and restores region membership in the host's key/value storage.
"""

from __future__ import annotations
import json
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import LayoutState


class LayoutStore:
    """Stores layout snapshots in numbered slots.

    This component subscribes to the slot command events.

    Responsibilities:
    - CMD_SAVE_SLOT: Save the current layout into a slot
    - CMD_CLEAR_SLOT: Delete a slot
    - CMD_CLEAR_ALL_SLOTS: Delete every slot
    """

    def __init__(self, state: "LayoutState"):
        """Initialize layout store.

        Args:
            state: Layout state to snapshot
        """
        self.state = state
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to slot command events."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_save_slot, topics.CMD_SAVE_SLOT)
        pub.subscribe(self._on_clear_slot, topics.CMD_CLEAR_SLOT)
        pub.subscribe(self._on_clear_all_slots, topics.CMD_CLEAR_ALL_SLOTS)

    @property
    def host(self):
        return self.state.host

    def save(self, slot: str):
        """Save the current layout.

        Saving to any slot other than the default one makes it the current
        slot, so the next autosave and startup restore follow it.
        """
        if slot != self.state.config.default_store_slot:
            self.state.current_store_slot = slot
        self.host.storage_set(slot, json.dumps(self.state.to_dict()))

    def load(self, slot: Optional[str]) -> Optional[dict]:
        """Load a layout snapshot, or None if the slot is empty or unreadable."""
        if slot is None:
            return None
        raw = self.host.storage_get(slot)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError as e:
            print(f"Warning: ignoring unreadable layout in slot {slot}: {e}")
            return None
        if not isinstance(data, dict):
            print(f"Warning: ignoring malformed layout in slot {slot}")
            return None
        return data

    def delete(self, slot: str):
        self.host.storage_remove(slot)
        if self.state.current_store_slot == slot:
            self.state.current_store_slot = None

    def clear_all(self):
        """Delete every configured slot."""
        print("Clearing all layout slots")
        for slot in self.state.config.save_slots:
            self.delete(slot)

    def autosave(self):
        """Save after a window opened or closed."""
        config = self.state.config
        current = self.state.current_store_slot

        if config.default_auto_save:
            self.save(config.default_store_slot)

        if config.current_auto_save and current and current != config.default_store_slot:
            self.save(current)

    def _on_save_slot(self, slot: str):
        """Handle CMD_SAVE_SLOT command."""
        self.save(slot)

    def _on_clear_slot(self, slot: str):
        """Handle CMD_CLEAR_SLOT command."""
        self.delete(slot)

    def _on_clear_all_slots(self):
        """Handle CMD_CLEAR_ALL_SLOTS command."""
        self.clear_all()
