"""
Layout State

The single world-state object shared by displays, regions and windows.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional

from .protocol import RegionKey

if TYPE_CHECKING:
    from .config import RegionWMConfig
    from .display import Display
    from .host import Host
    from .region import Region
    from .wrapped_window import WrappedWindow


class FoundWindow(NamedTuple):
    """A tracked window together with the region that owns it."""

    wrapped_window: "WrappedWindow"
    region: "Region"


class LayoutState:
    """Displays, the window -> region index and the focused window.

    Regions are the only writers of ``region_map``. The LayoutManager is the
    only component that rebuilds the display graph (see ``reset``).
    """

    def __init__(self, host: "Host", config: "RegionWMConfig"):
        self.host = host
        self.config = config
        self.displays: Dict[str, "Display"] = {}  # display_id -> Display
        self.region_map: Dict[int, RegionKey] = {}  # window_id -> region
        self.focused: Optional[FoundWindow] = None
        self.current_store_slot: Optional[str] = None

    def reset(self):
        """Forget all displays, regions and window assignments."""
        self.displays = {}
        self.region_map = {}
        self.focused = None

    def get_region(self, key: Optional[RegionKey]) -> Optional["Region"]:
        """Resolve a region key, or None if the display or region is unknown."""
        if key is None:
            return None
        display = self.displays.get(key.display_id)
        if display is None:
            return None
        return display.regions.get(key.name)

    def all_regions(self) -> List["Region"]:
        """Every region of every display, in display then definition order."""
        regions = []
        for display in self.displays.values():
            regions.extend(display.regions.values())
        return regions

    def find_window(self, window) -> Optional[FoundWindow]:
        """Resolve a host (or wrapped) window to its wrapper and region.

        Returns None for windows that are not tracked.
        """
        if window is None:
            return None
        region = self.get_region(self.region_map.get(window.id))
        if region is None:
            return None
        index = region.position_index.get(window.id)
        if index is None:
            return None
        return FoundWindow(region.wrapped_windows[index], region)

    def set_focused(self, found: Optional[FoundWindow]):
        """Set the focused window pointer and publish the change."""
        from pubsub import pub
        from . import topics

        self.focused = found
        pub.sendMessage(
            topics.FOCUS_CHANGED, window=found.wrapped_window if found else None
        )

    def tracked_window_count(self) -> int:
        return sum(len(region.wrapped_windows) for region in self.all_regions())

    def to_dict(self) -> dict:
        """Serializable snapshot of region membership."""
        displays = {}
        for display_id, display in self.displays.items():
            displays[display_id] = {
                "regions": {
                    name: {
                        "windows": [
                            wrapped.to_dict() for wrapped in region.wrapped_windows
                        ]
                    }
                    for name, region in display.regions.items()
                }
            }
        return {
            "current_store_slot": self.current_store_slot,
            "displays": displays,
        }
