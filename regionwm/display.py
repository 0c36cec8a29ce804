"""
Display

One physical screen and the regions configured for it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional

from .protocol import Rect

if TYPE_CHECKING:
    from .config import RegionConfig
    from .host import HostScreen
    from .region import Region


class Display:
    """A physical display (a screen on the host)."""

    def __init__(self, display_id: str, box: Rect, screen: Optional["HostScreen"] = None):
        self.id = display_id
        self.box = box
        self.screen = screen
        self.regions: Dict[str, "Region"] = {}

    def __repr__(self):
        return f"Display({self.id!r}, regions={list(self.regions)})"

    @classmethod
    def from_screen(cls, screen: "HostScreen") -> "Display":
        """Build a display from the usable area of a host screen."""
        frame = screen.visible_frame()
        box = Rect(
            x=int(frame.x),
            y=int(frame.y),
            width=frame.width,
            height=frame.height,
        )
        return cls(screen.id, box, screen)

    def region_box(self, config: "RegionConfig") -> Rect:
        """Absolute box of a region from its fractional definition."""
        start_x, start_y = config.start_pt
        return Rect(
            x=self.box.x if start_x == 0 else int(start_x * self.box.width + self.box.x),
            y=self.box.y if start_y == 0 else int(start_y * self.box.height + self.box.y),
            width=int(self.box.width * config.width),
            height=int(self.box.height * config.height),
        )

    def distribute(self):
        """Lay out the windows of every region."""
        for region in self.regions.values():
            region.reconcile_windows()
