"""
Core Value Types

Geometry values, directions and actions shared by every part of the layout
engine, plus the enums used to talk to the host window manager.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import NamedTuple


class Direction(Enum):
    """Cardinal direction for focus, move and swap actions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def is_vertical(self) -> bool:
        """Whether the direction runs along the vertical axis."""
        return self in (Direction.NORTH, Direction.SOUTH)

    @property
    def index_step(self) -> int:
        """Step through a region's window list when moving this way."""
        return 1 if self in (Direction.EAST, Direction.SOUTH) else -1


class Action(Enum):
    """Directional actions a region can dispatch."""

    MOVE = "move"
    FOCUS = "focus"
    SWAP = "swap"


class Modifiers(IntFlag):
    """Keyboard modifiers for hotkeys."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    CMD = 8


class HostEvent(Enum):
    """Host events the window manager subscribes to."""

    WINDOW_OPENED = "windowDidOpen"
    WINDOW_CLOSED = "windowDidClose"
    MOUSE_LEFT_CLICK = "mouseDidLeftClick"
    MOUSE_LEFT_DRAG = "mouseDidLeftDrag"


@dataclass(frozen=True)
class Point:
    """Point in screen coordinates."""

    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class Rect:
    """Rectangle in screen coordinates (top-left origin, y grows downward)."""

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)


class RegionKey(NamedTuple):
    """Identifies a region by its display and name."""

    display_id: str
    name: str
