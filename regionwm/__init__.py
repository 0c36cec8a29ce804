"""
Region Window Manager (regionwm)

A region-based tiling layout engine that runs inside a host window manager.

This package provides:
- Region, display and window models with margin-aware partitioning
- Directional focus, move and swap across regions and displays
- Drag-and-drop placement, numbered layout slots and key bindings
- An abstract host interface that platform adapters implement

Example usage:
    from regionwm import RegionWM, RegionWMConfig

    config = RegionWMConfig(
        margin=30,
        regions={
            "main": {
                "left": {"width": 0.5, "adjacent": {"east": ["main", "right"]}},
                "right": {"start_pt": [0.5, 0], "width": 0.5,
                          "adjacent": {"west": ["main", "left"]}},
            },
        },
    )
    wm = RegionWM(host, config)
    wm.start()
"""

__version__ = "0.1.0"

from .protocol import (
    Action,
    Direction,
    HostEvent,
    Modifiers,
    Point,
    Rect,
    RegionKey,
)

from .host import (
    Host,
    HostScreen,
    HostWindow,
    HostWindowError,
    KeyHandle,
    TimerHandle,
)

from .config import RegionConfig, RegionWMConfig

from .state import FoundWindow, LayoutState

from .wrapped_window import WrappedWindow

from .region import Region

from .display import Display

from .layout_manager import LayoutManager, RegionPosition

from .binding_manager import BindingManager, BindingMode

from .regionwm import RegionWM

from . import topics

__all__ = [
    # Version
    "__version__",
    # Value types
    "Action",
    "Direction",
    "HostEvent",
    "Modifiers",
    "Point",
    "Rect",
    "RegionKey",
    # Host interface
    "Host",
    "HostScreen",
    "HostWindow",
    "HostWindowError",
    "KeyHandle",
    "TimerHandle",
    # Configuration
    "RegionConfig",
    "RegionWMConfig",
    # Layout model
    "FoundWindow",
    "LayoutState",
    "WrappedWindow",
    "Region",
    "Display",
    "LayoutManager",
    "RegionPosition",
    # Bindings
    "BindingManager",
    "BindingMode",
    # Window Manager
    "RegionWM",
    # Event topics
    "topics",
]
