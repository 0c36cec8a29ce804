"""
Layout Manager

Builds the display/region graph, keeps it in sync with window lifecycle
events and runs directional commands against it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional, Sequence, TypeVar

from .config import parse_direction
from .display import Display
from .geometry import get_sub_regions, is_pt_in_box
from .protocol import Action, Direction, Point, Rect
from .region import Region
from .state import FoundWindow
from .wrapped_window import WrappedWindow

if TYPE_CHECKING:
    from .config import RegionConfig
    from .host import HostWindow
    from .persistence import LayoutStore
    from .state import LayoutState

T = TypeVar("T")


class RegionPosition(NamedTuple):
    """A slot inside a region, as found by hit testing."""

    region: Region
    box: Rect
    index: int


def distribute_windows(windows: Sequence[T], num: int) -> List[List[T]]:
    """
    Split windows into ``num`` groups of nearly equal size.

    The first ``len(windows) % num`` groups get one extra window, e.g. seven
    windows in three groups gives sizes 3, 2, 2.
    """
    if num <= 0:
        return []

    div, mod = divmod(len(windows), num)
    distributed = []
    start = 0
    for i in range(num):
        size = div + 1 if i < mod else div
        distributed.append(list(windows[start : start + size]))
        start += size
    return distributed


def filter_windows(windows: Sequence["HostWindow"], window_data) -> List["HostWindow"]:
    """Live windows for saved window entries, in saved order. Missing ones are dropped."""
    by_id = {window.id: window for window in windows}
    filtered = []
    for entry in window_data or []:
        window_id = entry.get("id") if isinstance(entry, dict) else None
        if window_id in by_id:
            filtered.append(by_id[window_id])
    return filtered


class LayoutManager:
    """
    Owns the display/region graph.

    This component subscribes to window lifecycle events, directional command
    events and slot restore commands. It publishes LAYOUT_INITIALIZED.

    Responsibilities:
    - Build displays and regions from configuration and live windows
    - Restore region membership from a saved layout
    - WINDOW_OPENED / WINDOW_CLOSED: Track windows and re-layout
    - CMD_FOCUS / CMD_MOVE / CMD_SWAP: Directional actions on the focused window
    - CMD_RESTORE_SLOT: Rebuild from a saved slot
    """

    def __init__(self, state: "LayoutState", store: "LayoutStore"):
        """Initialize layout manager.

        Args:
            state: Shared layout state
            store: Slot storage used for restore and autosave
        """
        self.state = state
        self.store = store
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        from pubsub import pub
        from . import topics

        # Notification events
        pub.subscribe(self._on_window_opened, topics.WINDOW_OPENED)
        pub.subscribe(self._on_window_closed, topics.WINDOW_CLOSED)

        # Command events
        pub.subscribe(self._on_focus, topics.CMD_FOCUS)
        pub.subscribe(self._on_move, topics.CMD_MOVE)
        pub.subscribe(self._on_swap, topics.CMD_SWAP)
        pub.subscribe(self._on_restore_slot, topics.CMD_RESTORE_SLOT)

    @property
    def host(self):
        return self.state.host

    @property
    def config(self):
        return self.state.config

    # Initialization

    def init(self, stored: Optional[dict] = None):
        """Build the layout, restoring a saved one when available.

        Without explicit data and with auto restore enabled, the default slot
        is loaded, then the slot it names as current; the latter wins.
        """
        data = stored
        if data is None and self.config.auto_restore:
            default_data = self.store.load(self.config.default_store_slot)
            last_data = (
                self.store.load(default_data.get("current_store_slot"))
                if default_data
                else None
            )
            data = last_data or default_data
        self.init_displays(data)

    def init_displays(self, stored: Optional[dict] = None):
        """Rebuild every display from live screens and windows."""
        from pubsub import pub
        from . import topics

        self.state.reset()
        if stored is not None:
            self.state.current_store_slot = stored.get("current_store_slot")

        screens = self.host.screens()
        windows = [window for window in self.host.windows() if window.is_normal()]
        stored_displays = (stored or {}).get("displays")
        if not isinstance(stored_displays, dict):
            stored_displays = {}

        # Saved membership first; a window is only ever claimed once
        claimed = set()
        restored: Dict[str, Dict[str, List["HostWindow"]]] = {}
        unsaved_display_ids = []
        for screen in screens:
            region_config = self.config.regions.get(screen.id)
            if not region_config:
                continue
            region_data = self._region_data(stored_displays, screen.id)
            if region_data is None:
                unsaved_display_ids.append(screen.id)
                continue
            restored[screen.id] = {}
            for name in region_config:
                saved = region_data.get(name)
                window_data = saved.get("windows") if isinstance(saved, dict) else None
                found = [
                    window
                    for window in filter_windows(windows, window_data)
                    if window.id not in claimed
                ]
                claimed.update(window.id for window in found)
                restored[screen.id][name] = found

        leftovers = [window for window in windows if window.id not in claimed]
        groups = iter(
            distribute_windows(leftovers, self.config.region_count(unsaved_display_ids))
        )

        for screen in screens:
            display = Display.from_screen(screen)
            self.state.displays[display.id] = display

            region_config = self.config.regions.get(display.id)
            if not region_config:
                print(f"Warning: no regions configured for display {display.id}")
                continue

            if display.id in restored:
                windows_for_regions = restored[display.id]
            else:
                windows_for_regions = {name: next(groups, []) for name in region_config}

            display.regions = self.init_display_regions(
                display, region_config, windows_for_regions
            )

            if self.config.auto_distribute:
                display.distribute()

        pub.sendMessage(topics.LAYOUT_INITIALIZED, restored=bool(restored))

    @staticmethod
    def _region_data(stored_displays: dict, display_id: str) -> Optional[dict]:
        display_data = stored_displays.get(display_id)
        if not isinstance(display_data, dict):
            return None
        regions = display_data.get("regions")
        return regions if isinstance(regions, dict) else None

    def init_display_regions(
        self,
        display: Display,
        region_config: Dict[str, "RegionConfig"],
        windows_for_regions: Dict[str, List["HostWindow"]],
    ) -> Dict[str, Region]:
        """Create the regions of one display and wrap their windows."""
        focused = self.host.focused_window()
        margin = self.config.margin
        display_regions = {}

        for name, cfg in region_config.items():
            box = display.region_box(cfg)
            windows = windows_for_regions.get(name, [])

            # Initial boxes for the windows
            sub_regions = get_sub_regions(
                box,
                len(windows),
                cfg.adjacent,
                margin,
                is_vertical=cfg.vertical_layout,
                display_id=display.id,
            )
            wrapped_windows = [
                WrappedWindow(self.state, window, sub_region)
                for window, sub_region in zip(windows, sub_regions)
            ]

            region = Region(
                self.state,
                display.id,
                name,
                cfg,
                box,
                wrapped_windows=wrapped_windows,
                sub_regions=sub_regions,
            )
            region.register_windows()
            display_regions[name] = region

            for wrapped_window in wrapped_windows:
                if focused is not None and focused.id == wrapped_window.id:
                    self.state.set_focused(FoundWindow(wrapped_window, region))

        return display_regions

    # Lookups

    def find_window(self, window) -> Optional[FoundWindow]:
        """The wrapped window and region for a host window, or None if untracked."""
        return self.state.find_window(window)

    def all_regions(self) -> List[Region]:
        return self.state.all_regions()

    def find_region_position(self, point: Point) -> Optional[RegionPosition]:
        """Find the region slot under a point.

        Slots are computed without margins so that regions tile their display.
        An empty region is a single slot. Points on a border match nothing.
        """
        for region in self.all_regions():
            boxes = region.compute_sub_regions(
                margin=0, count=max(len(region.wrapped_windows), 1)
            )
            for index, box in enumerate(boxes):
                if is_pt_in_box(point, box):
                    return RegionPosition(region, box, index)
        return None

    def default_region(self) -> Optional[Region]:
        """Region that takes windows with no other home."""
        if self.config.default_region is not None:
            region = self.state.get_region(self.config.default_region)
            if region is not None:
                return region

        regions = self.all_regions()
        for region in regions:
            if region.is_default:
                return region
        return regions[0] if regions else None

    # Mutations

    def add_new_window_to_region(self, window: "HostWindow") -> Optional[Region]:
        """Track a newly opened window in the default region."""
        found = self.find_window(window)
        if found:
            return found.region

        region = self.default_region()
        if region is None:
            print(f"Warning: no region available for window {window.id}")
            return None

        region.add_window_end(WrappedWindow(self.state, window))
        return region

    def do_action(self, action: Action, direction: Direction):
        """Run a directional action on the focused window."""
        found = self.find_window(self.host.focused_window())
        if not found:
            return
        found.region.do(action, found.wrapped_window, direction)

    # Event handlers

    def _on_window_opened(self, window: "HostWindow"):
        """Handle WINDOW_OPENED event."""
        if not window.is_normal():
            return

        region = self.add_new_window_to_region(window)
        if region is None:
            return
        region.reconcile_windows()
        self.store.autosave()

    def _on_window_closed(self, window: "HostWindow"):
        """Handle WINDOW_CLOSED event."""
        found = self.find_window(window)
        if not found:
            return

        found.region.remove_window(found.wrapped_window)
        found.region.reconcile_windows()

        focused = self.state.focused
        if focused and focused.wrapped_window.id == window.id:
            self.state.set_focused(None)

        self.store.autosave()

    def _on_focus(self, direction):
        """Handle CMD_FOCUS command."""
        self._run_command(Action.FOCUS, direction)

    def _on_move(self, direction):
        """Handle CMD_MOVE command."""
        self._run_command(Action.MOVE, direction)

    def _on_swap(self, direction):
        """Handle CMD_SWAP command."""
        self._run_command(Action.SWAP, direction)

    def _run_command(self, action: Action, direction):
        try:
            parsed = parse_direction(direction)
        except ValueError as e:
            print(f"Warning: ignoring {action.value} command: {e}")
            return
        self.do_action(action, parsed)

    def _on_restore_slot(self, slot: str):
        """Handle CMD_RESTORE_SLOT command."""
        data = self.store.load(slot)
        if data is None:
            print(f"Warning: layout slot {slot} is empty")
            return
        self.init(data)
        self.state.current_store_slot = slot
