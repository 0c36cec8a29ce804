"""
Region

A named area of a display holding an ordered list of windows laid out along
one axis, with links to neighbouring regions for directional actions.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set

from .geometry import get_distance, get_sub_regions, is_after, is_below
from .protocol import Action, Direction, Point, Rect, RegionKey

if TYPE_CHECKING:
    from .config import RegionConfig
    from .state import LayoutState
    from .wrapped_window import WrappedWindow


class Region:
    """Ordered window container.

    Any change to membership or order rebuilds ``position_index``; callers
    finish a mutation with ``reconcile_windows`` so every member's box is
    recomputed and pushed to the host.
    """

    def __init__(
        self,
        state: "LayoutState",
        display_id: str,
        name: str,
        config: "RegionConfig",
        box: Rect,
        wrapped_windows: Optional[List["WrappedWindow"]] = None,
        sub_regions: Optional[List[Rect]] = None,
    ):
        self.state = state
        self.display_id = display_id
        self.name = name
        self.box = box

        self.is_vertical = config.vertical_layout
        self.is_default = config.is_default
        self.adjacent: Dict[Direction, RegionKey] = dict(config.adjacent)

        self.wrapped_windows: List["WrappedWindow"] = (
            wrapped_windows if wrapped_windows is not None else []
        )
        self.sub_regions: List[Rect] = sub_regions if sub_regions is not None else []
        self.position_index: Dict[int, int] = self.index_windows()

    def __repr__(self):
        return (
            f"Region({self.display_id!r}, {self.name!r}, "
            f"windows={[w.id for w in self.wrapped_windows]})"
        )

    @property
    def key(self) -> RegionKey:
        return RegionKey(self.display_id, self.name)

    # Dispatch

    def do(
        self,
        action: Action,
        wrapped_window: "WrappedWindow",
        direction: Direction,
        _visited: Optional[Set[RegionKey]] = None,
    ):
        """Run a directional action for a window.

        Stays inside the region when the direction runs along the region's
        stacking axis and there is a neighbour that way; otherwise hands off
        to the adjacent region.
        """
        index = self.position_index.get(wrapped_window.id) if wrapped_window else None
        index_direction = direction.index_step

        is_internal = (
            index is not None
            and direction.is_vertical == self.is_vertical
            and 0 <= index + index_direction < len(self.wrapped_windows)
        )

        if is_internal:
            if action == Action.MOVE:
                self.move_neighbor(index, index_direction)
            elif action == Action.FOCUS:
                self.focus_neighbor(index, index_direction)
            elif action == Action.SWAP:
                self.swap_neighbor(index, index_direction)
        else:
            if action == Action.MOVE:
                self.move_region(wrapped_window, direction)
            elif action == Action.FOCUS:
                self.focus_region(wrapped_window, direction, _visited)
            elif action == Action.SWAP:
                self.swap_region(wrapped_window, direction)

    # Within the region

    def move_neighbor(self, current_index: int, index_direction: int):
        self.swap_neighbor(current_index, index_direction)

    def swap_neighbor(self, current_index: int, index_direction: int):
        """Swap a window with its neighbour and re-layout."""
        new_index = current_index + index_direction
        windows = self.wrapped_windows
        windows[current_index], windows[new_index] = (
            windows[new_index],
            windows[current_index],
        )
        self.reindex_windows()
        self.reconcile_windows()

    def focus_neighbor(self, current_index: int, index_direction: int):
        """Move focus to the neighbouring window."""
        curr_window = self.wrapped_windows[current_index]
        next_window = self.wrapped_windows[current_index + index_direction]
        top_left = next_window.top_left()

        next_window.focus()
        curr_window.unfocus()

        if self.state.config.mouse_follow:
            self.state.host.move_mouse(top_left)

    # Across regions

    def move_region(
        self, wrapped_window: "WrappedWindow", direction: Direction, is_swap: bool = False
    ):
        """Hand a window over to the adjacent region. No-op without a neighbour."""
        next_region = self.state.get_region(self.get_adjacent(direction))
        if next_region is None or next_region is self:
            return
        if wrapped_window is None or wrapped_window.id not in self.position_index:
            return

        self.place_windows(wrapped_window, next_region, direction, is_swap)

        self.reconcile_windows()
        next_region.reconcile_windows()

    def swap_region(self, wrapped_window: "WrappedWindow", direction: Direction):
        self.move_region(wrapped_window, direction, is_swap=True)

    def place_windows(
        self,
        wrapped_window: "WrappedWindow",
        next_region: "Region",
        direction: Direction,
        is_swap: bool,
    ):
        """Put a window into ``next_region`` next to its closest window.

        An empty destination simply takes the window as its first member. A
        swap exchanges the window with the closest one; otherwise the window
        is inserted before or after the closest one depending on where it
        currently sits.
        """
        closest = next_region.find_closest_window(
            wrapped_window.top_left(), next_region.wrapped_windows
        )

        if closest is None:
            self.remove_window(wrapped_window)
            next_region.add_window_start(wrapped_window)
            return

        current_index = self.position_index[wrapped_window.id]
        closest_index = next_region.position_index[closest.id]

        if is_swap:
            self.wrapped_windows[current_index] = closest
            next_region.wrapped_windows[closest_index] = wrapped_window
            self._track(closest)
            next_region._track(wrapped_window)
        else:
            curr_box = wrapped_window.frame()
            next_box = closest.frame()
            if next_region.is_vertical:
                is_next = is_below(curr_box, next_box)
            else:
                is_next = is_after(curr_box, next_box)

            self.remove_window(wrapped_window)
            if is_next:
                next_region.add_window_after(wrapped_window, closest_index)
            else:
                next_region.add_window_before(wrapped_window, closest_index)

        self.reindex_windows()
        next_region.reindex_windows()

    def focus_region(
        self,
        wrapped_window: Optional["WrappedWindow"],
        direction: Direction,
        _visited: Optional[Set[RegionKey]] = None,
    ):
        """Focus the closest window in the neighbouring region.

        Empty neighbours pass the request on to their own neighbour in the
        same direction.
        """
        visited = _visited if _visited is not None else set()
        visited.add(self.key)

        key = self.get_adjacent(direction) or self.get_almost_adjacent(direction)
        next_region = self.state.get_region(key)
        if next_region is None or next_region.key in visited:
            return

        windows = next_region.wrapped_windows
        if not windows:
            next_region.do(Action.FOCUS, wrapped_window, direction, _visited=visited)
            return

        if wrapped_window is not None:
            closest = next_region.find_closest_window(wrapped_window.top_left(), windows)
        else:
            closest = windows[0]

        if closest is None:
            return

        closest.focus()
        if wrapped_window is not None:
            wrapped_window.unfocus()

        if self.state.config.mouse_follow:
            self.state.host.move_mouse(closest.top_left())

    def get_adjacent(self, direction: Direction) -> Optional[RegionKey]:
        return self.adjacent.get(direction)

    def get_almost_adjacent(self, direction: Direction) -> Optional[RegionKey]:
        """Any neighbour in the same general direction (east/south or north/west)."""
        if direction in (Direction.EAST, Direction.SOUTH):
            return self.adjacent.get(Direction.EAST) or self.adjacent.get(Direction.SOUTH)
        return self.adjacent.get(Direction.NORTH) or self.adjacent.get(Direction.WEST)

    @staticmethod
    def find_closest_window(
        coords: Point, wrapped_windows: Iterable["WrappedWindow"]
    ) -> Optional["WrappedWindow"]:
        """The window whose top-left corner is nearest to ``coords``."""
        closest_distance = None
        closest_window = None

        for wrapped_window in wrapped_windows:
            distance = get_distance(coords, wrapped_window.top_left())
            if closest_distance is None or distance < closest_distance:
                closest_distance = distance
                closest_window = wrapped_window

        return closest_window

    # Membership

    def remove_window(self, wrapped_window: "WrappedWindow"):
        """Drop a window. The caller reconciles."""
        index = self.position_index.get(wrapped_window.id)
        if index is None:
            return
        del self.wrapped_windows[index]
        if self.state.region_map.get(wrapped_window.id) == self.key:
            del self.state.region_map[wrapped_window.id]
        self.reindex_windows()

    def add_window_start(self, wrapped_window: "WrappedWindow"):
        self.wrapped_windows.insert(0, wrapped_window)
        self._track(wrapped_window)
        self.reindex_windows()

    def add_window_before(self, wrapped_window: "WrappedWindow", index: int):
        self.wrapped_windows.insert(index, wrapped_window)
        self._track(wrapped_window)
        self.reindex_windows()

    def add_window_after(self, wrapped_window: "WrappedWindow", index: int):
        self.wrapped_windows.insert(index + 1, wrapped_window)
        self._track(wrapped_window)
        self.reindex_windows()

    def add_window_end(self, wrapped_window: "WrappedWindow"):
        self.wrapped_windows.append(wrapped_window)
        self._track(wrapped_window)
        self.reindex_windows()

    def register_windows(self):
        """Record every member in the window -> region index."""
        for wrapped_window in self.wrapped_windows:
            self._track(wrapped_window)

    def _track(self, wrapped_window: "WrappedWindow"):
        self.state.region_map[wrapped_window.id] = self.key

    # Layout

    def compute_sub_regions(
        self, margin: Optional[float] = None, count: Optional[int] = None
    ) -> List[Rect]:
        """Per-window boxes, by default for the current window count and margin."""
        return get_sub_regions(
            self.box,
            len(self.wrapped_windows) if count is None else count,
            self.adjacent,
            self.state.config.margin if margin is None else margin,
            is_vertical=self.is_vertical,
            display_id=self.display_id,
        )

    def reconcile_windows(self):
        """Size and position every window in the region."""
        if not self.wrapped_windows:
            self.sub_regions = []
            return

        self.sub_regions = self.compute_sub_regions()
        for wrapped_window, box in zip(self.wrapped_windows, self.sub_regions):
            if not wrapped_window.is_valid():
                # Closed but not yet removed; the close event cleans up
                wrapped_window.box = box
                continue
            wrapped_window.update_box(box)

    def reindex_windows(self):
        self.position_index = self.index_windows()

    def index_windows(self) -> Dict[int, int]:
        return {
            wrapped_window.id: index
            for index, wrapped_window in enumerate(self.wrapped_windows)
        }
