"""
Region Geometry

Pure functions for partitioning a region into per-window boxes and for the
point and box tests used by hit testing and cross-region placement.
"""

from __future__ import annotations
import math
from typing import Mapping, List, Optional

from .protocol import Direction, Point, Rect, RegionKey


def adjacency_offset(
    count: int,
    adjacent: Mapping[Direction, RegionKey],
    margin: float,
    display_id: Optional[str] = None,
) -> Rect:
    """
    Correction applied to a region's partition for its same-display neighbours.

    Edges that touch another region on the same display are inner seams rather
    than screen edges; they are widened so that the gap between two regions
    matches the gap between two windows inside a region. Each direction is
    handled independently and the corrections add up.

    Args:
        count: Number of windows in the region
        adjacent: Adjacency links of the region
        margin: Margin between windows
        display_id: Display the region lives on

    Returns:
        Rect holding the x/y/width/height deltas
    """
    base = margin / 2
    size_incr = base / 2
    pos_incr = base / count if count else 0

    x = y = width = height = 0.0
    for direction in (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST):
        neighbor = adjacent.get(direction)
        if not neighbor or neighbor.display_id != display_id:
            continue
        if direction == Direction.NORTH:
            height += size_incr
            y -= pos_incr
        elif direction == Direction.SOUTH:
            height += size_incr
        elif direction == Direction.WEST:
            width += size_incr
            x -= pos_incr
        elif direction == Direction.EAST:
            width += size_incr

    return Rect(x, y, width, height)


def get_sub_regions(
    box: Rect,
    count: int,
    adjacent: Mapping[Direction, RegionKey],
    margin: float,
    is_vertical: bool = False,
    display_id: Optional[str] = None,
) -> List[Rect]:
    """
    Split a region box into one box per window along its primary axis.

    Args:
        box: The region box
        count: Number of windows
        adjacent: Adjacency links of the region
        margin: Margin between windows
        is_vertical: Stack top-to-bottom instead of left-to-right
        display_id: Display the region lives on

    Returns:
        ``count`` boxes in window order; empty when ``count`` is 0
    """
    if count <= 0:
        return []

    # Half a margin around the whole region gives equal gaps between children
    half = margin / 2
    adj = adjacency_offset(count, adjacent, margin, display_id)

    sub_regions = []
    if is_vertical:
        height = (box.height - margin + adj.height) / count
        for i in range(count):
            sub_regions.append(
                Rect(
                    x=box.x + half + adj.x,
                    y=box.y + half + adj.y + height * i,
                    width=box.width - margin + adj.width,
                    height=height,
                )
            )
    else:
        width = (box.width - margin + adj.width) / count
        for i in range(count):
            sub_regions.append(
                Rect(
                    x=box.x + half + adj.x + width * i,
                    y=box.y + half + adj.y,
                    width=width,
                    height=box.height - margin + adj.height,
                )
            )

    return sub_regions


def before_or_after(point: Point, box: Rect, is_vertical: bool) -> str:
    """Which half of ``box`` the point falls in along the stacking axis."""
    if is_vertical:
        return "After" if point.y > box.y + box.height / 2 else "Before"
    return "After" if point.x > box.x + box.width / 2 else "Before"


def is_pt_in_box(point: Point, box: Rect) -> bool:
    """Strict containment; points on the border are outside."""
    return (
        box.x < point.x < box.x + box.width
        and box.y < point.y < box.y + box.height
    )


def get_distance(origin: Point, target: Point) -> float:
    return math.hypot(origin.x - target.x, origin.y - target.y)


def is_below(origin: Rect, target: Rect) -> bool:
    """Whether ``origin`` lies mostly below the vertical midpoint of ``target``."""
    midpoint = target.y + target.height / 2
    tail = origin.y + origin.height - midpoint
    return origin.y > midpoint or tail > midpoint - origin.y


def is_after(origin: Rect, target: Rect) -> bool:
    """Whether ``origin`` lies mostly right of the horizontal midpoint of ``target``."""
    midpoint = target.x + target.width / 2
    tail = origin.x + origin.width - midpoint
    return origin.x > midpoint or tail > midpoint - origin.x
