"""
Configuration

Window manager settings and the static region definitions per display.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .protocol import Direction, Modifiers, RegionKey


def parse_direction(value: Union[str, Direction]) -> Direction:
    """Parse a direction name ("north", "south", "east", "west")."""
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).lower())
    except ValueError:
        raise ValueError(
            f"Invalid direction: {value!r}. Use north, south, east or west"
        ) from None


def parse_region_key(value: Union[RegionKey, Tuple[str, str], List[str]]) -> RegionKey:
    """Parse a ``[display_id, region_name]`` pair."""
    if isinstance(value, RegionKey):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return RegionKey(str(value[0]), str(value[1]))
    raise ValueError(f"Invalid region reference: {value!r}. Use [display_id, name]")


def _fraction(value: Any, what: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {what}: {value!r}") from None
    if not 0 <= number <= 1:
        raise ValueError(f"Invalid {what}: {value!r}. Must be between 0 and 1")
    return number


@dataclass
class RegionConfig:
    """Static definition of one region, in fractions of its display."""

    start_pt: Tuple[float, float] = (0.0, 0.0)
    width: float = 1.0
    height: float = 1.0
    adjacent: Dict[Direction, RegionKey] = field(default_factory=dict)
    vertical_layout: bool = False
    is_default: bool = False

    def __post_init__(self):
        """Validate fractions and normalize adjacency links."""
        if len(self.start_pt) != 2:
            raise ValueError(f"Invalid start_pt: {self.start_pt!r}. Use [x, y]")
        self.start_pt = (
            _fraction(self.start_pt[0], "start_pt x"),
            _fraction(self.start_pt[1], "start_pt y"),
        )
        self.width = _fraction(self.width, "width")
        self.height = _fraction(self.height, "height")
        self.adjacent = {
            parse_direction(direction): parse_region_key(key)
            for direction, key in self.adjacent.items()
            if key
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegionConfig":
        """Build a region definition from a plain mapping."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown region options: {sorted(unknown)}")
        return cls(**data)


@dataclass
class RegionWMConfig:
    """Window manager configuration."""

    # Margin between windows and between regions
    margin: int = 30

    # Grow the focused window slightly over its margins
    grow_active_window: bool = True

    # Move the mouse pointer along with focus changes
    mouse_follow: bool = False

    # Lay out existing windows into their regions on startup
    auto_distribute: bool = True

    # Restore the default or last used layout on startup
    auto_restore: bool = True

    # Storage slots. The default slot is written on every window open/close
    default_store_slot: str = "0"
    default_auto_save: bool = True
    current_auto_save: bool = False
    save_slots: str = "1234567890"

    # Quiet period before a drag is applied, in seconds
    drag_debounce: float = 0.25

    # How often to re-request focus when the host hands it elsewhere
    focus_retry_limit: int = 50

    # Region new windows are placed in: (display_id, region_name)
    default_region: Optional[Union[RegionKey, Tuple[str, str]]] = None

    # display_id -> region name -> RegionConfig (or plain dict)
    regions: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    # Custom keybindings: list of (key, modifiers, event_topic, event_data) tuples
    # Example: [("f", Modifiers.CMD | Modifiers.CTRL, topics.CMD_SAVE_SLOT, {"slot": "1"})]
    custom_keybindings: Optional[List[Tuple[str, Modifiers, str, dict]]] = None

    def __post_init__(self):
        """Parse plain region dicts and check cross references."""
        if self.margin < 0:
            raise ValueError(f"Invalid margin: {self.margin}. Must not be negative")

        parsed: Dict[str, Dict[str, RegionConfig]] = {}
        for display_id, regions in self.regions.items():
            parsed[str(display_id)] = {
                str(name): (
                    cfg if isinstance(cfg, RegionConfig) else RegionConfig.from_dict(cfg)
                )
                for name, cfg in regions.items()
            }
        self.regions = parsed

        for display_id, regions in self.regions.items():
            for name, cfg in regions.items():
                for direction, key in cfg.adjacent.items():
                    if key.name not in self.regions.get(key.display_id, {}):
                        raise ValueError(
                            f"Region {display_id}/{name} is adjacent ({direction.value}) "
                            f"to unknown region {key.display_id}/{key.name}"
                        )

        if self.default_region is not None:
            self.default_region = parse_region_key(self.default_region)
            key = self.default_region
            if key.name not in self.regions.get(key.display_id, {}):
                raise ValueError(
                    f"Unknown default region: {key.display_id}/{key.name}"
                )

        if self.custom_keybindings:
            from . import topics

            directional = (topics.CMD_FOCUS, topics.CMD_MOVE, topics.CMD_SWAP)
            for binding in self.custom_keybindings:
                if len(binding) != 4:
                    raise ValueError(
                        f"Invalid keybinding: {binding!r}. "
                        "Use (key, modifiers, event_topic, event_data)"
                    )
                _, _, event_topic, event_data = binding
                if event_topic in directional:
                    parse_direction((event_data or {}).get("direction"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegionWMConfig":
        """Build a configuration from a JSON-like mapping."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration options: {sorted(unknown)}")
        return cls(**data)

    def region_count(self, display_ids) -> int:
        """Number of configured regions across the given displays."""
        return sum(len(self.regions.get(display_id, {})) for display_id in display_ids)
