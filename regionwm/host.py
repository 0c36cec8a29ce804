"""
Host Interface

Abstract interface to the platform window manager the layout engine runs
inside. A host adapter implements these classes; the core never touches the
platform directly.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .protocol import HostEvent, Modifiers, Point, Rect


class HostWindowError(Exception):
    """Raised by a host when an operation targets a window that is gone."""


class KeyHandle(ABC):
    """A registered global hotkey."""

    @abstractmethod
    def enable(self):
        pass

    @abstractmethod
    def disable(self):
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        pass


class TimerHandle(ABC):
    """A scheduled one-shot callback."""

    @abstractmethod
    def cancel(self):
        pass


class HostWindow(ABC):
    """A window owned by the host window manager."""

    @property
    @abstractmethod
    def id(self) -> int:
        """Stable identifier, unique while the window is open."""
        pass

    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def app_name(self) -> str:
        pass

    @abstractmethod
    def frame(self) -> Rect:
        """Current on-screen frame."""
        pass

    @abstractmethod
    def top_left(self) -> Point:
        pass

    @abstractmethod
    def set_frame(self, frame: Rect):
        """
        Move and resize the window.

        Raises:
            HostWindowError: if the window no longer exists
        """
        pass

    @abstractmethod
    def focus(self):
        """
        Request focus for the window.

        Raises:
            HostWindowError: if the window no longer exists
        """
        pass

    @abstractmethod
    def is_normal(self) -> bool:
        """Whether this is a regular user-facing window."""
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the window still exists."""
        pass


class HostScreen(ABC):
    """A physical display."""

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @abstractmethod
    def visible_frame(self) -> Rect:
        """Usable area in screen coordinates, excluding menu bars and docks."""
        pass


class Host(ABC):
    """The platform window manager runtime.

    All callbacks must be delivered on a single thread, one at a time.
    """

    @abstractmethod
    def screens(self) -> List[HostScreen]:
        pass

    @abstractmethod
    def windows(self) -> List[HostWindow]:
        """All visible windows."""
        pass

    @abstractmethod
    def focused_window(self) -> Optional[HostWindow]:
        pass

    @abstractmethod
    def move_mouse(self, point: Point):
        pass

    @abstractmethod
    def bind_key(
        self, key: str, modifiers: Modifiers, callback: Callable[[], Any]
    ) -> KeyHandle:
        """Register an enabled global hotkey."""
        pass

    @abstractmethod
    def set_timeout(self, delay: float, callback: Callable[[], Any]) -> TimerHandle:
        """Run ``callback`` once on the host event loop after ``delay`` seconds."""
        pass

    @abstractmethod
    def on(self, event: HostEvent, callback: Callable[..., Any]):
        """Subscribe to a host event.

        Window events pass the HostWindow, mouse events pass a Point.
        """
        pass

    @abstractmethod
    def storage_get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def storage_set(self, key: str, value: str):
        pass

    @abstractmethod
    def storage_remove(self, key: str):
        pass
