"""Item interface consumed by the uniform grid, plus a plain in-memory item.

Hosts (Qt, tests, the CLI) adapt their own children to ``LayoutItem``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from app.uniformgrid.layout.geometry import Rect, Size


@runtime_checkable
class LayoutItem(Protocol):
    """Anything the grid can measure and place.

    ``desired_size`` is only meaningful after ``measure`` has been called.
    """

    @property
    def desired_size(self) -> Size: ...

    @property
    def is_visible(self) -> bool: ...

    def measure(self, available: Size) -> None: ...

    def arrange(self, rect: Rect) -> None: ...


class Visibility(Enum):
    VISIBLE = "visible"
    # Takes up a cell but draws nothing.
    HIDDEN = "hidden"
    COLLAPSED = "collapsed"


@dataclass(eq=False)
class GridItem:
    """Reference item with a fixed preferred size.

    measure() clips the preferred size to the available size; a collapsed
    item always reports an empty desired size.
    """

    key: str
    preferred: Size = Size(0.0, 0.0)
    visibility: Visibility = Visibility.VISIBLE
    desired_size: Size = field(default=Size(0.0, 0.0), init=False)
    bounds: Optional[Rect] = field(default=None, init=False)

    @property
    def is_visible(self) -> bool:
        return self.visibility is not Visibility.COLLAPSED

    def measure(self, available: Size) -> None:
        if not self.is_visible:
            self.desired_size = Size(0.0, 0.0)
            return
        self.desired_size = Size(
            min(self.preferred.width, available.width),
            min(self.preferred.height, available.height),
        )

    def arrange(self, rect: Rect) -> None:
        self.bounds = rect
