"""Size and rectangle value types shared by the grid layout modules.

Coordinates are floats; ``math.inf`` in a Size means "no limit".
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def unbounded(cls) -> "Size":
        return cls(math.inf, math.inf)

    def __iter__(self):
        yield self.width
        yield self.height


@dataclass(frozen=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)
