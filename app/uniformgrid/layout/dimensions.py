"""Row/column inference for uniform grids.

A requested count of 0 means "auto": the missing dimension is derived from
the number of visible items.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from app.uniformgrid.layout.items import LayoutItem


@dataclass(frozen=True)
class GridDimensions:
    rows: int
    columns: int
    first_column: int = 0

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns


def count_visible(items: Iterable[LayoutItem]) -> int:
    return sum(1 for item in items if item.is_visible)


def infer_dimensions(
    *,
    rows: int,
    columns: int,
    first_column: int,
    visible_count: int,
) -> GridDimensions:
    """Resolve effective rows/columns for one layout pass.

    Policy:
    - rows and columns both 0: smallest square that holds every visible item
    - only rows 0: enough rows for the visible items plus the leading offset
    - only columns 0: enough columns for the visible items (the leading
      offset is not counted here)
    - first_column is reset to 0 when it does not fit the resolved columns

    An empty grid is laid out as if it held one item.
    """

    if rows < 0:
        raise ValueError("rows must be >= 0")
    if columns < 0:
        raise ValueError("columns must be >= 0")
    if first_column < 0:
        raise ValueError("first_column must be >= 0")
    if visible_count < 0:
        raise ValueError("visible_count must be >= 0")

    eff_rows = rows
    eff_columns = columns
    if eff_columns > 0 and first_column >= eff_columns:
        first_column = 0

    if eff_rows == 0 or eff_columns == 0:
        n = visible_count or 1
        if eff_rows == 0 and eff_columns == 0:
            eff_rows = math.ceil(math.sqrt(n))
            if eff_rows * eff_rows < n:
                eff_rows += 1
            eff_columns = eff_rows
        elif eff_rows == 0:
            eff_rows = (n + first_column + eff_columns - 1) // eff_columns
        else:
            eff_columns = (n + eff_rows - 1) // eff_rows

    # Inferred columns may still be too narrow for the offset.
    if first_column >= eff_columns:
        first_column = 0

    return GridDimensions(rows=eff_rows, columns=eff_columns, first_column=first_column)
