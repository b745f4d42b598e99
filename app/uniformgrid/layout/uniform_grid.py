"""Uniform grid layout (measure/arrange) helpers.

This module is intentionally UI-framework agnostic.

Every visible child gets a cell of the same size. Cells are filled
left-to-right, top-to-bottom, starting ``first_column`` cells into the first
row. Collapsed children are still measured and placed but never consume a
cell.

A host runs one layout pass as ``measure`` followed by ``arrange``; the
dimensions computed while measuring are reused, unchanged, when arranging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from app.uniformgrid.layout.dimensions import GridDimensions, count_visible, infer_dimensions
from app.uniformgrid.layout.geometry import Rect, Size
from app.uniformgrid.layout.items import LayoutItem


class LayoutStateError(RuntimeError):
    """The measure/arrange contract was broken (a bug in the caller or here)."""


@dataclass(frozen=True)
class LayoutRequest:
    """Input of one layout pass. ``rows``/``columns`` of 0 mean "auto"."""

    rows: int = 0
    columns: int = 0
    first_column: int = 0
    items: Tuple[LayoutItem, ...] = ()

    def __post_init__(self) -> None:
        for name in ("rows", "columns", "first_column"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        # Accept any sequence but keep the snapshot immutable.
        object.__setattr__(self, "items", tuple(self.items))


class UniformGridEngine:
    """Stateful pair of layout passes.

    measure_grid() must run before arrange_grid(); the second call reuses
    what the first one computed.
    """

    def __init__(self) -> None:
        self._request: Optional[LayoutRequest] = None
        self._dimensions: Optional[GridDimensions] = None

    @property
    def dimensions(self) -> Optional[GridDimensions]:
        return self._dimensions

    def measure_grid(self, request: LayoutRequest, constraint: Size) -> Size:
        """Measure every item against one cell and return the grid's desired size.

        The desired size is the largest item width/height times the
        column/row count.
        """

        dims = infer_dimensions(
            rows=request.rows,
            columns=request.columns,
            first_column=request.first_column,
            visible_count=count_visible(request.items),
        )
        if dims.rows <= 0 or dims.columns <= 0:
            raise LayoutStateError(f"degenerate grid {dims.rows}x{dims.columns}")

        self._request = request
        self._dimensions = dims

        cell = Size(constraint.width / dims.columns, constraint.height / dims.rows)
        max_w = 0.0
        max_h = 0.0
        # Collapsed items are measured too.
        for item in request.items:
            item.measure(cell)
            desired = item.desired_size
            if max_w < desired.width:
                max_w = desired.width
            if max_h < desired.height:
                max_h = desired.height

        return Size(max_w * dims.columns, max_h * dims.rows)

    def arrange_grid(self, final_size: Size) -> Size:
        """Place every item in its cell. Always consumes all of ``final_size``."""

        if self._request is None or self._dimensions is None:
            raise LayoutStateError("arrange_grid() called before measure_grid()")

        dims = self._dimensions
        cell_w = final_size.width / dims.columns
        cell_h = final_size.height / dims.rows

        x = cell_w * dims.first_column
        y = 0.0
        # One pixel short of the edge so rounding never leaves an empty trailing column.
        right_edge = final_size.width - 1.0

        for item in self._request.items:
            item.arrange(Rect(x, y, cell_w, cell_h))
            if item.is_visible:
                x += cell_w
                if x >= right_edge:
                    y += cell_h
                    x = 0.0

        return final_size


class UniformGrid:
    """Host-side grid: ordered children plus validated layout properties.

    Setting ``rows``, ``columns`` or ``first_column`` to a negative value
    raises ValueError and keeps the previous value. Any accepted change
    marks the measure dirty and calls ``on_invalidate``.
    """

    def __init__(
        self,
        items: Iterable[LayoutItem] = (),
        *,
        rows: int = 0,
        columns: int = 0,
        first_column: int = 0,
        on_invalidate: Optional[Callable[[], None]] = None,
    ) -> None:
        self._items: List[LayoutItem] = list(items)
        self._rows = _validated("rows", rows)
        self._columns = _validated("columns", columns)
        self._first_column = _validated("first_column", first_column)
        self._engine = UniformGridEngine()
        self._measure_valid = False
        self._on_invalidate = on_invalidate

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        self._set_count("_rows", "rows", value)

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        self._set_count("_columns", "columns", value)

    @property
    def first_column(self) -> int:
        return self._first_column

    @first_column.setter
    def first_column(self, value: int) -> None:
        self._set_count("_first_column", "first_column", value)

    @property
    def items(self) -> Sequence[LayoutItem]:
        return tuple(self._items)

    @property
    def dimensions(self) -> Optional[GridDimensions]:
        return self._engine.dimensions

    @property
    def is_measure_valid(self) -> bool:
        return self._measure_valid

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def add_item(self, item: LayoutItem) -> None:
        self._items.append(item)
        self.invalidate_measure()

    def insert_item(self, index: int, item: LayoutItem) -> None:
        self._items.insert(index, item)
        self.invalidate_measure()

    def remove_item(self, item: LayoutItem) -> None:
        self._items.remove(item)
        self.invalidate_measure()

    def take_at(self, index: int) -> Optional[LayoutItem]:
        if not 0 <= index < len(self._items):
            return None
        item = self._items.pop(index)
        self.invalidate_measure()
        return item

    def clear(self) -> None:
        self._items.clear()
        self.invalidate_measure()

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Layout pass
    # ------------------------------------------------------------------

    def request(self) -> LayoutRequest:
        return LayoutRequest(
            rows=self._rows,
            columns=self._columns,
            first_column=self._first_column,
            items=tuple(self._items),
        )

    def measure(self, constraint: Size) -> Size:
        desired = self._engine.measure_grid(self.request(), constraint)
        self._measure_valid = True
        return desired

    def arrange(self, final_size: Size) -> Size:
        return self._engine.arrange_grid(final_size)

    def update_layout(self, size: Size) -> Size:
        """Run a whole pass (measure then arrange) into ``size``."""
        self.measure(size)
        return self.arrange(size)

    def invalidate_measure(self) -> None:
        self._measure_valid = False
        if self._on_invalidate is not None:
            self._on_invalidate()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _set_count(self, attr: str, name: str, value: int) -> None:
        value = _validated(name, value)
        if getattr(self, attr) == value:
            return
        setattr(self, attr, value)
        self.invalidate_measure()


def _validated(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return int(value)
