from __future__ import annotations

import math

from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget

from app.uniformgrid.layout.dimensions import count_visible, infer_dimensions
from app.uniformgrid.layout.geometry import Rect, Size
from app.uniformgrid.layout.uniform_grid import UniformGrid

# Same value as Qt's QLAYOUTSIZE_MAX.
QLAYOUTSIZE_MAX = 16777215


class QtLayoutItem:
    """Adapts a QLayoutItem to the grid's item interface.

    Hidden widgets count as collapsed: they keep their place in the child
    order but never take a cell.
    """

    def __init__(self, item: QLayoutItem) -> None:
        self.item = item
        self.origin = QPoint(0, 0)
        self._desired = Size(0.0, 0.0)

    @property
    def desired_size(self) -> Size:
        return self._desired

    @property
    def is_visible(self) -> bool:
        return not self.item.isEmpty()

    def measure(self, available: Size) -> None:
        hint = self.item.sizeHint()
        self._desired = Size(
            min(float(max(hint.width(), 0)), available.width),
            min(float(max(hint.height(), 0)), available.height),
        )

    def arrange(self, rect: Rect) -> None:
        self.item.setGeometry(
            QRect(
                self.origin.x() + int(round(rect.x)),
                self.origin.y() + int(round(rect.y)),
                int(round(rect.width)),
                int(round(rect.height)),
            )
        )


class QUniformGridLayout(QLayout):
    """QLayout giving every visible child a cell of the same size.

    rows/columns of 0 are inferred from the number of visible children.
    Negative values raise ValueError and leave the layout unchanged.
    """

    def __init__(self, parent: QWidget | None = None, *, rows: int = 0, columns: int = 0, first_column: int = 0) -> None:
        super().__init__(parent)
        self._grid = UniformGrid(
            rows=rows,
            columns=columns,
            first_column=first_column,
            on_invalidate=self.invalidate,
        )

    # QLayout item management

    def addItem(self, item: QLayoutItem) -> None:  # type: ignore[override]
        self._grid.add_item(QtLayoutItem(item))

    def count(self) -> int:
        return len(self._grid)

    def itemAt(self, index: int) -> QLayoutItem | None:  # type: ignore[override]
        items = self._grid.items
        return items[index].item if 0 <= index < len(items) else None  # type: ignore[attr-defined]

    def takeAt(self, index: int) -> QLayoutItem | None:  # type: ignore[override]
        taken = self._grid.take_at(index)
        return taken.item if taken is not None else None  # type: ignore[attr-defined]

    # Grid properties

    def rows(self) -> int:
        return self._grid.rows

    def setRows(self, rows: int) -> None:
        self._grid.rows = rows

    def columns(self) -> int:
        return self._grid.columns

    def setColumns(self, columns: int) -> None:
        self._grid.columns = columns

    def firstColumn(self) -> int:
        return self._grid.first_column

    def setFirstColumn(self, first_column: int) -> None:
        self._grid.first_column = first_column

    # Geometry

    def expandingDirections(self) -> Qt.Orientation:  # type: ignore[override]
        return Qt.Orientation.Horizontal | Qt.Orientation.Vertical

    def hasHeightForWidth(self) -> bool:
        return False

    def sizeHint(self) -> QSize:
        desired = self._grid.measure(Size.unbounded())
        return self._with_margins(desired.width, desired.height)

    def minimumSize(self) -> QSize:
        items = self._grid.items
        dims = infer_dimensions(
            rows=self._grid.rows,
            columns=self._grid.columns,
            first_column=self._grid.first_column,
            visible_count=count_visible(items),
        )
        min_w = 0
        min_h = 0
        for adapter in items:
            if not adapter.is_visible:
                continue
            m = adapter.item.minimumSize()  # type: ignore[attr-defined]
            min_w = max(min_w, m.width())
            min_h = max(min_h, m.height())
        return self._with_margins(min_w * dims.columns, min_h * dims.rows)

    def setGeometry(self, rect: QRect) -> None:  # type: ignore[override]
        super().setGeometry(rect)
        contents = self.contentsRect()
        for adapter in self._grid.items:
            adapter.origin = contents.topLeft()  # type: ignore[attr-defined]
        self._grid.update_layout(Size(float(contents.width()), float(contents.height())))

    # Internal

    def _with_margins(self, width: float, height: float) -> QSize:
        margins = self.contentsMargins()
        return QSize(
            _to_int(width) + margins.left() + margins.right(),
            _to_int(height) + margins.top() + margins.bottom(),
        )


def _to_int(value: float) -> int:
    if math.isinf(value):
        return QLAYOUTSIZE_MAX
    return int(math.ceil(value))
