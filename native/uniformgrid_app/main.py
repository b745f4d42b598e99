from __future__ import annotations

import sys

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import (
    QApplication,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QWidget,
)

from native.uniformgrid_app.grid_layout import QUniformGridLayout

MAX_ITEMS = 64


def _read_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return max(0, int(settings.value(key, default)))
    except (TypeError, ValueError):
        return default


class MainWindow(QMainWindow):
    """Spin boxes on the left, a live uniform grid of buttons on the right.

    Clicking a button collapses it; "Show all" brings every button back.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("UniformGridX")
        self.resize(900, 600)
        self.settings = QSettings("UniformGridX", "UniformGridX")

        self.items_spin = self._spin(1, MAX_ITEMS, _read_int(self.settings, "grid/items", 9))
        self.rows_spin = self._spin(0, MAX_ITEMS, _read_int(self.settings, "grid/rows", 0))
        self.columns_spin = self._spin(0, MAX_ITEMS, _read_int(self.settings, "grid/columns", 0))
        self.first_column_spin = self._spin(0, MAX_ITEMS, _read_int(self.settings, "grid/first_column", 0))

        show_all = QPushButton("Show all")
        show_all.clicked.connect(self._show_all)

        form = QFormLayout()
        form.addRow("Items", self.items_spin)
        form.addRow("Rows (0 = auto)", self.rows_spin)
        form.addRow("Columns (0 = auto)", self.columns_spin)
        form.addRow("First column", self.first_column_spin)
        form.addRow(show_all)
        controls = QWidget()
        controls.setLayout(form)
        controls.setFixedWidth(240)

        self.grid_host = QFrame()
        self.grid_host.setFrameShape(QFrame.Shape.StyledPanel)
        self.grid_layout = QUniformGridLayout(self.grid_host)
        self.grid_layout.setContentsMargins(8, 8, 8, 8)

        central = QWidget()
        row = QHBoxLayout(central)
        row.addWidget(controls)
        row.addWidget(self.grid_host, 1)
        self.setCentralWidget(central)

        self.items_spin.valueChanged.connect(self._rebuild_items)
        self.rows_spin.valueChanged.connect(self._apply_grid_settings)
        self.columns_spin.valueChanged.connect(self._apply_grid_settings)
        self.first_column_spin.valueChanged.connect(self._apply_grid_settings)

        self._apply_grid_settings()
        self._rebuild_items()

    def _spin(self, minimum: int, maximum: int, value: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(minimum, maximum)
        spin.setValue(min(max(value, minimum), maximum))
        return spin

    def _apply_grid_settings(self) -> None:
        self.grid_layout.setRows(self.rows_spin.value())
        self.grid_layout.setColumns(self.columns_spin.value())
        self.grid_layout.setFirstColumn(self.first_column_spin.value())
        self._save_settings()

    def _rebuild_items(self) -> None:
        while self.grid_layout.count():
            taken = self.grid_layout.takeAt(0)
            if taken is not None and taken.widget() is not None:
                taken.widget().deleteLater()

        for i in range(self.items_spin.value()):
            button = QPushButton(str(i + 1))
            button.setMinimumSize(32, 24)
            button.clicked.connect(button.hide)
            self.grid_layout.addWidget(button)
        self._save_settings()

    def _show_all(self) -> None:
        for i in range(self.grid_layout.count()):
            item = self.grid_layout.itemAt(i)
            if item is not None and item.widget() is not None:
                item.widget().show()

    def _save_settings(self) -> None:
        self.settings.setValue("grid/items", self.items_spin.value())
        self.settings.setValue("grid/rows", self.rows_spin.value())
        self.settings.setValue("grid/columns", self.columns_spin.value())
        self.settings.setValue("grid/first_column", self.first_column_spin.value())


def main() -> None:
    app = QApplication(sys.argv)
    app.setOrganizationName("UniformGridX")
    app.setApplicationName("UniformGridX")

    win = MainWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
