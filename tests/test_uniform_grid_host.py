import unittest

from app.uniformgrid.layout.geometry import Rect, Size
from app.uniformgrid.layout.items import GridItem, LayoutItem, Visibility
from app.uniformgrid.layout.uniform_grid import LayoutStateError, UniformGrid


class TestUniformGridProperties(unittest.TestCase):
    def test_defaults(self):
        grid = UniformGrid()
        self.assertEqual((grid.rows, grid.columns, grid.first_column), (0, 0, 0))
        self.assertFalse(grid.is_measure_valid)
        self.assertIsNone(grid.dimensions)

    def test_negative_value_rejected_and_previous_kept(self):
        grid = UniformGrid(rows=2, columns=3, first_column=1)
        with self.assertRaises(ValueError):
            grid.rows = -1
        with self.assertRaises(ValueError):
            grid.columns = -5
        with self.assertRaises(ValueError):
            grid.first_column = -1
        self.assertEqual((grid.rows, grid.columns, grid.first_column), (2, 3, 1))

    def test_negative_rows_from_default(self):
        grid = UniformGrid()
        with self.assertRaises(ValueError):
            grid.rows = -1
        self.assertEqual(grid.rows, 0)

    def test_negative_constructor_values_rejected(self):
        with self.assertRaises(ValueError):
            UniformGrid(rows=-1)
        with self.assertRaises(ValueError):
            UniformGrid(first_column=-2)

    def test_change_invalidates_measure(self):
        calls = []
        grid = UniformGrid([GridItem("a")], on_invalidate=lambda: calls.append(1))
        grid.measure(Size(100.0, 100.0))
        self.assertTrue(grid.is_measure_valid)

        grid.columns = 2
        self.assertFalse(grid.is_measure_valid)
        self.assertEqual(len(calls), 1)

    def test_same_value_does_not_invalidate(self):
        calls = []
        grid = UniformGrid(rows=2, on_invalidate=lambda: calls.append(1))
        grid.rows = 2
        self.assertEqual(calls, [])

    def test_rejected_value_does_not_invalidate(self):
        calls = []
        grid = UniformGrid(on_invalidate=lambda: calls.append(1))
        grid.measure(Size(10.0, 10.0))
        with self.assertRaises(ValueError):
            grid.first_column = -1
        self.assertEqual(calls, [])
        self.assertTrue(grid.is_measure_valid)

    def test_child_changes_invalidate(self):
        calls = []
        grid = UniformGrid(on_invalidate=lambda: calls.append(1))
        a, b = GridItem("a"), GridItem("b")
        grid.add_item(a)
        grid.insert_item(0, b)
        self.assertEqual(list(grid.items), [b, a])
        grid.remove_item(b)
        self.assertIs(grid.take_at(0), a)
        self.assertIsNone(grid.take_at(0))
        grid.clear()
        self.assertEqual(len(calls), 5)
        self.assertEqual(len(grid), 0)


class TestUniformGridLayoutPass(unittest.TestCase):
    def test_update_layout_places_children(self):
        items = [GridItem(f"i{k}", preferred=Size(10.0, 10.0)) for k in range(6)]
        grid = UniformGrid(items, columns=3)
        final = grid.update_layout(Size(300.0, 200.0))

        self.assertEqual(final, Size(300.0, 200.0))
        self.assertEqual((grid.dimensions.rows, grid.dimensions.columns), (2, 3))
        self.assertEqual(items[5].bounds, Rect(200.0, 100.0, 100.0, 100.0))

    def test_first_column_reset_does_not_touch_property(self):
        items = [GridItem("a"), GridItem("b")]
        grid = UniformGrid(items, columns=2, first_column=4)
        grid.update_layout(Size(100.0, 100.0))
        self.assertEqual(grid.dimensions.first_column, 0)
        self.assertEqual(grid.first_column, 4)
        self.assertEqual(items[0].bounds.x, 0.0)

    def test_measure_uses_snapshot_of_children(self):
        items = [GridItem("a"), GridItem("b")]
        grid = UniformGrid(items, columns=2)
        grid.measure(Size(100.0, 50.0))
        late = GridItem("late")
        grid.add_item(late)
        grid.arrange(Size(100.0, 50.0))
        # Not part of the measured pass.
        self.assertIsNone(late.bounds)

    def test_arrange_without_measure(self):
        with self.assertRaises(LayoutStateError):
            UniformGrid([GridItem("a")]).arrange(Size(10.0, 10.0))


class TestGridItem(unittest.TestCase):
    def test_implements_layout_item(self):
        self.assertIsInstance(GridItem("a"), LayoutItem)

    def test_measure_clips_to_available(self):
        item = GridItem("a", preferred=Size(80.0, 30.0))
        item.measure(Size(50.0, 50.0))
        self.assertEqual(item.desired_size, Size(50.0, 30.0))
        item.measure(Size.unbounded())
        self.assertEqual(item.desired_size, Size(80.0, 30.0))

    def test_collapsed_has_empty_desired_size(self):
        item = GridItem("a", preferred=Size(80.0, 30.0), visibility=Visibility.COLLAPSED)
        item.measure(Size(100.0, 100.0))
        self.assertEqual(item.desired_size, Size(0.0, 0.0))
        self.assertFalse(item.is_visible)

    def test_hidden_keeps_size(self):
        item = GridItem("a", preferred=Size(80.0, 30.0), visibility=Visibility.HIDDEN)
        item.measure(Size(100.0, 100.0))
        self.assertEqual(item.desired_size, Size(80.0, 30.0))
        self.assertTrue(item.is_visible)


if __name__ == "__main__":
    unittest.main()
