import unittest

import numpy as np

from blockfall.game.cell import Cell
from blockfall.game.registry import SettledRegistry
from blockfall.game.state import GameState
from tests.helpers import settle


class SettledRegistryTests(unittest.TestCase):
    def setUp(self):
        self.state = GameState()
        self.registry = self.state.registry

    def test_empty_registry(self):
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(self.registry.cell_count(), 0)
        self.assertFalse(self.registry.is_overwhelmed())
        self.assertFalse(self.registry.is_occupied(0, 0))

    def test_occupancy_and_rows(self):
        settle(self.state, [(0, 14), (1, 14), (1, 13)], color=2)
        settle(self.state, [(5, 14)], color=4)
        self.assertEqual(self.registry.cell_count(), 4)
        self.assertTrue(self.registry.is_occupied(1, 13))
        self.assertFalse(self.registry.is_occupied(2, 13))
        self.assertEqual(
            sorted(c.position for c in self.registry.cells_in_row(14)),
            [(0, 14), (1, 14), (5, 14)],
        )

    def test_neighbor_queries(self):
        settle(self.state, [(4, 10)])
        self.assertTrue(self.registry.has_neighbor([Cell(5, 10, 0)], -1, 0))
        self.assertTrue(self.registry.has_neighbor([Cell(3, 10, 0)], 1, 0))
        self.assertTrue(self.registry.has_neighbor([Cell(4, 9, 0)], 0, 1))
        self.assertFalse(self.registry.has_neighbor([Cell(4, 9, 0)], -1, 0))
        self.assertFalse(self.registry.has_neighbor([Cell(6, 10, 0)], -1, 0))

    def test_overwhelmed_only_with_a_cell_on_the_top_row(self):
        settle(self.state, [(3, 1)])
        self.assertFalse(self.registry.is_overwhelmed())
        settle(self.state, [(3, 0)])
        self.assertTrue(self.registry.is_overwhelmed())

    def test_remove_cell_keeps_empty_groups(self):
        group = settle(self.state, [(2, 14)])
        cell = group.cells[0]
        self.assertTrue(self.registry.remove_cell(cell))
        self.assertTrue(cell.destroyed)
        self.assertEqual(group.cells, [])
        self.assertEqual(len(self.registry), 1)
        self.assertFalse(self.registry.remove_cell(Cell(0, 0, 0)))

    def test_grid_snapshot(self):
        settle(self.state, [(0, 14), (1, 14)], color=0)
        settle(self.state, [(9, 0)], color=6)
        grid = self.registry.get_grid()
        self.assertEqual(grid.shape, (15, 10))
        self.assertEqual(grid.dtype, np.int8)
        self.assertEqual(grid[14, 0], 1)
        self.assertEqual(grid[14, 1], 1)
        self.assertEqual(grid[0, 9], 7)
        self.assertEqual(int(np.count_nonzero(grid)), 3)

    def test_clear_destroys_everything(self):
        group = settle(self.state, [(0, 14), (1, 14)])
        self.registry.clear()
        self.assertEqual(len(self.registry), 0)
        self.assertTrue(all(cell.destroyed for cell in group.cells))

    def test_custom_dimensions(self):
        registry = SettledRegistry(width=4, height=6)
        self.assertEqual(registry.get_grid().shape, (6, 4))


if __name__ == "__main__":
    unittest.main()
