import unittest

from blockfall.game.block_group import GroupStatus
from blockfall.game.constants import FIELD_HEIGHT, FIELD_WIDTH
from blockfall.game.shapes import T_SHAPE
from blockfall.game.tetris import Action, GameStatus, TetrisGame
from tests.helpers import fill_row, settle


def replace_active(game, shape, color=0):
    """Swap the randomly spawned group for a known one."""
    game.current_group.drop_timer.stop()
    game.current_group = None
    return game.spawn_next(shape=shape, color=color)


class LifecycleTests(unittest.TestCase):
    def setUp(self):
        self.game = TetrisGame(seed=1234)
        self.events = []
        self.game.on_block_freeze.append(lambda: self.events.append("freeze"))
        self.game.on_game_over.append(lambda score: self.events.append(("over", score)))
        self.game.on_row_cleared.append(lambda count: self.events.append(("rows", count)))

    def test_new_game_is_idle(self):
        self.assertIs(self.game.status, GameStatus.IDLE)
        self.assertIsNone(self.game.current_group)
        self.assertTrue(self.game.state.paused)

    def test_start_spawns_the_first_group(self):
        state = self.game.start()
        self.assertIs(self.game.status, GameStatus.PLAYING)
        self.assertFalse(self.game.state.paused)
        self.assertIsNotNone(self.game.current_group)
        self.assertIs(self.game.current_group.status, GroupStatus.ACTIVE)
        self.assertEqual(self.game.groups_spawned, 1)
        self.assertEqual(state["score"], 0)
        self.assertEqual(len(state["active_cells"]), len(self.game.current_group.cells))

    def test_freeze_spawns_the_next_group(self):
        self.game.start()
        first = self.game.current_group
        for _ in range(FIELD_HEIGHT):
            if self.game.current_group is not first:
                break
            self.game.move_down()

        self.assertIs(first.status, GroupStatus.FROZEN)
        self.assertIn(first, self.game.state.registry.groups)
        self.assertIsNot(self.game.current_group, first)
        self.assertEqual(self.game.groups_spawned, 2)
        self.assertEqual(self.events, ["freeze"])

    def test_spawn_on_occupied_cells_ends_the_game(self):
        self.game.start()
        settle(self.game.state, [(1, 0)])
        self.game.current_group.drop_timer.stop()

        self.assertIsNone(self.game.spawn_next(shape=T_SHAPE, color=2))

        self.assertIs(self.game.status, GameStatus.GAME_OVER)
        self.assertIsNone(self.game.current_group)
        self.assertEqual(self.game.groups_spawned, 1)
        self.assertEqual(self.events, [("over", 0)])

    def test_freeze_on_the_top_row_ends_the_game(self):
        self.game.start()
        group = replace_active(self.game, T_SHAPE)
        settle(self.game.state, [(1, 2)])

        self.assertFalse(self.game.move_down())

        self.assertIs(group.status, GroupStatus.FROZEN)
        self.assertIs(self.game.status, GameStatus.GAME_OVER)
        self.assertTrue(self.game.state.paused)
        self.assertIsNone(self.game.current_group)
        self.assertEqual(self.events, [("over", 0)])

    def test_completing_a_row_scores_and_signals(self):
        self.game.start()
        fill_row(self.game.state, FIELD_HEIGHT - 1, skip=(FIELD_WIDTH - 1,))
        replace_active(self.game, ((FIELD_WIDTH - 1, 0),), color=1)

        for _ in range(FIELD_HEIGHT - 1):
            self.assertTrue(self.game.move_down())
        self.assertFalse(self.game.move_down())

        self.assertEqual(self.game.score, 10)
        self.assertEqual(self.events, ["freeze", ("rows", 1)])
        self.assertEqual(self.game.state.registry.cell_count(), 0)
        self.assertIs(self.game.status, GameStatus.PLAYING)
        self.assertIsNotNone(self.game.current_group)

    def test_restart_clears_the_board_and_score(self):
        self.game.start()
        settled = settle(self.game.state, [(4, 14)])
        self.game.state.score.update(30)
        self.game.current_group.drop_timer.stop()
        self.game.spawn_next(shape=((4, 14),), color=0)
        self.assertIs(self.game.status, GameStatus.GAME_OVER)

        self.game.start()

        self.assertIs(self.game.status, GameStatus.PLAYING)
        self.assertEqual(self.game.score, 0)
        self.assertEqual(len(self.game.state.registry), 0)
        self.assertTrue(settled.cells[0].destroyed)


class InputTests(unittest.TestCase):
    def setUp(self):
        self.game = TetrisGame(seed=7)

    def test_commands_are_ignored_before_start(self):
        self.assertFalse(self.game.move_left())
        self.assertFalse(self.game.move_right())
        self.assertFalse(self.game.move_down())
        self.assertFalse(self.game.rotate())
        _state, gained, done = self.game.step(Action.DOWN)
        self.assertEqual((gained, done), (0, False))
        self.game.tick(10_000)

    def test_commands_move_the_active_group(self):
        self.game.start()
        group = replace_active(self.game, [(x + 3, y + 2) for x, y in T_SHAPE])
        before = group.positions()
        self.assertTrue(self.game.move_left())
        self.assertTrue(self.game.move_right())
        self.assertEqual(group.positions(), before)
        self.assertTrue(self.game.rotate())
        self.assertNotEqual(sorted(group.positions()), sorted(before))

    def test_pause_blocks_input_and_auto_drop(self):
        self.game.start()
        group = replace_active(self.game, [(x + 3, y + 2) for x, y in T_SHAPE])
        before = group.positions()

        self.assertTrue(self.game.toggle_pause())
        self.assertFalse(self.game.move_left())
        self.assertFalse(self.game.rotate())
        self.game.tick(700 * 3)
        self.assertEqual(group.positions(), before)
        self.assertTrue(group.drop_timer.running)

        self.assertFalse(self.game.toggle_pause())
        self.assertTrue(self.game.move_left())

    def test_tick_drops_once_per_interval(self):
        self.game.start()
        group = replace_active(self.game, [(x + 3, y + 2) for x, y in T_SHAPE])
        before = group.positions()
        self.game.tick(699)
        self.assertEqual(group.positions(), before)
        self.game.tick(1)
        self.assertEqual(group.positions(), [(x, y + 1) for x, y in before])

    def test_step_reports_score_and_done(self):
        self.game.start()
        fill_row(self.game.state, FIELD_HEIGHT - 1, skip=(0,))
        replace_active(self.game, ((0, FIELD_HEIGHT - 2),), color=3)
        _state, gained, done = self.game.step(Action.DOWN)
        self.assertEqual((gained, done), (0, False))
        state, gained, done = self.game.step(Action.DOWN)
        self.assertEqual((gained, done), (10, False))
        self.assertEqual(state["rows_cleared"], 1)


class SnapshotTests(unittest.TestCase):
    def test_snapshot_contents(self):
        game = TetrisGame(seed=3)
        game.start()
        settle(game.state, [(2, 14)], color=4)
        state = game.get_state()
        self.assertEqual(state["grid"].shape, (FIELD_HEIGHT, FIELD_WIDTH))
        self.assertEqual(state["grid"][14, 2], 5)
        self.assertIs(state["status"], GameStatus.PLAYING)
        self.assertFalse(state["paused"])
        self.assertEqual(state["groups_spawned"], 1)
        for x, y, _color in state["active_cells"]:
            self.assertEqual(state["grid"][y, x], 0)

    def test_board_size_override(self):
        game = TetrisGame(seed=3, board_width=6, board_height=8)
        game.start()
        self.assertEqual(game.get_state()["grid"].shape, (8, 6))


if __name__ == "__main__":
    unittest.main()
