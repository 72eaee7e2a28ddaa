import random
import unittest

from helpers import ScriptedRandom

from game.board import Board
from game.errors import SpawnError
from game.spawn import Spawn, SpawnPolicy


class TestSpawnPolicy(unittest.TestCase):

    def test_places_value_in_chosen_empty_cell(self):
        board = Board(2)
        spawn = SpawnPolicy().spawn(board, ScriptedRandom(indices=[3], floats=[0.5]))
        self.assertEqual(spawn, Spawn((1, 1), 2))
        self.assertEqual(board.to_list(), [[0, 0], [0, 2]])

    def test_chooses_among_empty_cells_only(self):
        board = Board.from_rows([[2, 0], [4, 0]])
        spawn = SpawnPolicy().spawn(board, ScriptedRandom(indices=[1], floats=[0.95]))
        self.assertEqual(spawn, Spawn((1, 1), 4))
        self.assertEqual(board.to_list(), [[2, 0], [4, 4]])

    def test_last_empty_cell_fills_board(self):
        board = Board.from_rows([[2, 0], [4, 8]])
        spawn = SpawnPolicy().spawn(board, ScriptedRandom(indices=[0], floats=[0.1]))
        self.assertEqual(spawn, Spawn((0, 1), 2))
        self.assertTrue(board.is_full())

    def test_full_board_raises(self):
        board = Board.from_rows([[2, 4], [4, 2]])
        with self.assertRaises(SpawnError):
            SpawnPolicy().spawn(board, ScriptedRandom())

    def test_fixed_probabilities(self):
        rng = random.Random(7)
        self.assertEqual({SpawnPolicy(1.0).choose_value(rng) for _ in range(50)}, {2})
        self.assertEqual({SpawnPolicy(0.0).choose_value(rng) for _ in range(50)}, {4})

    def test_custom_values(self):
        policy = SpawnPolicy(0.5, values=(8, 16))
        self.assertEqual(policy.choose_value(ScriptedRandom(floats=[0.2])), 8)
        self.assertEqual(policy.choose_value(ScriptedRandom(floats=[0.7])), 16)

    def test_mostly_twos(self):
        rng = random.Random(1234)
        policy = SpawnPolicy()
        values = [policy.spawn(Board(4), rng).value for _ in range(2000)]
        fours = values.count(4)
        self.assertEqual(set(values), {2, 4})
        self.assertTrue(100 < fours < 300, fours)

    def test_positions_cover_the_board(self):
        rng = random.Random(99)
        positions = {SpawnPolicy().spawn(Board(4), rng).position for _ in range(500)}
        self.assertEqual(len(positions), 16)

    def test_invalid_parameters(self):
        with self.assertRaises(ValueError):
            SpawnPolicy(1.5)
        with self.assertRaises(ValueError):
            SpawnPolicy(values=(2,))
        for values in ((3, 5), (2, 6), (1, 2), (0, 4), (2.0, 4)):
            with self.assertRaises(ValueError, msg=repr(values)):
                SpawnPolicy(values=values)

    def test_spawned_board_stays_valid(self):
        board = Board(2)
        SpawnPolicy(values=(8, 16)).spawn(board, random.Random(0))
        self.assertEqual(Board.from_rows(board.to_list()), board)


if __name__ == '__main__':
    unittest.main()
