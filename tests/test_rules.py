import random
import unittest

import numpy as np

from dropfour.game import rules
from dropfour.game.board import Board
from dropfour.game.state import GameState
from dropfour.utils import Player
from tests.helpers import board_with, draw_grid

DIAGONAL = [(5, 0), (4, 1), (3, 2), (2, 3)]


class TestWinDetector(unittest.TestCase):
    def test_given_each_direction_when_four_in_a_row_then_win(self):
        runs = {
            'horizontal': [(5, 0), (5, 1), (5, 2), (5, 3)],
            'vertical': [(2, 6), (3, 6), (4, 6), (5, 6)],
            'down_right': [(0, 0), (1, 1), (2, 2), (3, 3)],
            'down_left': [(2, 6), (3, 5), (4, 4), (5, 3)],
        }
        for name, cells in runs.items():
            with self.subTest(direction=name):
                board = board_with(cells, player=2)
                self.assertTrue(rules.check_win(board, Player.TWO))
                self.assertFalse(rules.check_win(board, Player.ONE))
                self.assertEqual(rules.find_winning_line(board, 2), sorted(cells)
                                 if name != 'down_left' else cells)

    def test_given_three_in_a_row_or_gap_when_checking_then_no_win(self):
        self.assertFalse(rules.check_win(board_with([(5, 0), (5, 1), (5, 2)]), 1))
        self.assertFalse(rules.check_win(board_with([(5, 0), (5, 1), (5, 3), (5, 4)]), 1))
        self.assertFalse(rules.check_win(board_with([(5, 5), (5, 6)]), 1))

    def test_given_diagonal_when_checking_then_win_and_any_flip_breaks_it(self):
        board = board_with(DIAGONAL)
        self.assertTrue(rules.check_win(board, 1))

        for flipped in DIAGONAL:
            grid = board.get_state()
            grid[flipped] = 2
            with self.subTest(flipped=flipped):
                self.assertFalse(rules.check_win(Board.from_grid(grid), 1))

    def test_given_winning_board_when_mirrored_then_result_unchanged(self):
        rng = random.Random(7)
        for _ in range(50):
            grid = np.array([[rng.choice([0, 1, 2]) for _ in range(7)] for _ in range(6)],
                            dtype=np.int8)
            board = Board.from_grid(grid)
            mirrored = Board.from_grid(np.fliplr(grid))
            for player in (Player.ONE, Player.TWO):
                self.assertEqual(rules.check_win(board, player),
                                 rules.check_win(mirrored, player))

    def test_given_run_when_translated_within_bounds_then_still_win(self):
        shape = [(0, 0), (1, 1), (2, 2), (3, 3)]
        for dr in range(3):
            for dc in range(4):
                cells = [(r + dr, c + dc) for r, c in shape]
                with self.subTest(offset=(dr, dc)):
                    self.assertTrue(rules.check_win(board_with(cells), 1))

    def test_given_run_leaving_board_when_checking_then_not_wrapped(self):
        # cells on both edges of a row must not join up across the border
        board = board_with([(5, 5), (5, 6), (4, 0), (4, 1)])
        self.assertFalse(rules.check_win(board, 1))

    def test_given_full_board_without_four_when_checking_then_draw_not_win(self):
        board = Board.from_grid(draw_grid())
        self.assertTrue(board.is_full())
        self.assertFalse(rules.check_win(board, Player.ONE))
        self.assertFalse(rules.check_win(board, Player.TWO))
        self.assertTrue(rules.is_draw(board))

    def test_given_partial_board_when_checking_draw_then_false(self):
        grid = draw_grid()
        grid[0, 3] = 0
        self.assertFalse(rules.is_draw(Board.from_grid(grid)))

    def test_given_random_games_when_checking_placed_cell_then_matches_full_scan(self):
        rng = random.Random(1234)
        for _ in range(200):
            state = GameState()
            while not state.is_game_over():
                mover = state.current_player
                outcome = state.drop(rng.choice(state.valid_moves()))
                board = state.board
                self.assertEqual(rules.check_win_at(board, outcome.row, outcome.column),
                                 rules.check_win(board, mover))
                if not state.is_game_over():
                    state.advance_turn()

    def test_given_board_sizes_when_iterating_runs_then_counts_match(self):
        # 6x7: 24 horizontal, 21 vertical, 12 per diagonal
        self.assertEqual(len(list(rules.iter_runs(6, 7))), 69)
        self.assertEqual(list(rules.iter_runs(3, 3)), [])

    def test_given_empty_cell_when_checking_at_then_false(self):
        self.assertFalse(rules.check_win_at(Board(), 5, 0))
        self.assertIsNone(rules.find_winning_line(Board(), Player.EMPTY))


if __name__ == '__main__':
    unittest.main()
