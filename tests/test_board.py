import unittest

import numpy as np

from dropfour.errors import ColumnFullError, InvalidColumnError
from dropfour.game.board import Board
from dropfour.utils import Player


class TestBoard(unittest.TestCase):
    def test_given_empty_board_when_finding_drop_row_then_bottom_row_returned(self):
        for rows in (1, 4, 6, 9):
            board = Board(rows=rows, cols=5)
            for col in range(5):
                self.assertEqual(board.find_drop_row(col), rows - 1)

    def test_given_pieces_in_column_when_placing_then_pieces_stack_upwards(self):
        board = Board()
        self.assertEqual(board.place(3, Player.ONE), 5)
        self.assertEqual(board.place(3, Player.TWO), 4)
        self.assertEqual(board.place(3, 1), 3)
        self.assertEqual(board.cell_at(5, 3), Player.ONE)
        self.assertEqual(board.cell_at(4, 3), Player.TWO)
        self.assertEqual(board.cell_at(2, 3), Player.EMPTY)

    def test_given_full_column_when_finding_drop_row_then_none(self):
        board = Board()
        for i in range(6):
            board.place(2, Player.ONE if i % 2 == 0 else Player.TWO)
        self.assertIsNone(board.find_drop_row(2))
        self.assertEqual(board.valid_moves(), [0, 1, 3, 4, 5, 6])

    def test_given_full_column_when_placing_then_error_and_board_unchanged(self):
        board = Board()
        for i in range(6):
            board.place(2, Player.ONE if i % 2 == 0 else Player.TWO)
        before = board.get_state()
        with self.assertRaises(ColumnFullError):
            board.place(2, Player.ONE)
        np.testing.assert_array_equal(board.get_state(), before)

    def test_given_out_of_range_column_when_finding_drop_row_then_invalid_column(self):
        board = Board()
        for col in (-1, 7, 100):
            with self.assertRaises(InvalidColumnError):
                board.find_drop_row(col)
        # also usable as a ValueError
        with self.assertRaises(ValueError):
            board.place(7, Player.ONE)

    def test_given_top_row_filled_when_checking_full_then_true(self):
        board = Board(rows=2, cols=3)
        self.assertFalse(board.is_full())
        for col in range(3):
            board.place(col, Player.ONE)
            board.place(col, Player.TWO)
        self.assertTrue(board.is_full())
        self.assertEqual(board.valid_moves(), [])

    def test_given_board_when_reading_grid_then_view_is_read_only(self):
        board = Board()
        with self.assertRaises(ValueError):
            board.grid[5, 0] = 1
        state = board.get_state()
        state[5, 0] = 1
        self.assertEqual(board.cell_at(5, 0), Player.EMPTY)

    def test_given_copy_when_mutated_then_original_untouched(self):
        board = Board()
        board.place(0, Player.ONE)
        other = board.copy()
        other.place(0, Player.TWO)
        self.assertEqual(board.piece_count(), 1)
        self.assertEqual(other.piece_count(), 2)
        self.assertNotEqual(board, other)

    def test_given_bad_grids_when_building_from_grid_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.from_grid([1, 2, 0])
        with self.assertRaises(ValueError):
            Board.from_grid([[0, 3], [0, 0]])
        with self.assertRaises(ValueError):
            Board(rows=0, cols=7)

    def test_given_values_beyond_int8_when_building_from_grid_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.from_grid([[256, 0], [0, 0]])
        with self.assertRaises(ValueError):
            Board.from_grid([[2 ** 80, 0], [0, 0]])

    def test_given_piece_above_empty_cell_when_checking_settled_then_false(self):
        self.assertTrue(Board().is_settled())
        self.assertTrue(Board.from_grid([[0, 0], [1, 0], [2, 1]]).is_settled())
        self.assertFalse(Board.from_grid([[0, 0], [1, 0], [0, 2]]).is_settled())

    def test_given_non_integer_column_when_dropping_then_type_error(self):
        board = Board()
        with self.assertRaises(TypeError):
            board.find_drop_row(2.5)
        with self.assertRaises(TypeError):
            board.place("3", Player.ONE)
        self.assertEqual(board.find_drop_row(np.int64(2)), 5)
        self.assertEqual(board.piece_count(), 0)

    def test_given_cell_outside_board_when_reading_then_index_error(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.cell_at(6, 0)
        with self.assertRaises(IndexError):
            board.cell_at(0, -1)

    def test_given_pieces_when_rendering_then_symbols_and_footer_present(self):
        board = Board()
        board.place(0, Player.ONE)
        board.place(1, Player.TWO)
        text = board.render()
        lines = text.splitlines()
        self.assertIn("| X O . . . . . |", lines)
        self.assertEqual(lines[-1], "  0 1 2 3 4 5 6")
        self.assertIn("*", board.render(highlight=[(5, 0)]))


if __name__ == '__main__':
    unittest.main()
