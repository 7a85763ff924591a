import unittest

from blockfall_board import WALL, flatten, new_board, row_full, snapshot, sweep

W, H = 12, 25


def fill_row(board, y, marker=1, skip=()):
    for x in range(1, W - 1):
        if x not in skip:
            board[y][x] = marker


class TestBoard(unittest.TestCase):

    def setUp(self):
        self.board = new_board(W, H)

    def assertBorderIntact(self, board):
        self.assertEqual(board[0], [WALL] * W)
        for y in range(H):
            self.assertEqual(board[y][0], WALL)
            self.assertEqual(board[y][W - 1], WALL)

    def test_new_board(self):
        self.assertEqual(len(self.board), H)
        self.assertBorderIntact(self.board)
        for y in range(1, H):
            self.assertEqual(self.board[y][1:W - 1], [None] * (W - 2))

    def test_floor_is_full_but_never_swept(self):
        self.assertTrue(row_full(self.board, 0))
        self.assertEqual(sweep(self.board), 0)
        self.assertBorderIntact(self.board)

    def test_single_clear_drops_row_above(self):
        fill_row(self.board, 1)
        self.board[2][3] = 4
        self.assertEqual(sweep(self.board), 1)
        self.assertEqual(self.board[1][3], 4)
        self.assertEqual([c for x, c in enumerate(self.board[1]) if x != 3][1:-1], [None] * (W - 3))
        self.assertEqual(self.board[2][1:W - 1], [None] * (W - 2))
        self.assertBorderIntact(self.board)

    def test_double_clear_in_one_pass(self):
        fill_row(self.board, 1, 2)
        fill_row(self.board, 2, 3)
        self.board[3][5] = 6
        self.assertEqual(sweep(self.board), 2)
        self.assertEqual(self.board[1][5], 6)
        self.assertIsNone(self.board[2][5])

    def test_row_shifted_into_place_is_checked_again(self):
        fill_row(self.board, 1)
        fill_row(self.board, 2, skip=(4,))
        fill_row(self.board, 3)
        self.board[4][7] = 5
        self.assertEqual(sweep(self.board), 2)
        self.assertIsNone(self.board[1][4])
        self.assertEqual(self.board[1][5], 1)
        self.assertEqual(self.board[2][7], 5)
        self.assertFalse(row_full(self.board, 2))

    def test_top_row_refilled_empty(self):
        fill_row(self.board, 1)
        self.board[H - 1][3] = 2
        sweep(self.board)
        self.assertEqual(self.board[H - 2][3], 2)
        self.assertEqual(self.board[H - 1], [WALL] + [None] * (W - 2) + [WALL])

    def test_spawn_buffer_rows_shift_down_with_the_rest(self):
        fill_row(self.board, 1)
        self.board[H - 2][5] = 1
        self.assertEqual(sweep(self.board), 1)
        self.assertEqual(self.board[H - 3][5], 1)
        self.assertIsNone(self.board[H - 2][5])
        self.assertEqual(self.board[H - 1], [WALL] + [None] * (W - 2) + [WALL])

    def test_sweep_terminates_with_full_rows_at_the_top(self):
        for y in range(1, H):
            fill_row(self.board, y)
        self.assertEqual(sweep(self.board), H - 1)
        self.assertBorderIntact(self.board)

    def test_flatten_preserves_occupancy(self):
        self.board[1][1] = 4
        self.board[1][2] = 7
        self.board[5][9] = 1
        before = snapshot(self.board)
        flatten(self.board)
        for y in range(H):
            for x in range(W):
                self.assertEqual(before[y][x] is not None, self.board[y][x] is not None)
                if self.board[y][x] is not None:
                    self.assertEqual(self.board[y][x], WALL)

    def test_snapshot_is_detached(self):
        snap = snapshot(self.board)
        self.board[3][3] = 2
        self.assertIsNone(snap[3][3])


if __name__ == '__main__':
    unittest.main()
