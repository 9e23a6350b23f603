from __future__ import annotations

import unittest

from checkerz.board import Board
from checkerz.exceptions import GameOver, IllegalMove, NotCurrentColor
from checkerz.game import Game
from checkerz.player import Human
from checkerz.state import GameState
from checkerz.types import Piece, PieceColor, Position

BLACK = Piece(PieceColor.BLACK)
RED = Piece(PieceColor.RED)


def P(row: int, col: int) -> Position:
    return Position(row, col)


class TestGameCore(unittest.TestCase):
    def setUp(self):
        self.bill = Human("Bill")
        self.ted = Human("Ted")
        self.game = Game(self.bill, self.ted)

    def force_state(self, pieces: dict, color: PieceColor = PieceColor.BLACK) -> None:
        self.game.current_state = GameState(
            board=Board.from_pieces(pieces), current_color=color
        )

    def test_initial_state(self):
        state = self.game.get_current_state()
        self.assertIs(state.get_current_color(), PieceColor.BLACK)
        self.assertEqual(state.get_board().count(PieceColor.BLACK), 12)
        self.assertEqual(state.get_board().count(PieceColor.RED), 12)
        self.assertEqual(self.game.get_black_captures(), 0)
        self.assertEqual(self.game.get_red_captures(), 0)
        self.assertIsNone(self.game.get_winner())
        self.assertIs(self.game.get_black_player(), self.bill)
        self.assertIs(self.game.get_red_player(), self.ted)
        self.assertIs(self.game.current_player(), self.bill)

    def test_advance_turn_swaps_state_and_player(self):
        nxt = self.game.get_current_state().next(BLACK, P(2, 1), P(3, 2))
        self.game.advance_turn(nxt)
        self.assertIs(self.game.get_current_state(), nxt)
        self.assertIs(self.game.current_player(), self.ted)
        self.assertEqual(self.game.get_black_captures(), 0)

    def test_capture_increments_black_count(self):
        board = Board.standard().with_piece(P(3, 2), RED)
        self.game.current_state = GameState(board=board, current_color=PieceColor.BLACK)
        nxt = self.game.get_current_state().next(BLACK, P(2, 1), P(4, 3))
        self.game.advance_turn(nxt)
        self.assertEqual(self.game.get_black_captures(), 1)
        self.assertEqual(self.game.get_red_captures(), 0)
        self.assertIsNone(self.game.get_current_state().board.get_piece_at(P(3, 2)))
        self.assertEqual(self.game.get_current_state().board.get_piece_at(P(4, 3)), BLACK)

    def test_red_capture_counted(self):
        self.force_state(
            {P(2, 1): BLACK, P(4, 7): BLACK, P(3, 2): RED, P(6, 1): RED}, PieceColor.RED
        )
        self.game.submit_move(RED, P(3, 2), P(1, 0))
        self.assertEqual(self.game.get_red_captures(), 1)
        self.assertEqual(self.game.get_black_captures(), 0)

    def test_multi_jump_through_submit_move(self):
        self.force_state(
            {P(2, 1): BLACK, P(3, 2): RED, P(5, 4): RED, P(7, 0): RED}
        )
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        self.assertEqual(self.game.get_black_captures(), 1)
        self.assertIs(self.game.current_player(), self.bill)
        self.assertIsNone(self.game.get_winner())
        self.game.submit_move(BLACK, P(4, 3), P(6, 5))
        self.assertEqual(self.game.get_black_captures(), 2)
        self.assertIs(self.game.current_player(), self.ted)

    def test_failed_submit_leaves_game_unchanged(self):
        before = self.game.get_current_state()
        with self.assertRaises(NotCurrentColor):
            self.game.submit_move(RED, P(5, 0), P(4, 1))
        with self.assertRaises(IllegalMove):
            self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        self.assertIs(self.game.get_current_state(), before)
        self.assertEqual(before.board, Board.standard())

    def test_win_by_elimination(self):
        self.force_state({P(2, 1): BLACK, P(3, 2): RED})
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        self.assertIs(self.game.get_winner(), self.bill)

    def test_win_by_blockade(self):
        # red's only man is hemmed in on its own back rank
        self.force_state(
            {P(0, 1): BLACK, P(6, 1): BLACK, P(5, 2): BLACK, P(7, 0): RED}
        )
        self.game.submit_move(BLACK, P(0, 1), P(1, 0))
        self.assertIs(self.game.get_current_state().current_color, PieceColor.RED)
        self.assertIs(self.game.get_winner(), self.bill)

    def test_red_wins_when_black_is_wiped_out(self):
        self.force_state({P(4, 3): BLACK, P(5, 4): RED, P(0, 7): BLACK}, PieceColor.RED)
        self.game.submit_move(RED, P(5, 4), P(3, 2))
        self.assertIsNone(self.game.get_winner())
        self.force_state({P(4, 3): BLACK, P(5, 4): RED}, PieceColor.RED)
        self.game.submit_move(RED, P(5, 4), P(3, 2))
        self.assertIs(self.game.get_winner(), self.ted)

    def test_no_moves_after_game_over(self):
        self.force_state({P(2, 1): BLACK, P(3, 2): RED})
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        with self.assertRaises(GameOver):
            self.game.advance_turn(GameState.initial())
        with self.assertRaises(GameOver):
            self.game.submit_move(BLACK, P(4, 3), P(5, 4))

    def test_capture_counts_never_decrease(self):
        self.force_state(
            {P(2, 1): BLACK, P(2, 5): BLACK, P(3, 2): RED, P(6, 5): RED, P(7, 4): RED},
        )
        counts = []
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        counts.append(self.game.get_black_captures())
        self.game.submit_move(RED, P(6, 5), P(5, 6))
        counts.append(self.game.get_black_captures())
        self.game.submit_move(BLACK, P(2, 5), P(3, 6))
        counts.append(self.game.get_black_captures())
        self.assertEqual(counts, sorted(counts))
        self.assertEqual(counts[-1], 1)

    def test_reset_game(self):
        board = Board.standard().with_piece(P(3, 2), RED)
        self.game.current_state = GameState(board=board, current_color=PieceColor.BLACK)
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        self.game.submit_move(RED, P(5, 4), P(3, 2))
        self.assertEqual(self.game.get_black_captures(), 1)
        self.assertEqual(self.game.get_red_captures(), 1)

        self.game.reset_game()
        state = self.game.get_current_state()
        self.assertEqual(state.board, Board.standard())
        self.assertEqual(len(list(state.board.pieces())), 24)
        self.assertIs(state.current_color, PieceColor.BLACK)
        self.assertEqual(self.game.get_black_captures(), 0)
        self.assertEqual(self.game.get_red_captures(), 0)
        self.assertIsNone(self.game.get_winner())

    def test_reset_clears_winner(self):
        self.force_state({P(2, 1): BLACK, P(3, 2): RED})
        self.game.submit_move(BLACK, P(2, 1), P(4, 3))
        self.assertIsNotNone(self.game.get_winner())
        self.game.reset_game()
        self.assertIsNone(self.game.get_winner())
        self.game.submit_move(BLACK, P(2, 1), P(3, 2))


if __name__ == "__main__":
    unittest.main()
