import itertools

import pytest

from tictactoe.board import Board, Player
from tictactoe.win_checker import WIN_LINES, Terminal, WinChecker


@pytest.fixture
def checker():
    return WinChecker()


class TestWinChecker:
    def test_eight_lines(self):
        assert len(WIN_LINES) == 8
        assert len(set(WIN_LINES)) == 8

    @pytest.mark.parametrize("line", WIN_LINES)
    def test_each_line_wins(self, checker, line):
        cells = [None] * 9
        for i in line:
            cells[i] = Player.O
        board = Board(cells)
        assert checker.check_win(board, Player.O)
        assert not checker.check_win(board, Player.X)
        assert checker.winning_line(board, Player.O) == line
        assert checker.check_winner(board) == Player.O

    def test_no_winner(self, checker):
        board = Board.from_string("XO_XO_O__")
        assert checker.check_winner(board) is None
        assert checker.winning_line(board, Player.X) is None

    def test_first_line_reported(self, checker):
        # Top row and left column both complete
        board = Board.from_string("XXXXOOXOO")
        assert checker.winning_line(board, Player.X) == (0, 1, 2)

    def test_draw(self, checker):
        board = Board.from_string("XOXXOOOXX")
        assert checker.is_draw(board)
        assert checker.evaluate_terminal(board) == Terminal.DRAW

    def test_full_board_with_win_is_not_draw(self, checker):
        board = Board.from_string("XXXOOXOXO")
        assert not checker.is_draw(board)

    def test_not_full_is_not_draw(self, checker):
        assert not checker.is_draw(Board.from_string("XOXXOOOX_"))

    def test_terminal_scores(self, checker):
        assert checker.evaluate_terminal(Board.from_string("OOOXX_X__")) == Terminal.O_WIN
        assert checker.evaluate_terminal(Board.from_string("XXXOO____")) == Terminal.X_WIN
        assert checker.evaluate_terminal(Board()) == Terminal.NON_TERMINAL
        assert Terminal.O_WIN.score == 10
        assert Terminal.X_WIN.score == -10
        assert Terminal.DRAW.score == 0
        assert not Terminal.NON_TERMINAL.is_terminal

    def test_accepts_tuples(self, checker):
        cells = (Player.X, Player.X, Player.X) + (None,) * 6
        assert checker.check_win(cells, Player.X)

    def test_check_win_matches_lines_exhaustively(self, checker):
        # Every assignment of X/O/empty to the 9 cells
        for cells in itertools.product((None, Player.X, Player.O), repeat=9):
            for player in Player:
                expected = any(all(cells[i] == player for i in line) for line in WIN_LINES)
                assert checker.check_win(cells, player) == expected

    def test_terminal_classification_exhaustive(self, checker):
        for cells in itertools.product((None, Player.X, Player.O), repeat=9):
            result = checker.evaluate_terminal(cells)
            has_win = checker.check_winner(cells) is not None
            has_empty = None in cells
            assert (result == Terminal.NON_TERMINAL) == (has_empty and not has_win)
