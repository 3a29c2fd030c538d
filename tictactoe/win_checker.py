"""
Win checker for TicTacToe Arena.
Checks if a player has won, if the game is a draw, and scores
finished positions for the AI search.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from .board import Cell, Player
from .config import GameConfig


# All possible winning lines, as triples of cell indices.
# The order matters only for which line gets highlighted.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Terminal(Enum):
    """
    Result of evaluating a position, scored from O's point of view.

    Positive favours O (the AI), negative favours X, zero is a draw.
    """
    O_WIN = GameConfig.WIN_SCORE
    X_WIN = -GameConfig.WIN_SCORE
    DRAW = 0
    NON_TERMINAL = None

    @property
    def score(self) -> Optional[int]:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self is not Terminal.NON_TERMINAL


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Every method takes a Board or any 9-long sequence of cells.
    """

    WINNING_LINES = WIN_LINES

    def check_win(self, board: Sequence[Cell], player: Player) -> bool:
        """True if the player fully occupies at least one winning line."""
        return self.winning_line(board, player) is not None

    def winning_line(self, board: Sequence[Cell], player: Player) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line (in WIN_LINES order) held by the player.

        Args:
            board: The cells to check.
            player: Whose line to look for.

        Returns:
            The line as a triple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if all(board[i] == player for i in line):
                return line
        return None

    def check_winner(self, board: Sequence[Cell]) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for a, b, c in self.WINNING_LINES:
            if board[a] is not None and board[a] == board[b] == board[c]:
                return board[a]
        return None

    def is_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has won.
        """
        if self.check_winner(board) is not None:
            return False
        return all(cell is not None for cell in board)

    def evaluate_terminal(self, board: Sequence[Cell]) -> Terminal:
        """
        Score a position for the minimax search.

        Returns:
            O_WIN / X_WIN if a line is complete, DRAW if the board is full,
            NON_TERMINAL otherwise.
        """
        winner = self.check_winner(board)
        if winner == Player.O:
            return Terminal.O_WIN
        if winner == Player.X:
            return Terminal.X_WIN
        if all(cell is not None for cell in board):
            return Terminal.DRAW
        return Terminal.NON_TERMINAL
