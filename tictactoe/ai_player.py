"""
AI player for TicTacToe Arena.
Picks a move at one of three difficulty tiers:
random, win/block heuristic, or full Minimax search.
"""

import logging
import random
from enum import Enum
from functools import lru_cache
from typing import Callable, List, Sequence, Tuple

from .board import Cell, Player
from .config import GameConfig
from .win_checker import Terminal, WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


class NoMovesAvailable(RuntimeError):
    """Raised when the AI is asked to move on a full board."""


class Difficulty(Enum):
    """AI difficulty tiers."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win if possible, else block, else random
    HARD = 3      # Full minimax

    @classmethod
    def for_level(cls, level: int) -> "Difficulty":
        """Map an integer AI level (1-9) to its tier."""
        if level <= GameConfig.EASY_MAX_LEVEL:
            return cls.EASY
        if level <= GameConfig.MEDIUM_MAX_LEVEL:
            return cls.MEDIUM
        return cls.HARD


@lru_cache(maxsize=None)
def _minimax(cells: Tuple[Cell, ...], o_to_move: bool) -> int:
    """
    Minimax value of a position, from O's point of view.

    The board is an immutable tuple: each child position is a new tuple,
    so sibling branches never see each other's marks. Positions are
    cached, there are only a few thousand reachable ones.

    Args:
        cells: The 9 cells.
        o_to_move: True if O (the maximizing side) plays next.

    Returns:
        10 minus the number of marks on the board if O wins with best
        play, -10 plus that number if X wins, 0 for a draw. Faster wins
        and slower losses score higher, so a lost position still blocks.
    """
    result = _win_checker.evaluate_terminal(cells)
    if result.is_terminal:
        ply = sum(cell is not None for cell in cells)
        if result == Terminal.O_WIN:
            return result.score - ply
        if result == Terminal.X_WIN:
            return result.score + ply
        return result.score

    mark = Player.O if o_to_move else Player.X
    scores = (
        _minimax(cells[:i] + (mark,) + cells[i + 1:], not o_to_move)
        for i, cell in enumerate(cells)
        if cell is None
    )
    return max(scores) if o_to_move else min(scores)


class AIPlayer:
    """
    An AI that plays TicTacToe at a given level.

    Levels 1-2 pick a random empty cell, levels 3-4 take a win or block
    the opponent's win, levels 5+ use Minimax and never lose.
    """

    def __init__(self, player: Player = Player.O, random_float: Callable[[], float] = random.random):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            random_float: Source of floats in [0, 1), used by the easy and
                medium tiers. Pass a seeded generator for reproducible games.
        """
        self.player = player
        self.random_float = random_float

    def select_move(self, board: Sequence[Cell], level: int) -> int:
        """
        Choose the cell to play.

        Args:
            board: Current board (a Board or 9 cells).
            level: AI level; decides the difficulty tier.

        Returns:
            Index of an empty cell.

        Raises:
            NoMovesAvailable: If the board has no empty cell.
        """
        cells = tuple(board)
        empties = [i for i, cell in enumerate(cells) if cell is None]
        if not empties:
            raise NoMovesAvailable("AI asked to move on a full board")

        difficulty = Difficulty.for_level(level)
        if difficulty == Difficulty.EASY:
            move = self._random_move(empties)
        elif difficulty == Difficulty.MEDIUM:
            move = self._heuristic_move(cells, empties)
        else:
            move = self._best_move(cells, empties)

        logger.debug("AI %s (level %d, %s) plays %d", self.player.value, level, difficulty.name, move)
        return move

    def _random_move(self, empties: List[int]) -> int:
        """Uniformly random empty cell."""
        return empties[int(self.random_float() * len(empties))]

    def _heuristic_move(self, cells: Tuple[Cell, ...], empties: List[int]) -> int:
        """
        Take a winning cell if we have one, else block the opponent's
        winning cell, else play at random.

        The win pass runs over all cells before the block pass, so an own
        win always beats a block.
        """
        for mark in (self.player, self.player.opposite()):
            for i in empties:
                trial = cells[:i] + (mark,) + cells[i + 1:]
                if _win_checker.check_win(trial, mark):
                    return i
        return self._random_move(empties)

    def _best_move(self, cells: Tuple[Cell, ...], empties: List[int]) -> int:
        """
        Minimax over the full remaining game tree.

        Ties go to the lowest index, so the result is deterministic.
        """
        # Only one move left, just take it
        if len(empties) == 1:
            return empties[0]

        # Search values are O-positive; flip them when playing X
        sign = 1 if self.player == Player.O else -1
        o_to_move_next = self.player == Player.X

        best_score = float('-inf')
        best_move = empties[0]
        for i in empties:
            child = cells[:i] + (self.player,) + cells[i + 1:]
            score = sign * _minimax(child, o_to_move_next)
            if score > best_score:
                best_score = score
                best_move = i

        logger.debug("Minimax best move %d (score %d)", best_move, sign * best_score)
        return best_move
