"""
Board model for TicTacToe Arena.
Holds the 9 cells of the grid and who occupies each one.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A cell is either empty (None) or holds a player's mark
Cell = Optional[Player]


class InvalidMove(ValueError):
    """Raised when a mark cannot be placed at the requested cell."""


class Board:
    """
    The 3x3 grid, stored as a flat list of 9 cells.

    Index layout:
        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    Only cells that were explicitly set are non-empty. Whether the game
    is still running is checked by the caller, not here.
    """

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        if cells is None:
            self._cells: List[Cell] = [None] * GameConfig.BOARD_CELLS
        else:
            self._cells = list(cells)
            if len(self._cells) != GameConfig.BOARD_CELLS:
                raise ValueError(f"A board has {GameConfig.BOARD_CELLS} cells, got {len(self._cells)}")

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a 9-character string like "XO_X_____".

        Any character other than X or O is an empty cell.
        """
        marks = {"X": Player.X, "O": Player.O}
        return cls(marks.get(ch.upper()) for ch in layout)

    @staticmethod
    def _check_index(index: int):
        if not 0 <= index < GameConfig.BOARD_CELLS:
            raise InvalidMove(f"Invalid cell {index}. Must be 0-{GameConfig.BOARD_CELLS - 1}.")

    def is_empty(self, index: int) -> bool:
        """True if nobody has played at this cell yet."""
        self._check_index(index)
        return self._cells[index] is None

    def place(self, index: int, player: Player):
        """
        Put a player's mark on the board.

        Args:
            index: Cell index (0-8).
            player: Who is playing.

        Raises:
            InvalidMove: If the index is out of range or the cell is taken.
        """
        self._check_index(index)
        if self._cells[index] is not None:
            raise InvalidMove(f"Cell {index} is already occupied by {self._cells[index].value}")
        self._cells[index] = player

    def clear(self):
        """Reset all cells to empty."""
        self._cells = [None] * GameConfig.BOARD_CELLS

    def empty_indices(self) -> List[int]:
        """All unoccupied cell indices, in ascending order."""
        return [i for i, cell in enumerate(self._cells) if cell is None]

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Read-only snapshot of the cells."""
        return tuple(self._cells)

    def copy(self) -> "Board":
        return Board(self._cells)

    def __getitem__(self, index: int) -> Cell:
        self._check_index(index)
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        layout = "".join(cell.value if cell else "_" for cell in self._cells)
        return f"Board({layout!r})"

    def render_text(self) -> str:
        """
        Text drawing of the board for the console.

        Empty cells show their index so the player knows what to type.
        """
        lines = []
        for row in range(GameConfig.BOARD_SIZE):
            start = row * GameConfig.BOARD_SIZE
            row_cells = self._cells[start:start + GameConfig.BOARD_SIZE]
            lines.append(" " + " | ".join(
                cell.value if cell else str(start + col)
                for col, cell in enumerate(row_cells)
            ))
            if row < GameConfig.BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)
