"""
Board renderer for TicTacToe Arena.
Draws the board into a Pillow image (used by the Tk front-end and
for screenshots).
"""

import time
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .board import Cell, Player
from .config import GameConfig


# Colours per theme (RGB)
THEMES = {
    "light": {
        "background": (245, 245, 245),
        "grid": (60, 60, 60),
        "x": (220, 70, 70),
        "o": (40, 120, 220),
        "win": (255, 215, 0),
    },
    "dark": {
        "background": (26, 26, 46),
        "grid": (0, 212, 255),
        "x": (255, 107, 107),
        "o": (0, 255, 136),
        "win": (120, 100, 20),
    },
}


def format_seconds(seconds: float) -> str:
    """Elapsed time as shown next to each player, e.g. '12.3'."""
    return f"{seconds:.1f}"


class BoardRenderer:
    """
    Renders a 3x3 board as an image.

    The winning line, if given, is drawn with a highlighted background.
    """

    def __init__(self, size: int = GameConfig.BOARD_IMAGE_SIZE, theme: str = "light"):
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}. Choose from {sorted(THEMES)}")
        self.size = size
        self.theme = theme
        self.cell_size = size // GameConfig.BOARD_SIZE

    def toggle_theme(self) -> str:
        """Switch between light and dark. Returns the new theme name."""
        self.theme = "dark" if self.theme == "light" else "light"
        return self.theme

    def cell_box(self, index: int) -> Tuple[int, int, int, int]:
        """Pixel box (left, top, right, bottom) of a cell."""
        row, col = divmod(index, GameConfig.BOARD_SIZE)
        left = col * self.cell_size
        top = row * self.cell_size
        return left, top, left + self.cell_size, top + self.cell_size

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """Cell index under a pixel, or None if outside the board."""
        if not (0 <= x < self.cell_size * GameConfig.BOARD_SIZE and
                0 <= y < self.cell_size * GameConfig.BOARD_SIZE):
            return None
        return (y // self.cell_size) * GameConfig.BOARD_SIZE + (x // self.cell_size)

    def render(
        self,
        cells: Sequence[Cell],
        winning_line: Optional[Sequence[int]] = None
    ) -> Image.Image:
        """
        Draw the board.

        Args:
            cells: The 9 cells.
            winning_line: Indices to highlight, if a round was won.

        Returns:
            An RGB image of size x size pixels.
        """
        colors = THEMES[self.theme]
        image = Image.new("RGB", (self.size, self.size), colors["background"])
        draw = ImageDraw.Draw(image)

        for index in winning_line or ():
            draw.rectangle(self.cell_box(index), fill=colors["win"])

        # Grid lines
        width = max(2, self.size // 90)
        for i in range(1, GameConfig.BOARD_SIZE):
            pos = i * self.cell_size
            draw.line([(pos, 0), (pos, self.size)], fill=colors["grid"], width=width)
            draw.line([(0, pos), (self.size, pos)], fill=colors["grid"], width=width)

        # Marks
        pad = self.cell_size // 5
        stroke = max(3, self.cell_size // 12)
        for index, cell in enumerate(cells):
            if cell is None:
                continue
            left, top, right, bottom = self.cell_box(index)
            box = (left + pad, top + pad, right - pad, bottom - pad)
            if cell == Player.X:
                draw.line([box[:2], box[2:]], fill=colors["x"], width=stroke)
                draw.line([(box[0], box[3]), (box[2], box[1])], fill=colors["x"], width=stroke)
            else:
                draw.ellipse(box, outline=colors["o"], width=stroke)

        return image

    def save(
        self,
        cells: Sequence[Cell],
        winning_line: Optional[Sequence[int]] = None,
        path: Optional[str] = None
    ) -> str:
        """Save a PNG of the board. Returns the file name used."""
        if path is None:
            path = GameConfig.SCREENSHOT_PATTERN.format(timestamp=int(time.time()))
        self.render(cells, winning_line).save(path, format="PNG")
        return path
