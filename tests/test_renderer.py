import pytest

from tictactoe.board import Board
from tictactoe.renderer import THEMES, BoardRenderer, format_seconds


class TestBoardRenderer:
    def test_image_size(self):
        image = BoardRenderer(size=300).render(Board().cells)
        assert image.size == (300, 300)
        assert image.mode == "RGB"

    def test_empty_cell_is_background(self):
        renderer = BoardRenderer(size=300)
        image = renderer.render(Board().cells)
        assert image.getpixel((50, 50)) == THEMES["light"]["background"]

    def test_x_mark_drawn(self):
        renderer = BoardRenderer(size=300)
        image = renderer.render(Board.from_string("X________").cells)
        # Centre of cell 0 lies on both strokes of the X
        assert image.getpixel((50, 50)) == THEMES["light"]["x"]

    def test_winning_line_highlighted(self):
        renderer = BoardRenderer(size=300)
        board = Board.from_string("OOO_XX_X_")
        image = renderer.render(board.cells, winning_line=(0, 1, 2))
        # Corner of cell 2, away from the mark and the grid
        assert image.getpixel((95 + 200, 10)) == THEMES["light"]["win"]
        assert image.getpixel((10, 110)) == THEMES["light"]["background"]

    def test_toggle_theme(self):
        renderer = BoardRenderer(size=300)
        assert renderer.toggle_theme() == "dark"
        image = renderer.render(Board().cells)
        assert image.getpixel((50, 50)) == THEMES["dark"]["background"]
        assert renderer.toggle_theme() == "light"

    def test_unknown_theme(self):
        with pytest.raises(ValueError):
            BoardRenderer(theme="neon")

    @pytest.mark.parametrize("x,y,index", [(0, 0, 0), (150, 150, 4), (299, 299, 8), (250, 10, 2)])
    def test_cell_at(self, x, y, index):
        assert BoardRenderer(size=300).cell_at(x, y) == index

    def test_cell_at_outside(self):
        assert BoardRenderer(size=300).cell_at(300, 10) is None

    def test_save(self, tmp_path):
        path = tmp_path / "board.png"
        saved = BoardRenderer(size=120).save(Board.from_string("XO_______").cells, path=str(path))
        assert saved == str(path)
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_format_seconds():
    assert format_seconds(0) == "0.0"
    assert format_seconds(12.34) == "12.3"
    assert format_seconds(1.26) == "1.3"
