"""
TicTacToe Arena UI
A graphical interface for TicTacToe Arena using Tkinter.

Shows:
- Mode selection (two players or player vs AI)
- The board, drawn with Pillow (click a cell to play)
- Scores, per-player time and game status
- Play again / new game / back / theme buttons ('s' saves a screenshot)
"""

import argparse
import logging
import random
import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from PIL import ImageTk

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Cell, Player
from tictactoe.clock import MonotonicClock
from tictactoe.game_state import Mode, Phase, RoundResult
from tictactoe.match import MatchController, MatchListener
from tictactoe.renderer import BoardRenderer, format_seconds


class TkScheduler:
    """Runs match timers on the Tk event loop."""

    def __init__(self, root: tk.Tk):
        self.root = root
        self.clock = MonotonicClock()

    def schedule_after(self, delay_ms: float, callback) -> str:
        return self.root.after(int(delay_ms), callback)

    def cancel(self, handle: Optional[str]):
        if handle is not None:
            self.root.after_cancel(handle)


class TicTacToeUI(MatchListener):
    """
    Main UI class for TicTacToe Arena.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the UI."""
        self.renderer = BoardRenderer()
        self.cells: Tuple[Cell, ...] = (None,) * 9
        self.board_photo: Optional[ImageTk.PhotoImage] = None

        # Create UI
        self._create_ui()

        rng = random.Random(seed)
        self.match = MatchController(
            scheduler=TkScheduler(self.root),
            ai=AIPlayer(Player.O, random_float=rng.random),
            listeners=[self],
        )
        self.on_phase_changed(Phase.AWAITING_MODE_SELECTION)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe Arena")
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'))
        style.configure('Status.TLabel', font=('Segoe UI', 12))
        style.configure('TButton', font=('Segoe UI', 10, 'bold'))

        # Mode selection screen
        self.mode_frame = ttk.Frame(self.root, padding=30)
        ttk.Label(self.mode_frame, text="Choose a mode", style='Title.TLabel').pack(pady=(0, 15))
        ttk.Button(
            self.mode_frame, text="Player vs Player", width=22,
            command=lambda: self.match.select_mode(Mode.PVP)
        ).pack(pady=5)
        ttk.Button(
            self.mode_frame, text="Player vs AI", width=22,
            command=lambda: self.match.select_mode(Mode.AI)
        ).pack(pady=5)

        # Game screen
        self.game_frame = ttk.Frame(self.root, padding=10)

        score_frame = ttk.Frame(self.game_frame)
        score_frame.pack(fill=tk.X)
        self.score_x_label = ttk.Label(score_frame, text="X: 0")
        self.score_x_label.pack(side=tk.LEFT)
        self.score_o_label = ttk.Label(score_frame, text="O: 0")
        self.score_o_label.pack(side=tk.RIGHT)

        time_frame = ttk.Frame(self.game_frame)
        time_frame.pack(fill=tk.X)
        self.time_x_label = ttk.Label(time_frame, text="0.0")
        self.time_x_label.pack(side=tk.LEFT)
        self.time_o_label = ttk.Label(time_frame, text="0.0")
        self.time_o_label.pack(side=tk.RIGHT)

        self.board_canvas = tk.Canvas(
            self.game_frame,
            width=self.renderer.size,
            height=self.renderer.size,
            highlightthickness=0
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_click)

        self.status_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        button_frame = ttk.Frame(self.game_frame)
        button_frame.pack(pady=5)
        self.play_again_btn = ttk.Button(
            button_frame, text="Play Again",
            command=lambda: self.match.start_round(reset_all=False)
        )
        ttk.Button(
            button_frame, text="New Game",
            command=lambda: self.match.start_round(reset_all=True)
        ).pack(side=tk.LEFT, padx=3)
        ttk.Button(button_frame, text="Back", command=lambda: self.match.go_back()).pack(side=tk.LEFT, padx=3)
        ttk.Button(button_frame, text="Theme", command=self._toggle_theme).pack(side=tk.LEFT, padx=3)

        self.root.bind("<Key-s>", self._save_screenshot)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== MATCH EVENTS ====================

    def on_phase_changed(self, phase: Phase):
        if phase == Phase.AWAITING_MODE_SELECTION:
            self.game_frame.pack_forget()
            self.mode_frame.pack(fill=tk.BOTH, expand=True)
            return

        self.mode_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True)
        if phase == Phase.ROUND_OVER:
            self.play_again_btn.pack(side=tk.LEFT, padx=3)
        else:
            self.play_again_btn.pack_forget()
        self._update_status()

    def on_board_changed(self, cells: Tuple[Cell, ...]):
        self.cells = cells
        self._draw_board()

    def on_turn_changed(self, player: Player):
        self._update_status()

    def on_round_ended(self, result: RoundResult):
        self._draw_board()
        self._update_status()
        self.root.bell()

    def on_timer_tick(self, elapsed_x: float, elapsed_o: float):
        self.time_x_label.configure(text=format_seconds(elapsed_x))
        self.time_o_label.configure(text=format_seconds(elapsed_o))

    # ==================== DRAWING ====================

    def _draw_board(self):
        """Redraw the board image on the canvas."""
        result = self.match.state.result
        line = result.line if result is not None else None
        image = self.renderer.render(self.cells, line)
        # Keep a reference, Tk does not
        self.board_photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self.board_photo)

    def _update_status(self):
        self.status_label.configure(text=self.match.status_message)
        scores = self.match.state.scores
        self.score_x_label.configure(text=f"X: {scores[Player.X]}")
        self.score_o_label.configure(text=f"O: {scores[Player.O]}")

    # ==================== INPUT ====================

    def _on_click(self, event):
        index = self.renderer.cell_at(event.x, event.y)
        if index is not None:
            self.match.submit_player_move(index)

    def _toggle_theme(self):
        theme = self.renderer.toggle_theme()
        self.board_canvas.configure(bg='#1a1a2e' if theme == "dark" else '#f5f5f5')
        self._draw_board()

    def _save_screenshot(self, event=None):
        result = self.match.state.result
        filename = self.renderer.save(self.cells, result.line if result else None)
        print(f"Saved: {filename}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.match.go_back()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe Arena UI")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the easy/medium AI")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("\n" + "="*60)
    print("   TicTacToe Arena UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
