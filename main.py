"""
Console runner for TicTacToe Arena.

Play in the terminal, against a friend or against the AI:
- Type a cell number (0-8) to play
- 'p' play again, 'n' new game, 'b' back to mode selection, 'q' quit

Run with --ui to open the Tkinter window instead.
"""

import argparse
import logging
import random
from typing import Optional

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Player
from tictactoe.clock import EventLoop, MonotonicClock
from tictactoe.game_state import Mode, Phase, RoundResult
from tictactoe.match import MatchController, MatchListener
from tictactoe.renderer import format_seconds


class ConsoleListener(MatchListener):
    """Prints round results as they happen."""

    def __init__(self, match: MatchController):
        self.match = match

    def on_round_ended(self, result: RoundResult):
        state = self.match.state
        print("\n" + state.board.render_text())
        if result.is_draw:
            print("\n🤝 It's a DRAW!")
        else:
            print(f"\n🏆 {result.winner.value} WINS! (line {list(result.line)})")
        print(f"Score  X {state.scores[Player.X]} - {state.scores[Player.O]} O")
        elapsed_x, elapsed_o = self.match.display_times()
        print(f"Time   X {format_seconds(elapsed_x)}s - {format_seconds(elapsed_o)}s O")
        if state.mode == Mode.AI:
            print(f"AI level: {state.ai_level}")


class TicTacToeConsole:
    """
    Terminal game loop around a MatchController.

    Timers run on an EventLoop that is only pumped between prompts, so
    the AI move always completes before the next input is read.
    """

    def __init__(self, seed: Optional[int] = None):
        self.loop = EventLoop(MonotonicClock())
        rng = random.Random(seed)
        self.match = MatchController(
            scheduler=self.loop,
            ai=AIPlayer(Player.O, random_float=rng.random),
        )
        self.match.add_listener(ConsoleListener(self.match))
        self.is_running = False

    def start(self, mode: Optional[Mode] = None):
        """Start the game."""
        self.is_running = True
        if mode is not None:
            self.match.select_mode(mode)

        while self.is_running:
            self.loop.run_pending()
            phase = self.match.state.phase

            if phase == Phase.AWAITING_MODE_SELECTION:
                self._prompt_mode()
            elif self.match.ai_thinking:
                print("\n>>> AI thinking...")
                self.loop.run_for(self.match.ai_delay_ms)
            elif phase == Phase.IN_PROGRESS:
                self._prompt_move()
            else:
                self._prompt_round_over()

        self.match.go_back()

    def _prompt_mode(self):
        choice = input("\nChoose a mode: [1] Player vs Player  [2] Player vs AI  [q] Quit > ").strip().lower()
        if choice == "1":
            self.match.select_mode(Mode.PVP)
        elif choice == "2":
            self.match.select_mode(Mode.AI)
        elif choice == "q":
            self.is_running = False

    def _prompt_move(self):
        print("\n" + self.match.state.board.render_text())
        choice = input(f"\n{self.match.status_message} (0-8, n/b/q) > ").strip().lower()
        if choice.isdigit():
            if not self.match.submit_player_move(int(choice)):
                print("Invalid move, try again.")
        else:
            self._handle_command(choice)

    def _prompt_round_over(self):
        choice = input("\n[p] Play again  [n] New game  [b] Back  [q] Quit > ").strip().lower()
        if choice == "p":
            self.match.start_round(reset_all=False)
        else:
            self._handle_command(choice)

    def _handle_command(self, choice: str):
        if choice == "n":
            self.match.start_round(reset_all=True)
        elif choice == "b":
            self.match.go_back()
        elif choice == "q":
            print("\nGame quit by user.")
            self.is_running = False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Play TicTacToe Arena")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=None,
        help="Skip the mode selection (pvp or ai)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the easy/medium AI"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Open the Tkinter window instead of the console game"
    )

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.ui:
        from ui import TicTacToeUI
        TicTacToeUI(seed=args.seed).run()
        return

    print("\n" + "="*60)
    print("   TicTacToe Arena")
    print("="*60)
    print("   Type a cell number (0-8) to play.")
    print("="*60)

    game = TicTacToeConsole(seed=args.seed)
    game.start(Mode(args.mode) if args.mode else None)


if __name__ == "__main__":
    main()
