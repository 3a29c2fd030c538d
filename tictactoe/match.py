"""
Match controller for TicTacToe Arena.

Sequences turns, keeps scores and per-player clocks, runs the AI
opponent after its "thinking" delay and ramps up its level.

Game flow:
1. A mode is selected (two players, or player vs AI)
2. X moves, then O, until a line is complete or the board is full
3. The round is over; play again keeps scores, new game resets them
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .ai_player import AIPlayer, NoMovesAvailable
from .board import Cell, Player
from .clock import EventLoop
from .config import GameConfig
from .game_state import MatchState, Mode, Phase, RoundResult
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class MatchListener:
    """
    Receives match events. Front-ends subclass this and override
    the callbacks they care about; the defaults do nothing.
    """

    def on_phase_changed(self, phase: Phase):
        pass

    def on_board_changed(self, cells: Tuple[Cell, ...]):
        pass

    def on_turn_changed(self, player: Player):
        pass

    def on_round_ended(self, result: RoundResult):
        pass

    def on_timer_tick(self, elapsed_x: float, elapsed_o: float):
        pass


class MatchController:
    """
    Runs one match. Each controller owns its own MatchState, so several
    matches can be driven side by side.

    Only one thing touches the state at a time: either a human move, a
    button press, or a timer callback. While the AI is thinking, human
    moves are ignored.
    """

    def __init__(
        self,
        scheduler=None,
        ai: Optional[AIPlayer] = None,
        listeners: Iterable[MatchListener] = (),
    ):
        """
        Initialize the match controller.

        Args:
            scheduler: Provides schedule_after(delay_ms, callback) -> handle,
                cancel(handle) and a .clock with now_ms(). Defaults to an
                EventLoop on the real clock.
            ai: The AI opponent (default: AIPlayer playing O).
            listeners: Objects notified of match events.
        """
        self.scheduler = scheduler if scheduler is not None else EventLoop()
        self.clock = self.scheduler.clock
        self.ai = ai if ai is not None else AIPlayer(Player.O)
        self.listeners: List[MatchListener] = list(listeners)

        self.state = MatchState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._tick_handle = None
        self._ai_handle = None

    # ==================== EVENTS ====================

    def add_listener(self, listener: MatchListener):
        self.listeners.append(listener)

    def _emit(self, event: str, *args):
        for listener in self.listeners:
            getattr(listener, event)(*args)

    def _set_phase(self, phase: Phase):
        self.state.phase = phase
        self._emit("on_phase_changed", phase)

    # ==================== QUERIES ====================

    @property
    def is_ai_turn(self) -> bool:
        return self.state.active and self.state.is_ai_controlled(self.state.current_player)

    @property
    def ai_thinking(self) -> bool:
        """True between a hand-over to the AI and the AI's move."""
        return self._ai_handle is not None

    @property
    def ai_delay_ms(self) -> int:
        return GameConfig.ai_delay_ms(self.state.ai_level)

    def display_times(self) -> Tuple[float, float]:
        """
        Elapsed seconds for X and O, including the turn being played.
        Does not change the cumulative totals.
        """
        state = self.state
        running = 0.0
        if state.active:
            running = (self.clock.now_ms() - state.turn_started_ms) / 1000.0
        elapsed_x = state.elapsed[Player.X] + (running if state.current_player == Player.X else 0.0)
        elapsed_o = state.elapsed[Player.O] + (running if state.current_player == Player.O else 0.0)
        return elapsed_x, elapsed_o

    @property
    def status_message(self) -> str:
        """One-line status for the front-end."""
        state = self.state
        if state.phase == Phase.AWAITING_MODE_SELECTION:
            return "Choose a mode"
        if state.phase == Phase.ROUND_OVER:
            if state.result is None:
                return "Game Over"
            if state.result.is_draw:
                return "It's a draw!"
            return f"{state.result.winner.value} wins!"
        if self.is_ai_turn:
            return "AI thinking…"
        return f"Player {state.current_player.value}'s turn"

    # ==================== LIFECYCLE ====================

    def select_mode(self, mode: Mode):
        """
        Leave mode selection and start a fresh match in the given mode.
        Scores, clocks and the AI ramp start over.
        """
        if self.state.phase != Phase.AWAITING_MODE_SELECTION:
            logger.debug("Ignoring mode selection while %s", self.state.phase.value)
            return
        self.state.mode = mode
        logger.info("Mode selected: %s", mode.value)
        self._begin_round(reset_all=True)

    def start_round(self, reset_all: bool = False):
        """
        Clear the board and start a round with X to play.

        Args:
            reset_all: Also zero the scores and clocks and reset the AI
                level (a new match rather than "play again").
        """
        if self.state.phase == Phase.AWAITING_MODE_SELECTION:
            logger.debug("Ignoring new round before a mode is selected")
            return
        self._begin_round(reset_all)

    def _begin_round(self, reset_all: bool):
        self._cancel_ai_move()
        state = self.state
        state.board.clear()
        state.current_player = Player.X
        state.active = True
        state.result = None
        if reset_all:
            state.reset_match_totals()

        self._set_phase(Phase.IN_PROGRESS)
        self._emit("on_board_changed", state.board.cells)
        self._emit("on_turn_changed", state.current_player)
        self._start_timer()

    def go_back(self):
        """Abandon the match and return to mode selection."""
        self._cancel_ai_move()
        self._stop_timer()
        self.state.active = False
        self._set_phase(Phase.AWAITING_MODE_SELECTION)
        logger.info("Back to mode selection")

    # ==================== MOVES ====================

    def submit_player_move(self, index: int) -> bool:
        """
        Play a human move. Invalid moves (round over, occupied cell,
        AI's turn) are ignored.

        Returns:
            True if the move was played.
        """
        result = self.validator.validate_move(self.state, index)
        if not result.is_valid:
            logger.debug("Move %s ignored: %s", index, result.error_message)
            return False

        self._play(index)
        return True

    def ai_move(self):
        """Play the AI's move. Runs from the scheduler after the thinking delay."""
        self._ai_handle = None
        state = self.state
        if not self.is_ai_turn or state.phase != Phase.IN_PROGRESS:
            logger.debug("Stale AI move ignored")
            return

        try:
            index = self.ai.select_move(state.board, state.ai_level)
        except NoMovesAvailable:
            logger.error("AI had no move on board %r; ending round as a draw", state.board)
            self._accumulate_time()
            self._end_round(None)
            return

        self._play(index)

    def _play(self, index: int):
        """Place the current player's mark and hand over or end the round."""
        state = self.state
        player = state.current_player

        self._accumulate_time()
        state.board.place(index, player)
        logger.debug("%s plays %d", player.value, index)
        self._emit("on_board_changed", state.board.cells)

        if self.win_checker.check_win(state.board, player):
            self._end_round(player)
            return
        if self.win_checker.is_draw(state.board):
            self._end_round(None)
            return

        state.current_player = player.opposite()
        state.turn_started_ms = self.clock.now_ms()
        self._emit("on_turn_changed", state.current_player)

        if self.is_ai_turn:
            self._ai_handle = self.scheduler.schedule_after(self.ai_delay_ms, self.ai_move)

    def _end_round(self, winner: Optional[Player]):
        state = self.state
        state.active = False
        self._stop_timer()

        line = None
        if winner is not None:
            state.scores[winner] += 1
            line = self.win_checker.winning_line(state.board, winner)
        state.result = RoundResult(winner=winner, line=line)

        if state.mode == Mode.AI:
            self._ramp_ai_level()

        logger.info("Round over: %s (X %d - O %d)", self.status_message, state.scores[Player.X], state.scores[Player.O])
        self._set_phase(Phase.ROUND_OVER)
        self._emit("on_round_ended", state.result)

    def _ramp_ai_level(self):
        """One level up every few finished AI rounds, up to the cap."""
        state = self.state
        state.ai_games_played += 1
        if state.ai_games_played % GameConfig.ROUNDS_PER_LEVEL == 0:
            new_level = min(state.ai_level + 1, GameConfig.AI_LEVEL_MAX)
            if new_level != state.ai_level:
                logger.info("AI level up: %d -> %d", state.ai_level, new_level)
            state.ai_level = new_level

    def _cancel_ai_move(self):
        if self._ai_handle is not None:
            self.scheduler.cancel(self._ai_handle)
            self._ai_handle = None

    # ==================== TIMER ====================

    def _accumulate_time(self):
        """Add the finished turn to the mover's total."""
        state = self.state
        now = self.clock.now_ms()
        state.elapsed[state.current_player] += (now - state.turn_started_ms) / 1000.0
        state.turn_started_ms = now

    def _start_timer(self):
        self.state.turn_started_ms = self.clock.now_ms()
        self._stop_timer()
        self._tick_handle = self.scheduler.schedule_after(GameConfig.TICK_INTERVAL_MS, self._tick)

    def _stop_timer(self):
        if self._tick_handle is not None:
            self.scheduler.cancel(self._tick_handle)
            self._tick_handle = None
        self._emit("on_timer_tick", *self.display_times())

    def _tick(self):
        self._emit("on_timer_tick", *self.display_times())
        self._tick_handle = self.scheduler.schedule_after(GameConfig.TICK_INTERVAL_MS, self._tick)
