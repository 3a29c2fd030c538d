"""
Match state for TicTacToe Arena.
Tracks the board, whose turn it is, scores, clocks and the AI ramp.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .board import Board, Player
from .config import GameConfig


class Phase(Enum):
    """Where the match is in its lifecycle."""
    AWAITING_MODE_SELECTION = "awaiting_mode_selection"
    IN_PROGRESS = "in_progress"
    ROUND_OVER = "round_over"


class Mode(Enum):
    """Who plays O."""
    PVP = "pvp"   # Two humans share the board
    AI = "ai"     # Human is X, the AI is O


@dataclass(frozen=True)
class RoundResult:
    """How a round ended. winner is None for a draw."""
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def _per_player(value):
    return {Player.X: value, Player.O: value}


@dataclass
class MatchState:
    """
    The complete state of one match.

    Tracks:
    - The board and whose turn it is
    - Phase (mode selection, round in progress, round over) and mode
    - Scores and cumulative thinking time per player (seconds)
    - AI level and how many AI rounds have been completed
    """

    phase: Phase = Phase.AWAITING_MODE_SELECTION
    mode: Mode = Mode.PVP
    board: Board = field(default_factory=Board)
    current_player: Player = Player.X

    # True while a round is being played
    active: bool = False

    scores: Dict[Player, int] = field(default_factory=lambda: _per_player(0))
    elapsed: Dict[Player, float] = field(default_factory=lambda: _per_player(0.0))

    ai_level: int = GameConfig.AI_LEVEL_START
    ai_games_played: int = 0

    # Set when a round ends
    result: Optional[RoundResult] = None

    # Clock reading (ms) when the current turn started
    turn_started_ms: float = 0.0

    def is_ai_controlled(self, player: Player) -> bool:
        return self.mode == Mode.AI and player == Player.O

    def reset_match_totals(self):
        """Zero scores and clocks and put the AI back to its first level."""
        self.scores = _per_player(0)
        self.elapsed = _per_player(0.0)
        self.ai_level = GameConfig.AI_LEVEL_START
        self.ai_games_played = 0
