"""
TicTacToe Arena
===============
A 3x3 tic-tac-toe game for two players or a player against the computer.

The computer opponent has three tiers (random, win/block, minimax) and
ramps up its level as more rounds are played in the same match.
"""

__version__ = "1.0.0"

from .board import Board, Player, InvalidMove
from .win_checker import WinChecker, Terminal, WIN_LINES
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, NoMovesAvailable
from .game_state import MatchState, Mode, Phase, RoundResult
from .match import MatchController, MatchListener
