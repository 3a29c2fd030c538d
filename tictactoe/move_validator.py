"""
Move validator for TicTacToe Arena.
Validates that a human move follows the rules.
"""

from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .game_state import MatchState, Phase


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. A round must be in progress
    2. The cell index must be 0-8
    3. It must be a human's turn (not while the AI is thinking)
    4. Can only place on empty cells
    """

    def validate_move(self, state: MatchState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            state: Current match state.
            index: Cell the player wants to mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if state.phase != Phase.IN_PROGRESS or not state.active:
            return ValidationResult(
                is_valid=False,
                error_message="No round in progress!"
            )

        if not 0 <= index < GameConfig.BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.BOARD_CELLS - 1}."
            )

        if state.is_ai_controlled(state.current_player):
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the AI to play!"
            )

        if not state.board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {state.board[index].value}"
            )

        return ValidationResult(is_valid=True)
