"""
Game configuration for TicTacToe Arena.
All the tuning values for the board, the AI ramp and the timers.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune how the match plays!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # ==================== AI SETTINGS ====================
    # Level 1-2 = easy (random), 3-4 = medium (win/block), 5+ = hard (minimax)
    AI_LEVEL_START = 1
    AI_LEVEL_MAX = 9
    EASY_MAX_LEVEL = 2
    MEDIUM_MAX_LEVEL = 4

    # The level goes up by one after this many finished rounds against the AI
    ROUNDS_PER_LEVEL = 3

    # Terminal scores, from O's point of view
    WIN_SCORE = 10

    # ==================== TIMING SETTINGS (milliseconds) ====================
    # "Thinking" delay: max(MIN, BASE - (level - 1) * STEP)
    AI_DELAY_BASE_MS = 800
    AI_DELAY_STEP_MS = 100
    AI_DELAY_MIN_MS = 200

    # How often the elapsed-time display is refreshed
    TICK_INTERVAL_MS = 100

    # ==================== DISPLAY SETTINGS ====================
    BOARD_IMAGE_SIZE = 360
    SCREENSHOT_PATTERN = "tictactoe_{timestamp}.png"

    @classmethod
    def ai_delay_ms(cls, level: int) -> int:
        """Delay before the AI plays at the given level."""
        return max(cls.AI_DELAY_MIN_MS, cls.AI_DELAY_BASE_MS - (level - 1) * cls.AI_DELAY_STEP_MS)
