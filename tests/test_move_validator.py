from tictactoe.board import Player
from tictactoe.game_state import MatchState, Mode, Phase
from tictactoe.move_validator import MoveValidator


def running_state(mode=Mode.PVP):
    return MatchState(phase=Phase.IN_PROGRESS, mode=mode, active=True)


class TestMoveValidator:
    def test_valid_move(self):
        result = MoveValidator().validate_move(running_state(), 4)
        assert result.is_valid
        assert result.error_message is None

    def test_no_round(self):
        result = MoveValidator().validate_move(MatchState(), 4)
        assert not result.is_valid
        assert "No round" in result.error_message

    def test_round_over(self):
        state = running_state()
        state.phase = Phase.ROUND_OVER
        state.active = False
        assert not MoveValidator().validate_move(state, 4).is_valid

    def test_out_of_range(self):
        result = MoveValidator().validate_move(running_state(), 9)
        assert not result.is_valid
        assert "Invalid cell" in result.error_message

    def test_occupied(self):
        state = running_state()
        state.board.place(4, Player.X)
        state.current_player = Player.O
        result = MoveValidator().validate_move(state, 4)
        assert not result.is_valid
        assert "occupied" in result.error_message

    def test_ai_turn(self):
        state = running_state(Mode.AI)
        state.current_player = Player.O
        result = MoveValidator().validate_move(state, 0)
        assert not result.is_valid
        assert "AI" in result.error_message

    def test_o_is_human_in_pvp(self):
        state = running_state(Mode.PVP)
        state.current_player = Player.O
        assert MoveValidator().validate_move(state, 0).is_valid
