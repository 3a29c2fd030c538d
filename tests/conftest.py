import random

import pytest

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Player
from tictactoe.clock import EventLoop, ManualClock
from tictactoe.match import MatchController, MatchListener


class RecordingListener(MatchListener):
    """Keeps every event it receives, in order."""

    def __init__(self):
        self.events = []

    def on_phase_changed(self, phase):
        self.events.append(("phase", phase))

    def on_board_changed(self, cells):
        self.events.append(("board", cells))

    def on_turn_changed(self, player):
        self.events.append(("turn", player))

    def on_round_ended(self, result):
        self.events.append(("round_ended", result))

    def on_timer_tick(self, elapsed_x, elapsed_o):
        self.events.append(("tick", (elapsed_x, elapsed_o)))

    def of(self, kind):
        return [payload for name, payload in self.events if name == kind]


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def loop(clock):
    return EventLoop(clock)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def controller(loop, listener):
    ai = AIPlayer(Player.O, random_float=random.Random(1234).random)
    return MatchController(scheduler=loop, ai=ai, listeners=[listener])
