from decimal import Decimal

import pytest

from src.models import GameSettings
from src.services.wallet_service import PlayerWallet


class ScriptedRandomSource:
    """RandomSource returning pre-set draws"""

    def __init__(self, uniforms=(), ints=()):
        self.uniforms = list(uniforms)
        self.ints = list(ints)
        self.uniform_calls = 0
        self.int_calls = []

    def next_uniform(self) -> float:
        self.uniform_calls += 1
        return self.uniforms.pop(0)

    def next_int_in_range(self, lo: int, hi: int) -> int:
        self.int_calls.append((lo, hi))
        return self.ints.pop(0)


class RecordingOutput:
    """OutputService that keeps (severity, message) pairs"""

    def __init__(self):
        self.lines = []

    def write(self, message):
        self.lines.append(('prompt', message))

    def write_line(self, message=""):
        self.lines.append(('line', message))

    def write_info(self, message):
        self.lines.append(('info', message))

    def write_info_verbose(self, message):
        self.lines.append(('verbose', message))

    def write_success(self, message):
        self.lines.append(('success', message))

    def write_warning(self, message):
        self.lines.append(('warning', message))

    def write_error(self, message):
        self.lines.append(('error', message))

    def messages(self, severity):
        return [message for kind, message in self.lines if kind == severity]


@pytest.fixture
def game_settings():
    return GameSettings(
        min_bet=Decimal('1.00'),
        max_bet=Decimal('10.00'),
        loss_chance=0.50,
        win_x2_chance=0.40,
        win_x2_to_x10_chance=0.10,
    )


@pytest.fixture
def wallet():
    return PlayerWallet()


@pytest.fixture
def output():
    return RecordingOutput()
