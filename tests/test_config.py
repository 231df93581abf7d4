from decimal import Decimal

import pytest

from src.config import Settings

GAME_ENV = {
    'MIN_BET': '1.00',
    'MAX_BET': '10.00',
    'LOSS_CHANCE': '0.5',
    'WIN_X2_CHANCE': '0.4',
    'WIN_X2_TO_X10_CHANCE': '0.1',
}


@pytest.fixture
def game_env(monkeypatch):
    for key, value in GAME_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('RANDOM_SEED', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    return monkeypatch


def test_game_settings_from_env(game_env):
    game_settings = Settings().get_game_settings()

    assert game_settings.min_bet == Decimal('1.00')
    assert game_settings.max_bet == Decimal('10.00')
    assert game_settings.loss_chance == 0.5
    assert game_settings.win_x2_chance == 0.4
    assert game_settings.win_x2_to_x10_chance == 0.1


def test_defaults(game_env):
    settings = Settings()

    assert settings.LOG_LEVEL == 'INFO'
    assert settings.random_seed is None


def test_missing_keys_reported(game_env):
    game_env.delenv('MAX_BET')
    game_env.setenv('LOSS_CHANCE', '  ')
    settings = Settings()

    assert settings.missing_game_keys() == ['MAX_BET', 'LOSS_CHANCE']
    with pytest.raises(ValueError, match='MAX_BET, LOSS_CHANCE'):
        settings.get_game_settings()


def test_unparseable_value(game_env):
    game_env.setenv('MIN_BET', 'one euro')

    with pytest.raises(ValueError, match='MIN_BET'):
        Settings().get_game_settings()


def test_invalid_rules_rejected(game_env):
    game_env.setenv('MIN_BET', '20')

    with pytest.raises(ValueError):
        Settings().get_game_settings()


def test_random_seed(game_env):
    game_env.setenv('RANDOM_SEED', '42')
    assert Settings().random_seed == 42

    game_env.setenv('RANDOM_SEED', 'lucky')
    with pytest.raises(ValueError, match='RANDOM_SEED'):
        Settings().random_seed
