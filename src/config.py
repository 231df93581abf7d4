import os
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from dotenv import load_dotenv

from src.models import GameSettings

load_dotenv()


class Settings:
    """Application settings"""

    GAME_KEYS = (
        'MIN_BET',
        'MAX_BET',
        'LOSS_CHANCE',
        'WIN_X2_CHANCE',
        'WIN_X2_TO_X10_CHANCE',
    )

    def __init__(self):
        # Game Settings
        self.MIN_BET: Optional[str] = os.getenv('MIN_BET')
        self.MAX_BET: Optional[str] = os.getenv('MAX_BET')
        self.LOSS_CHANCE: Optional[str] = os.getenv('LOSS_CHANCE')
        self.WIN_X2_CHANCE: Optional[str] = os.getenv('WIN_X2_CHANCE')
        self.WIN_X2_TO_X10_CHANCE: Optional[str] = os.getenv('WIN_X2_TO_X10_CHANCE')

        # Runtime
        self.RANDOM_SEED: Optional[str] = os.getenv('RANDOM_SEED') or None
        self.LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()

    def missing_game_keys(self) -> List[str]:
        """Required game keys that are unset or blank"""
        return [key for key in self.GAME_KEYS if not (getattr(self, key) or '').strip()]

    @property
    def random_seed(self) -> Optional[int]:
        """Seed for the random source, if configured"""
        if self.RANDOM_SEED is None:
            return None
        try:
            return int(self.RANDOM_SEED)
        except ValueError:
            raise ValueError(f"❌ RANDOM_SEED must be an integer, got '{self.RANDOM_SEED}'")

    def validate(self):
        """Validate settings"""
        missing = self.missing_game_keys()
        if missing:
            raise ValueError(f"❌ Game settings not set in .env: {', '.join(missing)}")

    def get_game_settings(self) -> GameSettings:
        """Build the slot game rules from the environment"""
        self.validate()

        return GameSettings(
            min_bet=self._parse_decimal('MIN_BET'),
            max_bet=self._parse_decimal('MAX_BET'),
            loss_chance=self._parse_float('LOSS_CHANCE'),
            win_x2_chance=self._parse_float('WIN_X2_CHANCE'),
            win_x2_to_x10_chance=self._parse_float('WIN_X2_TO_X10_CHANCE'),
        )

    def _parse_decimal(self, key: str) -> Decimal:
        raw = getattr(self, key).strip()
        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise ValueError(f"❌ {key} must be a number, got '{raw}'")
        if not value.is_finite():
            raise ValueError(f"❌ {key} must be a finite number, got '{raw}'")
        return value

    def _parse_float(self, key: str) -> float:
        raw = getattr(self, key).strip()
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"❌ {key} must be a number, got '{raw}'")


settings = Settings()
