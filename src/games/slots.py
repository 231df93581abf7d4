import logging
from decimal import Decimal

from src.games.random_source import RandomSource
from src.models import GameSettings
from src.utils.formatters import Amount, format_currency, to_decimal

logger = logging.getLogger(__name__)


class BetOutOfRangeError(ValueError):
    """Bet outside the [min_bet, max_bet] range"""

    def __init__(self, bet_amount: Decimal, min_bet: Decimal, max_bet: Decimal):
        self.bet_amount = bet_amount
        self.min_bet = min_bet
        self.max_bet = max_bet
        super().__init__(
            f"Bet amount must be between {format_currency(min_bet)} and {format_currency(max_bet)}."
        )


class SlotGame:
    """Slot machine with a loss / 2x / 2x-10x outcome split"""

    # Extended tier multiplier is n / 100 with n in [201, 1000]
    MULTIPLIER_MIN_NUMERATOR = 201
    MULTIPLIER_MAX_NUMERATOR = 1000
    MULTIPLIER_DENOMINATOR = Decimal(100)

    PROBABILITY_TOLERANCE = 1e-9

    def __init__(self, random_source: RandomSource, settings: GameSettings):
        if random_source is None:
            raise ValueError("random_source is required")
        if settings is None:
            raise ValueError("settings is required")

        self._random = random_source
        self._settings = settings

        logger.info("🎰 Slot game initialized")
        logger.debug(
            f"Game rules: min_bet={settings.min_bet}, max_bet={settings.max_bet}, "
            f"loss={settings.loss_chance}, win_x2={settings.win_x2_chance}, "
            f"win_x2_x10={settings.win_x2_to_x10_chance}"
        )

        total = settings.probability_total
        if abs(total - 1.0) > self.PROBABILITY_TOLERANCE:
            logger.warning(f"⚠️ Outcome probabilities add up to {total:.4f}, not 1")

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def min_bet(self) -> Decimal:
        return self._settings.min_bet

    @property
    def max_bet(self) -> Decimal:
        return self._settings.max_bet

    def play(self, bet_amount: Amount) -> Decimal:
        """
        Play one round and return the win amount (0 for a loss).

        Raises BetOutOfRangeError before any random draw if the bet is
        outside the configured range.
        """
        bet_amount = to_decimal(bet_amount)
        logger.debug(f"Attempting to play slot game with bet: {format_currency(bet_amount)}")

        if bet_amount < self.min_bet or bet_amount > self.max_bet:
            logger.warning(
                f"⚠️ Invalid bet amount {format_currency(bet_amount)} received. "
                f"Range is {format_currency(self.min_bet)}-{format_currency(self.max_bet)}."
            )
            raise BetOutOfRangeError(bet_amount, self.min_bet, self.max_bet)

        outcome_roll = self._random.next_uniform()
        logger.debug(f"Outcome roll: {outcome_roll:.4f}")

        if outcome_roll < self._settings.loss_chance:
            win_amount = Decimal('0')
            logger.info(f"Bet {format_currency(bet_amount)} resulted in a loss.")
        elif outcome_roll < self._settings.loss_chance + self._settings.win_x2_chance:
            win_amount = bet_amount * 2
            logger.info(
                f"Bet {format_currency(bet_amount)} resulted in a 2x win ({format_currency(win_amount)})."
            )
        else:
            multiplier = self.draw_multiplier()
            win_amount = bet_amount * multiplier
            logger.info(
                f"Bet {format_currency(bet_amount)} resulted in a {multiplier:.2f}x win "
                f"({format_currency(win_amount)})."
            )

        return win_amount

    def draw_multiplier(self) -> Decimal:
        """Multiplier for the extended tier, 2.01 to 10.00 in 0.01 steps"""
        numerator = self._random.next_int_in_range(
            self.MULTIPLIER_MIN_NUMERATOR, self.MULTIPLIER_MAX_NUMERATOR
        )
        return Decimal(numerator) / self.MULTIPLIER_DENOMINATOR
