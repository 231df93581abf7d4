from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GameSettings:
    """Slot game rules"""
    min_bet: Decimal
    max_bet: Decimal

    # Probabilities of each outcome tier
    loss_chance: float
    win_x2_chance: float
    win_x2_to_x10_chance: float

    def __post_init__(self):
        for field in ['loss_chance', 'win_x2_chance', 'win_x2_to_x10_chance']:
            value = getattr(self, field)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{field} must be between 0 and 1, got {value}")

        if self.min_bet <= 0:
            raise ValueError(f"min_bet must be positive, got {self.min_bet}")
        if self.min_bet > self.max_bet:
            raise ValueError(
                f"min_bet ({self.min_bet}) must not exceed max_bet ({self.max_bet})"
            )

    @property
    def probability_total(self) -> float:
        """Sum of the three outcome probabilities"""
        return self.loss_chance + self.win_x2_chance + self.win_x2_to_x10_chance
