from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WalletOperationResult:
    """Result of a wallet operation"""
    is_success: bool
    message: str
    # Balance after the operation was attempted, successful or not
    current_balance: Decimal

    @classmethod
    def success(cls, message: str, current_balance: Decimal) -> 'WalletOperationResult':
        """Successful operation"""
        return cls(True, message, current_balance)

    @classmethod
    def failure(cls, message: str, current_balance: Decimal) -> 'WalletOperationResult':
        """Failed operation"""
        return cls(False, message, current_balance)
