import logging
import threading
from decimal import Decimal

from src.models import WalletOperationResult
from src.utils.formatters import Amount, format_currency, to_amount

logger = logging.getLogger(__name__)


class PlayerWallet:
    """Player wallet: deposits, withdrawals, bets and wins"""

    def __init__(self, initial_balance: Amount = Decimal('0')):
        balance = to_amount(initial_balance)
        if balance is None or balance < 0:
            raise ValueError(f"Initial balance must be a non-negative amount, got {initial_balance!r}")

        self._balance = balance
        # Check-then-mutate of every operation runs under this lock
        self._lock = threading.Lock()

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    def deposit(self, amount: Amount) -> WalletOperationResult:
        """Deposit funds"""
        value = to_amount(amount)

        with self._lock:
            if value is None:
                logger.warning(f"⚠️ Attempted to deposit an invalid amount: {amount!r}.")
                return WalletOperationResult.failure("Deposit amount must be a valid number with at most two decimal places.", self._balance)

            amount = value
            if amount <= 0:
                logger.warning(f"⚠️ Attempted to deposit non-positive amount: {format_currency(amount)}.")
                return WalletOperationResult.failure("Deposit amount must be positive.", self._balance)

            self._balance += amount
            logger.info(f"💰 Deposit: amount={format_currency(amount)}, new_balance={format_currency(self._balance)}")

            return WalletOperationResult.success(
                f"Successfully deposited {format_currency(amount)}.", self._balance
            )

    def withdraw(self, amount: Amount) -> WalletOperationResult:
        """Withdraw funds"""
        value = to_amount(amount)

        with self._lock:
            if value is None:
                logger.warning(f"⚠️ Attempted to withdraw an invalid amount: {amount!r}.")
                return WalletOperationResult.failure("Withdrawal amount must be a valid number with at most two decimal places.", self._balance)

            amount = value
            if amount <= 0:
                logger.warning(f"⚠️ Attempted to withdraw non-positive amount: {format_currency(amount)}.")
                return WalletOperationResult.failure("Withdrawal amount must be positive.", self._balance)

            if self._balance < amount:
                logger.warning(
                    f"⚠️ Insufficient funds for withdrawal. "
                    f"Current: {format_currency(self._balance)}, requested: {format_currency(amount)}."
                )
                return WalletOperationResult.failure(
                    f"Insufficient funds. Current balance: {format_currency(self._balance)}, "
                    f"requested withdrawal: {format_currency(amount)}.",
                    self._balance,
                )

            self._balance -= amount
            logger.info(f"💸 Withdraw: amount={format_currency(amount)}, new_balance={format_currency(self._balance)}")

            return WalletOperationResult.success(
                f"Successfully withdrew {format_currency(amount)}.", self._balance
            )

    def place_bet(self, bet_amount: Amount) -> WalletOperationResult:
        """Take a bet out of the balance"""
        value = to_amount(bet_amount)

        with self._lock:
            if value is None:
                logger.warning(f"⚠️ Attempted to place an invalid bet: {bet_amount!r}.")
                return WalletOperationResult.failure("Bet amount must be a valid number with at most two decimal places.", self._balance)

            bet_amount = value
            if bet_amount <= 0:
                logger.warning(f"⚠️ Attempted to place non-positive bet: {format_currency(bet_amount)}.")
                return WalletOperationResult.failure("Bet amount must be positive.", self._balance)

            if self._balance < bet_amount:
                logger.warning(
                    f"⚠️ Insufficient funds to place bet. "
                    f"Current: {format_currency(self._balance)}, requested bet: {format_currency(bet_amount)}."
                )
                return WalletOperationResult.failure(
                    f"Insufficient funds to place bet. Current balance: {format_currency(self._balance)}, "
                    f"requested bet: {format_currency(bet_amount)}.",
                    self._balance,
                )

            self._balance -= bet_amount
            logger.info(f"🎰 Bet placed: stake={format_currency(bet_amount)}, new_balance={format_currency(self._balance)}")

            return WalletOperationResult.success(
                f"Successfully placed bet of {format_currency(bet_amount)}.", self._balance
            )

    def accept_win(self, win_amount: Amount) -> None:
        """Credit a win (0 for a loss)"""
        value = to_amount(win_amount, places=None)

        with self._lock:
            if value is None:
                logger.error(f"❌ Attempted to accept an invalid win amount: {win_amount!r}. Win ignored.")
                return

            win_amount = value
            if win_amount < 0:
                # Payout engine bug: never credit or debit on a negative win
                logger.error("❌ Attempted to accept a negative win amount. Win ignored.")
                return

            self._balance += win_amount
            logger.info(f"✅ Win accepted: amount={format_currency(win_amount)}, new_balance={format_currency(self._balance)}")
