import logging
from decimal import Decimal
from typing import Callable, Optional

from src.games.slots import BetOutOfRangeError, SlotGame
from src.services.output_service import OutputService
from src.services.wallet_service import PlayerWallet
from src.utils.formatters import format_currency, parse_amount
from src.utils.menu import (
    MENU_DEPOSIT,
    MENU_EXIT,
    MENU_PLAY,
    MENU_WITHDRAW,
    get_goodbye_lines,
    get_main_menu_lines,
    get_welcome_lines,
)

logger = logging.getLogger(__name__)


class GameSession:
    """One player's console session: wallet, slot game and the menu loop"""

    def __init__(
        self,
        wallet: PlayerWallet,
        game: SlotGame,
        output: OutputService,
        input_func: Optional[Callable[[], str]] = None,
    ):
        self.wallet = wallet
        self.game = game
        self.output = output
        self.input_func = input_func or input

    def run(self) -> None:
        """Show the menu until the player exits"""
        self.display_welcome()
        self.display_balance()

        while True:
            self.display_menu()
            choice = self._read_line()
            if choice is None:
                # End of input counts as exit
                self.output.write_line()
                break

            choice = choice.strip().lower()
            if choice == MENU_EXIT:
                break

            self.handle_choice(choice)

            self.output.write_line("\n-------------------------------------")
            self.display_balance()
            self.output.write_line("-------------------------------------\n")

        self.display_goodbye()

    def handle_choice(self, choice: str) -> None:
        """Dispatch a menu choice"""
        handlers = {
            MENU_DEPOSIT: self.handle_deposit,
            MENU_WITHDRAW: self.handle_withdrawal,
            MENU_PLAY: self.handle_play,
        }
        handler = handlers.get(choice)
        if handler is None:
            logger.debug(f"Unknown menu choice: {choice!r}")
            self.output.write_warning("Invalid choice. Please try again.")
            return
        handler()

    # --- Output ---

    def display_welcome(self) -> None:
        for line in get_welcome_lines():
            self.output.write_line(line)

    def display_goodbye(self) -> None:
        for line in get_goodbye_lines():
            self.output.write_line(line)

    def display_balance(self) -> None:
        self.output.write_info_verbose(f"Current Balance: {format_currency(self.wallet.balance)}")

    def display_menu(self) -> None:
        for line in get_main_menu_lines(self.game.min_bet, self.game.max_bet):
            self.output.write_line(line)
        self.output.write("Enter your choice: ")

    # --- Handlers ---

    def handle_deposit(self) -> None:
        self.output.write("Enter amount to deposit: ")
        amount = self.read_amount()
        if amount is None:
            self.output.write_warning("Deposit amount input was invalid.")
            return

        result = self.wallet.deposit(amount)
        if result.is_success:
            self.output.write_success(result.message)
        else:
            self.output.write_error(f"Operation Failed: {result.message}")

    def handle_withdrawal(self) -> None:
        self.output.write("Enter amount to withdraw: ")
        amount = self.read_amount()
        if amount is None:
            self.output.write_warning("Withdrawal amount input was invalid.")
            return

        result = self.wallet.withdraw(amount)
        if result.is_success:
            self.output.write_success(result.message)
        else:
            self.output.write_error(f"Operation Failed: {result.message}")

    def handle_play(self) -> None:
        bet_range = f"{format_currency(self.game.min_bet)}-{format_currency(self.game.max_bet)}"
        self.output.write(f"Enter bet amount ({bet_range}): ")
        bet_amount = self.read_amount()
        if bet_amount is None:
            self.output.write_warning("Bet amount input was invalid.")
            return

        # Range check before touching the wallet
        if bet_amount < self.game.min_bet or bet_amount > self.game.max_bet:
            self.output.write_warning(f"Bet amount ({format_currency(bet_amount)}) outside valid range.")
            self.output.write_error(
                f"Error: Bet amount must be between {format_currency(self.game.min_bet)} "
                f"and {format_currency(self.game.max_bet)}."
            )
            return

        bet_result = self.wallet.place_bet(bet_amount)
        if not bet_result.is_success:
            self.output.write_error(f"Operation Failed: {bet_result.message}")
            return

        self.output.write_info(bet_result.message)
        self.play_round(bet_amount)

    def play_round(self, bet_amount: Decimal) -> Optional[Decimal]:
        """
        Play with a bet already taken from the wallet and credit the win.

        Any game error refunds the bet. Returns the win amount, or None
        when the bet was refunded.
        """
        try:
            win_amount = self.game.play(bet_amount)
        except BetOutOfRangeError as e:
            logger.error(f"❌ Game error: invalid bet amount passed to game logic after wallet processing. {e}")
            self.wallet.accept_win(bet_amount)
            self.output.write_error(f"Bet of {format_currency(bet_amount)} refunded due to game logic error.")
            return None
        except Exception as e:
            logger.exception(f"❌ An unexpected error occurred during game play: {e}")
            self.wallet.accept_win(bet_amount)
            self.output.write_error(f"Bet of {format_currency(bet_amount)} refunded due to unexpected error.")
            return None

        self.wallet.accept_win(win_amount)

        if win_amount > 0:
            self.output.write_success(
                f"Congratulations! You bet {format_currency(bet_amount)} and won {format_currency(win_amount)}!"
            )
        else:
            self.output.write_info(
                f"Unlucky! You bet {format_currency(bet_amount)} and lost. Better luck next time!"
            )

        return win_amount

    # --- Input ---

    def read_amount(self) -> Optional[Decimal]:
        """Read a non-negative amount, None if the input is invalid"""
        raw = self._read_line()
        amount = parse_amount(raw)
        if amount is None:
            self.output.write_error(f"Invalid numeric input received: '{raw if raw is not None else ''}'")
            self.output.write_error("Invalid input. Please enter a positive numeric value.")
        return amount

    def _read_line(self) -> Optional[str]:
        try:
            return self.input_func()
        except EOFError:
            return None
