from decimal import Decimal
from typing import List

from src.utils.formatters import format_currency

MENU_DEPOSIT = 'd'
MENU_WITHDRAW = 'w'
MENU_PLAY = 'p'
MENU_EXIT = 'e'


def get_welcome_lines() -> List[str]:
    """Banner shown on start"""
    return [
        "===============================================",
        "| Welcome to Betty's Player Wallet App 🤑🤑🤑 |",
        "===============================================",
        "",
    ]


def get_goodbye_lines() -> List[str]:
    """Banner shown on exit"""
    return [
        "",
        "=====================================",
        "| Thank you for using the wallet app! |",
        "=====================================",
        "",
    ]


def get_main_menu_lines(min_bet: Decimal, max_bet: Decimal) -> List[str]:
    """Main menu"""
    bet_range = f"{format_currency(min_bet)}-{format_currency(max_bet)}"
    return [
        "Please choose an option:",
        f" {MENU_DEPOSIT.upper()} - Deposit Funds",
        f" {MENU_WITHDRAW.upper()} - Withdraw Funds",
        f" {MENU_PLAY.upper()} - Play Slot Game (Bet: {bet_range})",
        f" {MENU_EXIT.upper()} - Exit",
    ]
