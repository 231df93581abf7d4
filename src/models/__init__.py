from src.models.game_settings import GameSettings
from src.models.operation_result import WalletOperationResult

__all__ = ['GameSettings', 'WalletOperationResult']
