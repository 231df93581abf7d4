import logging
import sys
from typing import Optional

from src.config import Settings, settings as app_settings
from src.games.random_source import SystemRandomSource
from src.games.slots import SlotGame
from src.handlers.session import GameSession
from src.services.output_service import ConsoleOutputService, OutputService
from src.services.wallet_service import PlayerWallet

logger = logging.getLogger(__name__)


def setup_logging(level_name: str):
    """Configure logging"""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_session(config: Settings, output: OutputService) -> GameSession:
    """Build a session: wallet, slot game and its random source"""
    game_settings = config.get_game_settings()
    random_source = SystemRandomSource(seed=config.random_seed)

    wallet = PlayerWallet()
    game = SlotGame(random_source, game_settings)

    return GameSession(wallet, game, output)


def main(config: Optional[Settings] = None, output: Optional[OutputService] = None) -> int:
    """Main entry point"""
    config = config or app_settings
    output = output or ConsoleOutputService()

    setup_logging(config.LOG_LEVEL)

    try:
        session = create_session(config, output)
    except ValueError as e:
        logger.error(f"❌ Startup failed: {e}")
        output.write_error(f"Error: game settings could not be loaded. {e} Exiting.")
        return 1

    logger.info("🎰 Betty's slot game started")
    session.run()
    logger.info("👋 Session finished")

    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("👋 Stopped")
