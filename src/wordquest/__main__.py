"""Main entry point for the game."""
import logging

from wordquest.app import WordQuestApp
from wordquest.config import ensure_directories
from wordquest.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the game in the terminal."""
    ensure_directories()

    setup_logging("Starting WordQuest ...")

    app = WordQuestApp()
    logger.info("Starting game...")
    app.run()
    logger.info("Game stopped")


if __name__ == "__main__":
    main()
