import logging
import os
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from .config import Config

LOG_FILE_NAME = "ray-cli.log"
HANDLER_PREFIX = "ray-cli."


def setup_logging(config: Config) -> None:
    """Set up logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if config.verbose else logging.WARNING)

    # Repeated calls (tests, embedding) must not stack handlers.
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler (with Rich)
    console = Console(stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    rich_handler.set_name(HANDLER_PREFIX + "console")
    root_logger.addHandler(rich_handler)

    # File handler (Rotating), only when a log directory is configured
    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(config.log_dir, LOG_FILE_NAME),
            maxBytes=10*1024*1024, backupCount=5  # 10 MB per file, 5 backups
        )
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        file_handler.set_name(HANDLER_PREFIX + "file")
        root_logger.addHandler(file_handler)

    # Configure specific loggers to be less verbose
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logger initialized with {config}")
