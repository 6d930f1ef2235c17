import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_DIR

_configured = False


def setup_logging(verbose: bool = False, log_dir: Optional[str] = None):
    """Set up logging for the application."""
    global _configured
    if _configured:
        return
    _configured = True

    log_dir = log_dir or DEFAULT_LOG_DIR

    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if verbose else logging.WARNING)

    # Console handler (with Rich)
    console = Console(stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    rich_handler.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

    # Configure specific loggers to be less verbose if needed
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)

    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create log directory {log_dir}: {e}")
        return

    # File handler (Rotating)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "aicli.log"), maxBytes=10*1024*1024, backupCount=5  # 10 MB per file, 5 backups
    )
    file_handler.setLevel(logging.INFO)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    logger.info(f"Logger initialized. Logs will be stored in {log_dir}")
