import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from .config import ConfigManager

# Format for the plain log file; RichHandler renders time and level itself.
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: ConfigManager, console: bool = False, verbose: bool = False):
    """
    Configures the root logger.

    The TUI owns the terminal, so in that mode everything goes to the log
    file. The one-shot CLI logs to stderr through Rich instead.
    """
    level_name = "DEBUG" if verbose else str(config.get("log_level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    if console:
        handlers = [RichHandler(
            console=Console(file=sys.stderr),
            show_time=False,
            show_path=False,
            markup=False,
        )]
        log_format = "%(message)s"
    else:
        log_file = config.get("log_file", "/tmp/vlint.log")
        try:
            handlers = [logging.FileHandler(log_file, encoding="utf-8")]
        except OSError as e:
            print(f"Warning: Could not configure file logging to {log_file}: {e}", file=sys.stderr)
            handlers = [logging.NullHandler()]
        log_format = FILE_FORMAT

    # force=True allows reconfiguration if called multiple times
    logging.basicConfig(level=level, format=log_format, handlers=handlers, force=True)

    # The watchdog observer is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
