"""
Logging configuration for the RDN agency tools.
"""
import logging
from colorama import init, Fore, Style

# Initialize Colorama (required on Windows)
init(autoreset=True)

_LEVEL_PREFIXES = {
    logging.DEBUG: Style.DIM + Fore.WHITE,
    logging.INFO: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Style.BRIGHT + Fore.RED,
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord):
        log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
        prefix = _LEVEL_PREFIXES.get(record.levelno, "")

        formatter = logging.Formatter(
            prefix + log_format + Style.RESET_ALL, "%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def get_logger(name: str) -> logging.Logger:
    """
    Create and return a logger with the given name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Only add handler if it doesn't already have one
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(ColorFormatter())
        logger.addHandler(console_handler)

    return logger
