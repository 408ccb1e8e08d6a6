"""Logger of the class generator: an optional log file plus progress-bar safe console output."""
import logging
import os
import sys

from tqdm import tqdm

LOGGER_NAME = "i18n_classgen"

# The log file keeps timestamps; the console reads like compiler diagnostics.
FILE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


class TqdmLoggingHandler(logging.Handler):
    """Write records through ``tqdm.write`` so they land above the interface progress bar."""

    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def _file_handler(log_file_path: str) -> logging.Handler:
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(log_file_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(log_level_str: str, log_file_path: str, log_to_console: bool) -> logging.Logger:
    """
    Configure the ``i18n_classgen`` logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        log_level_str: Level name such as 'INFO' or 'DEBUG'; unknown names fall back to INFO.
        log_file_path: Log file to append to; an empty value disables file logging.
        log_to_console: Whether diagnostics are also written to stderr.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(log_level_str.upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_file_path:
        logger.addHandler(_file_handler(log_file_path))
    if log_to_console:
        console_handler = TqdmLoggingHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)
    return logger
