# passive_view/utils/logger.py

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

# The console handler is tagged with this name so its level can be changed
# later, once the user's settings have been read.
CONSOLE_HANDLER_NAME = "passive_view.console"
DEFAULT_LOG_FILE_NAME = 'passive_view.log'


class LoggerManager:
    """
    Configures the application-wide logging system.

    Two handlers are attached to the root logger:
    1. Console Handler: short, human-friendly lines. It starts at INFO and is
       re-levelled from the settings file via `set_console_level`.
    2. Rotating File Handler: detailed DEBUG-level lines for diagnostics. The
       file lives in the directory the application was started from, never
       inside the installed package.
    """

    def __init__(self, log_dir: Optional[Path] = None, log_file_name: str = DEFAULT_LOG_FILE_NAME,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the manager.

        Args:
            log_dir: Where the log file is written. Defaults to the current working directory.
            log_file_name: The name of the log file.
            logger: The logger to configure. Defaults to the root logger.
        """
        # An installed package may sit in a read-only site-packages, so the log
        # file follows the user's working directory instead of the source tree.
        self.log_file_path = Path(log_dir if log_dir is not None else Path.cwd()) / log_file_name
        self.root_logger = logger if logger is not None else logging.getLogger()

    def setup(self):
        """
        Attaches the handlers to the logger.
        Only the first call does anything, so calling it twice never duplicates output.
        """
        if self.root_logger.hasHandlers():
            return

        self.root_logger.setLevel(logging.DEBUG)
        self.root_logger.addHandler(self._create_console_handler())

        # A missing log file is an inconvenience, not a reason to refuse to start.
        # If the directory is not writable, we keep going with the console alone.
        try:
            self.root_logger.addHandler(self._create_file_handler())
        except OSError as e:
            self.root_logger.warning(f"Could not open log file {self.log_file_path}: {e}. Logging to console only.")
            return

        self.root_logger.info(f"Logging configured. Log file: {self.log_file_path}")

    def _create_console_handler(self) -> logging.StreamHandler:
        """Creates a handler for logging messages to the console."""
        handler = logging.StreamHandler()
        handler.set_name(CONSOLE_HANDLER_NAME)
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            '%(asctime)s - [%(levelname)s] - %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self) -> logging.handlers.RotatingFileHandler:
        """Creates a rotating file handler; one sample app never needs more than 1 MB x 3."""
        handler = logging.handlers.RotatingFileHandler(
            self.log_file_path, maxBytes=1024 * 1024, backupCount=3, encoding='utf-8'
        )
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s'
        )
        handler.setFormatter(formatter)
        return handler


def set_console_level(level: Union[int, str], logger: Optional[logging.Logger] = None):
    """Changes the level of the console handler installed by `setup_logging`, if there is one."""
    target = logger if logger is not None else logging.getLogger()
    for handler in target.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(level)


def setup_logging():
    """Initializes and configures the application-wide logging system."""
    LoggerManager().setup()
