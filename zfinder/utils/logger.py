# zfinder/utils/logger.py

import logging
import logging.handlers
from pathlib import Path


# --- Logger Manager ---
# All handler construction lives in this class; the rest of the package only
# calls `setup_logging`.
class LoggerManager:
    """
    Configures application-wide logging on the root logger.

    Two handlers are attached:
    1. Console Handler: INFO and above, short timestamped lines.
    2. Rotating File Handler: DEBUG and above, with module and line numbers.
       The file rotates at 5MB and keeps five backups.
    """

    def __init__(self, log_file_name: str = 'zfinder.log', log_level=logging.DEBUG):
        """
        Args:
            log_file_name: Name of the log file, created in the project root.
            log_level: The root logger level, as a number or a level name.
        """
        self.log_file_path = Path(__file__).resolve().parents[2] / log_file_name
        self.log_level = log_level
        self.root_logger = logging.getLogger()

    def setup(self):
        """Attaches the handlers. Does nothing if the root logger already has handlers."""
        # A second call (tests, a relaunched window) must not stack duplicate handlers.
        if self.root_logger.hasHandlers():
            return

        self.root_logger.setLevel(self.log_level)
        self.root_logger.addHandler(self._create_console_handler())
        self.root_logger.addHandler(self._create_file_handler())

        logging.info("Logging configured.")

    def _create_console_handler(self) -> logging.StreamHandler:
        # Short lines for the terminal; DEBUG chatter stays in the file.
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            '%(asctime)s - [%(levelname)s] - %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self) -> logging.handlers.RotatingFileHandler:
        # Rotates at 5MB and keeps five old files next to the current one.
        handler = logging.handlers.RotatingFileHandler(
            self.log_file_path, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8'
        )
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s'
        )
        handler.setFormatter(formatter)
        return handler


# --- Public Entry Point ---

def setup_logging(settings=None):
    """Initializes logging, taking the file name and level from settings when given."""
    if settings is None:
        manager = LoggerManager()
    else:
        level = logging.getLevelName(str(settings.log_level).upper())
        # getLevelName returns a string like 'Level FOO' for unknown names.
        if not isinstance(level, int):
            level = logging.DEBUG
        manager = LoggerManager(settings.log_file, level)
    manager.setup()
