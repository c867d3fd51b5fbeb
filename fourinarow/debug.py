"""
debug.py - Debug and logging functionality for the terminal Connect Four game

The game board is drawn on stdout with cursor positioning, so log records are
routed to stderr (or to a file) and stay silent unless a level is configured.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Python logging has no TRACE level, register one just below DEBUG
TRACE = logging.DEBUG - 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Routes game diagnostics to the ``fourinarow`` logger."""

    def __init__(self, logger_name: str = "fourinarow"):
        self._level = DebugLevel.NONE
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # empty means all
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger(logger_name)

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _setup_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(console_handler)

        return logger

    def configure(self, level: Optional[DebugLevel] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None,
                  console: Optional[bool] = None):
        """
        Configure the debug manager.

        Args:
            level: Debug level to set
            log_file: Path to a log file; an empty string removes file logging
            components: Components to log (empty list for all)
            console: Whether records are also written to stderr
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if console is not None:
            for handler in self._logger.handlers:
                if not isinstance(handler, logging.FileHandler):
                    handler.setLevel(logging.NOTSET if console else LEVEL_MAP[DebugLevel.NONE])

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str]) -> bool:
        if self._level == DebugLevel.NONE or level.value > self._level.value:
            return False
        if component and self._enabled_components and component not in self._enabled_components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        """Log ``message`` at ``level``, tagged with ``component`` if given."""
        if level == DebugLevel.NONE or not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer started with ``start_timer`` and log the elapsed time.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Timer [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str):
        """Set the debug level from a command line value such as ``"info"``."""
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown debug level: {level_str}") from None

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}", "debug")


debug = DebugManager()
