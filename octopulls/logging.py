"""Logging from config and env.

Levels (inclusive):
- ERROR: critical errors only
- WARNING: failed API calls (error status, undecodable body) and ERROR
- INFO: WARNING and ERROR; octopulls itself logs nothing at INFO
- DEBUG: every request and response status, urllib3 connection pool included

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from octopulls.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Transport libraries that duplicate the per-request DEBUG lines of octopulls.transport
CHATTY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class OctopullsLogging:
    """Configures the root logger from LoggingConfig (YAML + env LOGGING_*).

    Unless the level is DEBUG, urllib3 is held at WARNING.
    """

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        chatty_level = logging.DEBUG if self._level <= logging.DEBUG else logging.WARNING
        for name in CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(chatty_level)
