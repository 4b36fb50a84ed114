import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


class Log:
    """Process-wide logging facade; the classifier core reports swallowed failures here."""

    _logger: logging.Logger = logging.getLogger("doc_classifier")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one handler, stderr unless ``stream`` is given.

        Calling it again only changes the level.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def exception(cls, message: str) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
