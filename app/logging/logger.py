import logging
import sys


class Log:
    """Process-wide logging facade for the title generator."""

    _logger: logging.Logger = logging.getLogger("titlegen")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Apply the level and attach one stderr handler.

        Safe to call repeatedly: later calls only change the level.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        """Log an attempt milestone (started, titles extracted)."""
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log a failed attempt."""
        cls._logger.error(message)

    @classmethod
    def exception(cls, message: str) -> None:
        """Log an unexpected failure with the active traceback attached."""
        cls._logger.exception(message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log a degraded but recoverable condition."""
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log payloads, raw bodies and skipped strategies."""
        cls._logger.debug(message)
