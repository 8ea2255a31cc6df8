import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None) -> int:
    """
    Configures root logging once and returns the applied level.

    An explicit level wins over the LOG_LEVEL environment variable, which
    wins over INFO.
    """
    global _LOGGING_CONFIGURED
    resolved: int = _resolve_level(level)
    root_logger: logging.Logger = logging.getLogger()

    if not _LOGGING_CONFIGURED:
        logging.basicConfig(format=LOG_FORMAT, level=resolved)
        _LOGGING_CONFIGURED = True
    root_logger.setLevel(resolved)
    for handler in root_logger.handlers:
        handler.setLevel(resolved)
    return resolved


def get_logger(name: str) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logger
